# EntropyTree/tests/generated_datasets/__init__.py

"""
Generated Datasets Sub-Package for Entropy Decision Tree Tests
"""

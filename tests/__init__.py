# tests/__init__.py

"""
Testing Package for Entropy Decision Tree
"""

# EntropyTree/entropy_tree/stopping.py

def check_pre_split_stopping_conditions(
    node_num_samples,
    current_depth,
    max_depth
    ):
    """
    Checks for basic stopping conditions before attempting to find a split.
    This avoids the cost of split-finding for nodes that are already terminal.

    Args:
        node_num_samples (int): Number of data points (rows) in the current node.
        current_depth (int): Current depth of the node in the tree.
        max_depth (int): Maximum allowed depth for the tree.

    Returns:
        str or None: A string describing the reason for stopping, or None if no stopping condition is met.
    """
    if current_depth >= max_depth:
        return f"max_depth ({current_depth} >= {max_depth})"

    if node_num_samples == 0:
        return "empty_node"

    return None


def check_post_split_stopping_condition(best_split):
    """
    Decides whether the best split found for a node is usable.

    A threshold of None (no candidate) and a threshold of exactly 0 are both
    treated as "no usable threshold", so a subtree whose best cutoff is 0 is
    never built.

    Args:
        best_split (dict): Result of find_best_split_across_columns.

    Returns:
        str or None: A string describing the reason for stopping, or None if splitting should proceed.
    """
    if not best_split.get('threshold'):
        return f"no_usable_threshold ({best_split.get('threshold')})"
    return None

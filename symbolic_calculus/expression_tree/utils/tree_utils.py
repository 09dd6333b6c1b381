"""
Tree Utility Functions

Tree traversal and analysis utilities for expression trees: node collection,
depth, variable discovery, postfix linearization and a text diagram.
"""

from typing import List

from ..core.node import Node, BinaryOpNode, UnaryOpNode, ConstantNode, VariableNode


def get_children(node: Node) -> List[Node]:
    """Children of a node in left-to-right order"""
    if isinstance(node, BinaryOpNode):
        return [node.left, node.right]
    elif isinstance(node, UnaryOpNode):
        return [node.operand]
    return []


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.pop(0)  # FIFO for breadth-first
        all_nodes.append(current_node)
        nodes_to_visit.extend(get_children(current_node))

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (recursive)"""
    nodes = [node]
    for child in get_children(node):
        nodes.extend(_depth_first_traversal(child))
    return nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    if isinstance(node, UnaryOpNode):
        return 1 + calculate_tree_depth(node.operand)
    elif isinstance(node, BinaryOpNode):
        return 1 + max(calculate_tree_depth(node.left), calculate_tree_depth(node.right))
    return 1


def find_nodes_by_operator(node: Node, operator: str) -> List[Node]:
    """Find all operator nodes with the given operator symbol or function name"""
    return [n for n in _depth_first_traversal(node)
            if isinstance(n, (BinaryOpNode, UnaryOpNode)) and n.operator == operator]


def get_variables(node: Node) -> List[str]:
    """Distinct variable names in left-to-right reading order"""
    names: List[str] = []
    for n in _depth_first_traversal(node):
        if isinstance(n, VariableNode) and n.name not in names:
            names.append(n.name)
    return names


def get_constants(node: Node) -> List[ConstantNode]:
    return [n for n in _depth_first_traversal(node) if isinstance(n, ConstantNode)]


def clone_tree(node: Node) -> Node:
    """Deep copy of a tree, sharing no nodes with the original"""
    return node.copy()


def tree_to_postfix(node: Node) -> List[str]:
    """Linearize a tree back into postfix tokens (post-order)"""
    if isinstance(node, BinaryOpNode):
        return tree_to_postfix(node.left) + tree_to_postfix(node.right) + [node.operator]
    elif isinstance(node, UnaryOpNode):
        return tree_to_postfix(node.operand) + [node.operator]
    return [node.to_string()]


def _node_label(node: Node) -> str:
    if isinstance(node, (BinaryOpNode, UnaryOpNode)):
        return node.operator
    return node.to_string()


def format_tree(node: Node) -> str:
    """
    Draw the tree as indented text, one node per line.

    Example for "x + 2":
        +
        ├── x
        └── 2.0
    """
    lines: List[str] = []
    _format_node(node, lines, "", "")
    return "\n".join(lines)


def _format_node(node: Node, lines: List[str], prefix: str, children_prefix: str):
    lines.append(prefix + _node_label(node))
    if isinstance(node, BinaryOpNode):
        _format_node(node.left, lines, children_prefix + "├── ", children_prefix + "│   ")
        _format_node(node.right, lines, children_prefix + "└── ", children_prefix + "    ")
    elif isinstance(node, UnaryOpNode):
        _format_node(node.operand, lines, children_prefix + "└── ", children_prefix + "    ")

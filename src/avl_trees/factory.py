"""Factory for the creation of ordered trees"""

from typing import Dict, Type
import logging

from avl_trees.base import AbstractOrderedTree
from avl_trees.avl_tree import AVLTree
from avl_trees.bs_tree import BSTree

# Configure logging
logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

# Tree classes by kind; "bst" is the unbalanced baseline
_tree_classes: Dict[str, Type[AbstractOrderedTree]] = {
    "avl": AVLTree,
    "bst": BSTree,
}

TREE_KINDS = tuple(_tree_classes)


def make_tree_class(kind: str) -> Type[AbstractOrderedTree]:
    """
    Look up the tree class registered for the given kind.

    Args:
        kind (str): "avl" for the balanced tree, "bst" for the baseline.

    Returns:
        The tree class.

    Raises:
        ValueError: If no tree class is registered for kind.
    """
    try:
        cls = _tree_classes[kind]
    except KeyError:
        raise ValueError(
            f"make_tree_class(): unknown tree kind {kind!r}, expected one of {TREE_KINDS}"
        ) from None
    logger.debug(f"Using {cls.__name__} for kind={kind!r}")
    return cls


def create_tree(kind: str = "avl") -> AbstractOrderedTree:
    """
    Create a new empty tree of the given kind.

    Args:
        kind (str): "avl" (default) or "bst".

    Returns:
        A new empty tree.
    """
    TreeClass = make_tree_class(kind)
    tree = TreeClass()
    logger.debug(f"Created tree instance of type {type(tree).__name__}")
    return tree

"""compositetree - Composite pattern component trees.

Leaves and composites are handled through one uniform Component
interface, so client code can treat a single object and a whole tree
the same way:

    from compositetree import Composite, Leaf

    tree = Composite()
    tree.add(Leaf())
    tree.operation()  # 'Branch(Leaf)'
"""

import logging

__version__ = "0.1.0"

# Core components
from .core import Component, Leaf, Composite

# Configuration and errors
from .config import TraversalStrategy
from .errors import CompositeTreeError, CycleError

# Traversal
from .traversal import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
)

# High-level API
from .api import (
    traverse_tree,
    count_nodes,
    find_components,
    get_leaves,
    get_root,
    get_path,
    get_tree_stats,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    'Component',
    'Leaf',
    'Composite',
    # Config
    'TraversalStrategy',
    # Errors
    'CompositeTreeError',
    'CycleError',
    # Traversal
    'TreeTraverser',
    'BreadthFirstTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'create_traverser',
    # API
    'traverse_tree',
    'count_nodes',
    'find_components',
    'get_leaves',
    'get_root',
    'get_path',
    'get_tree_stats',
]

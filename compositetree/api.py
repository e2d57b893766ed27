"""High-level API for compositetree.

This module provides simple, functional interfaces for common questions
about a component tree. These functions wrap the traverser classes for
ease of use in simple cases.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Union

from .config import TraversalStrategy
from .core.component import Component
from .traversal import create_traverser


def traverse_tree(
    root: Component,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
) -> Iterator[Component]:
    """Simple interface for tree traversal.

    Args:
        root: Starting component for traversal
        strategy: Traversal strategy (bfs, dfs_pre, dfs_post)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding components

    Yields:
        Components in the order the strategy visits them

    Example:
        >>> tree = Composite()
        >>> tree.add(Leaf())
        >>> [c.operation() for c in traverse_tree(tree)]
        ['Branch(Leaf)', 'Leaf']
    """
    traverser = create_traverser(strategy)
    for component, _ in traverser.traverse(root, max_depth=max_depth, min_depth=min_depth):
        yield component


def count_nodes(root: Component, **kwargs) -> int:
    """Count components in a tree.

    Args:
        root: Starting component
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of distinct components reached
    """
    count = 0
    for _ in traverse_tree(root, **kwargs):
        count += 1
    return count


def find_components(
    root: Component,
    predicate: Callable[[Component], bool],
    **kwargs
) -> Iterator[Component]:
    """Find components that match a predicate.

    Args:
        root: Starting component
        predicate: Function that returns True for matching components
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Components that match the predicate
    """
    for component in traverse_tree(root, **kwargs):
        if predicate(component):
            yield component


def get_leaves(root: Component, **kwargs) -> Iterator[Component]:
    """Get all components that cannot bear children.

    Uses ``is_composite()`` rather than the concrete class, so custom
    Component subclasses are classified by capability.
    """
    return find_components(root, lambda c: not c.is_composite(), **kwargs)


def get_root(component: Component) -> Component:
    """Follow parent back-references up to the topmost component.

    Args:
        component: Any component in a tree

    Returns:
        The first ancestor with no parent (component itself if it is a root)
    """
    seen = {id(component)}
    node = component
    parent = node.get_parent()
    while parent is not None and id(parent) not in seen:
        seen.add(id(parent))
        node = parent
        parent = node.get_parent()
    return node


def get_path(component: Component) -> List[Component]:
    """Get the components from the root down to component.

    Args:
        component: Any component in a tree

    Returns:
        List starting at the root and ending with component
    """
    path = [component]
    seen = {id(component)}
    parent = component.get_parent()
    while parent is not None and id(parent) not in seen:
        seen.add(id(parent))
        path.append(parent)
        parent = parent.get_parent()
    path.reverse()
    return path


def get_tree_stats(root: Component, **kwargs) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        root: Starting component
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(tree)
        >>> print(f"Total nodes: {stats['total_nodes']}")
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    traverser = create_traverser(kwargs.pop('strategy', TraversalStrategy.BREADTH_FIRST))
    for component, depth in traverser.traverse(root, **kwargs):
        stats['total_nodes'] += 1

        if not component.is_composite():
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['composite_nodes'] = stats['total_nodes'] - stats['leaf_nodes']

    return stats

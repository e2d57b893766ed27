"""Tree traversal strategies for compositetree.

Traversers walk a component tree through the uniform Component interface
(``children``), so they never need to know whether a node is a Leaf or a
Composite.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, Optional, Set, Tuple, Union

from .config import TraversalStrategy
from .core.component import Component


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Each walk tracks the components it has already visited by identity.
    A child listed twice, or shared by two composites, is yielded once,
    and an accidental cycle ends the walk instead of looping forever.
    """

    @abstractmethod
    def traverse(self,
                 root: Component,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Component, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting component for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding components

        Yields:
            Tuples of (component, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first traversal strategy.

    Visits all components at depth N before any at depth N+1.
    """

    def traverse(self,
                 root: Component,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Component, int]]:
        queue: Deque[Tuple[Component, int]] = deque([(root, 0)])
        visited: Set[int] = set()

        while queue:
            node, depth = queue.popleft()

            if id(node) in visited:
                continue
            visited.add(id(node))

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth) and node.is_composite():
                for child in node.children:
                    queue.append((child, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits a composite before its children, children in insertion order.
    This is the order in which ``operation()`` labels appear.
    """

    def traverse(self,
                 root: Component,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Component, int]]:
        visited: Set[int] = set()

        def _traverse_recursive(node: Component, depth: int) -> Iterator[Tuple[Component, int]]:
            if id(node) in visited:
                return
            visited.add(id(node))

            # Parent first
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth) and node.is_composite():
                for child in node.children:
                    yield from _traverse_recursive(child, depth + 1)

        yield from _traverse_recursive(root, 0)


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before their composite. Good for aggregating values
    bottom-up the way ``operation()`` does.
    """

    def traverse(self,
                 root: Component,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Component, int]]:
        visited: Set[int] = set()

        def _traverse_recursive(node: Component, depth: int) -> Iterator[Tuple[Component, int]]:
            if id(node) in visited:
                return
            visited.add(id(node))

            if self._should_explore(depth, max_depth) and node.is_composite():
                for child in node.children:
                    yield from _traverse_recursive(child, depth + 1)

            # Parent last
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

        yield from _traverse_recursive(root, 0)


_STRATEGY_ALIASES = {
    'bfs': TraversalStrategy.BREADTH_FIRST,
    'breadth_first': TraversalStrategy.BREADTH_FIRST,
    'dfs': TraversalStrategy.DEPTH_FIRST_PRE,
    'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'dfs_post': TraversalStrategy.DEPTH_FIRST_POST,
    'depth_first_post': TraversalStrategy.DEPTH_FIRST_POST,
}

_TRAVERSERS = {
    TraversalStrategy.BREADTH_FIRST: BreadthFirstTraverser,
    TraversalStrategy.DEPTH_FIRST_PRE: DepthFirstPreOrderTraverser,
    TraversalStrategy.DEPTH_FIRST_POST: DepthFirstPostOrderTraverser,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or string alias (bfs, dfs_pre, dfs_post, ...)

    Returns:
        TraversalStrategy enum value

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in _STRATEGY_ALIASES:
        return _STRATEGY_ALIASES[strategy_lower]

    raise ValueError(
        f"Unknown traversal strategy: {strategy}. "
        f"Choose from: {', '.join(_STRATEGY_ALIASES.keys())}"
    )


def create_traverser(strategy: Union[TraversalStrategy, str]) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy or its string alias

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    return _TRAVERSERS[parse_strategy(strategy)]()

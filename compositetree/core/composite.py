"""Composite component for compositetree.

A Composite owns an ordered list of child components. It implements the
child-management operations for real and builds its result by delegating
to its children and summing up what they return.
"""

import logging
from typing import Iterator, List, Set, Tuple

from ..errors import CycleError
from .component import Component

logger = logging.getLogger(__name__)


class Composite(Component):
    """Component that may have children of either variant.

    Children are kept in insertion order, which is also the order their
    results appear in ``operation()``. The same object may be added more
    than once; each add creates one more entry.
    """

    PREFIX = "Branch("
    SEPARATOR = "+"
    SUFFIX = ")"

    def __init__(self, detect_cycles: bool = False):
        """Create an empty composite.

        Args:
            detect_cycles: Reject adds that would make a component its own
                descendant (off by default)
        """
        super().__init__()
        self.detect_cycles = detect_cycles
        self._children: List[Component] = []

    @property
    def children(self) -> Tuple[Component, ...]:
        """Snapshot of the child components in insertion order."""
        return tuple(self._children)

    def add(self, component: Component) -> None:
        """Append a child and make this composite its parent.

        Args:
            component: Component to add (leaf or composite)

        Raises:
            TypeError: If component is None
            CycleError: If cycle detection is enabled and component is this
                composite or contains it
        """
        if component is None:
            raise TypeError("Cannot add None to a composite")

        if self.detect_cycles and self._reachable_from(component):
            logger.debug("Rejected add of %r into %r: would form a cycle", component, self)
            raise CycleError(
                f"Adding {component!r} to {self!r} would make it its own descendant"
            )

        self._children.append(component)
        component.set_parent(self)
        logger.debug("Added %r to %r (%d children)", component, self, len(self._children))

    def remove(self, component: Component) -> None:
        """Remove a child and clear its parent back-reference.

        Entries are matched by identity and every entry of the component is
        dropped. Removing a component that is not a child does nothing.

        Args:
            component: Component to remove
        """
        kept = [child for child in self._children if child is not component]
        removed = len(self._children) - len(kept)
        if not removed:
            return

        self._children = kept
        component.set_parent(None)
        logger.debug("Removed %r from %r (%d entries dropped)", component, self, removed)

    def is_composite(self) -> bool:
        """A composite can always bear children."""
        return True

    def operation(self) -> str:
        """Traverse the children recursively and sum up their results.

        Each child's result is joined with ``+`` in insertion order and the
        whole is wrapped as ``Branch(...)``. An empty composite gives
        ``Branch()``.
        """
        results = [child.operation() for child in self._children]
        return f"{self.PREFIX}{self.SEPARATOR.join(results)}{self.SUFFIX}"

    def _reachable_from(self, component: Component) -> bool:
        """Check whether this composite is component itself or inside its subtree."""
        stack = [component]
        visited: Set[int] = set()

        while stack:
            node = stack.pop()
            if node is self:
                return True
            if id(node) in visited:
                continue
            visited.add(id(node))
            stack.extend(node.children)

        return False

    def __len__(self) -> int:
        return len(self._children)

    def __bool__(self) -> bool:
        # An empty composite is still a component, not an absent one
        return True

    def __iter__(self) -> Iterator[Component]:
        return iter(self.children)

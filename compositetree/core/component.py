"""Component abstraction for compositetree.

The Component is the uniform interface shared by leaves and composites.
Client code talks to every node of a tree through it, so it declares the
child-management operations too, with no-op defaults that only Composite
overrides.
"""

import logging
import weakref
from abc import ABC, abstractmethod
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


class Component(ABC):
    """Abstract base class for every node in a composite tree.

    A component knows its parent through a weak reference. The parent owns
    the child, never the other way around, so a child does not keep its
    parent alive and no reference cycle is formed.
    """

    def __init__(self):
        self._parent: Optional[weakref.ref] = None

    def set_parent(self, parent: Optional['Component']) -> None:
        """Rebind the parent back-reference.

        The parent's child collection is not touched; Composite.add and
        Composite.remove keep the two sides consistent.

        Args:
            parent: New parent, or None to clear the reference
        """
        self._parent = weakref.ref(parent) if parent is not None else None

    def get_parent(self) -> Optional['Component']:
        """Return the current parent.

        Returns:
            The parent component, or None if this component is a root or
            its parent has been garbage collected
        """
        if self._parent is None:
            return None
        return self._parent()

    @property
    def parent(self) -> Optional['Component']:
        return self.get_parent()

    @parent.setter
    def parent(self, parent: Optional['Component']) -> None:
        self.set_parent(parent)

    @property
    def children(self) -> Tuple['Component', ...]:
        """Child components in insertion order (always empty by default)."""
        return ()

    def add(self, component: 'Component') -> None:
        """Add a child. No-op for components that cannot hold children."""
        logger.debug("Ignoring add on non-composite %r", self)

    def remove(self, component: 'Component') -> None:
        """Remove a child. No-op for components that cannot hold children."""
        logger.debug("Ignoring remove on non-composite %r", self)

    def is_composite(self) -> bool:
        """Check if this component can bear children.

        Lets client code probe the capability before calling add without
        inspecting the concrete class.

        Returns:
            False unless overridden
        """
        return False

    @abstractmethod
    def operation(self) -> str:
        """Describe this component (and its subtree) as a string.

        Returns:
            str: Descriptive result for this subtree
        """
        pass

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(at {id(self):#x})"

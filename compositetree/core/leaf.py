"""Leaf component for compositetree."""

from .component import Component


class Leaf(Component):
    """End object of a composition.

    A leaf has no children. Usually the leaves do the actual work while
    composites only delegate to their sub-components.
    """

    LABEL = "Leaf"

    def operation(self) -> str:
        """Return the fixed leaf label."""
        return self.LABEL

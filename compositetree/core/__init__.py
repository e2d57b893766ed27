"""Core abstractions for compositetree.

This module contains the component hierarchy: the abstract Component and
its two concrete variants, Leaf and Composite.
"""

from .component import Component
from .leaf import Leaf
from .composite import Composite

__all__ = [
    "Component",
    "Leaf",
    "Composite",
]

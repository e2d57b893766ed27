"""Exception types for compositetree.

The documented tree operations never raise under valid usage. These
exceptions cover the opt-in checks only.
"""


class CompositeTreeError(Exception):
    """Base class for all compositetree errors."""
    pass


class CycleError(CompositeTreeError):
    """Raised when an add would make a component its own descendant.

    Only raised by composites created with ``detect_cycles=True``.
    """
    pass

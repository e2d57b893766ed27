"""Configuration for compositetree traversal.

This module defines the strategies a traversal can walk a component tree
in. Composites themselves carry no configuration.
"""

from enum import Enum


class TraversalStrategy(Enum):
    """How to walk a component tree."""
    BREADTH_FIRST = "bfs"           # Level by level
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent

"""File-tree primitives: selection, copy and prune."""

from .copy import copy_tree
from .match import has_magic, match_patterns
from .prune import remove

__all__ = [
    "copy_tree",
    "has_magic",
    "match_patterns",
    "remove",
]

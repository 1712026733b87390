"""Domain model for directory listings and filesystem roots.

This package contains non-UI primitives:
- listing entry datatypes and the synthetic parent marker
- directory scanning with display ordering
- root/drive discovery
"""

from __future__ import annotations

from .types import PARENT_ENTRY, PARENT_LABEL, PARENT_MARKER, Entry, Listing, has_parent, safe_is_dir, safe_is_file
from .fs import list_directory, list_directory_children, listing_sort_key
from .roots import POSIX_ROOT, drive_candidates, enumerate_roots, is_current_root

__all__ = [
    "PARENT_MARKER",
    "PARENT_LABEL",
    "PARENT_ENTRY",
    "Entry",
    "Listing",
    "has_parent",
    "safe_is_dir",
    "safe_is_file",
    "listing_sort_key",
    "list_directory_children",
    "list_directory",
    "POSIX_ROOT",
    "drive_candidates",
    "enumerate_roots",
    "is_current_root",
]

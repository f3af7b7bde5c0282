"""
Core bookmark modules.

This package contains the bookmark data models, the JSON-backed store and
the service implementing the create/get/remove/list rules.
"""

from .data_models import BookmarkCollection, BookmarkKind, BookmarkResult
from .bookmark_store import BookmarkStore
from .bookmark_service import BookmarkService

__all__ = [
    'BookmarkCollection',
    'BookmarkKind',
    'BookmarkResult',
    'BookmarkStore',
    'BookmarkService',
]

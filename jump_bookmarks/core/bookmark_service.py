"""
Bookmark Service Module

Business rules for creating, resolving, listing and removing bookmarks.
Each call is a single load -> mutate -> save cycle over the store.
Validation and lookup failures come back as failed ``BookmarkResult``
objects; nothing is raised past this layer.
"""

import logging
from typing import Optional

from jump_bookmarks.utils import path_validator
from jump_bookmarks.utils.error_handler import ErrorCode, StorageError

from .bookmark_store import BookmarkStore
from .data_models import BookmarkCollection, BookmarkKind, BookmarkResult

logger = logging.getLogger(__name__)


def classify_path(path: str) -> BookmarkKind:
    """Classify *path* as a directory, a regular file, or anything else."""
    if path_validator.is_directory(path):
        return BookmarkKind.DIRECTORY
    if path_validator.is_file(path):
        return BookmarkKind.FILE
    return BookmarkKind.OTHER


class BookmarkService:
    """Create/get/remove/list operations over a ``BookmarkStore``."""

    def __init__(self, store: Optional[BookmarkStore] = None):
        self.store = store if store is not None else BookmarkStore()

    def create(self, input_path: str, alias: str) -> BookmarkResult:
        """
        Create a new bookmark.

        Args:
            input_path: Path to bookmark; ``~`` and relative paths are resolved
            alias: Alias to store it under

        Returns:
            BookmarkResult with the alias and resolved path on success
        """
        if not path_validator.is_valid_alias(alias):
            return BookmarkResult.fail(
                ErrorCode.INVALID_ALIAS,
                "Invalid alias format. Use only alphanumeric characters, "
                "underscores, and hyphens.",
                alias=alias,
            )

        resolved_path = path_validator.resolve_path(input_path)
        if not path_validator.path_exists(resolved_path):
            return BookmarkResult.fail(
                ErrorCode.PATH_NOT_FOUND,
                f"Path does not exist: {resolved_path}",
                alias=alias,
                path=resolved_path,
            )

        bookmarks = self.store.load()

        if alias in bookmarks:
            return BookmarkResult.fail(
                ErrorCode.ALIAS_EXISTS,
                f"Alias '{alias}' already exists. "
                f"Use 'jump remove {alias}' to remove it first.",
                alias=alias,
                path=bookmarks[alias],
            )

        bookmarks[alias] = resolved_path

        try:
            self.store.save(bookmarks)
        except StorageError as e:
            return BookmarkResult.fail(
                ErrorCode.STORAGE_ERROR,
                f"Failed to save bookmark: {e}",
                alias=alias,
                path=resolved_path,
            )

        logger.info(f"Created bookmark '{alias}' -> {resolved_path}")
        return BookmarkResult.ok(
            f"Bookmark '{alias}' created for '{resolved_path}'",
            alias=alias,
            path=resolved_path,
        )

    def list(self) -> BookmarkCollection:
        """Return every stored bookmark (empty if there are none)."""
        return self.store.load()

    def get(self, alias: str) -> BookmarkResult:
        """
        Look up the path behind *alias*.

        Stale bookmarks are reported as ``PATH_GONE`` but left in place.

        Returns:
            BookmarkResult with ``path`` and ``kind`` on success
        """
        bookmarks = self.store.load()

        if alias not in bookmarks:
            return BookmarkResult.fail(
                ErrorCode.ALIAS_NOT_FOUND, f"Bookmark '{alias}' not found", alias=alias
            )

        bookmark_path = bookmarks[alias]

        if not path_validator.path_exists(bookmark_path):
            return BookmarkResult.fail(
                ErrorCode.PATH_GONE,
                f"Bookmarked path no longer exists: {bookmark_path}",
                alias=alias,
                path=bookmark_path,
            )

        return BookmarkResult.ok(
            alias=alias,
            path=bookmark_path,
            kind=classify_path(bookmark_path),
        )

    def remove(self, alias: str) -> BookmarkResult:
        """
        Delete the bookmark stored under *alias*.

        The deletion is only durable once the save succeeds; on a storage
        failure the file on disk still holds the bookmark.
        """
        bookmarks = self.store.load()

        if alias not in bookmarks:
            return BookmarkResult.fail(
                ErrorCode.ALIAS_NOT_FOUND, f"Bookmark '{alias}' not found", alias=alias
            )

        removed_path = bookmarks.pop(alias)

        try:
            self.store.save(bookmarks)
        except StorageError as e:
            return BookmarkResult.fail(
                ErrorCode.STORAGE_ERROR,
                f"Failed to remove bookmark: {e}",
                alias=alias,
                path=removed_path,
            )

        logger.info(f"Removed bookmark '{alias}' (was {removed_path})")
        return BookmarkResult.ok(
            f"Bookmark '{alias}' removed (was pointing to '{removed_path}')",
            alias=alias,
            path=removed_path,
        )

    def has_bookmarks(self) -> bool:
        return self.count() > 0

    def count(self) -> int:
        return len(self.store.load())

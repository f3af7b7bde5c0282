"""
Data models for Jump Bookmarks.

This module defines the structures passed between the store, the service
and the command-line layer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from jump_bookmarks.utils.error_handler import ErrorCode

# Alias -> absolute path, exactly as persisted.
BookmarkCollection = Dict[str, str]


class BookmarkKind(Enum):
    """What a bookmarked path points at."""

    DIRECTORY = "directory"
    FILE = "file"
    OTHER = "other"


@dataclass
class BookmarkResult:
    """
    Outcome of a single bookmark service operation.

    Failed results carry an ``error`` code and a user-facing ``message``;
    they are returned, never raised, so the caller decides on exit codes.
    """

    success: bool
    message: str = ""
    error: Optional[ErrorCode] = None
    alias: Optional[str] = None
    path: Optional[str] = None
    kind: Optional[BookmarkKind] = None

    @classmethod
    def ok(
        cls,
        message: str = "",
        alias: Optional[str] = None,
        path: Optional[str] = None,
        kind: Optional[BookmarkKind] = None,
    ) -> "BookmarkResult":
        return cls(True, message, None, alias, path, kind)

    @classmethod
    def fail(
        cls,
        error: ErrorCode,
        message: str,
        alias: Optional[str] = None,
        path: Optional[str] = None,
    ) -> "BookmarkResult":
        return cls(False, message, error, alias, path)

    @property
    def is_directory(self) -> bool:
        return self.kind is BookmarkKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is BookmarkKind.FILE

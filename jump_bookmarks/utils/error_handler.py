"""
Error definitions for Jump Bookmarks.

This module holds the exception hierarchy and the error codes carried by
failed service results.
"""

from enum import Enum


# ============================================================================
# Unified Exception Hierarchy for Jump Bookmarks
# ============================================================================
# All custom exceptions for the project are defined here.
# Import these exceptions from jump_bookmarks.utils.error_handler
# ============================================================================


class JumpError(Exception):
    """Base exception for all jump bookmark errors."""

    pass


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(JumpError):
    """Configuration-related errors."""

    pass


# ============================================================================
# Storage Errors
# ============================================================================


class StorageError(JumpError):
    """Reading or writing the bookmarks file failed."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class ErrorCode(Enum):
    """Failure categories reported by the bookmark service."""

    INVALID_ALIAS = "invalid_alias"  # Alias contains disallowed characters
    PATH_NOT_FOUND = "path_not_found"  # Path to bookmark does not exist
    ALIAS_EXISTS = "alias_exists"  # Alias already taken
    ALIAS_NOT_FOUND = "alias_not_found"  # No bookmark under this alias
    PATH_GONE = "path_gone"  # Bookmark target was deleted (stale)
    STORAGE_ERROR = "storage_error"  # Bookmarks file could not be written

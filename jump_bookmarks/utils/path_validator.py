"""
Alias and path checks used by the bookmark service.

All functions here are stateless. The filesystem probes never raise: an
unreadable or broken path simply reports ``False``.
"""

import logging
import os

from .validators import AliasValidator

logger = logging.getLogger(__name__)

_alias_validator = AliasValidator()


def is_valid_alias(alias) -> bool:
    """Return True if *alias* is non-empty and uses only ``[A-Za-z0-9_-]``."""
    return _alias_validator.validate(alias).is_valid


def resolve_path(input_path: str) -> str:
    """
    Expand ``~`` and make *input_path* absolute and normalized.

    Relative paths are resolved against the current working directory.
    Symlinks are left as they are.
    """
    return os.path.abspath(os.path.expanduser(input_path))


def path_exists(path: str) -> bool:
    try:
        return os.path.exists(path)
    except (OSError, ValueError):
        logger.debug("existence probe failed for %s", path, exc_info=True)
        return False


def is_directory(path: str) -> bool:
    try:
        return os.path.isdir(path)
    except (OSError, ValueError):
        logger.debug("directory probe failed for %s", path, exc_info=True)
        return False


def is_file(path: str) -> bool:
    try:
        return os.path.isfile(path)
    except (OSError, ValueError):
        logger.debug("file probe failed for %s", path, exc_info=True)
        return False

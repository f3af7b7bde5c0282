"""
Bookmark Store Module

Persists the alias -> path collection as a single pretty-printed JSON
object. Every operation reads the whole file and every mutation rewrites
it; there is no locking, so concurrent writers race and the last one wins.
"""

import json
import logging
from pathlib import Path
from typing import Union

from jump_bookmarks.utils.error_handler import StorageError

from .data_models import BookmarkCollection

logger = logging.getLogger(__name__)

DEFAULT_BOOKMARKS_FILE = Path("~/.jump.json")


class BookmarkStore:
    """Reads and writes the bookmarks JSON file."""

    def __init__(self, file_path: Union[str, Path, None] = None):
        """
        Initialize the store.

        Args:
            file_path: Location of the bookmarks file. ``~`` is expanded;
                defaults to ``~/.jump.json``.
        """
        if file_path is None:
            file_path = DEFAULT_BOOKMARKS_FILE
        self._file_path = Path(file_path).expanduser()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def exists(self) -> bool:
        try:
            return self._file_path.is_file()
        except OSError:
            return False

    def load(self) -> BookmarkCollection:
        """
        Load all bookmarks.

        A missing file is an empty collection. Unreadable or malformed
        content is logged and also treated as empty, so a corrupted file
        does not stop the tool from running.

        Returns:
            Mapping of alias to absolute path
        """
        if not self.exists():
            logger.debug(f"Bookmarks file {self._file_path} not found, starting empty")
            return {}

        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error(f"Error reading bookmarks file {self._file_path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.error(
                f"Error reading bookmarks file {self._file_path}: "
                f"expected a JSON object, got {type(data).__name__}"
            )
            return {}

        bookmarks: BookmarkCollection = {}
        for alias, path in data.items():
            if not isinstance(path, str):
                logger.warning(f"Skipping bookmark '{alias}': path is not a string")
                continue
            bookmarks[alias] = path

        return bookmarks

    def save(self, bookmarks: BookmarkCollection) -> None:
        """
        Overwrite the bookmarks file with *bookmarks*.

        Args:
            bookmarks: Full collection to persist

        Raises:
            StorageError: If the collection cannot be serialized or written
        """
        try:
            content = json.dumps(bookmarks, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.error(f"Error serializing bookmarks: {e}")
            raise StorageError(f"cannot serialize bookmarks: {e}", self._file_path) from e

        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._file_path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Error writing bookmarks file {self._file_path}: {e}")
            reason = e.strerror or str(e)
            raise StorageError(
                f"{reason}: {self._file_path}", self._file_path
            ) from e

        logger.debug(f"Saved {len(bookmarks)} bookmarks to {self._file_path}")

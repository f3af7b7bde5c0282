"""
Tests for the bookmark service business rules.
"""

import os
from unittest.mock import patch

import pytest

from jump_bookmarks.core.bookmark_service import BookmarkService, classify_path
from jump_bookmarks.core.data_models import BookmarkKind
from jump_bookmarks.utils import path_validator
from jump_bookmarks.utils.error_handler import ErrorCode, StorageError


class TestCreate:
    """Test BookmarkService.create."""

    def test_create_directory(self, service, target_dir, stored_bookmarks):
        result = service.create(str(target_dir), "WORK")

        assert result.success
        assert result.error is None
        assert result.alias == "WORK"
        assert result.path == str(target_dir)
        assert "WORK" in result.message
        assert result.message == f"Bookmark 'WORK' created for '{target_dir}'"
        assert stored_bookmarks() == {"WORK": str(target_dir)}

    def test_create_file(self, service, target_file):
        result = service.create(str(target_file), "NOTES")

        assert result.success
        assert service.list() == {"NOTES": str(target_file)}

    def test_create_resolves_relative_path(self, service, target_dir, monkeypatch):
        monkeypatch.chdir(target_dir.parent)

        result = service.create(target_dir.name, "WORK")

        assert result.success
        assert result.path == os.path.join(os.getcwd(), target_dir.name)

    def test_create_expands_tilde(self, service, isolated_environment):
        (isolated_environment / "docs").mkdir()

        result = service.create("~/docs", "DOCS")

        assert result.success
        assert result.path == str(isolated_environment / "docs")

    @pytest.mark.parametrize("alias", ["", "my alias", "a/b", "x.y"])
    def test_invalid_alias(self, service, target_dir, bookmarks_file, alias):
        result = service.create(str(target_dir), alias)

        assert not result.success
        assert result.error is ErrorCode.INVALID_ALIAS
        assert result.message == (
            "Invalid alias format. Use only alphanumeric characters, "
            "underscores, and hyphens."
        )
        assert not bookmarks_file.exists()

    def test_invalid_alias_checked_before_path(self, service, tmp_path):
        result = service.create(str(tmp_path / "missing"), "bad alias")

        assert result.error is ErrorCode.INVALID_ALIAS

    def test_path_not_found(self, service, tmp_path, seed_bookmarks, stored_bookmarks):
        seed_bookmarks({"OTHER": "/tmp"})
        missing = tmp_path / "missing"

        result = service.create(str(missing), "WORK")

        assert not result.success
        assert result.error is ErrorCode.PATH_NOT_FOUND
        assert result.message == f"Path does not exist: {missing}"
        assert stored_bookmarks() == {"OTHER": "/tmp"}

    def test_alias_exists_leaves_mapping(
        self, service, target_dir, target_file, stored_bookmarks
    ):
        service.create(str(target_dir), "WORK")

        result = service.create(str(target_file), "WORK")

        assert not result.success
        assert result.error is ErrorCode.ALIAS_EXISTS
        assert result.message == (
            "Alias 'WORK' already exists. Use 'jump remove WORK' to remove it first."
        )
        assert stored_bookmarks() == {"WORK": str(target_dir)}

    def test_alias_is_case_sensitive(self, service, target_dir, target_file):
        assert service.create(str(target_dir), "work").success
        assert service.create(str(target_file), "WORK").success
        assert service.count() == 2

    def test_same_path_under_two_aliases(self, service, target_dir):
        assert service.create(str(target_dir), "A").success
        assert service.create(str(target_dir), "B").success

        assert service.list() == {"A": str(target_dir), "B": str(target_dir)}

    def test_storage_error(self, service, target_dir):
        with patch.object(
            service.store, "save", side_effect=StorageError("disk full")
        ):
            result = service.create(str(target_dir), "WORK")

        assert not result.success
        assert result.error is ErrorCode.STORAGE_ERROR
        assert result.message == "Failed to save bookmark: disk full"
        assert service.list() == {}


class TestGet:
    """Test BookmarkService.get."""

    def test_get_directory(self, service, target_dir):
        service.create(str(target_dir), "WORK")

        result = service.get("WORK")

        assert result.success
        assert result.path == str(target_dir)
        assert result.kind is BookmarkKind.DIRECTORY
        assert result.is_directory
        assert not result.is_file

    def test_get_file(self, service, target_file):
        service.create(str(target_file), "NOTES")

        result = service.get("NOTES")

        assert result.success
        assert result.kind is BookmarkKind.FILE
        assert result.is_file

    def test_create_then_get_round_trip(self, service, tmp_path):
        for index in range(5):
            path = tmp_path / f"dir{index}"
            path.mkdir()
            service.create(str(path), f"D{index}")

        for index in range(5):
            assert service.get(f"D{index}").path == str(tmp_path / f"dir{index}")

    def test_alias_not_found(self, service):
        result = service.get("WORK")

        assert not result.success
        assert result.error is ErrorCode.ALIAS_NOT_FOUND
        assert result.message == "Bookmark 'WORK' not found"

    def test_stale_bookmark_is_path_gone(self, service, target_dir, stored_bookmarks):
        service.create(str(target_dir), "WORK")
        target_dir.rmdir()

        result = service.get("WORK")

        assert not result.success
        assert result.error is ErrorCode.PATH_GONE
        assert result.message == f"Bookmarked path no longer exists: {target_dir}"
        assert result.path == str(target_dir)
        # Stale bookmarks are kept
        assert stored_bookmarks() == {"WORK": str(target_dir)}


class TestRemove:
    """Test BookmarkService.remove."""

    def test_remove_existing(self, service, seed_bookmarks, stored_bookmarks):
        seed_bookmarks({"A": "/a", "B": "/b", "C": "/c"})

        result = service.remove("B")

        assert result.success
        assert result.path == "/b"
        assert result.message == "Bookmark 'B' removed (was pointing to '/b')"
        assert stored_bookmarks() == {"A": "/a", "C": "/c"}

    def test_remove_stale_bookmark(self, service, seed_bookmarks, stored_bookmarks):
        seed_bookmarks({"GONE": "/definitely/not/here"})

        assert service.remove("GONE").success
        assert stored_bookmarks() == {}

    def test_remove_missing(self, service, seed_bookmarks, stored_bookmarks):
        seed_bookmarks({"A": "/a"})

        result = service.remove("B")

        assert not result.success
        assert result.error is ErrorCode.ALIAS_NOT_FOUND
        assert result.message == "Bookmark 'B' not found"
        assert stored_bookmarks() == {"A": "/a"}

    def test_storage_error_leaves_file_unchanged(
        self, service, seed_bookmarks, stored_bookmarks
    ):
        seed_bookmarks({"A": "/a"})

        with patch.object(
            service.store, "save", side_effect=StorageError("read-only file system")
        ):
            result = service.remove("A")

        assert not result.success
        assert result.error is ErrorCode.STORAGE_ERROR
        assert result.message == "Failed to remove bookmark: read-only file system"
        assert stored_bookmarks() == {"A": "/a"}


class TestListAndCount:
    """Test listing helpers."""

    def test_empty(self, service):
        assert service.list() == {}
        assert service.count() == 0
        assert not service.has_bookmarks()

    def test_populated(self, service, seed_bookmarks):
        seed_bookmarks({"A": "/a", "B": "/b"})

        assert service.list() == {"A": "/a", "B": "/b"}
        assert service.count() == 2
        assert service.has_bookmarks()

    def test_corrupt_file_lists_empty(self, service, bookmarks_file):
        bookmarks_file.parent.mkdir(parents=True)
        bookmarks_file.write_text("garbage", encoding="utf-8")

        assert service.list() == {}

    def test_default_store(self, isolated_environment):
        service = BookmarkService()

        assert service.store.file_path == isolated_environment / ".jump.json"


class TestClassifyPath:
    """Test path kind detection used by get."""

    def test_directory(self, target_dir):
        assert classify_path(str(target_dir)) is BookmarkKind.DIRECTORY

    def test_file(self, target_file):
        assert classify_path(str(target_file)) is BookmarkKind.FILE

    def test_other(self):
        with patch.object(path_validator, "is_directory", return_value=False), \
                patch.object(path_validator, "is_file", return_value=False):
            assert classify_path("/dev/null") is BookmarkKind.OTHER

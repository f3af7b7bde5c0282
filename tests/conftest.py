"""
Pytest configuration and shared fixtures for jump bookmark tests.

Every test runs with an isolated HOME and a cleared environment so the
user's real bookmarks file and configuration are never touched.
"""

import json
from pathlib import Path
from typing import Dict

import pytest

from jump_bookmarks.core.bookmark_service import BookmarkService
from jump_bookmarks.core.bookmark_store import BookmarkStore

# ============================================================================
# Environment Isolation
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch) -> Path:
    """Point HOME at a temp directory and clear jump-related variables."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for var in (
        "EDITOR",
        "JUMP_BOOKMARKS_PATH",
        "JUMP_CONFIG_PATH",
        "XDG_CONFIG_HOME",
    ):
        monkeypatch.delenv(var, raising=False)
    return home


# ============================================================================
# Filesystem Fixtures
# ============================================================================


@pytest.fixture
def bookmarks_file(tmp_path: Path) -> Path:
    """Location of the bookmarks file used by a test (not yet created)."""
    return tmp_path / "data" / "jump.json"


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """An existing directory to bookmark."""
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def target_file(tmp_path: Path) -> Path:
    """An existing file to bookmark."""
    path = tmp_path / "notes.txt"
    path.write_text("Test content for notes.txt", encoding="utf-8")
    return path


@pytest.fixture
def seed_bookmarks(bookmarks_file: Path):
    """Return a function writing a bookmarks file directly, bypassing the store."""

    def _seed(bookmarks: Dict[str, str]) -> Path:
        bookmarks_file.parent.mkdir(parents=True, exist_ok=True)
        bookmarks_file.write_text(json.dumps(bookmarks, indent=2), encoding="utf-8")
        return bookmarks_file

    return _seed


@pytest.fixture
def stored_bookmarks(bookmarks_file: Path):
    """Return a function reading the bookmarks file as raw JSON."""

    def _read() -> Dict[str, str]:
        return json.loads(bookmarks_file.read_text(encoding="utf-8"))

    return _read


# ============================================================================
# Store and Service Fixtures
# ============================================================================


@pytest.fixture
def store(bookmarks_file: Path) -> BookmarkStore:
    return BookmarkStore(bookmarks_file)


@pytest.fixture
def service(store: BookmarkStore) -> BookmarkService:
    return BookmarkService(store)


@pytest.fixture
def cli_env(monkeypatch, bookmarks_file: Path) -> Path:
    """Route the CLI to the test bookmarks file."""
    monkeypatch.setenv("JUMP_BOOKMARKS_PATH", str(bookmarks_file))
    return bookmarks_file

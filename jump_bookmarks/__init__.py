"""
Jump Bookmarks

Bookmark directories and files under short aliases and jump back to them
from the shell.
"""

__version__ = "1.0.0"

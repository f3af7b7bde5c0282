"""
Utility modules for Jump Bookmarks.

This package contains path validation, output formatting, editor
launching, logging setup and the error definitions.
"""

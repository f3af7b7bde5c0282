#!/usr/bin/env python3
"""
Main entry point for Jump Bookmarks.

This module backs the ``jump`` console script.
"""

import sys
from jump_bookmarks.cli import main


if __name__ == "__main__":
    sys.exit(main())

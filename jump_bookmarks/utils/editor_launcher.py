"""
Open file bookmarks in the user's editor.

The editor is started in its own session and never waited on. If it cannot
be started the bookmarked path is printed instead, so ``jump to`` still
produces something usable.
"""

import logging
import shlex
import subprocess
import sys
import warnings
from typing import List

from .output_formatter import format_error

logger = logging.getLogger(__name__)


def build_editor_command(editor: str, file_path: str) -> List[str]:
    """Split *editor* like a shell would and append *file_path*."""
    return shlex.split(editor) + [file_path]


def open_file(file_path: str, editor: str) -> bool:
    """
    Launch *editor* on *file_path* without waiting for it to exit.

    Args:
        file_path: File to open
        editor: Editor command, possibly with arguments (``"code -w"``)

    Returns:
        True if the editor process was started, False if the path was
        printed as a fallback
    """
    try:
        command = build_editor_command(editor, file_path)
    except ValueError as e:
        logger.warning(f"Could not parse editor command {editor!r}: {e}")
        print(format_error(f"Failed to open file: {e}"), file=sys.stderr)
        print(file_path)
        return False

    if len(command) < 2:
        print(file_path)
        return False

    try:
        process = subprocess.Popen(command, start_new_session=True)
    except (OSError, subprocess.SubprocessError) as e:
        logger.warning(f"Failed to start editor {command[0]}: {e}")
        print(
            format_error(f"Failed to open file with {editor}: {e}"), file=sys.stderr
        )
        print(file_path)
        return False

    # Never waited on; drop the still-running handle quietly.
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", ResourceWarning)
        del process

    logger.debug(f"Opened {file_path} with {command[0]}")
    return True

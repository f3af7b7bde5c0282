"""
Console output formatting for Jump Bookmarks.

Plain-text rendering only: the output is read by people and by shell
wrappers alike.
"""

from typing import Dict, List, Mapping

# Status icons
ICONS: Dict[str, str] = {
    "success": "✓",
    "error": "✗",
}

ALIAS_HEADER = "ALIAS"
PATH_HEADER = "PATH"
COLUMN_SEPARATOR = " | "
EMPTY_MESSAGE = "No bookmarks found."


def format_success(message: str) -> str:
    return f"{ICONS['success']} {message}"


def format_error(message: str) -> str:
    return f"{ICONS['error']} {message}"


def format_bookmarks_table(
    bookmarks: Mapping[str, str], sort_aliases: bool = False
) -> str:
    """
    Render bookmarks as a two-column ``ALIAS | PATH`` table.

    Args:
        bookmarks: Mapping of alias to path
        sort_aliases: List rows alphabetically instead of in stored order

    Returns:
        The table as a single string, or ``No bookmarks found.`` when empty
    """
    if not bookmarks:
        return EMPTY_MESSAGE

    aliases: List[str] = list(bookmarks)
    if sort_aliases:
        aliases.sort(key=str.lower)

    alias_width = max(len(ALIAS_HEADER), *(len(alias) for alias in aliases))
    path_width = max(len(PATH_HEADER), *(len(bookmarks[a]) for a in aliases))

    header = f"{ALIAS_HEADER:<{alias_width}}{COLUMN_SEPARATOR}{PATH_HEADER:<{path_width}}"
    separator = "-" * len(header)

    rows = [
        f"{alias:<{alias_width}}{COLUMN_SEPARATOR}{bookmarks[alias]}".rstrip()
        for alias in aliases
    ]

    return "\n".join([header.rstrip(), separator, *rows])

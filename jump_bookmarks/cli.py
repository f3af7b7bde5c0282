"""
Command-line interface for Jump Bookmarks.

This module provides the ``jump`` command: create, resolve, list and remove
bookmarks for directories and files.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from jump_bookmarks import __version__
from jump_bookmarks.config.configuration import Configuration
from jump_bookmarks.config.pydantic_config import create_sample_config
from jump_bookmarks.core.bookmark_service import BookmarkService
from jump_bookmarks.core.bookmark_store import BookmarkStore
from jump_bookmarks.utils.editor_launcher import open_file
from jump_bookmarks.utils.error_handler import ConfigurationError
from jump_bookmarks.utils.logging_setup import setup_logging
from jump_bookmarks.utils.output_formatter import (
    format_bookmarks_table,
    format_error,
    format_success,
)

logger = logging.getLogger(__name__)

EPILOG = """
Examples:
  jump create /var/www/project WORK
  jump create ~/documents/notes.txt NOTES
  jump list
  jump to WORK
  jump remove WORK

  Aliases starting with "-" must follow a "--" separator:

  jump create -- /var/www/project -w
  jump to -- -w

Configuration:
  Optional settings are read from ~/.config/jump/config.toml (or .json),
  from --config, or from the file named by JUMP_CONFIG_PATH.

  bookmarks_file = "~/.jump.json"
  editor = "vim"
  sort_aliases = false

  Environment variables: JUMP_BOOKMARKS_PATH overrides the bookmarks file,
  EDITOR selects the editor used to open file bookmarks.

Shell Integration:
  Add this to your ~/.bashrc or ~/.zshrc for directory navigation:

  function jump() {
      local result
      result=$(command jump "$@")
      if [[ "$1" == "to" && -d "$result" ]]; then
          cd "$result"
      else
          echo "$result"
      fi
  }
"""


class JumpArgumentParser(argparse.ArgumentParser):
    """Argument parser reporting usage errors with exit code 1."""

    def error(self, message):
        print(format_error(message), file=sys.stderr)
        self.print_usage(sys.stderr)
        self.exit(1)


class CLIInterface:
    """Command line interface for the bookmark service."""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser with one sub-command per verb."""
        parser = JumpArgumentParser(
            prog="jump",
            description="Quick navigation with bookmarks",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=EPILOG,
        )

        parser.add_argument(
            "--version", "-V", action="version", version=f"%(prog)s {__version__}"
        )
        parser.add_argument(
            "--config",
            "-c",
            help="Configuration file path (TOML or JSON format). "
            "If not specified, looks for ~/.config/jump/config.toml.",
        )
        parser.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            help="Log debug information to stderr",
        )
        parser.add_argument(
            "--create-config",
            metavar="PATH",
            help="Write a sample configuration file to PATH (.toml or .json)",
        )

        subparsers = parser.add_subparsers(dest="command", metavar="<command>")

        create_parser = subparsers.add_parser("create", help="Create a new bookmark")
        create_parser.add_argument("path", help="Directory or file to bookmark")
        create_parser.add_argument("alias", help="Alias (letters, digits, _ and -)")
        create_parser.set_defaults(handler=self._handle_create)

        to_parser = subparsers.add_parser("to", help="Navigate to a bookmark")
        to_parser.add_argument("alias", help="Bookmark alias")
        to_parser.set_defaults(handler=self._handle_to)

        list_parser = subparsers.add_parser("list", help="List all bookmarks")
        list_parser.set_defaults(handler=self._handle_list)

        remove_parser = subparsers.add_parser(
            "remove", aliases=["rm"], help="Remove a bookmark"
        )
        remove_parser.add_argument("alias", help="Bookmark alias")
        remove_parser.set_defaults(handler=self._handle_remove)

        subparsers.add_parser("help", help="Show help information")

        return parser

    def parse_args(self, args=None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)

    def process_arguments(self, parsed_args: argparse.Namespace) -> Configuration:
        """
        Load configuration and set up logging.

        Args:
            parsed_args: Parsed arguments from argparse

        Returns:
            Configured Configuration object

        Raises:
            ConfigurationError: If the configuration cannot be loaded
        """
        config_path = Path(parsed_args.config) if parsed_args.config else None
        config = Configuration(config_path)
        config.update_from_args({"verbose": parsed_args.verbose})

        setup_logging(config, verbose=parsed_args.verbose)

        return config

    def show_help(self) -> int:
        self.parser.print_help(sys.stdout)
        return 0

    def _handle_create(self, service: BookmarkService, args, config) -> int:
        result = service.create(args.path, args.alias)

        if result.success:
            print(format_success(result.message))
            return 0

        print(format_error(result.message), file=sys.stderr)
        return 1

    def _handle_to(self, service: BookmarkService, args, config) -> int:
        result = service.get(args.alias)

        if not result.success:
            print(format_error(result.message), file=sys.stderr)
            return 1

        # Directories are printed for the shell wrapper to cd into
        if result.is_directory:
            print(result.path)
        elif result.is_file and config.editor:
            open_file(result.path, config.editor)
        else:
            print(result.path)

        return 0

    def _handle_list(self, service: BookmarkService, args, config) -> int:
        bookmarks = service.list()
        print(format_bookmarks_table(bookmarks, sort_aliases=config.sort_aliases))
        return 0

    def _handle_remove(self, service: BookmarkService, args, config) -> int:
        result = service.remove(args.alias)

        if result.success:
            print(format_success(result.message))
            return 0

        print(format_error(result.message), file=sys.stderr)
        return 1

    def _handle_create_config(self, output: str) -> int:
        """Write a sample configuration file, refusing to overwrite."""
        output_path = Path(output).expanduser()
        config_format = "json" if output_path.suffix.lower() == ".json" else "toml"

        if output_path.exists():
            print(
                format_error(f"Configuration file '{output_path}' already exists"),
                file=sys.stderr,
            )
            return 1

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            create_sample_config(output_path, config_format)
        except OSError as e:
            print(format_error(f"Error creating configuration file: {e}"), file=sys.stderr)
            return 1

        print(format_success(f"Created configuration file: {output_path}"))
        return 0

    def run(self, args=None) -> int:
        """Execute CLI interface."""
        parsed_args = self.parse_args(args)

        if parsed_args.create_config:
            return self._handle_create_config(parsed_args.create_config)

        handler = getattr(parsed_args, "handler", None)
        if handler is None:
            return self.show_help()

        try:
            config = self.process_arguments(parsed_args)

            logger.debug(f"Command: {parsed_args.command}")
            logger.debug(f"Bookmarks file: {config.bookmarks_file}")

            service = BookmarkService(BookmarkStore(config.bookmarks_file))
            return handler(service, parsed_args, config)

        except ConfigurationError as e:
            print(format_error(str(e)), file=sys.stderr)
            return 1
        except Exception as e:
            print(format_error(f"Error: {e}"), file=sys.stderr)
            logger.exception("Unexpected error in CLI")
            return 1


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    cli = CLIInterface()
    return cli.run(args)


if __name__ == "__main__":
    sys.exit(main())

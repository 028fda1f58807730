#!/usr/bin/env python3
"""
retag - Copy an audio file and rewrite its title, artist, album and cover.

Usage:
    python -m retag [path] [options]
"""

import argparse
import logging
import os
import sys
from typing import Optional

from retag.config import eprint, load_config, setup_logging, validate_config
from retag.editor import edit_file
from retag.errors import TagError
from retag.interactive import InteractivePrompts
from retag.models import EditResult
from retag.tag_handler import TagHandler

logger = logging.getLogger(__name__)


class RetagProcessor:
    """Runs one interactive edit: prompts, copy, tag, report."""

    def __init__(self, config: dict, args: argparse.Namespace,
                 prompts: InteractivePrompts):
        """
        Initialize processor.

        Args:
            config: Configuration dictionary
            args: CLI arguments
            prompts: Interactive prompts handler
        """
        self.config = config
        self.args = args
        self.prompts = prompts
        self.tag_handler = TagHandler(id3_version=config["id3_version"])

    def process(self, path: Optional[str] = None) -> EditResult:
        """
        Main entry point for processing.

        Args:
            path: Source file from the command line; prompted for if None

        Returns:
            EditResult describing the saved copy
        """
        source = path or self.prompts.ask_source_path()
        request = self.prompts.collect_request()
        output = self.prompts.ask_output_path()

        if self.tag_handler.is_supported(source) and not request.is_empty():
            current = self.tag_handler.read_tags(source)
            self.prompts.show_tag_comparison(source, current, request)

        result = edit_file(
            source,
            request,
            output=output,
            handler=self.tag_handler,
            suffix=self.config["output_suffix"],
        )

        if not result.supported:
            self.prompts.show_unsupported(result.extension)

        self.prompts.show_result(result)
        return result


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser."""
    parser = argparse.ArgumentParser(
        description="Copy an audio file and write title, artist, album and "
                    "cover art into the copy (MP3 and Opus).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Answer every prompt interactively
  python -m retag

  # Skip the file path prompt
  python -m retag /path/to/song.mp3

  # Show debug output
  python -m retag /path/to/song.opus --verbose
"""
    )

    parser.add_argument(
        "path",
        nargs="?",
        help="Path to the audio file (prompted for if omitted)"
    )

    # Configuration
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to .env file (default: ./.env)"
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output"
    )

    # Verbosity
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress non-essential output"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging"
    )

    return parser


def main(argv: Optional[list] = None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.path and not os.path.isfile(args.path):
        parser.error(f"File does not exist: {args.path}")

    setup_logging(args.verbose)

    config = load_config(args.env_file)
    problems = validate_config(config)
    if problems:
        eprint("\nInvalid configuration:")
        for problem in problems:
            eprint(f"  - {problem}")
        sys.exit(1)

    prompts = InteractivePrompts(
        no_color=args.no_color or config["no_color"],
        quiet=args.quiet
    )

    processor = RetagProcessor(config, args, prompts)

    try:
        processor.process(args.path)
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        sys.exit(1)
    except (TagError, OSError) as e:
        logger.debug("Edit failed", exc_info=True)
        eprint(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

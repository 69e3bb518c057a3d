"""CLI interface for Lift - generate llms.txt from a directory of Markdown files."""

import argparse
import locale
import logging
import sys

from pydantic import ValidationError
from pydantic_settings import SettingsError

from lift import __version__
from lift.config import get_settings
from lift.errors import LiftError
from lift.processor import LiftProcessor

logger = logging.getLogger(__name__)

EPILOG = """\
Examples:
  # Default (current directory)
  lift

  # Specify input and output directories
  lift --input docs --output build

  # Only guides, without drafts
  lift -i docs --include "guides/**" --exclude "**/draft-*"

  # Silent mode with index.json metadata
  lift -i docs -o build --generate-index --silent

Output:
  - llms.txt: Structured index with Core Documentation and Optional sections
  - llms-full.txt: Full concatenated content with headers and separators
  - index.json / master-index.json: Directory metadata (with --generate-index)

Document ordering: index/readme files first, then important docs (guides,
tutorials), then the remainder.
"""


class Colors:
    RESET = "\033[0m"
    YELLOW = "\033[33m"
    RED = "\033[31m"


class LevelColorFormatter(logging.Formatter):
    """Color warnings and errors when writing to a terminal."""

    LEVEL_COLORS = {
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.RED,
    }

    def __init__(self, use_color: bool) -> None:
        super().__init__("%(message)s")
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelno)
        if self.use_color and color:
            return f"{color}{message}{Colors.RESET}"
        return message


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


class LiftArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message: str) -> None:
        print(f"Error: {message}", file=sys.stderr)
        print("Use --help to see available options", file=sys.stderr)
        sys.exit(1)


def setup_logging(silent: bool = False) -> None:
    """Configure logging for CLI: progress on stdout, problems on stderr."""
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(_BelowWarning())
    stdout_handler.setFormatter(LevelColorFormatter(use_color=False))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(LevelColorFormatter(use_color=sys.stderr.isatty()))

    logging.basicConfig(
        level=logging.WARNING if silent else logging.INFO,
        handlers=[stdout_handler, stderr_handler],
        force=True,
    )


def build_parser() -> LiftArgumentParser:
    parser = LiftArgumentParser(
        prog="lift",
        description="Generate llms.txt from a directory of Markdown and HTML files.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        add_help=False,
    )
    parser.add_argument(
        "-i",
        "--input",
        metavar="PATH",
        help="Source directory of Markdown files (default: current directory)",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="PATH",
        help="Destination directory for generated files (default: current directory)",
    )
    parser.add_argument(
        "--include",
        metavar="GLOB",
        action="append",
        help="Only include files matching this glob (repeatable)",
    )
    parser.add_argument(
        "--exclude",
        metavar="GLOB",
        action="append",
        help="Skip files matching this glob (repeatable)",
    )
    parser.add_argument(
        "--generate-index",
        action="store_true",
        help="Also write index.json per directory and master-index.json",
    )
    parser.add_argument(
        "--silent",
        action="store_true",
        help="Suppress non-error output",
    )
    parser.add_argument("-h", "--help", action="store_true", help="Show this help message and exit")
    parser.add_argument("--version", action="store_true", help="Show the current version and exit")
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse arguments, rejecting unknown options."""
    parser = build_parser()
    args, extras = parser.parse_known_args(argv)

    # Bare positional arguments are ignored
    unknown = {arg for arg in extras if arg.startswith("-")}

    # Help, version and unknown options are handled in the order given
    for arg in sys.argv[1:] if argv is None else argv:
        if arg in unknown:
            parser.error(f"Unknown option {arg}")
        if arg in ("-h", "--help"):
            parser.print_help()
            sys.exit(0)
        if arg == "--version":
            print(__version__)
            sys.exit(0)

    return args


def _overrides(args: argparse.Namespace) -> dict:
    """Settings given on the command line; anything omitted falls back to env/config."""
    overrides: dict = {}
    if args.input is not None:
        overrides["input_path"] = args.input
    if args.output is not None:
        overrides["output_path"] = args.output
    if args.include:
        overrides["include_globs"] = args.include
    if args.exclude:
        overrides["exclude_globs"] = args.exclude
    if args.generate_index:
        overrides["generate_index"] = True
    if args.silent:
        overrides["silent"] = True
    return overrides


def cli(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    args = parse_args(argv)
    setup_logging(args.silent)

    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        logger.debug("Falling back to the default collation locale")

    try:
        settings = get_settings(**_overrides(args))
    except (ValidationError, SettingsError) as e:
        logger.error(f"Error: Invalid configuration: {e}")
        sys.exit(1)

    if settings.silent and not args.silent:
        logging.getLogger().setLevel(logging.WARNING)

    try:
        LiftProcessor(settings).process()
    except LiftError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    cli()

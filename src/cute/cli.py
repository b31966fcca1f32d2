"""Command-line interface for CuTE."""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .app import CuteApp
from .config import Config, load_config
from .providers import SqliteStorage
from .transport import CursesTerminal


def setup_logging(verbose: bool = False, log_file: str | Path | None = None) -> None:
    """Configure logging.

    curses owns the terminal while the app runs, so records go to a file
    when one is given.
    """
    level = logging.DEBUG if verbose else logging.INFO
    handlers = None
    if log_file is not None:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers = [logging.FileHandler(path)]
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="CuTE - build curl and wget commands from a terminal menu",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # Use default config
  %(prog)s -c config.yaml           # Use specific config file
  %(prog)s -d ~/cute.db             # Use a specific database
  %(prog)s -v --log-file cute.log   # Debug logging to cute.log
""",
    )

    parser.add_argument(
        "-c", "--config",
        metavar="FILE",
        help="Path to YAML configuration file",
    )

    parser.add_argument(
        "-d", "--database",
        metavar="FILE",
        help="SQLite database for saved keys and commands",
    )

    parser.add_argument(
        "--log-file",
        metavar="FILE",
        help="File to write logs to",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Load configuration
    if args.config:
        try:
            config = load_config(args.config)
        except FileNotFoundError:
            print(f"Config file not found: {args.config}", file=sys.stderr)
            return 1
    else:
        config = Config()

    # Override config with command line arguments
    if args.database:
        config = replace(config, database=args.database)
    if args.log_file:
        config = replace(config, log_file=args.log_file)

    try:
        setup_logging(args.verbose, config.get_log_path())
    except OSError as e:
        print(f"Cannot write log file {config.log_file}: {e}", file=sys.stderr)
        return 1

    logger = logging.getLogger(__name__)
    logger.info(f"  Database: {config.get_database_path()}")
    logger.info(f"  curl: {config.curl_path}, wget: {config.wget_path}")

    app = CuteApp(
        CursesTerminal(),
        SqliteStorage(config.get_database_path()),
        config,
    )

    try:
        app.run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Command-line entry point for app-icon-updater."""

from __future__ import annotations

import argparse
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Sequence

from core.config import ConfigError, ConfigService
from core.pipeline import IconUpdater, RunSummary
from utils.env import file_logging_disabled, log_level_from_env, resolve_log_level
from utils.paths import get_app_paths

logger = logging.getLogger(__name__)

USAGE_EPILOG = """\
Examples
  update-app-icons ./app_icons.json
  update-app-icons ./app_icons.json --dry-run
"""


def setup_logging(level: int | None = None, *, log_file: bool = True) -> None:
    """Configure logging to stdout and, optionally, a rotating application log file."""

    if level is None:
        level = log_level_from_env()
    root_logger = logging.getLogger()

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        try:
            handler.close()
        except Exception:  # pragma: no cover - best effort cleanup
            pass

    root_logger.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s [%(name)s] %(message)s",
        "%Y-%m-%d %H:%M:%S",
    )

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if not log_file:
        return

    log_dir = get_app_paths().ensure_log_dir()
    log_path = log_dir / "app.log"
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=5 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="update-app-icons",
        description="Update the app icons of a mobile-app project from a single source image.",
        epilog=USAGE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    # Optional here so a missing value is reported with exit status 1, not argparse's 2.
    parser.add_argument("config_file", nargs="?", help="JSON (or YAML) icon configuration")
    parser.add_argument("--dry-run", action="store_true", help="show the results but don't update any files")
    parser.add_argument("--log-level", default=None, help="logging level (default: $AIU_LOG_LEVEL or INFO)")
    parser.add_argument("--no-log-file", action="store_true", help="log to stdout only")
    return parser


def run(config_file: str, *, dry_run: bool = False) -> RunSummary:
    """Load ``config_file`` and update every configured icon."""

    config = ConfigService(config_file).load(dry_run=dry_run)
    return IconUpdater(config).run()


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = resolve_log_level(args.log_level, log_level_from_env())
    # Without a config file nothing is touched, the log file included.
    log_file = bool(args.config_file) and not (args.no_log_file or file_logging_disabled())
    setup_logging(level, log_file=log_file)

    if not args.config_file:
        logger.error("Missing <config_file>. See --help for help")
        return 1

    try:
        run(args.config_file, dry_run=args.dry_run)
    except ConfigError as exc:
        logger.error("%s", exc)
        return 1
    except Exception:
        logger.exception("Unexpected error while updating icons")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import AppConfig, LOG_LEVELS
from .errors import ConfigError
from .session import SmartHomeSession

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smart-home",
        description="Interactive simulator for switching virtual household devices on and off.",
    )
    parser.add_argument("--config", type=Path, help="Path to a YAML config file.")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors.")
    parser.add_argument("--quiet", action="store_true", help="Do not print the welcome banner.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Override the log level (default: WARNING).",
    )
    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    cfg = AppConfig.from_file(args.config) if args.config else AppConfig()
    if args.no_color:
        cfg.use_color = False
    if args.quiet:
        cfg.show_welcome = False
    if args.log_level:
        cfg.log_level = args.log_level
    return cfg


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        cfg = load_config(args)
    except ConfigError as exc:
        parser.error(str(exc))

    logging.basicConfig(level=cfg.logging_level, format=LOG_FORMAT, stream=sys.stderr)
    logger.debug("Starting session", extra={"config": cfg})

    SmartHomeSession(config=cfg).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

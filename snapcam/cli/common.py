from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Optional

from snapcam.core.config import SnapcamConfig


LOG_LEVELS: dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def add_common_cli_arguments(
    parser: argparse.ArgumentParser,
    *,
    defaults: SnapcamConfig,
) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Configuration file (key = value lines); CLI flags override it",
    )

    parser.add_argument(
        "--camera-index",
        type=int,
        default=defaults.camera_index,
        help="OpenCV camera index to open",
    )

    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path(defaults.output_dir),
        help="Directory where snapshots are written",
    )

    parser.add_argument(
        "--log-level",
        choices=sorted(LOG_LEVELS.keys()),
        default=defaults.log_level.lower() if defaults.log_level.lower() in LOG_LEVELS else "info",
        help="Logging verbosity",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        default=defaults.log_path,
        help="Rotating log file, or a directory to hold snapcam.log",
    )

    console_group = parser.add_mutually_exclusive_group()
    console_group.add_argument(
        "--console",
        dest="console_output",
        action="store_true",
        default=defaults.console_output,
        help="Log to stdout",
    )
    console_group.add_argument(
        "--no-console",
        dest="console_output",
        action="store_false",
        help="Do not log to stdout",
    )


def merge_args_into_config(args: argparse.Namespace, config: SnapcamConfig) -> SnapcamConfig:
    """Return ``config`` with values from parsed CLI arguments applied."""
    updates: dict[str, Any] = {
        "camera_index": args.camera_index,
        "output_dir": str(args.output_dir),
        "log_level": args.log_level,
        "log_file": str(args.log_file) if args.log_file else "",
        "console_output": args.console_output,
    }
    merged = config.to_dict()
    merged.update(updates)
    return SnapcamConfig.from_dict(merged)


def pre_parse_config_path(argv: Optional[list[str]]) -> Optional[Path]:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument("--config", type=Path, default=None)
    pre_args, _ = pre_parser.parse_known_args(argv)
    return pre_args.config


__all__ = [
    "LOG_LEVELS",
    "add_common_cli_arguments",
    "merge_args_into_config",
    "pre_parse_config_path",
]

"""Config file loading for SnapCam.

Config files are plain ``key = value`` lines. ``#`` starts a comment, blank
lines are ignored, and values are coerced to the type of the matching default.
A config file is only read when one is named explicitly.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from .logging_utils import get_module_logger

logger = get_module_logger(__name__)


class ConfigLoader:
    """Parse ``key = value`` config files into dictionaries typed by ``defaults``."""

    @staticmethod
    def load(config_path: Path, defaults: Dict[str, Any]) -> Dict[str, Any]:
        config = defaults.copy()

        if not config_path.exists():
            logger.warning("Config file not found at %s, using defaults", config_path)
            return config

        logger.debug("Loading config from: %s", config_path)

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                for line_num, line in enumerate(f, 1):
                    line = line.strip()

                    if not line or line.startswith("#"):
                        continue

                    if "=" not in line:
                        logger.warning(
                            "Invalid config line %d (missing '='): %s",
                            line_num, line,
                        )
                        continue

                    key, value = line.split("=", 1)
                    key = key.strip()
                    value = value.strip()

                    if "#" in value:
                        value = value.split("#", 1)[0].strip()

                    if (value.startswith('"') and value.endswith('"')) or (
                        value.startswith("'") and value.endswith("'")
                    ):
                        value = value[1:-1]

                    if key not in defaults:
                        logger.warning("Unknown config key '%s' (line %d) - ignored", key, line_num)
                        continue

                    config[key] = ConfigLoader._parse_value_with_type(value, defaults[key])

        except OSError as e:
            logger.error("Failed to load config file %s: %s", config_path, e)
            return config

        logger.info("Loaded config from %s", config_path)
        return config

    @staticmethod
    def _parse_value_with_type(value: str, default: Any) -> Any:
        target_type = type(default)

        if target_type is bool:
            return value.lower() in ("true", "yes", "on", "1")

        if target_type is int:
            try:
                return int(value, 0)  # decimal, hex (0x...), octal (0o...), binary (0b...)
            except ValueError:
                logger.warning("Failed to parse '%s' as int, using default %r", value, default)
                return default

        if target_type is float:
            try:
                return float(value)
            except ValueError:
                logger.warning("Failed to parse '%s' as float, using default %r", value, default)
                return default

        return value


@dataclass(slots=True)
class SnapcamConfig:
    camera_index: int = 0
    output_dir: str = "."
    control_bar_height: int = 30
    window_title: str = "SnapCam"
    log_level: str = "info"
    log_file: str = ""
    console_output: bool = True

    @classmethod
    def defaults(cls) -> Dict[str, Any]:
        return asdict(cls())

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "SnapcamConfig":
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in values.items() if key in known})

    @property
    def output_path(self) -> Path:
        return Path(self.output_dir).expanduser()

    @property
    def log_path(self) -> Optional[Path]:
        return Path(self.log_file).expanduser() if self.log_file else None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(config_path: Optional[Path] = None) -> SnapcamConfig:
    """Load ``config_path`` on top of the built-in defaults.

    Without a path the defaults are returned unchanged.
    """
    if config_path is None:
        return SnapcamConfig()
    values = ConfigLoader.load(Path(config_path), SnapcamConfig.defaults())
    return SnapcamConfig.from_dict(values)


__all__ = ["ConfigLoader", "SnapcamConfig", "load_config"]

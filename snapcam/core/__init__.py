"""Core services: logging and configuration."""

from .config import ConfigLoader, SnapcamConfig, load_config
from .logging_config import configure_logging
from .logging_utils import get_module_logger

__all__ = [
    "ConfigLoader",
    "SnapcamConfig",
    "configure_logging",
    "get_module_logger",
    "load_config",
]

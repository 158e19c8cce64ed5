"""SnapCam: live camera preview with PNG snapshots."""

from __future__ import annotations

from importlib import metadata
from typing import Optional, Sequence

try:
    __version__ = metadata.version("snapcam")
except metadata.PackageNotFoundError:  # pragma: no cover - local dev
    __version__ = "0.0.0"


def run(argv: Optional[Sequence[str]] = None) -> int:
    """Convenience wrapper around the application entry point."""
    from .app import main

    return main(list(argv) if argv is not None else None)


__all__ = ["__version__", "run"]

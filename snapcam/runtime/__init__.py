from .context import AppContext
from .pump import FramePump
from .snapshot import SnapshotExporter, SnapshotResult, snapshot_filename
from .timer import RepeatingTimer

__all__ = [
    "AppContext",
    "FramePump",
    "RepeatingTimer",
    "SnapshotExporter",
    "SnapshotResult",
    "snapshot_filename",
]

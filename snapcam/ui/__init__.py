from .dialogs import DialogNotifier
from .display import DisplaySurface
from .shell import CameraShell

__all__ = ["CameraShell", "DialogNotifier", "DisplaySurface"]

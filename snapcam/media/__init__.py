"""Frame conversion utilities."""

from .color_convert import ensure_uint8, fit_to, to_native, to_rgb

__all__ = ["ensure_uint8", "fit_to", "to_native", "to_rgb"]

from .hex_renderer import render_level

__all__ = ["render_level"]

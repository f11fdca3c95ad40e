"""A small browser engine: DOM, CSS parsing, style matching, block layout and rendering helpers."""

__version__ = "0.1.0"

__all__ = ["color", "css", "dom", "geometry", "html_state", "layout", "render", "style"]
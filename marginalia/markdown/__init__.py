# marginalia/markdown/__init__.py

from .renderer import render_markdown, render_note

__all__ = ["render_markdown", "render_note"]

# marginalia/exceptions.py
"""
Errors raised while converting a markdown document.

Every error is fatal for the whole build: nothing catches them below the
``build`` command, which reports the message and exits non-zero.
"""

from pathlib import Path
from typing import Optional


class ConversionError(Exception):
    """Base class for malformed input found while converting a document."""

    def __init__(self, message: str, source: Optional[Path] = None):
        super().__init__(message)
        self.source = source


class FrontmatterError(ConversionError):
    """The document does not open with a closed ``---`` frontmatter block."""


class FootnoteDefinitionError(ConversionError):
    """A footnote definition line does not look like ``[^label]:body``."""


class DeckError(ConversionError):
    """An ``orbit`` block holds a payload that is not a valid review deck."""


class TemplateSlotError(ConversionError):
    """The page template has no slot for the rendered body."""

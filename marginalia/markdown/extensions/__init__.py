# marginalia/markdown/extensions/__init__.py

from .footnote_refs import FootnoteReferenceExtension
from .md_links import MarkdownLinkExtension
from .orbit_blocks import OrbitBlockExtension
from .strikethrough import StrikethroughExtension

__all__ = [
    "FootnoteReferenceExtension",
    "MarkdownLinkExtension",
    "OrbitBlockExtension",
    "StrikethroughExtension",
]

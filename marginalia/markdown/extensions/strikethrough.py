# marginalia/markdown/extensions/strikethrough.py
"""Render ``~~text~~`` as ``<del>text</del>``."""

from markdown.extensions import Extension
from markdown.inlinepatterns import SimpleTagInlineProcessor

STRIKETHROUGH_RE = r"(~{2})(.+?)~{2}"


class StrikethroughExtension(Extension):
    def extendMarkdown(self, md):
        # Below inline code and links, next to the emphasis patterns
        md.inlinePatterns.register(
            SimpleTagInlineProcessor(STRIKETHROUGH_RE, "del"), "strikethrough", 55
        )


def makeExtension(**kwargs):
    return StrikethroughExtension(**kwargs)

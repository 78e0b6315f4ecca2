# marginalia/markdown/extensions/md_links.py
"""
A Markdown extension that points links between notes at the rendered pages.

    [previous note](spacing-effect.md)  ->  <a href="spacing-effect.html">

Only destinations ending in ``.md`` are touched, and only that suffix changes.
Raw HTML anchors written by authors are left as they are.
"""

import logging

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from ...constants import OUTPUT_SUFFIX, SOURCE_SUFFIX

logger = logging.getLogger(__name__)


def rewrite_destination(href: str) -> str:
    if href.endswith(SOURCE_SUFFIX):
        return href[: -len(SOURCE_SUFFIX)] + OUTPUT_SUFFIX
    return href


class MarkdownLinkTreeprocessor(Treeprocessor):
    def run(self, root):
        for link in root.iter("a"):
            href = link.get("href")
            if href is None:
                continue
            rewritten = rewrite_destination(href)
            if rewritten != href:
                logger.debug("Rewrote link %s -> %s", href, rewritten)
                link.set("href", rewritten)


class MarkdownLinkExtension(Extension):
    def extendMarkdown(self, md):
        # After the inline processor (20) has turned link syntax into <a>
        md.treeprocessors.register(MarkdownLinkTreeprocessor(md), "md_links", 15)


def makeExtension(**kwargs):
    return MarkdownLinkExtension(**kwargs)

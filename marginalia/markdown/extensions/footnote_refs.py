# marginalia/markdown/extensions/footnote_refs.py
"""
A Markdown extension that renders footnote references as numbered anchors.

    Spaced repetition[^sr] works.

becomes

    Spaced repetition<sup class="fn"><a id="sr-back" href="#sr">[1]</a></sup> works.

Notes:
- The number counts references, not labels: referencing the same label twice
  yields [1] and [2], both pointing at the same definition.
- The anchor is stored as raw HTML so later processors (links, smarty) leave it
  alone.
- Numbers are filled in on the serialized HTML. The inline treeprocessor
  visits nested blocks out of document order, so counting in handleMatch
  would misnumber references inside lists and blockquotes.
- Definitions are not handled here; they are split off before parsing and
  rendered by ``marginalia.markdown.footnotes``.
"""

import itertools
import re

from markdown import util
from markdown.extensions import Extension
from markdown.inlinepatterns import InlineProcessor
from markdown.postprocessors import Postprocessor

FOOTNOTE_REFERENCE_RE = r"\[\^([^\]\s]+)\]"
SUPERSCRIPT_TEMPLATE = (
    '<sup class="fn"><a id="{label}-back" href="#{label}">[{number}]</a></sup>'
)

# STX/ETX are stripped from the source, so the marker cannot be authored.
NUMBER_MARKER = f"{util.STX}fn-number{util.ETX}"


class FootnoteReferenceInlineProcessor(InlineProcessor):
    def handleMatch(self, m, data):
        html = SUPERSCRIPT_TEMPLATE.format(label=m.group(1), number=NUMBER_MARKER)
        return self.md.htmlStash.store(html), m.start(0), m.end(0)


class FootnoteNumberPostprocessor(Postprocessor):
    def run(self, text):
        numbers = itertools.count(1)
        return re.sub(re.escape(NUMBER_MARKER), lambda m: str(next(numbers)), text)


class FootnoteReferenceExtension(Extension):
    def extendMarkdown(self, md):
        # Must run before the link patterns, which would eat the brackets
        md.inlinePatterns.register(
            FootnoteReferenceInlineProcessor(FOOTNOTE_REFERENCE_RE, md),
            "footnote_reference",
            175,
        )
        # After raw_html (30) has restored the stashed anchors
        md.postprocessors.register(
            FootnoteNumberPostprocessor(md), "footnote_numbers", 25
        )


def makeExtension(**kwargs):
    return FootnoteReferenceExtension(**kwargs)

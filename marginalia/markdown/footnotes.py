# marginalia/markdown/footnotes.py
"""
Footnote rendering.

Definitions collected by the footnote splitter are turned back into markdown,
one ordered-list item per definition with a back-link to the reference, and
parsed with the same python-markdown setup as the body:

    [^essay]: See [the essay](essay.md).

becomes

    ---

    1.  See [the essay](essay.md). <a class="fn-back" href="#essay-back">↩</a>

The list items are then tagged with the footnote labels by the
``footnote_labels`` postprocessor, in definition order.
"""

import re
from dataclasses import dataclass
from typing import List

from ..exceptions import FootnoteDefinitionError
from .config import create_markdown
from .postprocessors import apply_postprocessors
from .postprocessors.footnote_labels import LABELS_KEY

FOOTNOTE_DEFINITION_RE = re.compile(r"^\[\^([^\]]+)\]:(.*)$")

SEPARATOR = "---"
BACKLINK_TEMPLATE = '<a class="fn-back" href="#{label}-back">↩</a>'


@dataclass(frozen=True)
class FootnoteDefinition:
    label: str
    body: str


def parse_footnote_definition(line: str) -> FootnoteDefinition:
    match = FOOTNOTE_DEFINITION_RE.match(line)
    if match is None:
        raise FootnoteDefinitionError(
            f"malformed footnote definition, expected '[^label]:text': {line!r}"
        )
    return FootnoteDefinition(label=match.group(1), body=match.group(2))


def build_footnote_source(definitions: List[FootnoteDefinition]) -> str:
    """Build the markdown source of the footnote block."""
    items = [
        f"1. {definition.body} {BACKLINK_TEMPLATE.format(label=definition.label)}"
        for definition in definitions
    ]
    return "\n".join([SEPARATOR, ""] + items) + "\n"


def render_footnotes(lines: List[str]) -> str:
    """
    Render footnote definition lines as the footnote block of a page.

    Args:
        lines: Definition lines, in the order they appeared in the document

    Returns:
        HTML for a separator followed by an ordered list whose N-th item has
        the id of the N-th definition's label

    Raises:
        FootnoteDefinitionError: If a line is not a footnote definition
    """
    definitions = [parse_footnote_definition(line) for line in lines]

    html = create_markdown().convert(build_footnote_source(definitions))

    context = {LABELS_KEY: [definition.label for definition in definitions]}
    return apply_postprocessors(html, context)

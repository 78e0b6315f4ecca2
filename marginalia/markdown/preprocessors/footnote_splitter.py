# marginalia/markdown/preprocessors/footnote_splitter.py
"""
Preprocessor that pulls footnote definitions out of the body.

Definitions are rendered separately, as a numbered list with back-links, so
they are removed before python-markdown sees the body. Any line that opens
with ``[^...]:`` is treated as a definition, and malformed ones such as
``[^]: text`` are rejected later by the footnote renderer. Lines that only
open with a reference, like ``[^1] as noted above``, stay in the body.
"""

import re
from typing import List, Tuple

DEFINITION_SHAPE_RE = re.compile(r"^\[\^[^\]]*\]:")

FOOTNOTES_KEY = "footnotes"


def split_footnotes(text: str) -> Tuple[str, List[str]]:
    """
    Partition a body into prose and footnote definition lines.

    Lines are split on ``\\n`` only, with a trailing ``\\r`` dropped.

    Args:
        text: Body text with the frontmatter already removed

    Returns:
        (body, definitions): the remaining lines joined by newlines, and the
        definition lines in the order they appeared
    """
    body = []
    definitions = []

    for line in text.split("\n"):
        line = line.removesuffix("\r")
        if DEFINITION_SHAPE_RE.match(line):
            definitions.append(line)
        else:
            body.append(line)

    return "\n".join(body), definitions


def footnote_splitter_default(text: str, context: dict) -> str:
    """
    Default configuration for split_footnotes.

    Stores the definition lines under ``context["footnotes"]`` for the
    footnote renderer and returns the remaining body.
    """
    body, definitions = split_footnotes(text)
    context[FOOTNOTES_KEY] = definitions
    return body

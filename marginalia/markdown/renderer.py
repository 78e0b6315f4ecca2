# marginalia/markdown/renderer.py

import logging

from .config import create_markdown
from .footnotes import render_footnotes
from .postprocessors import apply_postprocessors
from .preprocessors import apply_preprocessors
from .preprocessors.footnote_splitter import FOOTNOTES_KEY

logger = logging.getLogger(__name__)


def render_markdown(text, context=None):
    """
    Render a note body with the pre/post processing pipeline.

    Args:
        text: Raw note source, frontmatter included
        context: Optional dict shared with the processors. The footnote
            splitter leaves the definition lines under ``footnotes``.

    Returns:
        Body HTML, without the footnote block
    """
    if context is None:
        context = {}

    # Pre-processing: frontmatter removal, footnote definitions split off
    text = apply_preprocessors(text, context)

    # Markdown conversion, fresh instance per document
    html = create_markdown().convert(text)

    # Post-processing: After markdown conversion
    html = apply_postprocessors(html, context)

    return html


def render_note(text):
    """
    Render a note to its body HTML followed by its footnote block.

    Args:
        text: Raw note source, frontmatter included

    Returns:
        (body_html, footnotes_html)
    """
    context = {}
    body = render_markdown(text, context)
    footnotes = render_footnotes(context.get(FOOTNOTES_KEY, []))

    logger.debug("Rendered note with %d footnote(s)", len(context.get(FOOTNOTES_KEY, [])))
    return body, footnotes

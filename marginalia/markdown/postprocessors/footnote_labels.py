# marginalia/markdown/postprocessors/footnote_labels.py
"""
Postprocessor that gives footnote list items their anchor ids.

Footnote references link to ``#<label>``, so the N-th item of the rendered
footnote list receives ``id="<label>"`` of the N-th definition. Assignment is
positional: it does not look at the item text.

Only runs when ``context["footnote_labels"]`` is set; the body of a page is
returned unchanged.
"""

import logging

from bs4 import BeautifulSoup

from ...exceptions import FootnoteDefinitionError

logger = logging.getLogger(__name__)

LABELS_KEY = "footnote_labels"


def footnote_labels(html: str, context: dict) -> str:
    """
    Tag the top-level items of the footnote list with their labels.

    Args:
        html: Rendered footnote block (separator followed by one <ol>)
        context: Must contain ``footnote_labels``, the labels in order

    Returns:
        HTML with an id on every footnote list item

    Raises:
        FootnoteDefinitionError: If the number of items and labels differ
    """
    labels = context.get(LABELS_KEY)
    if not labels:
        return html

    soup = BeautifulSoup(html, "html.parser")

    ol = soup.find("ol", recursive=False)
    items = ol.find_all("li", recursive=False) if ol else []

    if len(items) != len(labels):
        raise FootnoteDefinitionError(
            f"{len(labels)} footnote definition(s) rendered as {len(items)} list item(s)"
        )

    for li, label in zip(items, labels):
        li["id"] = label

    logger.debug("Labelled %d footnote(s)", len(labels))
    return str(soup)


def footnote_labels_default(html: str, context: dict) -> str:
    """
    Default configuration for footnote_labels.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return footnote_labels(html, context)

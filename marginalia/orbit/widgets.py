# marginalia/orbit/widgets.py
"""
Render review decks to orbit web-component markup.

Card fields are written into the widget attributes verbatim. Authors are
trusted to supply attribute-safe text, so nothing is HTML-escaped here.
"""

import logging
from typing import Optional

from django.template.base import Template
from django.utils.safestring import mark_safe

from ..templating import load_template, render_template
from .models import ReviewCard, ReviewDeck

logger = logging.getLogger(__name__)

REVIEW_START = "<orbit-reviewarea>"
REVIEW_END = "</orbit-reviewarea>"
PROMPT_TEMPLATE = (
    '<orbit-prompt question="{{ question }}" '
    'question-attachments="{{ question_attachments }}" '
    'answer="{{ answer }}"></orbit-prompt>'
)
PROMPT_SLOTS = ("question", "question_attachments", "answer")


def render_card(card: ReviewCard, template: Optional[Template] = None) -> str:
    """Render one card as a self-contained ``<orbit-prompt>`` element."""
    if template is None:
        template = load_template(PROMPT_TEMPLATE, required_slots=PROMPT_SLOTS)

    context = {
        "question": mark_safe(card.question),
        "question_attachments": mark_safe(card.question_attachments),
        "answer": mark_safe(card.answer),
    }
    return render_template(template, context)


def render_deck(deck: ReviewDeck) -> str:
    """
    Render a deck as an ``<orbit-reviewarea>`` holding one prompt per card.

    Args:
        deck: Parsed review deck

    Returns:
        HTML fragment, cards in deck order
    """
    template = load_template(PROMPT_TEMPLATE, required_slots=PROMPT_SLOTS)

    parts = [REVIEW_START]
    for card in deck.cards:
        parts.append(render_card(card, template))
    parts.append(REVIEW_END)

    logger.debug("Rendered orbit review area with %d card(s)", len(deck))
    return "".join(parts)

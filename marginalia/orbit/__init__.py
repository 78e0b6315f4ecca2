"""Orbit review decks embedded in markdown fenced blocks."""

from .models import ReviewCard, ReviewDeck
from .widgets import render_card, render_deck

__all__ = [
    "ReviewCard",
    "ReviewDeck",
    "render_card",
    "render_deck",
]

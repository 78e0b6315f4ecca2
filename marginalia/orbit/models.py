# marginalia/orbit/models.py
"""
Typed review decks parsed from the JSON payload of an ``orbit`` block.

Two payload shapes are accepted:

    [{"question": "...", "question_attachments": "", "answer": "..."}]

    {"deck": [{"question": "...", "question_attachments": "", "answer": "..."}]}
"""

from typing import List, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from ..exceptions import DeckError


class ReviewCard(BaseModel):
    """A single question/answer prompt."""

    model_config = {"frozen": True, "strict": True}

    question: str = Field(..., description="Prompt text, may contain markup")
    question_attachments: str = Field(
        ..., description="Free-form attachment references, e.g. image URLs"
    )
    answer: str = Field(..., description="Answer text")


class ReviewDeck(BaseModel):
    """An ordered, immutable sequence of review cards."""

    model_config = {"frozen": True, "strict": True}

    # Only the "deck" key is accepted in payloads
    cards: List[ReviewCard] = Field(..., alias="deck")

    def __len__(self) -> int:
        return len(self.cards)

    @classmethod
    def from_json(cls, payload: str) -> "ReviewDeck":
        """
        Parse an ``orbit`` block payload.

        Args:
            payload: JSON text found between the block's fences

        Returns:
            The parsed deck

        Raises:
            DeckError: If the payload is not valid JSON, an object payload has
                no "deck" array, or a card is missing a field or has a
                non-string field
        """
        try:
            parsed = _PAYLOAD_ADAPTER.validate_json(payload)
        except ValidationError as exc:
            raise DeckError(f"invalid orbit deck: {exc}") from exc

        if isinstance(parsed, ReviewDeck):
            return parsed
        return cls(deck=parsed)


_PAYLOAD_ADAPTER = TypeAdapter(Union[List[ReviewCard], ReviewDeck])

"""
Deck recipe and scrape result models.

A Deck holds the cards of the three zones in page order. ScrapeResult wraps
one scrape attempt: a deck on success, an error message on failure.
"""

from datetime import UTC, datetime

from pydantic import BaseModel, Field, model_validator

from neurondeck.models.card import CARD_MODEL_CONFIG, Card

UNKNOWN_DECK_ID = "unknown"
UNKNOWN_DECK_NAME = "Unknown Deck"


class Deck(BaseModel):
    """
    A deck recipe scraped from the card database.

    Attributes:
        name: Deck name (UNKNOWN_DECK_NAME when not found on the page)
        deck_id: Value of the ``dno`` query parameter (UNKNOWN_DECK_ID if absent)
        main_deck: Main deck cards in page order
        extra_deck: Extra deck cards in page order
        side_deck: Side deck cards in page order
        description: Deck description, if known
        author: Deck author, if known
        created_at: Creation date as shown by the source, if known
    """

    model_config = CARD_MODEL_CONFIG

    name: str = UNKNOWN_DECK_NAME
    deck_id: str = UNKNOWN_DECK_ID
    main_deck: tuple[Card, ...] = ()
    extra_deck: tuple[Card, ...] = ()
    side_deck: tuple[Card, ...] = ()
    description: str | None = None
    author: str | None = None
    created_at: str | None = None

    def all_cards(self) -> list[Card]:
        """Cards of all three zones, main first."""
        return [*self.main_deck, *self.extra_deck, *self.side_deck]


def _utc_timestamp() -> str:
    return datetime.now(UTC).isoformat()


class ScrapeResult(BaseModel):
    """
    Outcome of a single scrape.

    A scrape either fully succeeds (deck present, no error) or fully fails
    (error present, no deck).
    """

    model_config = CARD_MODEL_CONFIG

    success: bool
    deck: Deck | None = None
    error: str | None = None
    timestamp: str = Field(default_factory=_utc_timestamp)

    @model_validator(mode="after")
    def _check_outcome(self) -> "ScrapeResult":
        if self.success and self.deck is None:
            raise ValueError("successful scrape result must carry a deck")
        if not self.success and self.deck is not None:
            raise ValueError("failed scrape result must not carry a deck")
        return self

    @classmethod
    def succeeded(cls, deck: Deck) -> "ScrapeResult":
        return cls(success=True, deck=deck)

    @classmethod
    def failed(cls, error: str) -> "ScrapeResult":
        return cls(success=False, error=error or "Unknown error occurred")

"""
Card and deck validation.

Checks scraped cards against the reference enumerations. Validation is
advisory: it reports problems but never removes cards from a deck and never
stops at the first failure.
"""

from dataclasses import dataclass, field

from neurondeck.models.card import (
    BaseCard,
    LinkMonster,
    MonsterBase,
    NormalMonster,
    SpellCard,
    TrapCard,
    XyzMonster,
)
from neurondeck.models.deck import Deck
from neurondeck.models.enums import (
    is_valid_attribute,
    is_valid_card_type,
    is_valid_monster_type,
    is_valid_race,
    is_valid_spell_type,
    is_valid_trap_type,
)

UNKNOWN_CARD_NAME = "Unknown"


@dataclass
class InvalidCardDetail:
    """A card that failed validation and the rules it violated."""

    card_name: str
    errors: list[str]


@dataclass
class DeckValidationReport:
    """Validation summary across main, extra and side decks."""

    total_cards: int = 0
    valid_cards: int = 0
    invalid_cards: int = 0
    invalid_card_details: list[InvalidCardDetail] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.invalid_cards == 0


def _validate_base(card: BaseCard) -> list[str]:
    errors: list[str] = []
    if not card.name or not card.name.strip():
        errors.append("Card name is empty")
    if not card.image_url or not card.image_url.strip():
        errors.append("Image URL is empty")
    if not card.type or not is_valid_card_type(card.type):
        errors.append(f"Invalid card type: {card.type!r}")
    if card.quantity < 1:
        errors.append(f"Quantity must be at least 1, got {card.quantity}")
    return errors


def _validate_monster(card: MonsterBase) -> list[str]:
    errors: list[str] = []
    if not card.attribute or not is_valid_attribute(card.attribute):
        errors.append(f"Invalid attribute: {card.attribute!r}")
    if not card.race or not is_valid_race(card.race):
        errors.append(f"Invalid race: {card.race!r}")

    invalid_types = [t for t in card.monster_types if not is_valid_monster_type(t)]
    if invalid_types:
        errors.append(f"Invalid monster types: {', '.join(invalid_types)}")

    if card.attack < 0:
        errors.append(f"Attack is negative: {card.attack}")

    if isinstance(card, NormalMonster):
        if card.level < 1:
            errors.append(f"Level must be at least 1, got {card.level}")
        if card.defense < 0:
            errors.append(f"Defense is negative: {card.defense}")
    elif isinstance(card, XyzMonster):
        if card.rank < 1:
            errors.append(f"Rank must be at least 1, got {card.rank}")
        if card.defense < 0:
            errors.append(f"Defense is negative: {card.defense}")
    elif isinstance(card, LinkMonster):
        if card.link < 1:
            errors.append(f"Link rating must be at least 1, got {card.link}")

    return errors


def validate_card(card: BaseCard) -> list[str]:
    """
    Check a card against the rules for its variant.

    Args:
        card: Any card variant

    Returns:
        Descriptions of every violated rule. Empty list if the card is valid.
    """
    errors = _validate_base(card)

    if isinstance(card, MonsterBase):
        errors.extend(_validate_monster(card))
    elif isinstance(card, SpellCard):
        if not card.spell_type or not is_valid_spell_type(card.spell_type):
            errors.append(f"Invalid spell type: {card.spell_type!r}")
    elif isinstance(card, TrapCard):
        if not card.trap_type or not is_valid_trap_type(card.trap_type):
            errors.append(f"Invalid trap type: {card.trap_type!r}")

    return errors


def validate_deck(deck: Deck) -> DeckValidationReport:
    """
    Validate every card of every zone.

    Args:
        deck: Scraped deck

    Returns:
        DeckValidationReport with counts and per-card violations, in zone order
    """
    report = DeckValidationReport()

    for card in deck.all_cards():
        report.total_cards += 1
        errors = validate_card(card)
        if not errors:
            report.valid_cards += 1
            continue

        report.invalid_cards += 1
        report.invalid_card_details.append(
            InvalidCardDetail(card_name=card.name or UNKNOWN_CARD_NAME, errors=errors)
        )

    return report

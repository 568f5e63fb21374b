from neurondeck.models.card import (
    BaseCard,
    Card,
    LinkMonster,
    MonsterBase,
    MonsterCard,
    NormalMonster,
    SpellCard,
    TrapCard,
    XyzMonster,
    is_monster,
    monster_variant,
)
from neurondeck.models.deck import UNKNOWN_DECK_ID, UNKNOWN_DECK_NAME, Deck, ScrapeResult
from neurondeck.models.enums import (
    ATTRIBUTES,
    CARD_TYPES,
    MONSTER_TYPES,
    RACES,
    SPELL_TYPES,
    TRAP_TYPES,
    Attribute,
    CardType,
    MonsterType,
    Race,
    SpellType,
    TrapType,
)

__all__ = [
    "ATTRIBUTES",
    "Attribute",
    "BaseCard",
    "CARD_TYPES",
    "Card",
    "CardType",
    "Deck",
    "LinkMonster",
    "MONSTER_TYPES",
    "MonsterBase",
    "MonsterCard",
    "MonsterType",
    "NormalMonster",
    "RACES",
    "Race",
    "SPELL_TYPES",
    "ScrapeResult",
    "SpellCard",
    "SpellType",
    "TRAP_TYPES",
    "TrapCard",
    "TrapType",
    "UNKNOWN_DECK_ID",
    "UNKNOWN_DECK_NAME",
    "XyzMonster",
    "is_monster",
    "monster_variant",
]

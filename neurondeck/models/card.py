"""
Card model as a discriminated union.

The deck page does not carry an explicit variant field, so the union is
discriminated in two steps: first by ``type`` (monster, spell, trap), then,
for monsters, by the sub-types listed on the card. An Xyz sub-type wins over
Link, and anything else is a level-based monster.

String fields are not constrained to the reference enumerations here.
Classification passes unknown values through and the validator reports them.
"""

from collections.abc import Iterable
from typing import Annotated, Any, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Tag
from pydantic.alias_generators import to_camel

from neurondeck.models.enums import CardType, MonsterType

CARD_MODEL_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class BaseCard(BaseModel):
    """
    Fields shared by every card variant.

    Attributes:
        name: Card name as shown on the page
        image_url: Absolute URL of the card image (empty when not found)
        card_id: Database card id (cid), if present
        card_text: Rules text, if present
        quantity: Copies in the zone
        type: Card category tag (see CardType)
    """

    model_config = CARD_MODEL_CONFIG

    name: str
    image_url: str = ""
    card_id: str | None = None
    card_text: str | None = None
    quantity: int = 1
    type: str


class MonsterBase(BaseCard):
    type: str = CardType.MONSTER.value
    attribute: str
    race: str
    monster_types: tuple[str, ...] = ()
    attack: int = 0


class NormalMonster(MonsterBase):
    """Level-based monster (normal, effect, fusion, synchro, ritual...)."""

    level: int
    defense: int = 0


class XyzMonster(MonsterBase):
    """Xyz monster: has a rank instead of a level."""

    rank: int
    defense: int = 0


class LinkMonster(MonsterBase):
    """Link monster: has a link rating and no defense."""

    link: int


class SpellCard(BaseCard):
    type: str = CardType.SPELL.value
    spell_type: str


class TrapCard(BaseCard):
    type: str = CardType.TRAP.value
    trap_type: str


MonsterCard = NormalMonster | XyzMonster | LinkMonster


def monster_variant(monster_types: Iterable[str]) -> str:
    """
    Pick the monster variant tag from its sub-types.

    Returns:
        "xyz", "link" or "normal". Xyz takes precedence over Link.
    """
    monster_types = tuple(monster_types)
    if MonsterType.XYZ.value in monster_types:
        return "xyz"
    if MonsterType.LINK.value in monster_types:
        return "link"
    return "normal"


def _card_tag(value: Any) -> str:
    if isinstance(value, dict):
        card_type = value.get("type")
        monster_types = value.get("monsterTypes", value.get("monster_types", ()))
    else:
        card_type = getattr(value, "type", None)
        monster_types = getattr(value, "monster_types", ())

    if card_type == CardType.SPELL.value:
        return "spell"
    if card_type == CardType.TRAP.value:
        return "trap"
    return monster_variant(monster_types or ())


Card = Annotated[
    Union[
        Annotated[NormalMonster, Tag("normal")],
        Annotated[XyzMonster, Tag("xyz")],
        Annotated[LinkMonster, Tag("link")],
        Annotated[SpellCard, Tag("spell")],
        Annotated[TrapCard, Tag("trap")],
    ],
    Discriminator(_card_tag),
]


def is_monster(card: BaseCard) -> bool:
    """True for any of the three monster variants."""
    return isinstance(card, MonsterBase)

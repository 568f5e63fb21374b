"""
Card classifier.

Turns one row of raw text fields, as read from the deck page, into one of the
five card variants. Pure functions, no I/O.

Raw field conventions on the page:
    attribute_or_type_text: "闇属性" for monsters, "魔法" or "罠" otherwise
    spell_or_trap_type_text: "速攻" -> 速攻魔法, "カウンター" -> カウンター罠
    specs_text: "【魔法使い族／効果】" -> race, then sub-types
"""

import re
from dataclasses import dataclass

from neurondeck.models.card import (
    Card,
    LinkMonster,
    NormalMonster,
    SpellCard,
    TrapCard,
    XyzMonster,
    monster_variant,
)
from neurondeck.models.enums import (
    CardType,
    SpellType,
    TrapType,
    is_valid_monster_type,
    is_valid_spell_type,
    is_valid_trap_type,
)

NON_DIGIT_PATTERN = re.compile(r"[^\d]")
ATTRIBUTE_SUFFIX = "属性"
SPECS_BRACKETS_PATTERN = re.compile(r"[【】]")
SPECS_DELIMITER = "／"


@dataclass(frozen=True)
class RawCardRow:
    """Text fields of one card row, exactly as read from the page."""

    name: str = ""
    image_url: str = ""
    card_id: str = ""
    card_text: str = ""
    quantity_text: str = ""
    attack_text: str = ""
    defense_text: str = ""
    attribute_or_type_text: str = ""
    spell_or_trap_type_text: str = ""
    specs_text: str = ""
    level_or_rank_text: str = ""
    link_text: str = ""


def parse_number(text: str, default: str = "0") -> int:
    """
    Parse an integer out of decorated page text.

    Every non-digit character is dropped ("★4" -> 4, "ATK 2,500" -> 2500).
    Empty input falls back to ``default`` before stripping.

    Returns:
        Parsed integer, or the default when no digits remain.
    """
    digits = NON_DIGIT_PATTERN.sub("", text or default)
    if not digits:
        digits = NON_DIGIT_PATTERN.sub("", default)
    return int(digits) if digits else 0


def parse_specs(specs_text: str) -> tuple[str, tuple[str, ...]]:
    """
    Split the species text into race and known monster sub-types.

    Example:
        "【ドラゴン族／シンクロ／効果】" -> ("ドラゴン族", ("シンクロ", "効果"))

    The race is returned unchecked. Sub-types that are not in the reference
    set are dropped.
    """
    clean = SPECS_BRACKETS_PATTERN.sub("", specs_text or "").strip()
    parts = [part.strip() for part in clean.split(SPECS_DELIMITER)]
    parts = [part for part in parts if part]

    race = parts[0] if parts else ""
    monster_types = tuple(part for part in parts[1:] if is_valid_monster_type(part))
    return race, monster_types


def _base_fields(row: RawCardRow) -> dict[str, object]:
    return {
        "name": row.name,
        "image_url": row.image_url,
        "card_id": row.card_id or None,
        "card_text": row.card_text or None,
        "quantity": parse_number(row.quantity_text, default="1"),
    }


def build_spell_card(base: dict[str, object], type_text: str) -> SpellCard:
    # Short labels such as "通常" are shared with traps, so the suffix goes first
    candidate = f"{type_text}{CardType.SPELL.value}" if type_text else ""
    spell_type = candidate if is_valid_spell_type(candidate) else SpellType.NORMAL.value
    return SpellCard(**base, spell_type=spell_type)


def build_trap_card(base: dict[str, object], type_text: str) -> TrapCard:
    candidate = f"{type_text}{CardType.TRAP.value}" if type_text else ""
    trap_type = candidate if is_valid_trap_type(candidate) else TrapType.NORMAL.value
    return TrapCard(**base, trap_type=trap_type)


def build_monster_card(base: dict[str, object], row: RawCardRow) -> Card:
    attribute = row.attribute_or_type_text.replace(ATTRIBUTE_SUFFIX, "").strip()
    race, monster_types = parse_specs(row.specs_text)

    common = {
        **base,
        "attribute": attribute,
        "race": race,
        "monster_types": monster_types,
        "attack": parse_number(row.attack_text),
    }

    variant = monster_variant(monster_types)
    if variant == "xyz":
        return XyzMonster(
            **common,
            rank=parse_number(row.level_or_rank_text),
            defense=parse_number(row.defense_text),
        )
    if variant == "link":
        return LinkMonster(**common, link=parse_number(row.link_text))
    return NormalMonster(
        **common,
        level=parse_number(row.level_or_rank_text),
        defense=parse_number(row.defense_text),
    )


def classify_row(row: RawCardRow) -> Card:
    """
    Classify one raw row into a card variant.

    Empty name or image URL pass through unchanged; the validator reports
    them. This function does not raise for missing field text.
    """
    base = _base_fields(row)
    marker = row.attribute_or_type_text.strip()

    if marker == CardType.SPELL.value:
        return build_spell_card(base, row.spell_or_trap_type_text.strip())
    if marker == CardType.TRAP.value:
        return build_trap_card(base, row.spell_or_trap_type_text.strip())
    return build_monster_card(base, row)


def classify_rows(rows: list[RawCardRow]) -> list[Card]:
    return [classify_row(row) for row in rows]

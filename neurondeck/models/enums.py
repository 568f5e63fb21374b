"""
Reference enumerations for the Yu-Gi-Oh! OCG card database.

The deck page renders every tag in Japanese, so the enum values are the exact
strings that appear on the page. Membership is always an exact match.
"""

from enum import Enum


class CardType(str, Enum):
    """Top-level card category."""

    MONSTER = "モンスター"
    SPELL = "魔法"
    TRAP = "罠"


class Attribute(str, Enum):
    """Monster attribute."""

    LIGHT = "光"
    DARK = "闇"
    FIRE = "炎"
    WATER = "水"
    EARTH = "地"
    WIND = "風"
    DIVINE = "神"


class Race(str, Enum):
    """Monster race (shuzoku)."""

    SPELLCASTER = "魔法使い族"
    DRAGON = "ドラゴン族"
    ZOMBIE = "アンデット族"
    WARRIOR = "戦士族"
    BEAST_WARRIOR = "獣戦士族"
    BEAST = "獣族"
    WINGED_BEAST = "鳥獣族"
    FIEND = "悪魔族"
    FAIRY = "天使族"
    INSECT = "昆虫族"
    DINOSAUR = "恐竜族"
    REPTILE = "爬虫類族"
    FISH = "魚族"
    SEA_SERPENT = "海竜族"
    AQUA = "水族"
    PYRO = "炎族"
    THUNDER = "雷族"
    ROCK = "岩石族"
    PLANT = "植物族"
    MACHINE = "機械族"
    PSYCHIC = "サイキック族"
    DIVINE_BEAST = "幻神獣族"
    CREATOR_GOD = "創造神族"
    WYRM = "幻竜族"
    CYBERSE = "サイバース族"
    ILLUSION = "幻想魔族"


class MonsterType(str, Enum):
    """Monster sub-type qualifier shown after the race."""

    NORMAL = "通常"
    EFFECT = "効果"
    FUSION = "融合"
    SYNCHRO = "シンクロ"
    XYZ = "エクシーズ"
    LINK = "リンク"
    RITUAL = "儀式"
    TOON = "トゥーン"
    SPIRIT = "スピリット"
    UNION = "ユニオン"
    GEMINI = "デュアル"
    TUNER = "チューナー"
    FLIP = "リバース"
    PENDULUM = "ペンデュラム"
    SPECIAL = "特殊召喚"


class SpellType(str, Enum):
    """Spell card sub-type."""

    NORMAL = "通常魔法"
    CONTINUOUS = "永続魔法"
    QUICK_PLAY = "速攻魔法"
    FIELD = "フィールド魔法"
    EQUIP = "装備魔法"
    RITUAL = "儀式魔法"


class TrapType(str, Enum):
    """Trap card sub-type."""

    NORMAL = "通常罠"
    CONTINUOUS = "永続罠"
    COUNTER = "カウンター罠"


CARD_TYPES = frozenset(t.value for t in CardType)
ATTRIBUTES = frozenset(a.value for a in Attribute)
RACES = frozenset(r.value for r in Race)
MONSTER_TYPES = frozenset(m.value for m in MonsterType)
SPELL_TYPES = frozenset(s.value for s in SpellType)
TRAP_TYPES = frozenset(t.value for t in TrapType)


def is_valid_card_type(value: str) -> bool:
    return value in CARD_TYPES


def is_valid_attribute(value: str) -> bool:
    return value in ATTRIBUTES


def is_valid_race(value: str) -> bool:
    return value in RACES


def is_valid_monster_type(value: str) -> bool:
    return value in MONSTER_TYPES


def is_valid_spell_type(value: str) -> bool:
    return value in SPELL_TYPES


def is_valid_trap_type(value: str) -> bool:
    return value in TRAP_TYPES

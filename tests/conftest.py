from pathlib import Path

import pytest

from neurondeck.models.card import LinkMonster, NormalMonster, SpellCard, TrapCard, XyzMonster
from neurondeck.models.deck import Deck

DECK_URL = (
    "https://www.db.yugioh-card.com/yugiohdb/member_deck.action"
    "?ope=1&wname=MemberDeck&cgid=87999bd183514004b8aa8afa1ff1bdb9&dno=16"
)


@pytest.fixture
def deck_url() -> str:
    return DECK_URL


@pytest.fixture
def deck_html() -> str:
    """Detail-text view of a rendered deck recipe page."""
    fixture_path = Path(__file__).parent / "fixtures" / "neuron_deck.html"
    return fixture_path.read_text(encoding="utf-8")


@pytest.fixture
def dark_magician() -> NormalMonster:
    return NormalMonster(
        name="ブラック・マジシャン",
        image_url="https://www.db.yugioh-card.com/yugiohdb/get_image.action?type=1&cid=4041",
        card_id="4041",
        quantity=3,
        attribute="闇",
        race="魔法使い族",
        monster_types=("通常",),
        level=7,
        attack=2500,
        defense=2100,
    )


@pytest.fixture
def xyz_monster() -> XyzMonster:
    return XyzMonster(
        name="虚空の黒魔導師",
        image_url="https://www.db.yugioh-card.com/yugiohdb/get_image.action?type=1&cid=10404",
        attribute="闇",
        race="魔法使い族",
        monster_types=("エクシーズ", "効果"),
        rank=7,
        attack=2100,
        defense=2800,
    )


@pytest.fixture
def link_monster() -> LinkMonster:
    return LinkMonster(
        name="アカシック・マジシャン",
        image_url="https://www.db.yugioh-card.com/yugiohdb/get_image.action?type=1&cid=14743",
        attribute="闇",
        race="魔法使い族",
        monster_types=("リンク", "効果"),
        link=2,
        attack=1700,
    )


@pytest.fixture
def spell_card() -> SpellCard:
    return SpellCard(
        name="黒・魔・導",
        image_url="https://www.db.yugioh-card.com/yugiohdb/get_image.action?type=1&cid=4860",
        quantity=2,
        spell_type="速攻魔法",
    )


@pytest.fixture
def trap_card() -> TrapCard:
    return TrapCard(
        name="マジシャンズ・サークル",
        image_url="https://www.db.yugioh-card.com/yugiohdb/get_image.action?type=1&cid=5012",
        trap_type="通常罠",
    )


@pytest.fixture
def sample_deck(
    dark_magician: NormalMonster,
    spell_card: SpellCard,
    trap_card: TrapCard,
    xyz_monster: XyzMonster,
    link_monster: LinkMonster,
) -> Deck:
    return Deck(
        name="ブラック・マジシャン",
        deck_id="16",
        main_deck=(dark_magician, spell_card, trap_card),
        extra_deck=(xyz_monster, link_monster),
        side_deck=(),
    )

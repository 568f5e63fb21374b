from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import pytest

from neurondeck.models.card import LinkMonster, NormalMonster, SpellCard, TrapCard, XyzMonster
from neurondeck.models.deck import UNKNOWN_DECK_ID, UNKNOWN_DECK_NAME
from neurondeck.scrapers.neuron import (
    EXTRA_ZONE,
    MAIN_ZONE,
    SIDE_ZONE,
    ZoneNotFoundError,
    clean_deck_name,
    extract_deck,
    extract_deck_id,
    extract_deck_name,
    extract_zone,
    extract_zone_rows,
    scrape_deck,
)
from neurondeck.scrapers.page import PageElement, SoupElement, parse_html


class FailingZonePage:
    """Document root that blows up when one zone container is queried."""

    def __init__(self, inner: SoupElement, failing_selector: str) -> None:
        self._inner = inner
        self._failing_selector = failing_selector

    async def select_one(self, selector: str) -> PageElement | None:
        if selector == self._failing_selector:
            raise RuntimeError("Execution context was destroyed")
        return await self._inner.select_one(selector)

    async def select_all(self, selector: str) -> list[PageElement]:
        return list(await self._inner.select_all(selector))

    async def text(self) -> str:
        return await self._inner.text()

    async def prop(self, name: str) -> str:
        return await self._inner.prop(name)


class TestExtractDeckId:
    def test_extracts_dno(self, deck_url: str) -> None:
        assert extract_deck_id(deck_url) == "16"

    def test_missing_dno_returns_sentinel(self) -> None:
        url = "https://www.db.yugioh-card.com/yugiohdb/member_deck.action?ope=1"
        assert extract_deck_id(url) == UNKNOWN_DECK_ID


class TestExtractDeckName:
    @pytest.mark.asyncio
    async def test_skips_boilerplate_and_cleans_markers(self, deck_html: str) -> None:
        page = parse_html(deck_html)

        assert await extract_deck_name(page) == "ブラック・マジシャン"

    @pytest.mark.asyncio
    async def test_no_usable_heading_returns_sentinel(self) -> None:
        page = parse_html("<html><body><h1>遊戯王ニューロン</h1><h1>  </h1></body></html>")

        assert await extract_deck_name(page) == UNKNOWN_DECK_NAME

    def test_clean_deck_name(self) -> None:
        assert clean_deck_name("【公開中】青眼 [ CARD GAME ID : 42 ]") == "青眼"
        assert clean_deck_name("  Plain Deck  ") == "Plain Deck"


class TestExtractZone:
    @pytest.mark.asyncio
    async def test_reads_raw_fields(self, deck_html: str, deck_url: str) -> None:
        page = parse_html(deck_html, deck_url)

        rows = await extract_zone_rows(page, MAIN_ZONE)

        first = rows[0]
        assert first.name == "ブラック・マジシャン"
        assert first.card_id == "4041"
        assert first.quantity_text == "3"
        assert first.attribute_or_type_text == "闇属性"
        assert first.specs_text == "【魔法使い族／通常】"
        assert first.level_or_rank_text == "レベル 7"
        assert first.link_text == ""

    @pytest.mark.asyncio
    async def test_image_url_is_absolute(self, deck_html: str, deck_url: str) -> None:
        page = parse_html(deck_html, deck_url)

        rows = await extract_zone_rows(page, MAIN_ZONE)

        assert rows[0].image_url == (
            "https://www.db.yugioh-card.com/yugiohdb/get_image.action?type=1&cid=4041&ciid=1"
        )

    @pytest.mark.asyncio
    async def test_missing_container_raises(self, deck_html: str) -> None:
        page = parse_html(deck_html)

        with pytest.raises(ZoneNotFoundError, match="container not found"):
            await extract_zone_rows(page, SIDE_ZONE)

    @pytest.mark.asyncio
    async def test_container_without_rows_raises(self) -> None:
        page = parse_html('<div id="detailtext_side"><p>no cards</p></div>')

        with pytest.raises(ZoneNotFoundError, match="no card rows"):
            await extract_zone_rows(page, SIDE_ZONE)

    @pytest.mark.asyncio
    async def test_missing_zone_is_empty(self, deck_html: str) -> None:
        page = parse_html(deck_html)

        assert await extract_zone(page, SIDE_ZONE) == []

    @pytest.mark.asyncio
    async def test_classifies_rows(self, deck_html: str) -> None:
        page = parse_html(deck_html)

        cards = await extract_zone(page, EXTRA_ZONE)

        assert [type(c) for c in cards] == [XyzMonster, LinkMonster]


class TestExtractDeck:
    @pytest.mark.asyncio
    async def test_builds_deck(self, deck_html: str, deck_url: str) -> None:
        deck = await extract_deck(parse_html(deck_html, deck_url), deck_url)

        assert deck.name == "ブラック・マジシャン"
        assert deck.deck_id == "16"
        assert len(deck.main_deck) == 3
        assert len(deck.extra_deck) == 2
        assert deck.side_deck == ()

    @pytest.mark.asyncio
    async def test_main_deck_variants(self, deck_html: str, deck_url: str) -> None:
        deck = await extract_deck(parse_html(deck_html, deck_url), deck_url)

        monster, spell, trap = deck.main_deck
        assert isinstance(monster, NormalMonster)
        assert monster.level == 7
        assert monster.quantity == 3
        assert isinstance(spell, SpellCard)
        assert spell.spell_type == "速攻魔法"
        assert spell.quantity == 2
        assert isinstance(trap, TrapCard)
        assert trap.trap_type == "通常罠"

    @pytest.mark.asyncio
    async def test_extra_deck_variants(self, deck_html: str, deck_url: str) -> None:
        deck = await extract_deck(parse_html(deck_html, deck_url), deck_url)

        xyz, link = deck.extra_deck
        assert isinstance(xyz, XyzMonster)
        assert xyz.rank == 7
        assert xyz.defense == 2800
        assert isinstance(link, LinkMonster)
        assert link.link == 2
        assert link.attack == 1700

    @pytest.mark.asyncio
    async def test_zone_failure_is_isolated(self, deck_html: str, deck_url: str) -> None:
        """An error in one zone leaves the other zones intact."""
        page = FailingZonePage(parse_html(deck_html, deck_url), "#detailtext_main")

        deck = await extract_deck(page, deck_url)

        assert deck.main_deck == ()
        assert len(deck.extra_deck) == 2


class TestScrapeDeck:
    @pytest.mark.asyncio
    async def test_success(self, deck_html: str, deck_url: str) -> None:
        released: list[str] = []

        @asynccontextmanager
        async def open_page(url: str) -> AsyncIterator[PageElement]:
            try:
                yield parse_html(deck_html, url)
            finally:
                released.append(url)

        result = await scrape_deck(deck_url, open_page=open_page)

        assert result.success is True
        assert result.error is None
        assert result.deck is not None
        assert result.deck.side_deck == ()
        assert released == [deck_url]

    @pytest.mark.asyncio
    async def test_navigation_failure(self, deck_url: str) -> None:
        """Navigation errors produce a failed result without a deck."""

        @asynccontextmanager
        async def open_page(url: str) -> AsyncIterator[PageElement]:
            raise RuntimeError("net::ERR_NAME_NOT_RESOLVED")
            yield  # pragma: no cover

        result = await scrape_deck(deck_url, open_page=open_page)

        assert result.success is False
        assert result.deck is None
        assert result.error == "net::ERR_NAME_NOT_RESOLVED"
        assert result.timestamp

    @pytest.mark.asyncio
    async def test_page_released_on_error(self, deck_url: str) -> None:
        released: list[str] = []

        class BrokenPage:
            async def select_one(self, selector: str) -> None:
                return None

            async def select_all(self, selector: str) -> list[PageElement]:
                raise RuntimeError("Target closed")

            async def text(self) -> str:
                return ""

            async def prop(self, name: str) -> str:
                return ""

        @asynccontextmanager
        async def open_page(url: str) -> AsyncIterator[PageElement]:
            try:
                yield BrokenPage()
            finally:
                released.append(url)

        result = await scrape_deck(deck_url, open_page=open_page)

        assert result.success is False
        assert result.error == "Target closed"
        assert released == [deck_url]

"""
Yu-Gi-Oh! OCG card database ("Neuron") deck recipe scraper.

Reads a rendered deck recipe page through the PageElement capability and
builds a Deck. The page lists each zone (main, extra, side) in its own
container, one ``.t_row.c_normal`` row per card.

Note: Web scraping is inherently fragile. Selectors follow the detail-text
view of the deck page and may change with the site.
"""

import asyncio
import logging
import re
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass

from neurondeck.models.card import Card
from neurondeck.models.deck import UNKNOWN_DECK_ID, UNKNOWN_DECK_NAME, Deck, ScrapeResult
from neurondeck.scrapers.browser import open_deck_page
from neurondeck.scrapers.classifier import RawCardRow, classify_rows
from neurondeck.scrapers.page import PageElement

logger = logging.getLogger(__name__)

# Deck number query parameter, e.g. member_deck.action?cgid=...&dno=16
DECK_ID_PATTERN = re.compile(r"dno=(\d+)")

# Site headings that are never the deck name
BOILERPLATE_HEADINGS = ("遊戯王ニューロン", "オフィシャルカードゲーム", "カードデータベース")
PUBLISHED_MARKER_PATTERN = re.compile(r"【\s*公開中\s*】\s*")
CARD_GAME_ID_PATTERN = re.compile(r"\[ CARD GAME ID : \d+ \]")

ROW_SELECTOR = ".t_row.c_normal"

# RawCardRow field -> selector of the element whose text holds it
ROW_TEXT_SELECTORS = {
    "name": ".card_name",
    "card_text": ".box_card_text",
    "quantity_text": ".cards_num_set span",
    "attack_text": ".atk_power span",
    "defense_text": ".def_power span",
    "attribute_or_type_text": ".box_card_attribute span:last-child",
    "spell_or_trap_type_text": ".box_card_effect span:last-child",
    "specs_text": ".card_info_species_and_other_item span",
    "level_or_rank_text": ".box_card_level_rank span",
    "link_text": ".box_card_linkmarker span",
}
IMAGE_SELECTOR = 'img[id^="card_image"]'
CARD_ID_SELECTOR = "input.cid"


@dataclass(frozen=True)
class Zone:
    """A deck zone and the id of its container on the page."""

    name: str
    section_id: str


MAIN_ZONE = Zone("main", "detailtext_main")
EXTRA_ZONE = Zone("extra", "detailtext_ext")
SIDE_ZONE = Zone("side", "detailtext_side")
ZONES = (MAIN_ZONE, EXTRA_ZONE, SIDE_ZONE)


class ZoneNotFoundError(Exception):
    """Raised when a zone container or its card rows are missing from the page."""

    def __init__(self, zone: Zone, reason: str):
        self.zone = zone
        self.reason = reason
        super().__init__(f"{zone.name} deck ({zone.section_id}): {reason}")


def extract_deck_id(url: str) -> str:
    """
    Extract the deck number from a deck recipe URL.

    Returns:
        The ``dno`` value, or UNKNOWN_DECK_ID if the URL has none.
    """
    match = DECK_ID_PATTERN.search(url)
    return match.group(1) if match else UNKNOWN_DECK_ID


def clean_deck_name(heading: str) -> str:
    """Remove the published marker and card game id annotation from a heading."""
    name = PUBLISHED_MARKER_PATTERN.sub("", heading, count=1)
    name = CARD_GAME_ID_PATTERN.sub("", name, count=1)
    return name.strip()


async def extract_deck_name(page: PageElement) -> str:
    """
    Find the deck name among the page's ``h1`` headings.

    The first non-empty heading that is not site boilerplate wins.

    Returns:
        Cleaned deck name, or UNKNOWN_DECK_NAME if no heading qualifies.
    """
    for heading in await page.select_all("h1"):
        text = (await heading.text()).strip()
        if text and not any(phrase in text for phrase in BOILERPLATE_HEADINGS):
            return clean_deck_name(text)
    return UNKNOWN_DECK_NAME


async def _text_of(row: PageElement, selector: str) -> str:
    element = await row.select_one(selector)
    if element is None:
        return ""
    return (await element.text()).strip()


async def _prop_of(row: PageElement, selector: str, name: str) -> str:
    element = await row.select_one(selector)
    if element is None:
        return ""
    return await element.prop(name)


async def extract_raw_row(row: PageElement) -> RawCardRow:
    """Read every card field of one row. Missing elements read as empty text."""
    fields = {field: await _text_of(row, selector) for field, selector in ROW_TEXT_SELECTORS.items()}
    return RawCardRow(
        image_url=await _prop_of(row, IMAGE_SELECTOR, "src"),
        card_id=await _prop_of(row, CARD_ID_SELECTOR, "value"),
        **fields,
    )


async def extract_zone_rows(page: PageElement, zone: Zone) -> list[RawCardRow]:
    """
    Read the raw rows of one zone.

    Raises:
        ZoneNotFoundError: If the zone container or its rows are missing
    """
    container = await page.select_one(f"#{zone.section_id}")
    if container is None:
        raise ZoneNotFoundError(zone, "container not found")

    rows = await container.select_all(ROW_SELECTOR)
    if not rows:
        raise ZoneNotFoundError(zone, "no card rows found")

    return [await extract_raw_row(row) for row in rows]


async def extract_zone(page: PageElement, zone: Zone) -> list[Card]:
    """
    Extract and classify the cards of one zone.

    Never raises: a missing or unreadable zone is logged and comes back empty,
    so one broken zone does not cost the other two.
    """
    logger.info("Extracting %s deck", zone.name)
    try:
        rows = await extract_zone_rows(page, zone)
    except ZoneNotFoundError as e:
        logger.warning("Treating %s deck as empty: %s", zone.name, e.reason)
        return []
    except Exception as e:
        logger.warning("Failed to extract %s deck: %s", zone.name, e)
        return []

    cards = classify_rows(rows)
    logger.info("Extracted %d cards from %s deck", len(cards), zone.name)
    return cards


async def extract_deck(page: PageElement, url: str) -> Deck:
    """
    Build a Deck from a rendered deck recipe page.

    The three zones are extracted concurrently and joined before the deck
    is built.

    Args:
        page: Document root of the rendered page
        url: URL the page was loaded from (source of the deck id)

    Returns:
        Deck with all zones filled (empty zones where the page had none)
    """
    deck_id = extract_deck_id(url)
    deck_name = await extract_deck_name(page)
    logger.info("Deck %s: %s", deck_id, deck_name)

    main_deck, extra_deck, side_deck = await asyncio.gather(
        *(extract_zone(page, zone) for zone in ZONES)
    )

    return Deck(
        name=deck_name,
        deck_id=deck_id,
        main_deck=tuple(main_deck),
        extra_deck=tuple(extra_deck),
        side_deck=tuple(side_deck),
    )


PageOpener = Callable[[str], AbstractAsyncContextManager[PageElement]]


async def scrape_deck(url: str, open_page: PageOpener = open_deck_page) -> ScrapeResult:
    """
    Scrape a deck recipe into a ScrapeResult.

    The page is acquired through ``open_page`` and always released. Any
    failure to acquire or navigate is reported as a failed result; no
    partial deck is returned.

    Args:
        url: Deck recipe URL
        open_page: Async context manager factory yielding the rendered page root

    Returns:
        ScrapeResult with the deck on success, or the error message on failure
    """
    logger.info("Scraping deck recipe %s", url)

    try:
        async with open_page(url) as page:
            deck = await extract_deck(page, url)
    except Exception as e:
        logger.error("Scrape failed for %s: %s", url, e)
        return ScrapeResult.failed(str(e) or type(e).__name__)

    return ScrapeResult.succeeded(deck)

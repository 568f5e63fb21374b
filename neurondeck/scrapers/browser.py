"""
Playwright rendering backend.

The deck page is built by JavaScript, so it is loaded in headless Chromium
and switched to the detail-text view (the view that carries per-card fields
and image URLs) before extraction.
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from playwright.async_api import ElementHandle, async_playwright
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from neurondeck.config import SETTLE_DELAY_SECONDS, ZONE_WAIT_TIMEOUT_MS, Settings, settings

logger = logging.getLogger(__name__)

LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-accelerated-2d-canvas",
    "--no-first-run",
    "--no-zygote",
    "--disable-gpu",
]

ZONE_CONTAINERS_SELECTOR = "#detailtext_main, #detailtext_ext, #detailtext_side"

SHOW_DETAIL_TEXT_JS = """
() => {
    const show = (id, display) => {
        const element = document.getElementById(id);
        if (element) element.style.display = display;
    };
    show('deck_image', 'none');
    show('deck_detailtext', 'block');
    show('deck_text', 'none');
}
"""


class PlaywrightElement:
    """PageElement backed by a Playwright element handle."""

    def __init__(self, handle: ElementHandle) -> None:
        self._handle = handle

    async def select_one(self, selector: str) -> "PlaywrightElement | None":
        handle = await self._handle.query_selector(selector)
        return PlaywrightElement(handle) if handle is not None else None

    async def select_all(self, selector: str) -> list["PlaywrightElement"]:
        return [PlaywrightElement(h) for h in await self._handle.query_selector_all(selector)]

    async def text(self) -> str:
        return await self._handle.text_content() or ""

    async def prop(self, name: str) -> str:
        value = await self._handle.evaluate("(element, name) => element[name]", name)
        return "" if value is None else str(value)


@asynccontextmanager
async def open_deck_page(url: str, config: Settings = settings) -> AsyncIterator[PlaywrightElement]:
    """
    Render a deck recipe page and yield its document root.

    The browser is launched for this page only and is closed on exit,
    whether extraction succeeded or not.

    Raises:
        playwright.async_api.Error: If the browser cannot start or navigation fails
    """
    async with async_playwright() as playwright:
        browser = await playwright.chromium.launch(headless=config.headless, args=LAUNCH_ARGS)
        try:
            page = await browser.new_page(user_agent=config.user_agent)
            await page.goto(url, wait_until="networkidle", timeout=config.page_timeout_ms)

            await page.evaluate(SHOW_DETAIL_TEXT_JS)
            await page.wait_for_function("() => document.readyState === 'complete'")

            try:
                await page.wait_for_selector(
                    ZONE_CONTAINERS_SELECTOR, state="attached", timeout=ZONE_WAIT_TIMEOUT_MS
                )
            except PlaywrightTimeoutError:
                logger.warning("No deck zone appeared within %d ms on %s", ZONE_WAIT_TIMEOUT_MS, url)

            await asyncio.sleep(SETTLE_DELAY_SECONDS)

            root = await page.query_selector("html")
            if root is None:
                raise RuntimeError(f"Rendered page has no document element: {url}")
            yield PlaywrightElement(root)
        finally:
            await browser.close()

"""
Read-only DOM query capability used by the deck extractor.

The extractor only needs to find elements by CSS selector, read their text
content and read a DOM property (``src`` of an image, ``value`` of an input).
Any rendering backend that offers this can feed it: a live Playwright page
(see ``neurondeck.scrapers.browser``) or a static HTML snapshot parsed with
BeautifulSoup (below).
"""

from typing import Protocol
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

# DOM properties that the browser resolves to absolute URLs
URL_PROPERTIES = frozenset({"src", "href"})


class PageElement(Protocol):
    """An element (or document root) of a rendered page."""

    async def select_one(self, selector: str) -> "PageElement | None": ...

    async def select_all(self, selector: str) -> list["PageElement"]: ...

    async def text(self) -> str:
        """Text content of the element, untrimmed. Empty string if none."""
        ...

    async def prop(self, name: str) -> str:
        """DOM property value as a string. Empty string if absent."""
        ...


class SoupElement:
    """PageElement backed by a BeautifulSoup tag."""

    def __init__(self, node: Tag, base_url: str = "") -> None:
        self._node = node
        self._base_url = base_url

    async def select_one(self, selector: str) -> "SoupElement | None":
        found = self._node.select_one(selector)
        return SoupElement(found, self._base_url) if found is not None else None

    async def select_all(self, selector: str) -> list["SoupElement"]:
        return [SoupElement(node, self._base_url) for node in self._node.select(selector)]

    async def text(self) -> str:
        return self._node.get_text()

    async def prop(self, name: str) -> str:
        value = self._node.get(name)
        if value is None:
            return ""
        if isinstance(value, list):
            value = " ".join(value)
        if name in URL_PROPERTIES and value:
            return urljoin(self._base_url, value)
        return value


def parse_html(html: str, base_url: str = "") -> SoupElement:
    """
    Parse a saved deck page into a queryable document.

    Args:
        html: Page HTML (for example saved from a browser after rendering)
        base_url: URL the page was loaded from, used to resolve image URLs

    Returns:
        Document root as a PageElement
    """
    return SoupElement(BeautifulSoup(html, "html.parser"), base_url)

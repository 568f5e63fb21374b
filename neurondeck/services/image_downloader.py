"""
Card image downloader.

Downloads card images in fixed-size concurrent batches with a pause between
batches to keep the load on the card database low. Failures are recorded per
card and never abort the rest of the batch.
"""

import asyncio
import logging
import re
import tempfile
from collections.abc import AsyncIterator, Iterator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeVar

import httpx

from neurondeck.config import NEURON_BASE, settings
from neurondeck.models.card import BaseCard
from neurondeck.models.deck import Deck

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONCURRENT = 5
MAX_FILE_STEM_LENGTH = 50
# Card images on the database are JPEGs
IMAGE_EXTENSION = ".jpg"
# Suffix of in-progress download files
PART_SUFFIX = ".part"

RESERVED_CHARS_PATTERN = re.compile(r'[<>:"/\\|?*]')
WHITESPACE_PATTERN = re.compile(r"\s+")

IMAGE_HEADERS = {
    "User-Agent": settings.user_agent,
    "Accept": "image/webp,image/apng,image/*,*/*;q=0.8",
    "Accept-Language": "ja,en-US;q=0.9,en;q=0.8",
    "Referer": f"{NEURON_BASE}/",
    "Sec-Fetch-Dest": "image",
    "Sec-Fetch-Mode": "no-cors",
    "Sec-Fetch-Site": "same-origin",
}

T = TypeVar("T")


@dataclass
class DownloadOutcome:
    """Result of downloading one card image."""

    success: bool
    file_path: Path | None = None
    error: str | None = None


@dataclass
class CardDownload:
    card: BaseCard
    outcome: DownloadOutcome


@dataclass
class BatchDownloadResult:
    """Totals and per-card outcomes of one download_card_images call."""

    success: int = 0
    failed: int = 0
    results: list[CardDownload] = field(default_factory=list)

    def failures(self) -> list[CardDownload]:
        return [r for r in self.results if not r.outcome.success]

    def successes(self) -> list[CardDownload]:
        return [r for r in self.results if r.outcome.success]


@dataclass
class ZoneDownloadCount:
    success: int = 0
    failed: int = 0


@dataclass
class DeckDownloadSummary:
    """Download totals for a whole deck, split by zone."""

    total_success: int
    total_failed: int
    main_deck: ZoneDownloadCount
    extra_deck: ZoneDownloadCount
    side_deck: ZoneDownloadCount


def generate_file_name(card: BaseCard) -> str:
    """
    Build a filesystem-safe image file name from a card name.

    Example:
        'Blue-Eyes White Dragon' -> 'Blue-Eyes_White_Dragon.jpg'
    """
    safe_name = RESERVED_CHARS_PATTERN.sub("_", card.name)
    safe_name = WHITESPACE_PATTERN.sub("_", safe_name)
    return f"{safe_name[:MAX_FILE_STEM_LENGTH]}{IMAGE_EXTENSION}"


def iter_batches(items: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    """Yield consecutive slices of at most ``size`` items."""
    if size < 1:
        raise ValueError(f"Batch size must be at least 1, got {size}")
    for start in range(0, len(items), size):
        yield items[start : start + size]


class ImageDownloader:
    """
    Downloads card images into a directory.

    Files already present are treated as downloaded, so re-runs only fetch
    what is missing.
    """

    def __init__(
        self,
        download_dir: Path,
        *,
        timeout: float = settings.image_timeout,
        batch_delay: float = settings.batch_delay,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.download_dir = download_dir
        self.timeout = timeout
        self.batch_delay = batch_delay
        self._client = client
        self.downloaded_count = 0
        self.failed_count = 0
        self._ensure_download_dir()

    def _ensure_download_dir(self) -> None:
        if not self.download_dir.exists():
            self.download_dir.mkdir(parents=True, exist_ok=True)
            logger.info("Created download directory %s", self.download_dir)

    def get_stats(self) -> dict[str, int]:
        return {"downloaded": self.downloaded_count, "failed": self.failed_count}

    def reset_stats(self) -> None:
        self.downloaded_count = 0
        self.failed_count = 0

    async def download_card_image(
        self, card: BaseCard, client: httpx.AsyncClient | None = None
    ) -> DownloadOutcome:
        """
        Download the image of one card.

        Never raises for network problems; they come back as a failed outcome.

        Args:
            card: Card whose image_url is fetched
            client: Client to reuse. A short-lived one is created if omitted.

        Returns:
            DownloadOutcome with the file path on success or the error on failure
        """
        if not card.image_url:
            return DownloadOutcome(success=False, error="No image URL")

        file_path = self.download_dir / generate_file_name(card)
        if file_path.exists():
            logger.debug("Skipping %s (already downloaded)", file_path.name)
            return DownloadOutcome(success=True, file_path=file_path)

        logger.info("Downloading %s -> %s", card.name, file_path.name)

        if client is not None:
            return await self._fetch_to_file(client, card, file_path)
        async with self._client_scope() as scoped_client:
            return await self._fetch_to_file(scoped_client, card, file_path)

    @asynccontextmanager
    async def _client_scope(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            yield client

    async def _fetch_to_file(
        self, client: httpx.AsyncClient, card: BaseCard, file_path: Path
    ) -> DownloadOutcome:
        # Streamed into a private temp file and renamed into place once complete
        part_path: Path | None = None
        try:
            async with client.stream(
                "GET", card.image_url, headers=IMAGE_HEADERS, timeout=self.timeout
            ) as response:
                if response.status_code != 200:
                    error = f"HTTP {response.status_code}: {response.reason_phrase}"
                    logger.warning("Download failed for %s: %s", card.name, error)
                    return DownloadOutcome(success=False, error=error)

                with tempfile.NamedTemporaryFile(
                    "wb",
                    dir=file_path.parent,
                    prefix=f"{file_path.name}.",
                    suffix=PART_SUFFIX,
                    delete=False,
                ) as f:
                    part_path = Path(f.name)
                    async for chunk in response.aiter_bytes():
                        f.write(chunk)
            part_path.replace(file_path)
        except httpx.TimeoutException:
            error = f"Timed out after {self.timeout:g}s"
            logger.warning("Download failed for %s: %s", card.name, error)
            return DownloadOutcome(success=False, error=error)
        except (httpx.HTTPError, httpx.InvalidURL, OSError) as e:
            error = str(e) or type(e).__name__
            logger.warning("Download failed for %s: %s", card.name, error)
            return DownloadOutcome(success=False, error=error)
        finally:
            if part_path is not None:
                part_path.unlink(missing_ok=True)

        logger.info("Downloaded %s", file_path.name)
        return DownloadOutcome(success=True, file_path=file_path)

    def _unexpected_failure(self, card: BaseCard, error: BaseException) -> DownloadOutcome:
        if not isinstance(error, Exception):
            raise error
        logger.error("Unexpected error downloading %s: %r", card.name, error)
        return DownloadOutcome(success=False, error=str(error) or type(error).__name__)

    async def download_card_images(
        self,
        cards: Sequence[BaseCard],
        max_concurrent: int = DEFAULT_MAX_CONCURRENT,
    ) -> BatchDownloadResult:
        """
        Download images for many cards in batches.

        Each batch of ``max_concurrent`` cards runs concurrently and is fully
        settled before the next starts. Counters are reset at the start of the
        call and updated after each batch.

        Args:
            cards: Cards to download, in order
            max_concurrent: Batch size

        Returns:
            BatchDownloadResult with totals and per-card outcomes
        """
        logger.info(
            "Downloading %d card images to %s (%d at a time)",
            len(cards),
            self.download_dir,
            max_concurrent,
        )
        self.reset_stats()
        results: list[CardDownload] = []

        async with self._client_scope() as client:
            batches = list(iter_batches(cards, max_concurrent))
            for index, batch in enumerate(batches):
                outcomes = await asyncio.gather(
                    *(self.download_card_image(card, client) for card in batch),
                    return_exceptions=True,
                )
                for card, outcome in zip(batch, outcomes, strict=True):
                    if isinstance(outcome, BaseException):
                        outcome = self._unexpected_failure(card, outcome)
                    results.append(CardDownload(card=card, outcome=outcome))
                    if outcome.success:
                        self.downloaded_count += 1
                    else:
                        self.failed_count += 1

                if index < len(batches) - 1:
                    await asyncio.sleep(self.batch_delay)

        logger.info(
            "Download complete: %d succeeded, %d failed, %d total",
            self.downloaded_count,
            self.failed_count,
            len(cards),
        )
        return BatchDownloadResult(
            success=self.downloaded_count,
            failed=self.failed_count,
            results=results,
        )

    async def download_deck_images(
        self,
        deck: Deck,
        max_concurrent: int = DEFAULT_MAX_CONCURRENT,
    ) -> DeckDownloadSummary:
        """Download images zone by zone and summarize per zone."""
        logger.info(
            "Downloading images for deck %s (main %d, extra %d, side %d)",
            deck.name,
            len(deck.main_deck),
            len(deck.extra_deck),
            len(deck.side_deck),
        )

        zone_counts: list[ZoneDownloadCount] = []
        for cards in (deck.main_deck, deck.extra_deck, deck.side_deck):
            result = await self.download_card_images(cards, max_concurrent)
            zone_counts.append(ZoneDownloadCount(success=result.success, failed=result.failed))

        main, extra, side = zone_counts
        return DeckDownloadSummary(
            total_success=sum(c.success for c in zone_counts),
            total_failed=sum(c.failed for c in zone_counts),
            main_deck=main,
            extra_deck=extra,
            side_deck=side,
        )


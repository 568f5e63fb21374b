"""
Download card images for a previously scraped deck.

Reads ``deck_<id>.json`` written by the scrape job and downloads every card
image that is not on disk yet.

Usage:
    python -m neurondeck.jobs.download_images 16
"""

import argparse
import asyncio
import logging
from pathlib import Path

from neurondeck.config import settings
from neurondeck.services.image_downloader import BatchDownloadResult, ImageDownloader
from neurondeck.services.storage import load_scrape_result, snapshot_path

logger = logging.getLogger(__name__)

DEFAULT_CONCURRENCY = 3
SUCCESS_EXAMPLES_SHOWN = 5


async def run_download(
    deck_id: str,
    *,
    output_dir: Path = settings.output_dir,
    download_dir: Path = settings.download_dir,
    max_concurrent: int = DEFAULT_CONCURRENCY,
) -> BatchDownloadResult | None:
    """
    Download all card images of a saved deck.

    Returns:
        Download result, or None if the snapshot holds no deck or no cards

    Raises:
        FileNotFoundError: If the snapshot does not exist
        ValueError: If the snapshot is corrupted
    """
    result = load_scrape_result(snapshot_path(output_dir, deck_id))
    if not result.success or result.deck is None:
        logger.error("No valid deck data in snapshot for deck %s", deck_id)
        return None

    deck = result.deck
    cards = deck.all_cards()
    logger.info("Deck %s: %s", deck.deck_id, deck.name)
    if not cards:
        logger.warning("Deck %s has no cards to download", deck.deck_id)
        return None

    logger.info(
        "%d cards (main %d, extra %d, side %d)",
        len(cards),
        len(deck.main_deck),
        len(deck.extra_deck),
        len(deck.side_deck),
    )

    downloader = ImageDownloader(download_dir)
    return await downloader.download_card_images(cards, max_concurrent)


def print_download_result(result: BatchDownloadResult) -> None:
    print("\n=== Download result ===")
    print(f"Succeeded: {result.success}")
    print(f"Failed: {result.failed}")

    failures = result.failures()
    if failures:
        print("\n=== Failed cards ===")
        for item in failures:
            print(f"- {item.card.name}: {item.outcome.error}")

    successes = result.successes()
    if successes:
        print("\n=== Downloaded ===")
        for item in successes[:SUCCESS_EXAMPLES_SHOWN]:
            print(f"{item.card.name} -> {item.outcome.file_path}")
        if len(successes) > SUCCESS_EXAMPLES_SHOWN:
            print(f"... and {len(successes) - SUCCESS_EXAMPLES_SHOWN} more")


def main() -> None:
    """CLI entry point for downloading card images of a saved deck."""
    parser = argparse.ArgumentParser(description="Download card images for a scraped deck")
    parser.add_argument("deck_id", help="Deck id (the dno value) of a saved deck")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=settings.output_dir,
        help=f"Directory holding deck JSON (default: {settings.output_dir})",
    )
    parser.add_argument(
        "--download-dir",
        type=Path,
        default=settings.download_dir,
        help=f"Directory for card images (default: {settings.download_dir})",
    )
    parser.add_argument(
        "--concurrency",
        type=int,
        default=DEFAULT_CONCURRENCY,
        help=f"Images downloaded at a time (default: {DEFAULT_CONCURRENCY})",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        result = asyncio.run(
            run_download(
                args.deck_id,
                output_dir=args.output_dir,
                download_dir=args.download_dir,
                max_concurrent=args.concurrency,
            )
        )
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        raise SystemExit(1) from e

    if result is None:
        raise SystemExit(1)
    print_download_result(result)


if __name__ == "__main__":
    main()

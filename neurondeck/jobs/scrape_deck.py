"""
Scrape a deck recipe and save it.

Renders the deck page, extracts the deck, writes ``deck_<id>.json``,
optionally downloads every card image and reports validation problems.

Usage:
    python -m neurondeck.jobs.scrape_deck "https://www.db.yugioh-card.com/yugiohdb/member_deck.action?ope=1&cgid=...&dno=16"
    python -m neurondeck.jobs.scrape_deck <deck URL> --no-download
"""

import argparse
import asyncio
import logging
from pathlib import Path

from neurondeck.config import settings
from neurondeck.models.deck import Deck
from neurondeck.scrapers.neuron import scrape_deck
from neurondeck.services.deck_stats import deck_statistics
from neurondeck.services.image_downloader import ImageDownloader
from neurondeck.services.storage import save_scrape_result
from neurondeck.services.validation import DeckValidationReport, validate_deck

logger = logging.getLogger(__name__)


def print_validation_report(report: DeckValidationReport) -> None:
    print("\n=== Data validation ===")
    print(f"Total cards: {report.total_cards}")
    print(f"Valid cards: {report.valid_cards}")
    print(f"Invalid cards: {report.invalid_cards}")

    if report.is_valid:
        print("\nAll card data is valid.")
        return

    print("\nInvalid card data found:")
    for index, detail in enumerate(report.invalid_card_details, start=1):
        print(f"{index}. {detail.card_name}")
        for error in detail.errors:
            print(f"   - {error}")


def log_deck_summary(deck: Deck) -> None:
    stats = deck_statistics(deck)
    logger.info("Deck name: %s", deck.name)
    logger.info("Deck id: %s", deck.deck_id)
    logger.info(
        "Main deck: %d, extra deck: %d, side deck: %d (%d total)",
        stats.card_count.main_deck,
        stats.card_count.extra_deck,
        stats.card_count.side_deck,
        stats.card_count.total,
    )
    logger.info("Card types: %s", stats.type_distribution)


async def run_scrape(
    url: str,
    *,
    download: bool = True,
    output_dir: Path = settings.output_dir,
    download_dir: Path = settings.download_dir,
    max_concurrent: int = settings.max_concurrent,
) -> int:
    """
    Scrape one deck and persist it.

    Returns:
        Process exit code: 0 on success, 1 if the scrape failed
    """
    logger.info("Scraping %s (image download %s)", url, "on" if download else "off")

    result = await scrape_deck(url)
    if not result.success or result.deck is None:
        logger.error("Scrape failed: %s", result.error)
        return 1

    deck = result.deck
    log_deck_summary(deck)

    path = save_scrape_result(result, output_dir)
    logger.info("Saved scrape result to %s", path)

    if download:
        downloader = ImageDownloader(download_dir)
        summary = await downloader.download_deck_images(deck, max_concurrent)
        if summary.total_failed == 0:
            logger.info("All %d images downloaded", summary.total_success)
        else:
            logger.warning(
                "Image download finished with %d failures (%d succeeded)",
                summary.total_failed,
                summary.total_success,
            )

    print_validation_report(validate_deck(deck))
    return 0


def main() -> None:
    """CLI entry point for scraping a deck recipe."""
    parser = argparse.ArgumentParser(description="Scrape a Yu-Gi-Oh! OCG deck recipe")
    parser.add_argument(
        "url",
        nargs="?",
        default=None,
        help="Deck recipe URL (default: NEURONDECK_DEFAULT_URL)",
    )
    parser.add_argument(
        "--no-download",
        action="store_true",
        help="Skip downloading card images",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=settings.output_dir,
        help=f"Directory for deck JSON (default: {settings.output_dir})",
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
        default=settings.max_concurrent,
        help=f"Images downloaded at a time (default: {settings.max_concurrent})",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    url = args.url or settings.default_url
    if not url:
        parser.print_usage()
        logger.error("No deck URL given and NEURONDECK_DEFAULT_URL is not set")
        raise SystemExit(1)

    exit_code = asyncio.run(
        run_scrape(
            url,
            download=not args.no_download,
            output_dir=args.output_dir,
            download_dir=args.download_dir,
            max_concurrent=args.concurrency,
        )
    )
    if exit_code:
        raise SystemExit(exit_code)


if __name__ == "__main__":
    main()

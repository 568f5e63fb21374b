"""
neurondeck services.

Validation, statistics, snapshot storage and image downloads for scraped decks.
"""

from neurondeck.services.deck_stats import (
    DeckCardCount,
    DeckStatistics,
    count_cards,
    deck_statistics,
)
from neurondeck.services.image_downloader import (
    BatchDownloadResult,
    CardDownload,
    DeckDownloadSummary,
    DownloadOutcome,
    ImageDownloader,
    generate_file_name,
)
from neurondeck.services.storage import load_scrape_result, save_scrape_result, snapshot_path
from neurondeck.services.validation import (
    DeckValidationReport,
    InvalidCardDetail,
    validate_card,
    validate_deck,
)

__all__ = [
    "BatchDownloadResult",
    "CardDownload",
    "DeckCardCount",
    "DeckDownloadSummary",
    "DeckStatistics",
    "DeckValidationReport",
    "DownloadOutcome",
    "ImageDownloader",
    "InvalidCardDetail",
    "count_cards",
    "deck_statistics",
    "generate_file_name",
    "load_scrape_result",
    "save_scrape_result",
    "snapshot_path",
    "validate_card",
    "validate_deck",
]

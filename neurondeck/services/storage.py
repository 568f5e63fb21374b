"""
JSON snapshot storage for scrape results.

One file per deck, ``deck_<deckId>.json``, holding the whole ScrapeResult
with camelCase keys.
"""

from pathlib import Path

from pydantic import ValidationError

from neurondeck.models.deck import ScrapeResult


def snapshot_path(output_dir: Path, deck_id: str) -> Path:
    """Path of the snapshot file for a deck id."""
    return output_dir / f"deck_{deck_id}.json"


def save_scrape_result(result: ScrapeResult, output_dir: Path) -> Path:
    """
    Write a successful scrape result to its snapshot file.

    Args:
        result: Scrape result carrying a deck
        output_dir: Directory for snapshots (created if missing)

    Returns:
        Path of the written file

    Raises:
        ValueError: If the result has no deck
    """
    if result.deck is None:
        raise ValueError("Only successful scrape results can be saved")

    output_dir.mkdir(parents=True, exist_ok=True)
    path = snapshot_path(output_dir, result.deck.deck_id)

    content = result.model_dump_json(by_alias=True, exclude_none=True, indent=2)
    path.write_text(content, encoding="utf-8")
    return path


def load_scrape_result(path: Path) -> ScrapeResult:
    """
    Read a snapshot file back into a ScrapeResult.

    Raises:
        FileNotFoundError: If the snapshot does not exist
        ValueError: If the file is not a valid scrape result
    """
    if not path.exists():
        raise FileNotFoundError(
            f"Scrape result not found at {path}. Run `neurondeck-scrape <deck URL>` first."
        )

    try:
        return ScrapeResult.model_validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as e:
        raise ValueError(f"Scrape result at {path} is corrupted: {e}") from e

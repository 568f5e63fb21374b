from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="NEURONDECK_")

    app_name: str = "neurondeck"

    # Deck recipe scraped when no URL is given on the command line
    default_url: str | None = None

    output_dir: Path = Path("output")
    download_dir: Path = Path("downloads/cards")

    headless: bool = True
    page_timeout_ms: int = 30_000
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    )

    image_timeout: float = 30.0
    max_concurrent: int = 5
    # Seconds to wait between download batches
    batch_delay: float = 1.0


settings = Settings()


# =============================================================================
# SITE CONSTANTS
# =============================================================================

NEURON_BASE = "https://www.db.yugioh-card.com"

# How long to wait for a zone container before extracting anyway
ZONE_WAIT_TIMEOUT_MS = 10_000

# Extra settle time for late dynamic content after the page reports ready
SETTLE_DELAY_SECONDS = 2.0

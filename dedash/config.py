from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

_PACKAGED_DATA_DIR = Path(__file__).resolve().parent / "data"


@dataclass(frozen=True)
class AppConfig:
    data_dir: Path = Path(os.getenv("DEDASH_DATA_DIR", str(_PACKAGED_DATA_DIR)))
    restaurants_filename: str = "restaurants.csv"
    menu_items_filename: str = "menu_items.csv"
    location_label: str = os.getenv("DEDASH_LOCATION", "Boston, MA")
    log_level: str = os.getenv("DEDASH_LOG_LEVEL", "INFO")
    host: str = os.getenv("DEDASH_HOST", "127.0.0.1")
    port: int = int(os.getenv("DEDASH_PORT", "8000"))

    @property
    def restaurants_path(self) -> Path:
        return self.data_dir / self.restaurants_filename

    @property
    def menu_items_path(self) -> Path:
        return self.data_dir / self.menu_items_filename


DEFAULT_APP_CONFIG = AppConfig()


def setup_logging(config: AppConfig = DEFAULT_APP_CONFIG) -> None:
    """Configure root logging for the application."""
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

_BUNDLED_DATA = Path(__file__).resolve().parent / "data" / "travel_recommendation_api.json"


@dataclass(frozen=True)
class AppConfig:
    data_path: Path = Path(os.getenv("TRAVELBLOOM_DATA_PATH", str(_BUNDLED_DATA)))
    clock_interval: float = float(os.getenv("TRAVELBLOOM_CLOCK_INTERVAL", "1.0"))
    max_cards: int = int(os.getenv("TRAVELBLOOM_MAX_CARDS", "6"))
    min_cards: int = int(os.getenv("TRAVELBLOOM_MIN_CARDS", "2"))


DEFAULT_APP_CONFIG = AppConfig()

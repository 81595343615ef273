from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from pydantic import ValidationError

from ..errors import DatasetLoadError
from .models import Country, Dataset, Place

logger = logging.getLogger(__name__)


def _read_dataset(path: Path) -> Dataset:
    try:
        raw = path.read_bytes()
        return Dataset.model_validate_json(raw)
    except (OSError, ValidationError) as exc:
        raise DatasetLoadError() from exc


class DataStore:
    """In-memory holder for the recommendation dataset.

    The dataset is loaded once and never mutated. Until :meth:`load` succeeds
    the store reports itself as not ready; a failed load leaves it that way.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        self._dataset: Dataset | None = None
        self._load_error: DatasetLoadError | None = None

    @classmethod
    def from_dataset(cls, dataset: Dataset) -> DataStore:
        store = cls()
        store._dataset = dataset
        return store

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def dataset(self) -> Dataset | None:
        return self._dataset

    @property
    def is_ready(self) -> bool:
        return self._dataset is not None

    @property
    def load_error(self) -> DatasetLoadError | None:
        return self._load_error

    async def load(self) -> Dataset | None:
        """Read the dataset file off the event loop.

        Returns the dataset, or ``None`` when the file is missing or invalid.
        """
        if self._path is None:
            raise ValueError("DataStore has no dataset path to load from")

        try:
            dataset = await asyncio.to_thread(_read_dataset, self._path)
        except DatasetLoadError as exc:
            logger.warning("Error loading dataset from %s", self._path, exc_info=True)
            self._load_error = exc
            return None

        self._dataset = dataset
        self._load_error = None
        logger.info(
            "Dataset loaded: %d beaches, %d temples, %d countries",
            len(dataset.beaches),
            len(dataset.temples),
            len(dataset.countries),
        )
        return dataset

    # ── Read-only accessors ──────────────────────────────────────────────

    def beaches(self) -> tuple[Place, ...]:
        return self._dataset.beaches if self._dataset else ()

    def temples(self) -> tuple[Place, ...]:
        return self._dataset.temples if self._dataset else ()

    def countries(self) -> tuple[Country, ...]:
        return self._dataset.countries if self._dataset else ()

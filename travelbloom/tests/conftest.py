from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from travelbloom.app import app
from travelbloom.catalog.data_store import DataStore
from travelbloom.catalog.models import Dataset


def make_dataset() -> Dataset:
    return Dataset.model_validate({
        "beaches": [
            {"name": "Bora Bora, French Polynesia", "description": "Turquoise water", "imageUrl": "bora.jpg"},
            {"name": "Copacabana Beach, Brazil", "description": "Lively", "imageUrl": "copa.jpg"},
        ],
        "temples": [
            {"name": "Angkor Wat, Cambodia", "description": "Largest monument", "imageUrl": "angkor.jpg"},
        ],
        "countries": [
            {
                "name": "Greater Japan Region",
                "cities": [{"name": "Osaka, Greater Japan Region", "description": "Street food"}],
            },
            {
                "name": "Japan",
                "cities": [
                    {"name": "Tokyo, Japan", "description": "Metropolis", "imageUrl": "tokyo.jpg"},
                    {"name": "Kyoto, Japan", "description": "Temples", "imageUrl": "kyoto.jpg"},
                ],
            },
            {
                "name": "Brazil",
                "cities": [
                    {"name": "Rio de Janeiro, Brazil", "imageUrl": "rio.jpg"},
                    {"name": "São Paulo, Brazil", "description": "Nightlife"},
                ],
            },
            {
                "name": "Australia",
                "cities": [{"name": "Sydney, Australia", "description": "Harbour"}],
            },
        ],
    })


@pytest.fixture
def dataset() -> Dataset:
    return make_dataset()


@pytest.fixture
def store(dataset: Dataset) -> DataStore:
    return DataStore.from_dataset(dataset)


@pytest.fixture
def client():
    """Client whose startup has loaded the bundled dataset."""
    with TestClient(app) as c:
        yield c

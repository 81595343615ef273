from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Place(BaseModel):
    """A beach, temple or city as it appears in the source data."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = ""
    description: str = ""
    image_url: str = Field(default="", alias="imageUrl")

    @field_validator("name", "description", "image_url", mode="before")
    @classmethod
    def _null_as_missing(cls, value: Any) -> Any:
        return "" if value is None else value


class Country(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    cities: tuple[Place, ...] = ()

    @field_validator("name", mode="before")
    @classmethod
    def _null_name(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("cities", mode="before")
    @classmethod
    def _null_cities(cls, value: Any) -> Any:
        return () if value is None else value


class Dataset(BaseModel):
    model_config = ConfigDict(frozen=True)

    beaches: tuple[Place, ...] = ()
    temples: tuple[Place, ...] = ()
    countries: tuple[Country, ...] = ()

    @field_validator("beaches", "temples", "countries", mode="before")
    @classmethod
    def _null_sections(cls, value: Any) -> Any:
        return () if value is None else value

    def all_cities(self) -> list[Place]:
        """Every city of every country, in dataset order."""
        return [city for country in self.countries for city in country.cities]

    def country_names(self) -> list[str]:
        return [country.name for country in self.countries]

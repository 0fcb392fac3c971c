"""
Pydantic models for airport records.

``Airport`` is both the request body for creation and the shape of a
stored record.  Every field has a default so that a partial body can be
parsed; the directory enforces the required fields itself so that a
missing ``icao``, ``name`` or ``city`` yields the same error as an
empty one.  Unknown keys in a request body are dropped.
"""

from typing import List

from pydantic import BaseModel, Field


REQUIRED_FIELDS = ("icao", "name", "city")


class Airport(BaseModel):
    icao: str = Field("", examples=["YJUK"], description="Unique ICAO code identifying the airport")
    iata: str = Field("", examples=[""])
    name: str = Field("", examples=["Tjukurla Airport"])
    city: str = Field("", examples=["Tjukurla"])
    state: str = Field("", examples=["Western-Australia"])
    country: str = Field("", examples=["AU"])
    elevation: float | int = Field(0, examples=[0])
    lat: float | int = Field(0, examples=[-24.3707103729])
    lon: float | int = Field(0, examples=[128.7393341064])
    tz: str = Field("", examples=["Australia/Perth"])

    model_config = {
        "extra": "ignore",
    }

    def missing_required(self) -> List[str]:
        """Return the names of required fields that are empty."""
        return [name for name in REQUIRED_FIELDS if not getattr(self, name)]


class PageParams(BaseModel):
    """Pagination parameters for listing airports.

    ``page`` is one‑based.  The half‑open index range of a page is
    ``[(page - 1) * page_size, page * page_size)``.
    """

    page: int = 1
    page_size: int = 10

    @property
    def bounds(self) -> tuple[int, int]:
        return (self.page - 1) * self.page_size, self.page * self.page_size

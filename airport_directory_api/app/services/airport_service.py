"""
Business logic for the airport directory.

``AirportDirectory`` owns the ordered sequence of airport records held
in process memory.  One instance is built when the application starts
and handed to request handlers; nothing else keeps a reference to the
records.  Order reflects insertion history and is what pagination walks
over.  Lookups are linear scans over the sequence, which is plenty for
a seed dataset of this size.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import pydantic

from ..core.errors import (
    DuplicateKeyError,
    InvalidRangeError,
    NotFoundError,
    ValidationError,
)
from ..core.seed import load_seed
from ..schemas.airport import Airport, PageParams


logger = logging.getLogger(__name__)

DELETED_MESSAGE = "airport has been deleted"


class AirportDirectory:
    """In‑memory, insertion‑ordered collection of airports keyed by ``icao``."""

    def __init__(self, airports: Optional[Iterable[Airport]] = None) -> None:
        self._airports: List[Airport] = []
        for airport in airports or []:
            self.create(airport)

    @classmethod
    def from_seed(cls, path: str | Path) -> "AirportDirectory":
        """Build a directory from the JSON seed file at ``path``.

        Seed records are trusted reference data: only ``icao`` has to be
        present and unique, so entries with an unknown city are kept.
        Records that cannot be parsed, lack an ``icao`` or repeat one
        are skipped with a warning.
        """
        directory = cls()
        loaded = 0
        for position, raw in enumerate(load_seed(path)):
            try:
                airport = Airport.model_validate(raw)
                if not airport.icao:
                    raise ValidationError("seed airport must have icao")
                if airport.icao in directory:
                    raise DuplicateKeyError()
            except (pydantic.ValidationError, ValidationError, DuplicateKeyError) as exc:
                logger.warning("Skipping seed record %d (%s): %s", position, raw.get("icao"), exc)
                continue
            directory._airports.append(airport)
            loaded += 1
        logger.info("Airport directory initialised with %d records", loaded)
        return directory

    def __contains__(self, icao: object) -> bool:
        return self._index_of(icao) is not None

    def count(self) -> int:
        return len(self._airports)

    def _index_of(self, icao: object) -> Optional[int]:
        for index, airport in enumerate(self._airports):
            if airport.icao == icao:
                return index
        return None

    def list(self, page: int = 1, page_size: int = 10) -> List[Airport]:
        """Return one page of airports.

        Raises :class:`InvalidRangeError` when the page ends past the
        last record, starts before the first one, or has a negative
        size.  A page starting past the end whose upper bound still fits
        is returned as is (empty or partial).
        """
        lower, upper = PageParams(page=page, page_size=page_size).bounds
        if upper > len(self._airports) or lower < 0 or upper < lower:
            raise InvalidRangeError()
        return self._airports[lower:upper]

    def create(self, airport: Airport) -> Airport:
        """Append ``airport`` to the end of the directory and return it."""
        if airport.missing_required():
            raise ValidationError()
        if airport.icao in self:
            raise DuplicateKeyError()
        self._airports.append(airport)
        logger.info("Created airport %s", airport.icao)
        return airport

    def get(self, icao: str) -> Airport:
        index = self._index_of(icao)
        if index is None:
            raise NotFoundError()
        return self._airports[index]

    def update(self, icao: str, changes: Dict[str, Any]) -> Airport:
        """Merge ``changes`` into the airport identified by ``icao``.

        Only keys that are airport fields are applied; anything else in
        ``changes`` is ignored.  Renaming to an ``icao`` owned by another
        record raises :class:`DuplicateKeyError`.  Changes must have valid
        field types and may not blank out ``icao``, ``name`` or ``city``,
        otherwise :class:`ValidationError` is raised and the stored
        record is left as it was.
        """
        index = self._index_of(icao)
        if index is None:
            raise NotFoundError()

        if "icao" in changes:
            owner = self._index_of(changes["icao"])
            if owner is not None and owner != index:
                raise DuplicateKeyError()

        known = {key: value for key, value in changes.items() if key in Airport.model_fields}
        merged = {**self._airports[index].model_dump(), **known}
        try:
            updated = Airport.model_validate(merged)
        except pydantic.ValidationError as exc:
            raise ValidationError("airport has invalid field values") from exc
        if set(updated.missing_required()) & set(known):
            raise ValidationError()

        self._airports[index] = updated
        logger.info("Updated airport %s (%s)", updated.icao, ", ".join(sorted(known)) or "no known fields")
        return updated

    def delete(self, icao: str) -> str:
        """Remove the airport identified by ``icao``; later records shift left."""
        index = self._index_of(icao)
        if index is None:
            raise NotFoundError()
        del self._airports[index]
        logger.info("Deleted airport %s", icao)
        return DELETED_MESSAGE

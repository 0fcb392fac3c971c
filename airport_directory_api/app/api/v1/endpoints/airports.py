"""
Airport endpoints for API v1.

These routes expose a CRUD API over the in‑memory airport directory,
keyed by ICAO code.  Failures are reported as HTTP 400 with a fixed
plain‑text message (see ``core.errors``); the translation to a text
body happens in the application's HTTP exception handler.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request, status
from fastapi.responses import PlainTextResponse

from airport_directory_api.app.core.config import Settings
from airport_directory_api.app.core.errors import AirportDirectoryError
from airport_directory_api.app.schemas.airport import Airport
from airport_directory_api.app.services.airport_service import AirportDirectory


router = APIRouter()


def get_directory(request: Request) -> AirportDirectory:
    """Return the directory owned by the running application."""
    return request.app.state.directory


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _bad_request(exc: AirportDirectoryError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.get("", response_model=List[Airport])
async def list_airports(
    page: Optional[int] = Query(None, description="One‑based page number (default 1)"),
    page_size: Optional[int] = Query(None, alias="pageSize", description="Airports per page"),
    directory: AirportDirectory = Depends(get_directory),
    settings: Settings = Depends(get_settings),
) -> List[Airport]:
    """Return one page of airports in insertion order.

    - **page**: page number, starting at 1.
    - **pageSize**: number of airports per page.

    A page that ends past the last airport is rejected with
    ``invalid search params``.
    """
    if page is None:
        page = 1
    if page_size is None:
        page_size = settings.default_page_size
    try:
        return directory.list(page=page, page_size=page_size)
    except AirportDirectoryError as e:
        raise _bad_request(e) from e


@router.post("", response_model=Airport, status_code=status.HTTP_201_CREATED)
async def create_airport(
    airport: Airport,
    directory: AirportDirectory = Depends(get_directory),
) -> Airport:
    """Create a new airport.

    ``icao``, ``name`` and ``city`` are required and ``icao`` must not
    already be in use.
    """
    try:
        return directory.create(airport)
    except AirportDirectoryError as e:
        raise _bad_request(e) from e


@router.get("/{icao}", response_model=Airport)
async def get_airport(icao: str, directory: AirportDirectory = Depends(get_directory)) -> Airport:
    """Retrieve a single airport by its ICAO code (case sensitive)."""
    try:
        return directory.get(icao)
    except AirportDirectoryError as e:
        raise _bad_request(e) from e


@router.patch("/{icao}", response_model=Airport, status_code=status.HTTP_202_ACCEPTED)
async def update_airport(
    icao: str,
    changes: Dict[str, Any] = Body(...),
    directory: AirportDirectory = Depends(get_directory),
) -> Airport:
    """Partially update an airport.

    Only keys that are airport fields are applied; other keys are
    ignored.  Changing ``icao`` to a code used by another airport is
    rejected.
    """
    try:
        return directory.update(icao, changes)
    except AirportDirectoryError as e:
        raise _bad_request(e) from e


@router.delete("/{icao}", response_class=PlainTextResponse, status_code=status.HTTP_202_ACCEPTED)
async def delete_airport(icao: str, directory: AirportDirectory = Depends(get_directory)) -> str:
    """Delete an airport by its ICAO code."""
    try:
        return directory.delete(icao)
    except AirportDirectoryError as e:
        raise _bad_request(e) from e

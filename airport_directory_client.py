"""Airport Directory API client.

This module defines a simple client wrapper around the airport REST
API.  The client uses the ``requests`` library internally to make HTTP
calls and exposes one method per operation:

* :meth:`list_airports` – return one page of airports.
* :meth:`get_airport` – fetch a single airport by its ICAO code.
* :meth:`create_airport` – add a new airport.
* :meth:`update_airport` – partially update an airport.
* :meth:`delete_airport` – remove an airport.

Every method returns a ``(data, error)`` tuple.  The service reports
failures as plain‑text messages, which are passed through in
``error["message"]``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class AirportDirectoryAPI:
    """Client for interacting with the airport directory API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API including any route prefix,
                e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Result:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` holds the decoded JSON
            body (or the text body for non‑JSON responses) on success
            and ``error`` is ``None``.  On failure ``data`` is ``None``
            and ``error`` is a dictionary with keys ``status_code`` and
            ``message``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if not response.content:
            return None, None
        if "application/json" in response.headers.get("content-type", ""):
            return response.json(), None
        return response.text, None

    @staticmethod
    def _airport_path(icao: str) -> str:
        return f"/airports/{quote(icao, safe='')}"

    # ------------------------------------------------------------------
    # Airport operations
    # ------------------------------------------------------------------
    def list_airports(
        self, page: Optional[int] = None, page_size: Optional[int] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve one page of airports.

        Omitted arguments fall back to the server defaults (page 1,
        ten airports per page).
        """
        params: Dict[str, Any] = {}
        if page is not None:
            params["page"] = page
        if page_size is not None:
            params["pageSize"] = page_size
        data, error = self._request("GET", "/airports", params=params or None)
        return (data or []), error

    def get_airport(self, icao: str) -> Result:
        return self._request("GET", self._airport_path(icao))

    def create_airport(self, airport: Dict[str, Any]) -> Result:
        """Create an airport; ``icao``, ``name`` and ``city`` are required."""
        return self._request("POST", "/airports", json_body=airport)

    def update_airport(self, icao: str, changes: Dict[str, Any]) -> Result:
        return self._request("PATCH", self._airport_path(icao), json_body=changes)

    def delete_airport(self, icao: str) -> Result:
        """Delete an airport.  On success ``data`` is the confirmation text."""
        return self._request("DELETE", self._airport_path(icao))

"""Stellar API client.

This module defines a small client wrapper around the Stellar HTTP
API.  It uses the ``requests`` library internally and turns the JSON
responses back into the same ``Planet`` and ``Star`` models the
server serializes.

The client exposes one method per route:

* :meth:`list_stars` – return every star in the catalog.
* :meth:`get_star` – fetch a single star by name.
* :meth:`list_planets` – return every planet in the catalog.
* :meth:`get_planet` – fetch a single planet by name.

Every method returns a tuple ``(data, error)``.  On failure ``error``
is a dictionary with the keys ``status_code`` and ``message``; for a
missing record the message is the ``detail`` of the server's problem
response, e.g. ``"Star not found."``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests
from pydantic import ValidationError

from stellar_api.app.schemas.planet import Planet
from stellar_api.app.schemas.star import Star


logger = logging.getLogger(__name__)


class StellarAPI:
    """Client for the Stellar API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("title") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _name_path(collection: str, name: str) -> str:
        return f"/{collection}/{quote(name, safe='')}"

    # ------------------------------------------------------------------
    # Star operations
    # ------------------------------------------------------------------
    def list_stars(self) -> Tuple[List[Star], Optional[Dict[str, Any]]]:
        """Retrieve all stars.

        Returns:
            A tuple ``(stars, error)``. ``stars`` is empty on failure.
        """
        data, error = self._request("GET", "/stars")
        if error:
            return [], error
        return self._parse_list(Star, data)

    def get_star(self, name: str) -> Tuple[Optional[Star], Optional[Dict[str, Any]]]:
        """Retrieve a single star by name (case insensitive)."""
        data, error = self._request("GET", self._name_path("stars", name))
        if error:
            return None, error
        return self._parse_one(Star, data)

    # ------------------------------------------------------------------
    # Planet operations
    # ------------------------------------------------------------------
    def list_planets(self) -> Tuple[List[Planet], Optional[Dict[str, Any]]]:
        """Retrieve all planets.

        Returns:
            A tuple ``(planets, error)``. ``planets`` is empty on failure.
        """
        data, error = self._request("GET", "/planets")
        if error:
            return [], error
        return self._parse_list(Planet, data)

    def get_planet(self, name: str) -> Tuple[Optional[Planet], Optional[Dict[str, Any]]]:
        """Retrieve a single planet by name (case insensitive)."""
        data, error = self._request("GET", self._name_path("planets", name))
        if error:
            return None, error
        return self._parse_one(Planet, data)

    # ------------------------------------------------------------------
    # Response parsing
    # ------------------------------------------------------------------
    @staticmethod
    def _parse_list(model, data: Any):
        if not isinstance(data, list):
            return [], {"status_code": None, "message": "Expected a JSON array"}
        try:
            return [model.model_validate(item) for item in data], None
        except ValidationError as exc:
            logger.error("Malformed %s payload: %s", model.__name__, exc)
            return [], {"status_code": None, "message": str(exc)}

    @staticmethod
    def _parse_one(model, data: Any):
        try:
            return model.model_validate(data), None
        except ValidationError as exc:
            logger.error("Malformed %s payload: %s", model.__name__, exc)
            return None, {"status_code": None, "message": str(exc)}

"""Player Registry API client.

A thin wrapper around the REST surface of ``player_registry_api``
built on the ``requests`` library.  Every operation returns a tuple
``(data, error)``: on success ``error`` is ``None``; on failure
``data`` is empty and ``error`` is a dictionary with the keys
``status_code`` and ``message``.

Listing filters may be given either with their wire names
(``minExperience``, ``pageNumber``...) or as snake_case keywords
(``min_experience``, ``page_number``...)::

    client = PlayerRegistryClient(base_url="http://localhost:8000")
    players, error = client.list_players(race="ELF", min_level=5, order="NAME")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

# snake_case keyword -> query parameter understood by the API
_PARAM_NAMES: Dict[str, str] = {
    "min_experience": "minExperience",
    "max_experience": "maxExperience",
    "min_level": "minLevel",
    "max_level": "maxLevel",
    "page_number": "pageNumber",
    "page_size": "pageSize",
}

Error = Dict[str, Any]


class PlayerRegistryClient:
    """Client for the ``/api/v1/players`` endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 10,
        api_prefix: str = "/api/v1",
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds for every request.
            api_prefix: Path prefix of the versioned API.
        """
        self.base_url = base_url.rstrip("/") + api_prefix
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body
            (``None`` for empty responses).
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
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") if isinstance(err_json, dict) else str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": str(message)}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _query_params(filters: Dict[str, Any]) -> Dict[str, Any]:
        """Translate keyword filters into query parameters, dropping ``None``."""
        params: Dict[str, Any] = {}
        for key, value in filters.items():
            if value is None:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            params[_PARAM_NAMES.get(key, key)] = value
        return params

    # ------------------------------------------------------------------
    # Player operations
    # ------------------------------------------------------------------
    def list_players(self, **filters: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve one page of players matching ``filters``."""
        data, error = self._request("GET", "/players/", params=self._query_params(filters))
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def count_players(self, **filters: Any) -> Tuple[int, Optional[Error]]:
        """Count players matching ``filters``; paging keys are ignored by the server."""
        data, error = self._request("GET", "/players/count", params=self._query_params(filters))
        if error:
            return 0, error
        return int(data), None

    def get_player(self, player_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/players/{player_id}")

    def create_player(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a player.  ``payload`` uses the wire field names."""
        return self._request("POST", "/players/", json_body=payload)

    def update_player(self, player_id: int, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Partially update a player; omitted fields stay unchanged."""
        return self._request("PUT", f"/players/{player_id}", json_body=payload)

    def delete_player(self, player_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/players/{player_id}")
        return error is None, error

    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/health/")

"""Card Store API client.

A thin wrapper around the Card Store HTTP API built on the
``requests`` library.  Every method returns a tuple ``(data, error)``:
on success ``error`` is ``None``; on failure ``data`` is empty and
``error`` is a dictionary with the keys ``status_code`` and
``message``.

* :meth:`list_cards` – return every card.
* :meth:`get_card` – fetch a single card by its identifier.
* :meth:`create_card` – add a card.
* :meth:`update_card` – replace suit and value of a card.
* :meth:`delete_card` – remove a card.
* :meth:`cards_by_suit` / :meth:`cards_by_value` – case‑insensitive filters.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class CardStoreClient:
    """Client for interacting with the Card Store API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:3000",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
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
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)`` where ``data`` is the parsed JSON
            response on success.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
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
                    message = err_json.get("message") or err_json.get("error") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # Card operations
    # ------------------------------------------------------------------
    def list_cards(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all cards."""
        return self._list("/cards")

    def get_card(self, card_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single card by ID."""
        return self._request("GET", f"/cards/{card_id}")

    def create_card(self, suit: str, value: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a card and return it with its assigned ID."""
        return self._request("POST", "/cards", json_body={"suit": suit, "value": value})

    def update_card(self, card_id: int, suit: str, value: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace suit and value of an existing card."""
        return self._request("PUT", f"/cards/{card_id}", json_body={"suit": suit, "value": value})

    def delete_card(self, card_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Delete a card.

        Returns:
            A tuple ``(card, error)`` where ``card`` is the removed card.
        """
        data, error = self._request("DELETE", f"/cards/{card_id}")
        if error:
            return None, error
        return (data or {}).get("card"), None

    def cards_by_suit(self, suit: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve cards of a suit (case‑insensitive)."""
        return self._list(f"/cards/suit/{quote(suit, safe='')}")

    def cards_by_value(self, value: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve cards of a value (case‑insensitive)."""
        return self._list(f"/cards/value/{quote(value, safe='')}")

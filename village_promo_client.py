"""Village Promotion API client.

This module defines a thin client around the village promotion REST
API.  It is used by the public site helpers (:mod:`village_promo_site`)
and the admin dashboard (:mod:`village_dashboard`).  The client uses
the ``requests`` library internally to make HTTP calls.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty (``None`` or ``[]``) and
``error`` is a dictionary with the keys ``status_code`` and
``message``.  The message is taken from the API's ``{"message": ...}``
error body when there is one.  Connection problems are reported with
``status_code`` set to ``None``.

Payloads and results use the API's camelCase field names
(``categoryId``, ``imageUrl``, ``productImages`` ...).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class VillagePromoAPI:
    """Client for the categories, businesses and village profile endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API including its prefix, e.g.
                ``http://localhost:5000/api``.
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
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/umkms``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` holds the parsed JSON
            response, or ``None`` for empty responses such as 204.
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
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request %s %s failed (%s): %s", method, path, status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request %s %s failed: %s", method, path, exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    def _delete(self, path: str) -> Tuple[bool, Optional[ApiError]]:
        _, error = self._request("DELETE", path)
        if error:
            return False, error
        return True, None

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------
    def list_categories(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve all categories."""
        return self._list("/categories")

    def get_category(self, category_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", f"/categories/{category_id}")

    def create_category(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create a category from ``{"name": ..., "slug": ...}``."""
        return self._request("POST", "/categories", json_body=payload)

    def update_category(self, category_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("PUT", f"/categories/{category_id}", json_body=payload)

    def delete_category(self, category_id: Any) -> Tuple[bool, Optional[ApiError]]:
        return self._delete(f"/categories/{category_id}")

    # ------------------------------------------------------------------
    # Businesses
    # ------------------------------------------------------------------
    def list_umkms(self, category_id: Any = None) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve all businesses, or those of one category.

        Args:
            category_id: Optional category filter sent as ``categoryId``.
        """
        params = {"categoryId": category_id} if category_id is not None else None
        return self._list("/umkms", params)

    def get_umkm(self, umkm_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve a single business by ID."""
        return self._request("GET", f"/umkms/{umkm_id}")

    def create_umkm(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("POST", "/umkms", json_body=payload)

    def update_umkm(self, umkm_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Send a partial update for a business."""
        return self._request("PUT", f"/umkms/{umkm_id}", json_body=payload)

    def delete_umkm(self, umkm_id: Any) -> Tuple[bool, Optional[ApiError]]:
        return self._delete(f"/umkms/{umkm_id}")

    # ------------------------------------------------------------------
    # Village profile
    # ------------------------------------------------------------------
    def get_village_profile(self) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", "/village-profile")

    def update_village_profile(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("PUT", "/village-profile", json_body=payload)

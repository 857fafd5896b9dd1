"""Inventory API client.

A thin wrapper around the customer endpoints of the Inventory API
(``/api/v1/customers``), used by admin tooling and scripts.  It uses
the ``requests`` library internally.

The client exposes one method per customer operation:

* :meth:`list_customers` – every customer, including deactivated ones.
* :meth:`list_active_customers` – only customers with ``active = true``.
* :meth:`get_customer` – fetch a single customer by its identifier.
* :meth:`get_customer_by_name` – exact-name lookup.
* :meth:`add_customer` – register a new customer.
* :meth:`update_customer` – change name, email, contact and address.
* :meth:`delete_customer` – deactivate (soft-delete) a customer.

Every method returns a tuple ``(result, error)``.  On success
``error`` is ``None``; on failure ``result`` is empty and ``error`` is
a dictionary with ``status_code`` and ``message`` keys.  Network
failures are reported the same way with ``status_code`` set to
``None``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]

CUSTOMERS_PATH = "/api/v1/customers"


class InventoryAPI:
    """Client for the customer endpoints of the Inventory API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` is sent with
                every request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
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
            path: Path relative to :attr:`base_url`.
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body,
            or ``None`` when the response has no content.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            message = ""
            try:
                err_json = response.json()
                if isinstance(err_json, dict):
                    message = str(err_json.get("detail") or err_json.get("message") or err_json)
                else:
                    message = str(err_json)
            except ValueError:
                message = response.text
            if not message:
                message = f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}

        if response.content:
            return response.json(), None
        return None, None

    @staticmethod
    def _customer_path(customer_id: str) -> str:
        """Path of a single customer; the id is escaped as one segment."""
        return f"{CUSTOMERS_PATH}/{quote(str(customer_id), safe='')}"

    # ------------------------------------------------------------------
    # Customer operations
    # ------------------------------------------------------------------
    def list_customers(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve all customers."""
        data, error = self._request("GET", f"{CUSTOMERS_PATH}/")
        if error:
            return [], error
        return data or [], None

    def list_active_customers(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve customers that have not been deactivated."""
        data, error = self._request("GET", f"{CUSTOMERS_PATH}/", params={"active_only": "true"})
        if error:
            return [], error
        return data or [], None

    def get_customer(self, customer_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve a single customer by ID.

        An unknown id yields ``error`` with ``status_code`` 404.
        """
        return self._request("GET", self._customer_path(customer_id))

    def get_customer_by_name(self, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve the earliest registered customer with exactly ``name``.

        Returns ``(None, None)`` when nobody has that name.
        """
        data, error = self._request("GET", f"{CUSTOMERS_PATH}/", params={"name": name})
        if error:
            return None, error
        return (data[0] if data else None), None

    def add_customer(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Register a new customer.

        Args:
            payload: Customer fields (``name`` is required; ``email``,
                ``contact``, ``address`` and ``customer_id`` are optional).
        Returns:
            A tuple ``(customer, error)``.  The returned customer carries
            the server-assigned ``added`` timestamp.
        """
        return self._request("POST", f"{CUSTOMERS_PATH}/", json_body=payload)

    def update_customer(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Update name, email, contact and address of a customer.

        ``payload`` must contain ``customer_id``.  Omitted descriptive
        fields are cleared on the server.
        """
        return self._request("PUT", f"{CUSTOMERS_PATH}/", json_body=payload)

    def delete_customer(self, customer_id: str) -> Tuple[bool, Optional[ApiError]]:
        """Deactivate a customer.

        Returns:
            A tuple ``(success, error)``.  The server accepts unknown ids,
            so ``success`` only reflects whether the request went through.
        """
        _, error = self._request("DELETE", self._customer_path(customer_id))
        if error:
            return False, error
        return True, None

"""Customer service API client.

This module defines :class:`CustomerServiceClient`, a thin wrapper
around the REST API of the customer service.  It implements the
:class:`~vehicle_service_api.app.services.stores.CustomerDirectory`
contract on top of the ``requests`` library:

* :meth:`get_customer` – ``GET /api/customer/{id}``.  HTTP 404 or an
  empty body means the customer does not exist and yields ``None``.
* :meth:`list_customers` – ``GET /api/customer``.  The response is
  expected to be a JSON array; an object wrapping the array under
  ``customers``, ``data`` or ``items`` is accepted as well.

Every request carries a ``(connect, read)`` timeout.  Connection
errors, timeouts, non-404 HTTP errors and bodies that cannot be parsed
into customer records are all reported as
:class:`~vehicle_service_api.app.core.exceptions.UpstreamUnavailableError`.
Nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

import requests
from pydantic import ValidationError

from vehicle_service_api.app.core.exceptions import UpstreamUnavailableError
from vehicle_service_api.app.schemas.customer import CustomerRecord
from vehicle_service_api.app.services.stores import CustomerDirectory


logger = logging.getLogger(__name__)


CUSTOMERS_PATH = "/api/customer"


class CustomerServiceClient(CustomerDirectory):
    """Client for the customer service REST API."""

    # Keys under which some deployments wrap the customer list.
    _LIST_KEYS = ("customers", "data", "items")

    def __init__(
        self,
        *,
        base_url: str,
        connect_timeout: float = 5.0,
        read_timeout: float = 5.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the customer service, e.g.
                ``http://localhost:8888/CUSTOMER-SERVICE``.
            connect_timeout: Seconds to wait for a connection.
            read_timeout: Seconds to wait for the response body.
            session: Optional requests session.  If not supplied a
                session is created and owned by the client.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout: Tuple[float, float] = (connect_timeout, read_timeout)
        self._owns_session = session is None
        self.session = session or requests.Session()

    def close(self) -> None:
        """Close the underlying session if the client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "CustomerServiceClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, not_found_ok: bool = False) -> Optional[Any]:
        """Perform an HTTP request and return the decoded JSON body.

        Args:
            method: HTTP method (``GET`` etc.).
            path: Path relative to :attr:`base_url`.
            not_found_ok: Return ``None`` instead of failing on HTTP 404.
        Returns:
            The parsed JSON body, or ``None`` for an empty body or an
            accepted 404.
        Raises:
            UpstreamUnavailableError: On any transport or HTTP failure
                or when the body is not valid JSON.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method=method, url=url, timeout=self.timeout)
        except requests.Timeout as exc:
            logger.error("Customer service timed out on %s %s: %s", method, url, exc)
            raise UpstreamUnavailableError(f"Customer service timed out: {exc}") from exc
        except requests.RequestException as exc:
            logger.error("Customer service request failed on %s %s: %s", method, url, exc)
            raise UpstreamUnavailableError(f"Customer service unreachable: {exc}") from exc

        if response.status_code == 404 and not_found_ok:
            logger.debug("Customer service answered 404 for %s", url)
            return None
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            logger.error("Customer service answered %s for %s", response.status_code, url)
            raise UpstreamUnavailableError(
                f"Customer service answered HTTP {response.status_code}"
            ) from exc

        if not response.content or not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as exc:
            logger.error("Customer service returned a non-JSON body for %s", url)
            raise UpstreamUnavailableError("Customer service returned malformed JSON") from exc

    @staticmethod
    def _parse_customer(payload: Any) -> CustomerRecord:
        try:
            return CustomerRecord.model_validate(payload)
        except ValidationError as exc:
            logger.error("Customer service returned an invalid customer: %s", exc)
            raise UpstreamUnavailableError("Customer service returned an invalid customer record") from exc

    def _extract_list(self, data: Any) -> List[Any]:
        if isinstance(data, list):
            return data
        if isinstance(data, dict):
            for key in self._LIST_KEYS:
                if isinstance(data.get(key), list):
                    return data[key]
        raise UpstreamUnavailableError(
            f"Customer service returned {type(data).__name__} where a list was expected"
        )

    # ------------------------------------------------------------------
    # Customer operations
    # ------------------------------------------------------------------
    def get_customer(self, customer_id: int) -> Optional[CustomerRecord]:
        """Retrieve a single customer by ID, ``None`` if it does not exist."""
        data = self._request("GET", f"{CUSTOMERS_PATH}/{customer_id}", not_found_ok=True)
        if data is None or data == {}:
            return None
        return self._parse_customer(data)

    def list_customers(self) -> List[CustomerRecord]:
        """Retrieve all customers with a single request."""
        data = self._request("GET", CUSTOMERS_PATH)
        if data is None:
            return []
        customers = [self._parse_customer(item) for item in self._extract_list(data)]
        logger.debug("Fetched %d customers", len(customers))
        return customers

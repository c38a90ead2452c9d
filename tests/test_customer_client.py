from __future__ import annotations

import json
from typing import Any
from unittest import mock

import pytest
import requests

from vehicle_service_api.app.clients.customer_service import CustomerServiceClient
from vehicle_service_api.app.core.exceptions import UpstreamUnavailableError

BASE_URL = "http://customers.test/CUSTOMER-SERVICE"


def _response(status_code: int, body: Any = None, *, raw: bytes | None = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.url = BASE_URL
    response.encoding = "utf-8"
    if raw is not None:
        response._content = raw
    elif body is not None:
        response._content = json.dumps(body).encode("utf-8")
    else:
        response._content = b""
    return response


def _client(*, response: requests.Response | None = None, error: Exception | None = None):
    session = mock.Mock(spec=requests.Session)
    if error is not None:
        session.request.side_effect = error
    else:
        session.request.return_value = response
    return CustomerServiceClient(base_url=BASE_URL + "/", session=session), session


def test_get_customer_parses_customer_service_payload() -> None:
    client, session = _client(response=_response(200, {"id": 1, "name": "Amine SAFI", "age": 23.0}))

    customer = client.get_customer(1)

    assert customer.id == 1
    assert customer.full_name == "Amine SAFI"
    assert customer.age == 23.0
    session.request.assert_called_once_with(
        method="GET", url=f"{BASE_URL}/api/customer/1", timeout=(5.0, 5.0)
    )


def test_get_customer_not_found_returns_none() -> None:
    client, _ = _client(response=_response(404, {"detail": "missing"}))

    assert client.get_customer(7) is None


def test_get_customer_empty_body_returns_none() -> None:
    client, _ = _client(response=_response(200))

    assert client.get_customer(7) is None


def test_get_customer_server_error_is_upstream_failure() -> None:
    client, _ = _client(response=_response(500, {"error": "boom"}))

    with pytest.raises(UpstreamUnavailableError):
        client.get_customer(1)


@pytest.mark.parametrize(
    "error",
    [requests.ConnectionError("refused"), requests.ConnectTimeout("slow"), requests.ReadTimeout("slow")],
)
def test_transport_errors_are_upstream_failures(error) -> None:
    client, _ = _client(error=error)

    with pytest.raises(UpstreamUnavailableError) as excinfo:
        client.get_customer(1)

    assert excinfo.value.__cause__ is error


def test_malformed_json_is_upstream_failure() -> None:
    client, _ = _client(response=_response(200, raw=b"<html>gateway</html>"))

    with pytest.raises(UpstreamUnavailableError):
        client.list_customers()


def test_invalid_customer_record_is_upstream_failure() -> None:
    client, _ = _client(response=_response(200, [{"id": 1, "age": 3}]))

    with pytest.raises(UpstreamUnavailableError):
        client.list_customers()


def test_list_customers_single_request() -> None:
    payload = [
        {"id": 1, "name": "Amine SAFI", "age": 23.0},
        {"id": 2, "fullName": "Amal ALAOUI", "age": 22.0},
    ]
    client, session = _client(response=_response(200, payload))

    customers = client.list_customers()

    assert [c.id for c in customers] == [1, 2]
    assert customers[1].full_name == "Amal ALAOUI"
    session.request.assert_called_once_with(
        method="GET", url=f"{BASE_URL}/api/customer", timeout=(5.0, 5.0)
    )


def test_list_customers_accepts_wrapped_list() -> None:
    client, _ = _client(response=_response(200, {"data": [{"id": 3, "name": "Samir RAMI", "age": 22}]}))

    assert [c.full_name for c in client.list_customers()] == ["Samir RAMI"]


def test_list_customers_rejects_non_list() -> None:
    client, _ = _client(response=_response(200, {"id": 3}))

    with pytest.raises(UpstreamUnavailableError):
        client.list_customers()


def test_list_customers_not_found_is_upstream_failure() -> None:
    client, _ = _client(response=_response(404))

    with pytest.raises(UpstreamUnavailableError):
        client.list_customers()


def test_custom_timeouts_are_forwarded() -> None:
    session = mock.Mock(spec=requests.Session)
    session.request.return_value = _response(200, [])
    client = CustomerServiceClient(base_url=BASE_URL, connect_timeout=1.5, read_timeout=2.5, session=session)

    assert client.list_customers() == []
    assert session.request.call_args.kwargs["timeout"] == (1.5, 2.5)


def test_close_leaves_injected_session_open() -> None:
    client, session = _client(response=_response(200, []))

    client.close()

    session.close.assert_not_called()

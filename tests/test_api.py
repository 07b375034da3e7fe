"""Unit tests for the REST client and payload helpers."""

import httpx
import pytest

from factory_admin import api
from factory_admin.api import (
    ApiClient,
    ApiConnectionError,
    ApiResponseError,
    check_connection,
    ensure_ok,
    extract_list,
)

from conftest import BASE_URL, TOKEN


# ── Payload helpers ──


def test_ensure_ok_passes_success_and_bare_values():
    assert ensure_ok({"errFlag": 0, "data": []}) == {"errFlag": 0, "data": []}
    assert ensure_ok([1, 2]) == [1, 2]
    assert ensure_ok({"data": []}) == {"data": []}


def test_ensure_ok_raises_with_server_message():
    with pytest.raises(ApiResponseError) as exc:
        ensure_ok({"errFlag": 1, "message": "Duplicate GST number"})

    assert exc.value.message == "Duplicate GST number"
    assert exc.value.payload["errFlag"] == 1


def test_ensure_ok_uses_generic_message_when_server_is_silent():
    with pytest.raises(ApiResponseError) as exc:
        ensure_ok({"errFlag": "1"})

    assert exc.value.message == api.GENERIC_ERROR_MESSAGE


def test_extract_list_accepts_bare_array():
    rows = [{"id": 1}, {"id": 2}]
    assert extract_list(rows) == rows


def test_extract_list_unwraps_envelope_and_custom_key():
    assert extract_list({"errFlag": 0, "data": [{"id": 1}]}) == [{"id": 1}]
    assert extract_list({"errFlag": 0, "due_soon": [{"id": 9}]}, "due_soon") == [{"id": 9}]


def test_extract_list_null_data_is_empty():
    assert extract_list({"errFlag": 0, "data": None}) == []
    assert extract_list({"errFlag": 0}) == []


def test_extract_list_raises_on_error_flag():
    with pytest.raises(ApiResponseError):
        extract_list({"errFlag": 1, "message": "Invalid token"})


def test_extract_list_rejects_unexpected_shape():
    with pytest.raises(ApiConnectionError):
        extract_list("not json rows")


# ── Client ──


def test_build_path_fills_token_and_quotes_values(api_client):
    path = api_client.build_path("clients/change-status/{id}/{status}/{token}", id="7/8", status=0)
    assert path == f"clients/change-status/7%2F8/0/{TOKEN}"


def test_get_json_returns_decoded_body(api_client, backend):
    backend.add("GET", f"clients/get-all/{TOKEN}", [{"id": 1, "client_name": "Acme"}])

    assert api_client.get_json(f"clients/get-all/{TOKEN}") == [{"id": 1, "client_name": "Acme"}]
    assert backend.paths == [f"/clients/get-all/{TOKEN}"]


def test_get_json_http_error_status_raises_connection_error(api_client, backend):
    backend.add("GET", "brands/get-brands/x", {"message": "boom"}, status_code=500)

    with pytest.raises(ApiConnectionError) as exc:
        api_client.get_json("brands/get-brands/x")

    assert "500" in exc.value.message


def test_get_json_non_json_body_raises_connection_error(api_client, backend):
    backend.add_raw("GET", "units/get-units/x", httpx.Response(200, content=b"<html>oops</html>"))

    with pytest.raises(ApiConnectionError) as exc:
        api_client.get_json("units/get-units/x")

    assert exc.value.message == "Invalid response from server"


def test_get_json_network_failure_raises_connection_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = ApiClient(BASE_URL, token=TOKEN, transport=httpx.MockTransport(handler))
    with pytest.raises(ApiConnectionError) as exc:
        client.get_json("clients/get-all/x")

    assert "Cannot reach the server" in exc.value.message


def test_post_form_sends_multipart_with_token(api_client, backend, parse_form):
    backend.add("POST", "clients/add", {"errFlag": 0, "message": "Client added"})

    result = api_client.post_form("clients/add", {"client_name": "Acme", "credit_limit": 5000, "notes": None})

    assert result["message"] == "Client added"
    request = backend.requests[0]
    assert request.headers["content-type"].startswith("multipart/form-data")
    assert parse_form(request) == {
        "client_name": "Acme",
        "credit_limit": "5000",
        "notes": "",
        "token": TOKEN,
    }


def test_post_form_keeps_explicit_token(api_client, backend, parse_form):
    backend.add("POST", "dashboard/stats", {"errFlag": 0, "stats": {}})

    api_client.post_form("dashboard/stats", {"token": "other"})

    assert parse_form(backend.requests[0])["token"] == "other"


# ── Connection check ──


def test_check_connection_ok(api_client, backend):
    backend.add("GET", f"masters/get-table-counts/{TOKEN}", {"errFlag": 0, "counts": {}})
    assert check_connection(api_client) == (True, None)


def test_check_connection_server_refusal_still_counts_as_reachable(api_client, backend):
    backend.add("GET", f"masters/get-table-counts/{TOKEN}", {"errFlag": 1, "message": "Invalid token"})
    assert check_connection(api_client) == (True, None)


def test_check_connection_reports_http_failure(api_client, backend):
    backend.add("GET", f"masters/get-table-counts/{TOKEN}", {}, status_code=502)

    ok, error = check_connection(api_client)

    assert ok is False
    assert "502" in error


def test_check_connection_without_base_url():
    client = ApiClient("", token=TOKEN)
    assert check_connection(client) == (False, "API base URL is not configured")


# ── Singleton ──


def test_get_api_client_is_a_singleton(monkeypatch):
    monkeypatch.setitem(api.API_CONFIG, "base_url", BASE_URL)
    monkeypatch.setitem(api.API_CONFIG, "token", TOKEN)
    api.reset_api_client()
    try:
        first = api.get_api_client()
        assert api.get_api_client() is first
        assert first.base_url == BASE_URL
        assert first.token == TOKEN

        api.reset_api_client()
        assert api.get_api_client() is not first
    finally:
        api.reset_api_client()

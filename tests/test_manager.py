"""Unit tests for ResourceManager create / update / status toggle."""

import httpx
import pytest

from factory_admin.api import ApiConnectionError, ApiResponseError
from factory_admin.crud.manager import ResourceManager
from factory_admin.crud.queries import ResourceQueries

from conftest import TOKEN, VALID_CLIENT


@pytest.fixture
def clients(api_client):
    return ResourceManager("clients", client=api_client)


def test_create_posts_form_and_returns_server_message(clients, backend, parse_form):
    backend.add("POST", "clients/add", {"errFlag": 0, "message": "Client added successfully"})

    message = clients.create_record(VALID_CLIENT)

    assert message == "Client added successfully"
    assert backend.paths == ["/clients/add"]
    form = parse_form(backend.requests[0])
    assert form["client_name"] == "Acme Steel"
    assert form["billing_addr_pincode"] == "411001"
    assert form["token"] == TOKEN
    assert "client_id" not in form


def test_create_uses_default_message(clients, backend):
    backend.add("POST", "clients/add", {"errFlag": 0})
    assert clients.create_record(VALID_CLIENT) == "Clients record created"


def test_create_with_missing_required_field_sends_nothing(clients, backend):
    with pytest.raises(ValueError, match="Please fill required fields: GST Number"):
        clients.create_record(dict(VALID_CLIENT, gst_number="  "))

    assert backend.requests == []


def test_create_server_rejection_raises_with_message(clients, backend):
    backend.add("POST", "clients/add", {"errFlag": 1, "message": "Email already exists"})

    with pytest.raises(ApiResponseError) as exc:
        clients.create_record(VALID_CLIENT)

    assert exc.value.message == "Email already exists"


def test_create_http_failure_raises_connection_error(clients, backend):
    backend.add("POST", "clients/add", {}, status_code=503)

    with pytest.raises(ApiConnectionError):
        clients.create_record(VALID_CLIENT)


def test_create_not_supported_for_read_only_entity(api_client, backend):
    with pytest.raises(ValueError, match="cannot be created here"):
        ResourceManager("finished_goods", client=api_client).create_record({"product_name": "X"})

    assert backend.requests == []


def test_update_adds_entity_id_param(clients, backend, parse_form):
    backend.add("POST", "clients/update", {"errFlag": 0, "message": "Client updated"})

    assert clients.update_record(7, VALID_CLIENT) == "Client updated"

    form = parse_form(backend.requests[0])
    assert form["client_id"] == "7"
    assert form["email"] == "ravi@acme.in"


def test_update_requires_record_id(clients, backend):
    with pytest.raises(ValueError, match="Record id is required"):
        clients.update_record(None, VALID_CLIENT)
    with pytest.raises(ValueError):
        clients.update_record("  ", VALID_CLIENT)

    assert backend.requests == []


def test_toggle_status_sends_inverted_flag(clients, backend):
    backend.add("GET", f"clients/change-status/5/0/{TOKEN}", {"errFlag": 0, "message": "Status changed"})

    assert clients.toggle_status(5, 1) == 0
    assert backend.paths == [f"/clients/change-status/5/0/{TOKEN}"]


def test_toggle_status_activates_inactive_record(api_client, backend):
    backend.add("GET", f"vendors/change-vendor-status/3/1/{TOKEN}", {"errFlag": 0})

    assert ResourceManager("vendors", client=api_client).toggle_status(3, "0") == 1


def test_toggle_status_server_error(clients, backend):
    backend.add("GET", f"clients/change-status/5/1/{TOKEN}", {"errFlag": 1, "message": "Client not found"})

    with pytest.raises(ApiResponseError, match="Client not found"):
        clients.toggle_status(5, 0)


def test_toggle_status_not_available_without_status_flag(api_client, backend):
    with pytest.raises(ValueError, match="has no status toggle"):
        ResourceManager("orders", client=api_client).toggle_status(1, 1)

    assert backend.requests == []


def test_list_reflects_server_status_after_toggle(api_client, backend):
    stored = {"id": 5, "client_name": "Acme Steel", "status": "1"}

    def list_clients(request):
        return httpx.Response(200, json={"errFlag": 0, "data": [dict(stored)]})

    def change_status(request):
        stored["status"] = request.url.path.split("/")[-2]
        return httpx.Response(200, json={"errFlag": 0, "message": "Status changed"})

    backend.add_raw("GET", f"clients/get-all/{TOKEN}", list_clients)
    backend.add_raw("GET", f"clients/change-status/5/0/{TOKEN}", change_status)
    queries = ResourceQueries("clients", client=api_client)
    manager = ResourceManager("clients", client=api_client)

    before = queries.get_records()
    new_status = manager.toggle_status(5, before.loc[0, "status"])
    after = queries.get_records()

    assert new_status == 0
    assert after.loc[0, "status"] == 0
    assert after.loc[0, "status_label"] == "Inactive"
    assert backend.paths == [
        f"/clients/get-all/{TOKEN}",
        f"/clients/change-status/5/0/{TOKEN}",
        f"/clients/get-all/{TOKEN}",
    ]

"""Unit tests for ResourceQueries reads against an in-memory backend."""

import pytest

from factory_admin.crud.queries import ResourceQueries

from conftest import TOKEN


@pytest.fixture
def clients(api_client):
    return ResourceQueries("clients", client=api_client)


CLIENT_ROWS = [
    {"id": 1, "client_name": "Acme Steel", "status": "1"},
    {"id": 2, "clientName": "Blue Textiles", "status": "0"},
]


# ── Lists ──


def test_get_records_from_envelope(clients, backend):
    backend.add("GET", f"clients/get-all/{TOKEN}", {"errFlag": 0, "data": CLIENT_ROWS})

    df = clients.get_records()

    assert df["client_name"].tolist() == ["Acme Steel", "Blue Textiles"]
    assert df["status_label"].tolist() == ["Active", "Inactive"]
    assert clients.get_last_error() is None


def test_get_records_from_bare_array_with_custom_key(api_client, backend):
    backend.add("GET", f"vendors/get-vendors/{TOKEN}", [{"id": 3, "vendorName": "Steel Co", "status": 1}])

    df = ResourceQueries("vendors", client=api_client).get_records()

    assert df.loc[0, "vendor_name"] == "Steel Co"


def test_get_records_empty_list_is_not_an_error(clients, backend):
    backend.add("GET", f"clients/get-all/{TOKEN}", {"errFlag": 0, "data": []})

    df = clients.get_records()

    assert df is not None and df.empty
    assert clients.get_last_error() is None


def test_get_records_returns_none_on_http_failure(clients, backend):
    backend.add("GET", f"clients/get-all/{TOKEN}", {}, status_code=500)

    assert clients.get_records() is None
    assert "500" in clients.get_last_error()


def test_get_records_returns_none_on_error_flag(clients, backend):
    backend.add("GET", f"clients/get-all/{TOKEN}", {"errFlag": 1, "message": "Invalid token"})

    assert clients.get_records() is None
    assert clients.get_last_error() == "Invalid token"


# ── Details ──


def test_details_endpoint(api_client, backend):
    backend.add("GET", f"vendors/get-vendor-details/3/{TOKEN}",
                {"errFlag": 0, "data": {"id": 3, "vendorName": "Steel Co", "status": "1"}})

    record = ResourceQueries("vendors", client=api_client).get_record_details(3)

    assert record["vendor_name"] == "Steel Co"
    assert record["status"] == 1


def test_details_endpoint_with_list_data(api_client, backend):
    backend.add("GET", f"orders/get-details/12/{TOKEN}", {"errFlag": 0, "data": [{"id": 12, "orderCode": "ORD-12"}]})

    record = ResourceQueries("orders", client=api_client).get_record_details(12)

    assert record["order_code"] == "ORD-12"


def test_details_fall_back_to_list(clients, backend):
    backend.add("GET", f"clients/get-all/{TOKEN}", {"errFlag": 0, "data": CLIENT_ROWS})

    record = clients.get_record_details("2")

    assert record["client_name"] == "Blue Textiles"
    assert record["status"] == 0
    assert clients.get_record_details(99) is None


def test_details_failure_returns_none(api_client, backend):
    backend.add("GET", f"vendors/get-vendor-details/3/{TOKEN}", {"errFlag": 1, "message": "Vendor not found"})

    queries = ResourceQueries("vendors", client=api_client)

    assert queries.get_record_details(3) is None
    assert queries.get_last_error() == "Vendor not found"


# ── Related ──


def test_related_rows_nested_in_detail_record(api_client, backend):
    backend.add("GET", f"vendors/get-vendor-details/3/{TOKEN}", {
        "errFlag": 0,
        "data": {"id": 3, "raw_materials": [{"material_code": "RM1"}, {"material_code": "RM2"}]},
    })

    related = ResourceQueries("vendors", client=api_client).get_related_records(3)

    assert related["material_code"].tolist() == ["RM1", "RM2"]


def test_related_rows_at_top_level(clients, backend):
    backend.add("GET", f"dispatch-orders/get-by-customer/1/{TOKEN}",
                {"errFlag": 0, "data": [{"dispatch_id": "DSP-1", "grand_total": 100}]})

    related = clients.get_related_records(1)

    assert related["dispatch_id"].tolist() == ["DSP-1"]


def test_related_failure_is_empty(clients, backend):
    backend.add("GET", f"dispatch-orders/get-by-customer/1/{TOKEN}", {}, status_code=500)

    assert clients.get_related_records(1).empty


def test_related_without_related_list_makes_no_request(api_client, backend):
    assert ResourceQueries("units", client=api_client).get_related_records(1).empty
    assert backend.requests == []


def test_related_rows_read_from_the_record_itself(api_client, backend):
    record = {"id": 5, "po_number": "PO-5", "items": [
        {"po_id": 51, "alias": "Steel rod", "ordered_qty": "10", "received_qty": "4"},
    ]}

    related = ResourceQueries("purchase_orders", client=api_client).get_related_records(5, record)

    assert related["alias"].tolist() == ["Steel rod"]
    assert backend.requests == []


def test_related_rows_fetch_the_record_when_not_given(api_client, backend):
    backend.add("GET", f"vendor-stock-receipts/get-all/{TOKEN}", [
        {"id": 8, "grn_number": "GRN-8", "items": '[{"material_name": "Copper", "received_qty": 3}]'},
    ])

    related = ResourceQueries("vendor_receipts", client=api_client).get_related_records(8)

    assert related["material_name"].tolist() == ["Copper"]
    assert backend.paths == [f"/vendor-stock-receipts/get-all/{TOKEN}"]


# ── Lookups ──


def test_lookup_options_skip_inactive_and_disambiguate(clients, backend):
    backend.add("GET", f"client-types/get-client-types/{TOKEN}", {"errFlag": 0, "data": [
        {"id": 1, "type_name": "Retail", "status": 1},
        {"id": 2, "type_name": "Corporate", "status": "0"},
        {"id": 3, "typeName": "Retail", "status": "1"},
        {"id": 4, "type_name": "", "status": 1},
    ]})

    options = clients.get_lookup_options("client_types", "type_name")

    assert options == {"Retail": 1, "Retail (#3)": 3, "#4": 4}


def test_lookup_options_on_failure_are_empty(clients, backend):
    backend.add("GET", f"client-types/get-client-types/{TOKEN}", {}, status_code=500)

    assert clients.get_lookup_options("client_types") == {}
    assert "500" in clients.get_last_error()

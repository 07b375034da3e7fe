"""Unit tests for production batch helpers and reads."""

from datetime import date

import pandas as pd

from factory_admin.production import ProductionQueries
from factory_admin.production.common import (
    critical_batches,
    parse_raw_materials,
    prefill_from_order,
    production_stats,
)

from conftest import TOKEN

TODAY = date(2026, 10, 19)

BATCHES = pd.DataFrame([
    {"id": 1, "batch_code": "B-1", "batch_status": "in_progress", "expected_completion_date": "2026-10-17",
     "production_head_employee_id": 5, "completed_qty": 10, "updated_at": "2026-10-18 09:00:00"},
    {"id": 2, "batch_code": "B-2", "batch_status": "completed", "expected_completion_date": "2026-10-19",
     "production_head_employee_id": 5, "completed_qty": "40", "updated_at": "2026-10-19 15:30:00"},
    {"id": 3, "batch_code": "B-3", "batch_status": "pending", "expected_completion_date": "2026-10-19",
     "production_head_employee_id": 7, "completed_qty": None, "updated_at": None},
    {"id": 4, "batch_code": "B-4", "batch_status": "pending", "expected_completion_date": "2026-11-30",
     "production_head_employee_id": None, "completed_qty": 0, "updated_at": None},
    {"id": 5, "batch_code": "B-5", "batch_status": "COMPLETED", "expected_completion_date": "2026-10-01",
     "production_head_employee_id": 8, "completed_qty": 5.5, "updated_at": "2026-10-19"},
])


def test_critical_batches_are_due_and_not_completed():
    assert critical_batches(BATCHES, TODAY)["batch_code"].tolist() == ["B-1", "B-3"]


def test_critical_batches_without_due_dates():
    assert critical_batches(pd.DataFrame({"id": [1]}), TODAY).empty
    assert critical_batches(None, TODAY).empty


def test_production_stats():
    stats = production_stats(BATCHES, TODAY)

    assert stats == {"critical": 2, "completed_today": 2, "active_heads": 3, "units_today": 46}


def test_production_stats_empty():
    assert production_stats(pd.DataFrame(), TODAY) == {
        "critical": 0, "completed_today": 0, "active_heads": 0, "units_today": 0,
    }


def test_parse_raw_materials():
    materials = parse_raw_materials(
        '[{"raw_material_id": 3, "material_name": "Steel", "quantity": "2.5", "unit": "kg"}, "junk"]'
    )

    assert materials == [{"material_name": "Steel", "quantity": 2.5, "unit": "kg", "rawMaterialId": "3"}]
    assert parse_raw_materials("{not json") == []
    assert parse_raw_materials({"a": 1}) == []
    assert parse_raw_materials(None) == []


def test_prefill_from_sku_order():
    prefill = prefill_from_order({
        "id": 12, "product_sku_id": 4, "client_id": 9, "quantity": 100,
        "expected_delivery_date": "2026-11-01", "notes": "Rush",
    })

    assert prefill == {
        "ordersId": 12,
        "productId": 4,
        "clientId": 9,
        "quantity": 100,
        "expectedCompletionDate": date(2026, 11, 1),
        "productionNotes": "Rush",
    }


def test_prefill_from_custom_order():
    prefill = prefill_from_order({
        "id": 13, "product_sku_id": None, "clientId": 2, "quantity": 5,
        "raw_materials_json": [{"rawMaterialId": 7, "material_name": "Paint", "quantity": 1}],
    })

    assert prefill["productId"] is None
    assert prefill["clientId"] == 2
    assert prefill["expectedCompletionDate"] is None
    assert prefill["manualProduct"] == {
        "productName": "Custom Order Product",
        "rawMaterials": [{"material_name": "Paint", "quantity": 1.0, "unit": "", "rawMaterialId": "7"}],
    }


def test_get_order_for_batch(api_client, backend):
    backend.add("GET", f"orders/get-details/12/{TOKEN}",
                {"errFlag": 0, "data": [{"id": 12, "productSkuId": 4, "clientId": 9}]})

    order = ProductionQueries(client=api_client).get_order_for_batch(12)

    assert order["product_sku_id"] == 4
    assert order["client_id"] == 9


def test_get_order_for_batch_not_found(api_client, backend):
    backend.add("GET", f"orders/get-details/12/{TOKEN}", {"errFlag": 0, "data": []})

    queries = ProductionQueries(client=api_client)

    assert queries.get_order_for_batch(12) is None
    assert queries.get_last_error() == "Order not found"


def test_get_open_orders_excludes_closed(api_client, backend):
    backend.add("GET", f"orders/get-all/{TOKEN}", {"errFlag": 0, "data": [
        {"id": 1, "order_status": "pending"},
        {"id": 2, "order_status": "Completed"},
        {"id": 3, "order_status": "in_production"},
        {"id": 4, "order_status": "cancelled"},
        {"id": 5, "order_status": "delivered"},
    ]})

    orders = ProductionQueries(client=api_client).get_open_orders()

    assert orders["id"].tolist() == [1, 3]


def test_get_open_orders_on_failure(api_client, backend):
    backend.add("GET", f"orders/get-all/{TOKEN}", {}, status_code=500)

    assert ProductionQueries(client=api_client).get_open_orders().empty

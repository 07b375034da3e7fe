"""Consistency checks over the entity registry."""

import pytest

from factory_admin.crud.resources import (
    CREATE,
    GROUP_ADMIN,
    GROUP_CORE,
    GROUP_MASTER,
    GROUP_STOCK,
    UPDATE,
    get_resource,
    list_resources,
)

ALL = list_resources()


def test_registry_keys_are_unique_and_resolvable():
    keys = [spec.key for spec in ALL]
    assert len(keys) == len(set(keys))
    for key in keys:
        assert get_resource(key).key == key


def test_unknown_resource_raises_key_error():
    with pytest.raises(KeyError, match="Unknown resource"):
        get_resource("spaceships")


def test_groups():
    assert {spec.group for spec in ALL} == {GROUP_CORE, GROUP_MASTER, GROUP_ADMIN, GROUP_STOCK}
    master = {spec.key for spec in list_resources(GROUP_MASTER)}
    assert {"brands", "units", "stock_locations", "production_stages"} <= master
    assert "clients" not in master
    assert {spec.key for spec in list_resources(GROUP_ADMIN)} == {"admin_users", "admin_roles"}


@pytest.mark.parametrize("spec", ALL, ids=lambda s: s.key)
def test_paths_carry_placeholders(spec):
    assert "{token}" in spec.list_path
    if spec.status_path:
        for placeholder in ("{id}", "{status}", "{token}"):
            assert placeholder in spec.status_path
    if spec.details_path:
        assert "{id}" in spec.details_path
    if spec.related and spec.related.path:
        assert "{id}" in spec.related.path
    for path in (spec.add_path, spec.update_path):
        if path:
            assert "{" not in path


@pytest.mark.parametrize("spec", ALL, ids=lambda s: s.key)
def test_select_sources_exist(spec):
    for field_spec in spec.fields:
        if field_spec.options_source:
            assert get_resource(field_spec.options_source)
        if field_spec.kind == "select":
            assert field_spec.options or field_spec.options_source
        assert field_spec.option_value in ("id", "label")


@pytest.mark.parametrize("spec", ALL, ids=lambda s: s.key)
def test_editable_entities_have_form_fields(spec):
    if spec.can_create:
        assert spec.form_fields(CREATE)
    if spec.can_update:
        assert spec.form_fields(UPDATE)


def test_status_toggle_only_where_flag_and_endpoint_exist():
    assert get_resource("clients").can_toggle_status
    assert not get_resource("orders").can_toggle_status
    assert not get_resource("finished_goods").can_toggle_status
    assert not get_resource("finished_goods").can_create


def test_password_is_create_only():
    users = get_resource("admin_users")
    assert "password" in [f.name for f in users.form_fields(CREATE)]
    assert "password" not in [f.name for f in users.form_fields(UPDATE)]


def test_field_column_defaults_to_name():
    clients = get_resource("clients")
    assert all(f.column == f.name for f in clients.fields)
    vendor_name = get_resource("vendors").fields[0]
    assert (vendor_name.name, vendor_name.column) == ("vendorName", "vendor_name")


def test_stock_transactions_group():
    stock = {spec.key for spec in list_resources(GROUP_STOCK)}
    assert stock == {"vendor_receipts", "production_receipts", "fg_stock_adjustments"}


def test_stock_transaction_endpoints():
    receipts = get_resource("vendor_receipts")
    assert receipts.list_path == "vendor-stock-receipts/get-all/{token}"
    assert receipts.add_path == "vendor-stock-receipts/add"
    assert not receipts.can_update and not receipts.can_toggle_status

    production = get_resource("production_receipts")
    assert production.list_path == "production-receipts/get-all/{token}"
    assert production.add_path == "production-receipts/receive"
    assert production.update_path == "production-receipts/update"

    adjustments = get_resource("fg_stock_adjustments")
    assert adjustments.list_path == "finished-goods/get-fg-stock-adjustments/{token}"
    assert adjustments.add_path == "finished-goods/stock-adjust"
    assert not adjustments.can_update


def test_adjustment_type_defaults_to_increase():
    adjustment_type = next(f for f in get_resource("fg_stock_adjustments").fields
                           if f.name == "adjustmentType")
    assert adjustment_type.options == ["increase", "decrease"]
    assert adjustment_type.default == "increase"


def test_inline_related_lists_read_record_items():
    for key in ("vendor_receipts", "purchase_orders"):
        related = get_resource(key).related
        assert related.path is None
        assert related.list_key == "items"

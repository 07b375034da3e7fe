"""Unit tests for form validation and serialization."""

from datetime import date, datetime

import pytest

from factory_admin.crud.resources import CREATE, UPDATE, FieldSpec, get_resource
from factory_admin.crud.validators import (
    is_blank,
    next_status,
    serialize_form,
    serialize_value,
    validate_required,
)

from conftest import VALID_CLIENT


def test_is_blank():
    assert is_blank(None)
    assert is_blank("  ")
    assert is_blank(float("nan"))
    assert is_blank([])
    assert not is_blank(0)
    assert not is_blank("x")


def test_validate_required_accepts_complete_form():
    assert validate_required(get_resource("clients"), VALID_CLIENT) == (True, None)


def test_validate_required_lists_missing_labels():
    values = dict(VALID_CLIENT, client_name="", phone=None)

    ok, message = validate_required(get_resource("clients"), values)

    assert ok is False
    assert message == "Please fill required fields: Client Name, Phone"


def test_validate_required_checks_email_shape():
    ok, message = validate_required(get_resource("clients"), dict(VALID_CLIENT, email="not-an-email"))

    assert ok is False
    assert "Email" in message


def test_required_fields_depend_on_mode():
    locations = get_resource("stock_locations")
    create_values = {"aisle_no": "A", "num_racks": 2, "num_rows_per_rack": 3, "capacity": 100}

    assert validate_required(locations, create_values, CREATE) == (True, None)

    ok, message = validate_required(locations, create_values, UPDATE)
    assert ok is False
    assert "Rack" in message


@pytest.mark.parametrize("value, expected", [
    ('{"a": 1}', '{"a": 1}'),
    ({"productName": "X", "rawMaterials": []}, '{"productName": "X", "rawMaterials": []}'),
    ([], "[]"),
    ("", ""),
])
def test_serialize_json_field(value, expected):
    assert serialize_value(FieldSpec("payload", "Payload", "json"), value) == expected


def test_serialize_json_field_rejects_bad_json():
    with pytest.raises(ValueError, match="Payload must be valid JSON"):
        serialize_value(FieldSpec("payload", "Payload", "json"), "{not json")


def test_serialize_scalars():
    date_field = FieldSpec("due", "Due", "date")
    assert serialize_value(date_field, date(2026, 10, 19)) == "2026-10-19"
    assert serialize_value(date_field, datetime(2026, 10, 19, 8, 30)) == "2026-10-19"
    assert serialize_value(date_field, "2026-10-19 08:30:00") == "2026-10-19"

    assert serialize_value(FieldSpec("qty", "Qty", "int"), 3.0) == "3"
    assert serialize_value(FieldSpec("price", "Price", "number"), 2.5) == "2.5"
    assert serialize_value(FieldSpec("flag", "Flag"), True) == "1"
    assert serialize_value(FieldSpec("name", "Name"), "  Acme  ") == "Acme"
    assert serialize_value(FieldSpec("name", "Name"), None) == ""


def test_serialize_form_on_create_skips_absent_fields():
    form = serialize_form(get_resource("clients"), {"client_name": "Acme", "credit_limit": 5000.0})

    assert form == {"client_name": "Acme", "credit_limit": "5000.0"}


def test_serialize_form_on_update_adds_id_param():
    form = serialize_form(get_resource("clients"), {"client_name": "Acme"}, record_id=7)

    assert form == {"client_name": "Acme", "client_id": "7"}


def test_serialize_form_drops_fields_of_the_other_mode():
    values = {"aisle_no": "B", "num_racks": 2, "rack_no": "R1"}

    create_form = serialize_form(get_resource("stock_locations"), values)
    update_form = serialize_form(get_resource("stock_locations"), values, record_id=4)

    assert create_form == {"aisle_no": "B", "num_racks": "2"}
    assert update_form == {"aisle_no": "B", "rack_no": "R1", "location_id": "4"}


def test_next_status():
    assert next_status(1) == 0
    assert next_status("1") == 0
    assert next_status("0") == 1
    assert next_status(None) == 1

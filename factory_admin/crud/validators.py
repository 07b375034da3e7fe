# factory_admin/crud/validators.py
"""
Form validation and multipart serialization for entity forms

Only required-field presence (and email shape) is checked client-side;
everything else is the backend's call.
"""

import json
import logging
import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple

from ..common import SystemConstants, normalize_status, parse_date
from .resources import CREATE, UPDATE, FieldSpec, ResourceSpec

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r'\S+@\S+\.\S+')


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and value != value:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, dict, tuple)):
        return len(value) == 0
    return False


def validate_required(spec: ResourceSpec, values: Dict[str, Any],
                      mode: str = CREATE) -> Tuple[bool, Optional[str]]:
    """
    Check required fields of the form

    Returns:
        Tuple of (is_valid, error_message)
    """
    missing = []
    for field_spec in spec.required_fields(mode):
        value = values.get(field_spec.name)
        if is_blank(value):
            missing.append(field_spec.label)
            continue
        if field_spec.kind == 'email' and not EMAIL_PATTERN.fullmatch(str(value).strip()):
            return False, f"{field_spec.label} is not a valid email address"

    if missing:
        return False, "Please fill required fields: " + ", ".join(missing)

    return True, None


def serialize_value(field_spec: FieldSpec, value: Any) -> str:
    """
    Render one form value as a multipart string

    Raises:
        ValueError: JSON field holds text that is not valid JSON
    """
    if is_blank(value) and not isinstance(value, (list, dict)):
        return ''

    if field_spec.kind == 'json':
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except json.JSONDecodeError as e:
                raise ValueError(f"{field_spec.label} must be valid JSON ({e.msg})") from e
        return json.dumps(value)

    if field_spec.kind == 'date':
        if isinstance(value, (date, datetime)):
            return (value.date() if isinstance(value, datetime) else value).isoformat()
        parsed = parse_date(value)
        return parsed.isoformat() if parsed else str(value)

    if isinstance(value, bool):
        return '1' if value else '0'

    if field_spec.kind == 'int' and isinstance(value, (int, float, Decimal)):
        return str(int(value))

    if isinstance(value, float) and value.is_integer() and field_spec.kind != 'number':
        return str(int(value))

    return str(value).strip() if isinstance(value, str) else str(value)


def serialize_form(spec: ResourceSpec, values: Dict[str, Any],
                   record_id: Any = None) -> Dict[str, str]:
    """
    Turn form values into backend form fields

    On update (record_id given) the entity's id parameter is added.
    """
    mode = UPDATE if record_id is not None else CREATE
    form = {}
    for field_spec in spec.form_fields(mode):
        if field_spec.name not in values:
            continue
        form[field_spec.name] = serialize_value(field_spec, values[field_spec.name])

    if record_id is not None:
        form[spec.id_param] = str(record_id)

    return form


def next_status(current: Any) -> int:
    """Inverse of the current 0/1 status flag"""
    if normalize_status(current) == SystemConstants.STATUS_ACTIVE:
        return SystemConstants.STATUS_INACTIVE
    return SystemConstants.STATUS_ACTIVE

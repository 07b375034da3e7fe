# factory_admin/crud/forms.py
"""
Form components for entity records
Create and Edit forms built from the resource's FieldSpec list

Version: 1.1.0
Changes:
- v1.1.0: Prefill values (e.g. production batch started from an order)
- Fields rendered inside st.form() so typing does not rerun the page
"""

import json
import logging
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

import streamlit as st

from ..api import ApiError, GENERIC_ERROR_MESSAGE
from ..common import camel_to_snake, parse_date, pick, show_toast
from .manager import ResourceManager
from .queries import load_lookup_options
from .resources import CREATE, UPDATE, FieldSpec, ResourceSpec

logger = logging.getLogger(__name__)

_EMPTY_OPTION = ''


def initial_value(field_spec: FieldSpec, record: Optional[Dict[str, Any]] = None,
                  prefill: Optional[Dict[str, Any]] = None) -> Any:
    """Value a field starts with: prefill, then the record, then the field default"""
    if prefill and field_spec.name in prefill:
        return prefill[field_spec.name]
    if record:
        value = pick(record, field_spec.column, field_spec.name, camel_to_snake(field_spec.name))
        if value is not None:
            return value
    return field_spec.default


def _select_options(field_spec: FieldSpec, current: Any) -> Tuple[List[str], Dict[str, Any], int]:
    """
    Labels, label->submitted value map and the index of the current value
    """
    if field_spec.options_source:
        lookup = load_lookup_options(field_spec.options_source, field_spec.option_label)
        if field_spec.option_value == 'label':
            mapping = {label: label for label in lookup}
        else:
            mapping = dict(lookup)
    else:
        mapping = {str(o): o for o in (field_spec.options or [])}

    labels = list(mapping.keys())
    if current is not None and str(current) != '' and \
            not any(str(v) == str(current) for v in mapping.values()):
        # Keep an inactive or unknown current value selectable
        labels.append(str(current))
        mapping[str(current)] = current

    labels = [_EMPTY_OPTION] + labels if not field_spec.required or not labels else labels

    index = 0
    for i, label in enumerate(labels):
        if label != _EMPTY_OPTION and current is not None and str(mapping.get(label)) == str(current):
            index = i
            break
    return labels, mapping, index


def render_field(field_spec: FieldSpec, current: Any, key: str) -> Any:
    """Render one widget and return the entered value"""
    label = f"{field_spec.label} *" if field_spec.required else field_spec.label

    if field_spec.kind == 'textarea':
        return st.text_area(label, value='' if current is None else str(current),
                            help=field_spec.help, key=key)

    if field_spec.kind == 'json':
        if isinstance(current, (list, dict)):
            current = json.dumps(current, indent=2)
        return st.text_area(label, value='' if current is None else str(current),
                            help=field_spec.help, height=120, key=key)

    if field_spec.kind == 'number':
        try:
            value = float(current) if current not in (None, '') else 0.0
        except (TypeError, ValueError):
            value = 0.0
        return st.number_input(label, value=value, step=1.0, format="%.2f",
                               help=field_spec.help, key=key)

    if field_spec.kind == 'int':
        try:
            value = int(float(current)) if current not in (None, '') else 0
        except (TypeError, ValueError):
            value = 0
        return st.number_input(label, value=value, step=1, min_value=0,
                               help=field_spec.help, key=key)

    if field_spec.kind == 'date':
        value = parse_date(current)
        if value is None and field_spec.required:
            value = date.today()
        return st.date_input(label, value=value, help=field_spec.help, key=key)

    if field_spec.kind == 'select':
        labels, mapping, index = _select_options(field_spec, current)
        if not labels:
            st.selectbox(label, options=['(no options available)'], disabled=True, key=key)
            return None
        chosen = st.selectbox(label, options=labels, index=index, help=field_spec.help, key=key)
        return None if chosen == _EMPTY_OPTION else mapping.get(chosen)

    return st.text_input(label, value='' if current is None else str(current),
                         help=field_spec.help, key=key)


class ResourceForms:
    """Create / Edit form for one entity"""

    def __init__(self, resource: ResourceSpec):
        self.resource = resource
        self.manager = ResourceManager(resource)

    def render(self, mode: str = CREATE, record: Optional[Dict[str, Any]] = None,
               prefill: Optional[Dict[str, Any]] = None) -> bool:
        """
        Render the form and submit on save

        Returns:
            True when the record was saved
        """
        spec = self.resource
        record_id = pick(record, spec.id_field, 'id') if record else None
        form_key = f"{spec.key}_{mode}_form_{record_id or 'new'}"
        fields = spec.form_fields(mode)

        st.caption("Fields marked * are required")

        values = {}
        with st.form(key=form_key, clear_on_submit=False):
            short_fields = [f for f in fields if f.kind not in ('textarea', 'json')]
            long_fields = [f for f in fields if f.kind in ('textarea', 'json')]

            columns = st.columns(2)
            for i, field_spec in enumerate(short_fields):
                with columns[i % 2]:
                    values[field_spec.name] = render_field(
                        field_spec,
                        initial_value(field_spec, record, prefill),
                        key=f"{form_key}_{field_spec.name}",
                    )

            # Addresses, notes and JSON take the full width
            for field_spec in long_fields:
                values[field_spec.name] = render_field(
                    field_spec,
                    initial_value(field_spec, record, prefill),
                    key=f"{form_key}_{field_spec.name}",
                )

            st.markdown("---")
            btn_col1, btn_col2 = st.columns(2)
            with btn_col1:
                save_btn = st.form_submit_button(
                    "💾 Save" if mode == UPDATE else "➕ Create",
                    type="primary",
                    use_container_width=True,
                )
            with btn_col2:
                cancel_btn = st.form_submit_button("❌ Cancel", use_container_width=True)

        if cancel_btn:
            st.rerun()

        if save_btn:
            return self._handle_save(mode, record_id, values)
        return False

    def _handle_save(self, mode: str, record_id: Any, values: Dict[str, Any]) -> bool:
        try:
            if mode == UPDATE:
                message = self.manager.update_record(record_id, values)
            else:
                message = self.manager.create_record(values)
        except ValueError as e:
            show_toast(str(e), "error")
            return False
        except ApiError as e:
            show_toast(e.message or GENERIC_ERROR_MESSAGE, "error")
            return False
        except Exception as e:
            logger.error(f"Error saving {self.resource.key}: {e}", exc_info=True)
            show_toast(GENERIC_ERROR_MESSAGE, "error")
            return False

        st.session_state[f"{self.resource.key}_flash"] = f"✅ {message}"
        return True

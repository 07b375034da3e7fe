# factory_admin/crud/dialogs.py
"""
Dialog components for entity screens
Detail, Create, Edit and Status dialogs

Version: 1.1.0
Changes:
- v1.1.0: Detail dialog shows the related list (dispatches, materials, stages)
"""

import logging
from typing import Any, Dict, Optional

import streamlit as st

from ..api import ApiError, GENERIC_ERROR_MESSAGE
from ..common import SystemConstants, create_status_indicator, format_date, normalize_status, pick, show_toast
from .forms import ResourceForms
from .listing import build_display_frame
from .manager import ResourceManager
from .queries import ResourceQueries
from .resources import CREATE, UPDATE, get_resource

logger = logging.getLogger(__name__)

_HIDDEN_DETAIL_KEYS = {'password', 'token', 'status_label'}


# ==================== Detail Dialog ====================

@st.dialog("👁️ Record Details", width="large")
def show_detail_dialog(resource_key: str, record_id: Any, fallback: Optional[Dict[str, Any]] = None):
    """
    Show record details with the related list

    Args:
        resource_key: Registry key
        record_id: Server id of the record
        fallback: List row to show when the details call fails
    """
    spec = get_resource(resource_key)
    queries = ResourceQueries(spec)
    record = queries.get_record_details(record_id) or fallback

    if not record:
        st.error(f"❌ {queries.get_last_error() or 'Record not found'}")
        return

    col1, col2 = st.columns([3, 1])
    with col1:
        st.markdown(f"### {spec.icon} {pick(record, spec.name_column, default=f'#{record_id}')}")
    with col2:
        if spec.status_column and spec.status_column in record:
            st.markdown(f"**{create_status_indicator(record[spec.status_column])}**")

    st.markdown("---")

    # Configured columns first, then everything else the server sent
    labels = {field.column: field.label for field in spec.fields}
    labels.update(spec.columns)
    shown = set()
    col1, col2 = st.columns(2)
    items = [(k, record.get(k)) for k in labels if k in record] + \
            [(k, v) for k, v in record.items() if k not in labels]
    i = 0
    for key, value in items:
        if key in shown or key in _HIDDEN_DETAIL_KEYS or isinstance(value, (list, dict)):
            continue
        # camelCase originals duplicate their snake_case alias
        if any(c.isupper() for c in key):
            continue
        shown.add(key)
        label = labels.get(key, key.replace('_', ' ').title())
        if key.endswith('_at') or key.endswith('_date'):
            value = format_date(value) or value
        with (col1 if i % 2 == 0 else col2):
            st.write(f"• **{label}:** {'' if value is None else value}")
        i += 1

    if spec.related:
        st.markdown("---")
        st.markdown(f"**{spec.related.title}**")
        related_df = queries.get_related_records(record_id, record)
        if related_df.empty:
            st.info(f"📭 No {spec.related.title.lower()} found")
        else:
            st.dataframe(
                build_display_frame(related_df, spec.related.columns),
                use_container_width=True,
                hide_index=True,
            )

    st.markdown("---")
    if st.button("Close", use_container_width=True, key=f"{spec.key}_detail_close"):
        st.rerun()


# ==================== Create / Edit Dialogs ====================

@st.dialog("➕ New Record", width="large")
def show_create_dialog(resource_key: str, prefill: Optional[Dict[str, Any]] = None):
    """Create form; prefill seeds field values"""
    spec = get_resource(resource_key)
    st.markdown(f"### {spec.icon} New {spec.title}")

    if ResourceForms(spec).render(CREATE, prefill=prefill):
        st.rerun()


@st.dialog("✏️ Edit Record", width="large")
def show_edit_dialog(resource_key: str, record: Dict[str, Any]):
    """Edit form pre-populated from the selected row"""
    spec = get_resource(resource_key)
    record_id = pick(record, spec.id_field, 'id')
    st.markdown(f"### {spec.icon} Edit {pick(record, spec.name_column, default=f'#{record_id}')}")

    if ResourceForms(spec).render(UPDATE, record=record):
        st.rerun()


# ==================== Status Dialog ====================

@st.dialog("🔄 Change Status")
def show_status_dialog(resource_key: str, record_id: Any, record_name: str, current_status: Any):
    """Confirm, then send the inverted status flag"""
    spec = get_resource(resource_key)
    manager = ResourceManager(spec)

    action = "Deactivate" if normalize_status(current_status) == SystemConstants.STATUS_ACTIVE else "Activate"
    st.markdown(f"{action} **{record_name}**?")
    st.caption(f"Current status: {create_status_indicator(current_status)}")

    col1, col2 = st.columns(2)
    with col1:
        if st.button(f"✅ {action}", type="primary", use_container_width=True,
                     key=f"{spec.key}_status_confirm"):
            try:
                manager.toggle_status(record_id, current_status)
                st.session_state[f"{spec.key}_flash"] = f"✅ {record_name} {action.lower()}d"
                st.rerun()
            except ApiError as e:
                show_toast(e.message or GENERIC_ERROR_MESSAGE, "error")
            except ValueError as e:
                show_toast(str(e), "error")
            except Exception as e:
                logger.error(f"Error changing status of {spec.key} #{record_id}: {e}", exc_info=True)
                show_toast(GENERIC_ERROR_MESSAGE, "error")

    with col2:
        if st.button("❌ Cancel", use_container_width=True, key=f"{spec.key}_status_cancel"):
            st.rerun()


# ==================== Flash Message ====================

def show_flash(resource_key: str):
    """Success message left by a dialog before its rerun"""
    message = st.session_state.pop(f"{resource_key}_flash", None)
    if message:
        st.toast(message, icon="✅")
        st.success(message)


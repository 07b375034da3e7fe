# factory_admin/crud/page.py
"""
Main UI orchestrator for entity screens
Renders stats, filters, list and actions for one registry entry

Version: 1.2.0
Changes:
- v1.2.0: on_loaded hook so pages can add cards between stats and list
- v1.1.0: Page resets to 1 whenever search or filters change
"""

import logging
from typing import Any, Callable, Dict, Optional

import pandas as pd
import streamlit as st

from ..common import SystemConstants, pick
from ..config import APP_CONFIG
from .dashboard import render_dashboard
from .dialogs import (
    show_create_dialog, show_detail_dialog,
    show_edit_dialog, show_flash, show_status_dialog,
)
from .listing import (
    apply_filters, apply_search, build_display_frame, clamp_page, filter_options,
    frame_to_records, paginate,
)
from .queries import ResourceQueries
from .resources import ResourceSpec, get_resource

logger = logging.getLogger(__name__)


# ==================== Session State ====================

def _state_key(spec: ResourceSpec, name: str) -> str:
    return f"{spec.key}_{name}"


def _init_session_state(spec: ResourceSpec):
    """Initialize session state for one entity tab"""
    defaults = {
        _state_key(spec, 'page'): 1,
        _state_key(spec, 'selected_idx'): None,
        _state_key(spec, 'filter_signature'): None,
    }

    for key, value in defaults.items():
        st.session_state.setdefault(key, value)


# ==================== Filter Bar ====================

def _render_filter_bar(spec: ResourceSpec, df: pd.DataFrame) -> Dict[str, Any]:
    """
    Render search box and dropdown filters

    Returns:
        Dictionary with 'search' and 'selections'
    """
    cols = st.columns([2] + [1] * len(spec.filters)) if spec.filters else [st.container()]

    with cols[0]:
        search = st.text_input(
            "🔍 Search",
            placeholder=", ".join(c.replace('_', ' ') for c in spec.search_columns[:3]) + "...",
            key=_state_key(spec, 'filter_search'),
        )

    selections = {}
    for col, filter_spec in zip(cols[1:], spec.filters):
        with col:
            selections[filter_spec.column] = st.selectbox(
                filter_spec.label,
                options=filter_options(df, filter_spec.column, filter_spec.options),
                key=_state_key(spec, f"filter_{filter_spec.column}"),
            )

    # New search or filter starts from the first page
    signature = (search, tuple(sorted(selections.items())))
    if st.session_state[_state_key(spec, 'filter_signature')] != signature:
        st.session_state[_state_key(spec, 'filter_signature')] = signature
        st.session_state[_state_key(spec, 'page')] = 1
        st.session_state[_state_key(spec, 'selected_idx')] = None

    return {
        'search': search or None,
        'selections': {k: (None if v == SystemConstants.ALL_OPTION else v) for k, v in selections.items()},
    }


# ==================== Action Bar ====================

def _render_action_bar(spec: ResourceSpec):
    col1, col2, _ = st.columns([1, 1, 3])

    with col1:
        if spec.can_create and st.button(f"➕ Add {spec.title}", type="primary",
                                         use_container_width=True, key=_state_key(spec, 'btn_add')):
            show_create_dialog(spec.key)

    with col2:
        if st.button("🔄 Refresh", use_container_width=True, key=_state_key(spec, 'btn_refresh')):
            st.session_state[_state_key(spec, 'selected_idx')] = None
            st.rerun()


# ==================== Record List ====================

def _render_record_list(spec: ResourceSpec, df: pd.DataFrame, filters: Dict[str, Any]):
    """Render record list with single row selection"""
    page_size = APP_CONFIG.get('PAGE_SIZE') or SystemConstants.DEFAULT_PAGE_SIZE
    page_key = _state_key(spec, 'page')
    selected_key = _state_key(spec, 'selected_idx')

    filtered = apply_search(df, filters['search'], spec.search_columns)
    filtered = apply_filters(filtered, filters['selections'])

    if filtered is None or filtered.empty:
        st.info(f"📭 No {spec.title.lower()} found")
        return

    page_df, total_pages = paginate(filtered, st.session_state[page_key], page_size)
    page = clamp_page(st.session_state[page_key], total_pages)
    st.session_state[page_key] = page
    page_df = page_df.reset_index(drop=True)

    display_df = build_display_frame(page_df, spec.columns)
    display_df.insert(0, 'Select', False)
    selected_idx = st.session_state[selected_key]
    if selected_idx is not None and selected_idx < len(display_df):
        display_df.loc[selected_idx, 'Select'] = True

    edited_df = st.data_editor(
        display_df,
        use_container_width=True,
        hide_index=True,
        disabled=[c for c in display_df.columns if c != 'Select'],
        column_config={
            'Select': st.column_config.CheckboxColumn(
                '✓',
                help='Select row to perform actions',
                default=False,
                width='small'
            )
        },
        key=_state_key(spec, 'table_editor'),
    )

    # Handle single selection - keep only the newest tick
    selected_indices = edited_df[edited_df['Select'] == True].index.tolist()
    if selected_indices:
        if len(selected_indices) > 1:
            new_selection = [idx for idx in selected_indices if idx != selected_idx]
            if new_selection:
                st.session_state[selected_key] = new_selection[0]
                st.rerun()
        else:
            st.session_state[selected_key] = selected_indices[0]
    else:
        st.session_state[selected_key] = None

    if st.session_state[selected_key] is not None and st.session_state[selected_key] < len(page_df):
        _render_row_actions(spec, frame_to_records(page_df.iloc[[st.session_state[selected_key]]])[0])
    else:
        st.info("💡 Tick checkbox to select a record and perform actions")

    # Pagination
    st.markdown("---")
    col1, col2, col3 = st.columns([1, 2, 1])

    with col1:
        if st.button("⬅️ Previous", disabled=page <= 1, key=_state_key(spec, 'btn_prev_page')):
            st.session_state[page_key] = max(1, page - 1)
            st.session_state[selected_key] = None
            st.rerun()

    with col2:
        st.markdown(
            f"<div style='text-align:center'>Page {page} of {total_pages} | Total: {len(filtered)} records</div>",
            unsafe_allow_html=True
        )

    with col3:
        if st.button("Next ➡️", disabled=page >= total_pages, key=_state_key(spec, 'btn_next_page')):
            st.session_state[page_key] = page + 1
            st.session_state[selected_key] = None
            st.rerun()


def _render_row_actions(spec: ResourceSpec, record: Dict[str, Any]):
    record_id = pick(record, spec.id_field, 'id')
    name = pick(record, spec.name_column, default=f"#{record_id}")

    st.markdown("---")
    st.markdown(f"**Selected:** `{name}`")

    col1, col2, col3, _ = st.columns([1, 1, 1, 2])

    with col1:
        if st.button("👁️ View", type="primary", use_container_width=True, key=_state_key(spec, 'btn_view')):
            show_detail_dialog(spec.key, record_id, record)

    with col2:
        if st.button("✏️ Edit", use_container_width=True, key=_state_key(spec, 'btn_edit'),
                     disabled=not spec.can_update):
            show_edit_dialog(spec.key, record)

    with col3:
        if spec.can_toggle_status:
            current = record.get(spec.status_column)
            label = "⛔ Deactivate" if current == SystemConstants.STATUS_ACTIVE else "✅ Activate"
            if st.button(label, use_container_width=True, key=_state_key(spec, 'btn_status')):
                show_status_dialog(spec.key, record_id, str(name), current)


# ==================== Main Render Function ====================

def render_resource_tab(resource_key: str, show_title: bool = True,
                        on_loaded: Optional[Callable[[pd.DataFrame], None]] = None) -> Optional[pd.DataFrame]:
    """
    Render one entity screen: stats, filters, actions, list

    Args:
        resource_key: Registry key
        show_title: Render the subheader
        on_loaded: Called with the full list between the stats row and the filters

    Returns:
        The fetched list (None when the server could not be read)
    """
    spec = get_resource(resource_key)
    _init_session_state(spec)

    if show_title:
        st.subheader(f"{spec.icon} {spec.title}")

    show_flash(spec.key)

    queries = ResourceQueries(spec)
    records = queries.get_records()

    if records is None:
        error_msg = queries.get_last_error() or "Cannot connect to server"
        st.error(f"🔌 **Could not load {spec.title.lower()}**\n\n{error_msg}")
        df = pd.DataFrame()
    else:
        df = records

    render_dashboard(spec, df)

    if on_loaded is not None:
        on_loaded(df)

    filters = _render_filter_bar(spec, df)
    _render_action_bar(spec)
    _render_record_list(spec, df, filters)

    return records

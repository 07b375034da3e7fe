# factory_admin/production/page.py
"""
Production tab
Batch list with critical-batch card and "Start from Order" handoff

Version: 1.1.0
Changes:
- v1.1.0: Start a batch from a customer order (form pre-filled from the order)
"""

import logging
from datetime import date

import pandas as pd
import streamlit as st

from ..common import create_status_indicator, format_date, format_number, pick
from ..crud.dialogs import show_create_dialog
from ..crud.listing import frame_to_records
from ..crud.page import render_resource_tab
from .common import critical_batches, prefill_from_order, production_stats
from .queries import ProductionQueries

logger = logging.getLogger(__name__)


# ==================== Critical Batches ====================

def _render_production_summary(df: pd.DataFrame):
    """Today's numbers and the batches that are due or overdue"""
    today = date.today()
    stats = production_stats(df, today)

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("🚨 Critical", format_number(stats['critical'], 0),
                  help="Due today or overdue, not completed")
    with col2:
        st.metric("✔️ Completed Today", format_number(stats['completed_today'], 0))
    with col3:
        st.metric("👷 Production Heads", format_number(stats['active_heads'], 0))
    with col4:
        st.metric("📦 Units Today", format_number(stats['units_today'], 0))

    critical = critical_batches(df, today)
    if critical.empty:
        return

    with st.expander(f"🚨 Critical Batches ({len(critical)})", expanded=True):
        rows = []
        for record in critical.to_dict('records'):
            due = format_date(record.get('expected_completion_date'))
            rows.append({
                'Batch': pick(record, 'batch_code', 'id', default=''),
                'Product': pick(record, 'product_name', default=''),
                'Due': due,
                'Progress': create_status_indicator(record.get('batch_status')),
                'Qty': format_number(pick(record, 'quantity', default=0), 0),
            })
        st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)


# ==================== Start from Order ====================

def _order_label(record: dict) -> str:
    code = pick(record, 'order_code', 'id', default='')
    client = pick(record, 'client_name', default='-')
    product = pick(record, 'product_name', default='Custom product')
    return f"{code} | {client} | {product}"


def _render_start_from_order(queries: ProductionQueries):
    with st.expander("🧾 Start from Order", expanded=False):
        orders = queries.get_open_orders()
        if orders.empty:
            st.info("📭 No open orders")
            return

        records = frame_to_records(orders)
        labels = [_order_label(r) for r in records]

        col1, col2 = st.columns([3, 1])
        with col1:
            choice = st.selectbox("Order", options=range(len(labels)),
                                  format_func=lambda i: labels[i],
                                  key="production_start_order")
        with col2:
            st.write("")
            start = st.button("🏭 Start Batch", type="primary", use_container_width=True,
                              key="btn_production_start_order")

        if start:
            selected = records[choice]
            order_id = pick(selected, 'id')
            order = queries.get_order_for_batch(order_id) or selected
            logger.info(f"🏭 Starting batch from order {order_id}")
            show_create_dialog('production_batches', prefill_from_order(order))


# ==================== Main Render Function ====================

def render_production_tab():
    """Main function to render the Production tab"""
    queries = ProductionQueries()
    _render_start_from_order(queries)
    render_resource_tab('production_batches', on_loaded=_render_production_summary)

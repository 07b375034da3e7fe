# factory_admin/stock/page.py
"""
Stock Transactions
Production receipts, vendor receipts and finished-goods adjustments, plus
the received-quantity update on purchase-order items
"""

import logging

import pandas as pd
import streamlit as st

from ..api import ApiError, GENERIC_ERROR_MESSAGE
from ..common import create_status_indicator, format_number, pick
from ..crud.listing import frame_to_records
from ..crud.page import render_resource_tab
from ..layout import render_tabs
from .common import po_item_rows
from .manager import StockManager

logger = logging.getLogger(__name__)

STOCK_TABS = [
    ("🏭 Production Receipt", 'production_receipts'),
    ("📥 Receive From Vendor", 'vendor_receipts'),
    ("⚖️ FG Stock Adjustment", 'fg_stock_adjustments'),
]


# ==================== Received Quantity ====================

def render_received_qty_panel(df: pd.DataFrame):
    """Pick a purchase order and item, then send its new received quantity"""
    if df is None or df.empty:
        return

    with st.expander("📥 Update Received Quantity", expanded=False):
        orders = [po for po in frame_to_records(df) if po_item_rows(po)]
        if not orders:
            st.info("📭 No purchase order items to update")
            return

        col1, col2 = st.columns(2)
        with col1:
            po_index = st.selectbox(
                "Purchase Order", options=range(len(orders)),
                format_func=lambda i: f"{pick(orders[i], 'po_number', 'id', default='')} | "
                                      f"{pick(orders[i], 'vendor_name', default='-')}",
                key="stock_received_po",
            )
        items = po_item_rows(orders[po_index])
        with col2:
            item_index = st.selectbox(
                "Item", options=range(len(items)),
                format_func=lambda i: items[i]['material'],
                key="stock_received_item",
            )
        item = items[item_index]

        st.caption(
            f"Ordered {format_number(item['ordered_qty'], 2)} | "
            f"Received {format_number(item['received_qty'], 2)} | "
            f"Pending {format_number(item['pending_qty'], 2)} | "
            f"{create_status_indicator(item['item_status'])}"
        )

        with st.form("stock_received_qty_form"):
            qty = st.number_input("Received Quantity", min_value=0.0,
                                  value=float(item['received_qty']), step=1.0)
            submitted = st.form_submit_button("💾 Update", type="primary", use_container_width=True)

        if submitted:
            try:
                message = StockManager().update_received_qty(item['id'], qty)
                st.session_state["purchase_orders_flash"] = f"✅ {message}"
                st.rerun()
            except ApiError as e:
                st.error(f"❌ {e.message or GENERIC_ERROR_MESSAGE}")
            except ValueError as e:
                st.error(f"❌ {e}")


# ==================== Main Render Function ====================

def render_stock_transactions():
    """One tab per stock transaction list"""
    render_tabs([
        (label, lambda key=key: render_resource_tab(key, show_title=False))
        for label, key in STOCK_TABS
    ])

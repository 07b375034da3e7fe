# factory_admin/stock/__init__.py
"""
Stock Module
Stock receipts, finished-goods adjustments and PO received quantities

Components:
- common.py: Purchase-order item rows
- manager.py: Received-quantity update (StockManager)
- page.py: Stock Transactions tabs and the PO received-quantity panel
"""

from .common import po_item_rows
from .manager import StockManager
from .page import render_received_qty_panel, render_stock_transactions

__all__ = [
    'po_item_rows',
    'StockManager',
    'render_received_qty_panel',
    'render_stock_transactions',
]

# factory_admin/production/queries.py
"""
Backend reads for the Production screen
Batches list plus the customer orders a batch can be started from
"""

import logging
from typing import Any, Dict, Optional

import pandas as pd

from ..api import ApiClient, ApiError, ensure_ok
from ..common import normalize_record
from ..crud.queries import ResourceQueries
from ..crud.resources import get_resource

logger = logging.getLogger(__name__)

_CLOSED_ORDER_STATUSES = {'completed', 'cancelled', 'delivered'}


class ProductionQueries(ResourceQueries):
    """Production batch reads"""

    def __init__(self, client: Optional[ApiClient] = None):
        super().__init__('production_batches', client)
        self.orders = get_resource('orders')

    def get_order_for_batch(self, order_id: Any) -> Optional[Dict[str, Any]]:
        """Full order record (orders/get-details) used to prefill a batch"""
        try:
            path = self.client.build_path(self.orders.details_path, id=order_id)
            payload = ensure_ok(self.client.get_json(path))
        except ApiError as e:
            self._last_error = e.message
            logger.error(f"Error getting order {order_id} for batch: {e.message}")
            return None

        data = payload.get('data') if isinstance(payload, dict) else payload
        if isinstance(data, list):
            data = data[0] if data else None
        if not isinstance(data, dict):
            self._last_error = "Order not found"
            return None
        return normalize_record(data, status_column=None)

    def get_open_orders(self) -> pd.DataFrame:
        """Orders not yet completed or cancelled; empty on failure"""
        orders = ResourceQueries(self.orders, self._client).get_records()
        if orders is None or orders.empty:
            return pd.DataFrame()

        if 'order_status' in orders.columns:
            closed = orders['order_status'].astype(str).str.strip().str.lower().isin(_CLOSED_ORDER_STATUSES)
            orders = orders[~closed]
        return orders

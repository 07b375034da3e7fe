# factory_admin/stock/manager.py
"""
Stock Manager - received quantity on purchase-order items

Validation failures raise ValueError before any request is sent.
"""

import logging
from typing import Any, Optional

from ..api import ApiClient, ensure_ok, get_api_client

logger = logging.getLogger(__name__)

UPDATE_RECEIVED_QTY_PATH = 'purchase-orders/item/update-received-qty'


class StockManager:
    """Stock writes that are not plain entity forms"""

    def __init__(self, client: Optional[ApiClient] = None):
        self._client = client

    @property
    def client(self) -> ApiClient:
        return self._client or get_api_client()

    def update_received_qty(self, po_item_id: Any, received_qty: Any) -> str:
        """
        Set the received quantity of one purchase-order item

        Returns:
            Server message

        Raises:
            ValueError: missing item id, or quantity not a number >= 0
            ApiError: request failed or server returned errFlag != 0
        """
        if po_item_id is None or str(po_item_id).strip() == '':
            raise ValueError("Purchase order item is required")

        try:
            qty = float(received_qty)
        except (TypeError, ValueError):
            raise ValueError("Received quantity must be a number") from None
        if qty < 0:
            raise ValueError("Received quantity cannot be negative")

        payload = ensure_ok(self.client.post_form(UPDATE_RECEIVED_QTY_PATH, {
            'poItemId': po_item_id,
            'receivedQty': int(qty) if qty.is_integer() else qty,
        }))

        message = payload.get('message') if isinstance(payload, dict) else None
        logger.info(f"📥 PO item #{po_item_id} received qty -> {qty}")
        return str(message or "Item received quantity has been updated")

# factory_admin/stock/common.py
"""
Stock transaction helpers
Purchase-order line items in the shape the received-quantity form uses
"""

import json
import logging
from typing import Any, Dict, List, Optional

from ..common import pick

logger = logging.getLogger(__name__)


def _to_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def po_item_rows(po_record: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Line items of one purchase order

    Items may arrive as a list or as a JSON string. Items without an id
    cannot be updated and are skipped.
    """
    if not po_record:
        return []

    items = po_record.get('items')
    if isinstance(items, str):
        try:
            items = json.loads(items)
        except ValueError:
            logger.warning(f"PO {po_record.get('po_number')} items are not valid JSON")
            return []
    if not isinstance(items, list):
        return []

    rows = []
    for item in items:
        if not isinstance(item, dict):
            continue
        item_id = pick(item, 'id', 'po_item_id', 'po_id')
        if item_id is None:
            continue
        ordered = _to_float(pick(item, 'ordered_qty', 'quantity', default=0))
        received = _to_float(pick(item, 'received_qty', 'receivedQuantity', default=0))
        rows.append({
            'id': item_id,
            'material': pick(item, 'alias', 'raw_material_description', 'material_name',
                             default=f"#{item_id}"),
            'ordered_qty': ordered,
            'received_qty': received,
            'pending_qty': max(0.0, ordered - received),
            'unit_price': _to_float(pick(item, 'unit_price', default=0)),
            'item_status': pick(item, 'item_status', 'status', default=''),
        })
    return rows

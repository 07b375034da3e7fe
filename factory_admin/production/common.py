# factory_admin/production/common.py
"""
Production batch helpers
Critical batches, production stats, batch prefill from a customer order
"""

import json
import logging
from datetime import date
from typing import Any, Dict, List, Optional

import pandas as pd

from ..common import parse_date, pick

logger = logging.getLogger(__name__)


class ProductionConstants:
    """Batch progress values"""
    PENDING = 'pending'
    IN_PROGRESS = 'in_progress'
    ON_HOLD = 'on_hold'
    COMPLETED = 'completed'

    CUSTOM_PRODUCT_NAME = 'Custom Order Product'


def _is_completed(status: Any) -> bool:
    return str(status or '').strip().lower() == ProductionConstants.COMPLETED


def critical_batches(df: Optional[pd.DataFrame], today: Optional[date] = None) -> pd.DataFrame:
    """Batches due today or overdue that are not completed"""
    if df is None or df.empty or 'expected_completion_date' not in df.columns:
        return pd.DataFrame()

    today = today or date.today()
    due = df['expected_completion_date'].apply(parse_date)
    statuses = df['batch_status'] if 'batch_status' in df.columns else pd.Series('', index=df.index)

    mask = due.apply(lambda d: d is not None and d <= today) & ~statuses.apply(_is_completed)
    return df[mask.astype(bool)]


def production_stats(df: Optional[pd.DataFrame], today: Optional[date] = None) -> Dict[str, Any]:
    """
    Summary numbers for the production header

    Returns:
        Dictionary with critical, completed_today, active_heads, units_today
    """
    stats = {'critical': 0, 'completed_today': 0, 'active_heads': 0, 'units_today': 0}
    if df is None or df.empty:
        return stats

    today = today or date.today()
    stats['critical'] = len(critical_batches(df, today))

    completed_today = []
    for record in df.to_dict('records'):
        if not _is_completed(record.get('batch_status')):
            continue
        finished_on = parse_date(pick(record, 'updated_at', 'created_at'))
        if finished_on == today:
            completed_today.append(record)

    stats['completed_today'] = len(completed_today)
    stats['units_today'] = int(round(sum(_to_float(r.get('completed_qty')) for r in completed_today)))

    if 'production_head_employee_id' in df.columns:
        heads = df['production_head_employee_id'].dropna()
        stats['active_heads'] = int(heads[heads.astype(str) != ''].nunique())

    return stats


def _to_float(value: Any) -> float:
    if value is None or value == '':
        return 0.0
    number = pd.to_numeric(value, errors='coerce')
    return 0.0 if pd.isna(number) else float(number)


def parse_raw_materials(value: Any) -> List[Dict[str, Any]]:
    """Order raw_materials_json (string or list) to manual batch materials"""
    if value is None or value == '':
        return []

    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError as e:
            logger.warning(f"Could not parse raw_materials_json: {e}")
            return []

    if not isinstance(value, list):
        return []

    materials = []
    for item in value:
        if not isinstance(item, dict):
            continue
        materials.append({
            'material_name': item.get('material_name') or 'N/A',
            'quantity': _to_float(item.get('quantity')),
            'unit': item.get('unit') or '',
            'rawMaterialId': str(pick(item, 'raw_material_id', 'rawMaterialId', default='')),
        })
    return materials


def prefill_from_order(order: Dict[str, Any]) -> Dict[str, Any]:
    """
    Production batch form values for a customer order

    Orders without a product SKU carry their raw materials as a custom product.
    """
    sku_id = pick(order, 'product_sku_id', 'productSkuId')
    raw_materials = pick(order, 'raw_materials_json', 'rawMaterialsJson')
    is_custom = not sku_id and bool(raw_materials)

    expected = parse_date(pick(order, 'expected_delivery_date', 'expectedDeliveryDate'))

    prefill = {
        'ordersId': pick(order, 'id', 'order_id', default=''),
        'productId': None if is_custom else sku_id,
        'clientId': pick(order, 'client_id', 'clientId'),
        'quantity': pick(order, 'quantity', default=''),
        'expectedCompletionDate': expected,
        'productionNotes': order.get('notes') or '',
    }

    if is_custom:
        prefill['manualProduct'] = {
            'productName': ProductionConstants.CUSTOM_PRODUCT_NAME,
            'rawMaterials': parse_raw_materials(raw_materials),
        }

    return prefill

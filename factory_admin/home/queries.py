# factory_admin/home/queries.py
"""
Backend reads for the Home dashboard
KPIs, low stock, critical production, recent activities, master table counts

Dashboard endpoints are POSTs with the token as a form field;
the master counts endpoint is a GET with the token in the path.
"""

import logging
from typing import Any, Dict, List, Optional

import pandas as pd

from ..api import ApiClient, ApiError, ensure_ok, extract_list, get_api_client
from ..common import pick

logger = logging.getLogger(__name__)

# Master table count keys -> display labels
MASTER_COUNT_LABELS = {
    'brands': 'Brands',
    'raw_material_categories': 'Raw Material Categories',
    'product_categories': 'Product Categories',
    'products_sku': 'Product SKUs',
    'storage_locations': 'Stock Locations',
    'units_of_measurement': 'Units of Measurement',
    'payment_terms': 'Payment Terms',
    'client_types': 'Client Types',
    'production_stage': 'Production Stages',
    'production_stage-category': 'Production Stage Categories',
    'admin_users': 'Admin Users',
}

# Master table count keys -> registry keys
MASTER_COUNT_RESOURCES = {
    'brands': 'brands',
    'raw_material_categories': 'raw_material_categories',
    'product_categories': 'product_categories',
    'products_sku': 'product_skus',
    'storage_locations': 'stock_locations',
    'units_of_measurement': 'units',
    'payment_terms': 'payment_terms',
    'client_types': 'client_types',
    'production_stage': 'production_stages',
    'production_stage-category': 'production_stage_categories',
    'admin_users': 'admin_users',
}


class HomeQueries:
    """Dashboard reads"""

    def __init__(self, client: Optional[ApiClient] = None):
        self._client = client
        self._last_error = None

    @property
    def client(self) -> ApiClient:
        return self._client or get_api_client()

    def get_last_error(self) -> Optional[str]:
        return self._last_error

    def _post_dashboard(self, name: str) -> Dict[str, Any]:
        payload = ensure_ok(self.client.post_form(f"dashboard/{name}", {}))
        return payload if isinstance(payload, dict) else {}

    # ==================== KPIs ====================

    def get_stats(self) -> Optional[Dict[str, Any]]:
        """
        KPI numbers: total_production, low_stock_alerts, qc_pass_rate, avg_vendor_on_time

        Returns:
            Dictionary or None on failure
        """
        try:
            stats = self._post_dashboard('stats').get('stats')
        except ApiError as e:
            self._last_error = e.message
            logger.error(f"❌ Error loading dashboard stats: {e.message}")
            return None

        if not isinstance(stats, dict):
            return {}

        result = dict(stats)
        for key in ('total_production', 'low_stock_alerts'):
            result[key] = int(_to_number(result.get(key)))
        for key in ('qc_pass_rate', 'avg_vendor_on_time'):
            result[key] = round(_to_number(result.get(key)), 1)
        return result

    # ==================== Lists ====================

    def get_low_stock(self) -> pd.DataFrame:
        """Raw materials and finished goods below their levels, one frame"""
        try:
            payload = self._post_dashboard('low-stock')
        except ApiError as e:
            self._last_error = e.message
            logger.error(f"❌ Error loading low stock: {e.message}")
            return pd.DataFrame()

        rows = []
        for rm in payload.get('raw_materials') or []:
            current = _to_number(rm.get('stock_qty'))
            rows.append({
                'type': 'Raw Material',
                'code': (rm.get('material_code') or '').strip() or f"RM{rm.get('id', '')}",
                'name': rm.get('material_name') or '',
                'current': current,
                'reorder': _to_number(rm.get('min_stock_level')) - current,
                'vendor': rm.get('vendor_name') or 'N/A',
                'unit': rm.get('unit_of_measure') or '',
            })

        for fg in payload.get('finished_goods') or []:
            rows.append({
                'type': 'Finished Good',
                'code': (fg.get('sku_code') or '').strip() or f"FG{fg.get('id', '')}",
                'name': pick(fg, 'product_name', 'sku_code', default=''),
                'current': _to_number(fg.get('stock_qty')),
                'reorder': _to_number(fg.get('max_level')),
                'vendor': 'N/A',
                'unit': 'Finished Product',
            })

        return pd.DataFrame(rows, columns=['type', 'code', 'name', 'current', 'reorder', 'vendor', 'unit'])

    def get_critical_production(self) -> pd.DataFrame:
        """Batches due soon (due_soon)"""
        return self._get_list('critical-production', 'due_soon')

    def get_recent_activities(self) -> pd.DataFrame:
        """Latest activity feed (activities)"""
        return self._get_list('recent-activities', 'activities')

    def _get_list(self, name: str, key: str) -> pd.DataFrame:
        try:
            payload = self.client.post_form(f"dashboard/{name}", {})
            return pd.DataFrame(extract_list(payload, key))
        except ApiError as e:
            self._last_error = e.message
            logger.error(f"❌ Error loading dashboard/{name}: {e.message}")
            return pd.DataFrame()

    # ==================== Master Data ====================

    def get_master_counts(self) -> Dict[str, int]:
        """Record count per master table; empty on failure"""
        try:
            path = self.client.build_path("masters/get-table-counts/{token}")
            payload = ensure_ok(self.client.get_json(path))
        except ApiError as e:
            self._last_error = e.message
            logger.error(f"❌ Error loading master counts: {e.message}")
            return {}

        counts = payload.get('counts') if isinstance(payload, dict) else None
        if not isinstance(counts, dict):
            return {}
        return {key: int(_to_number(value)) for key, value in counts.items()}


def _to_number(value: Any) -> float:
    if value is None or value == '':
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def master_counts_frame(counts: Dict[str, int]) -> pd.DataFrame:
    """Counts as a labelled frame for tables and charts"""
    rows = [
        {'table': MASTER_COUNT_LABELS.get(key, key.replace('_', ' ').title()), 'count': value}
        for key, value in counts.items()
    ]
    return pd.DataFrame(rows, columns=['table', 'count'])


def status_breakdown(df: pd.DataFrame, column: str) -> List[Dict[str, Any]]:
    """[{status, count}] for a chart; empty when the column is missing"""
    if df is None or df.empty or column not in df.columns:
        return []
    counts = df[column].fillna('unknown').astype(str).str.strip().replace('', 'unknown').value_counts()
    return [{'status': status, 'count': int(count)} for status, count in counts.items()]

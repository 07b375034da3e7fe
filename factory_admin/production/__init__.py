# factory_admin/production/__init__.py
"""
Production Module
Production batches with critical-batch monitoring and order handoff

Components:
- common.py: Critical batches, stats, prefill from order
- queries.py: Batch and order reads (ProductionQueries)
- page.py: Production tab
"""

from .common import (
    ProductionConstants,
    critical_batches,
    production_stats,
    prefill_from_order,
    parse_raw_materials
)
from .queries import ProductionQueries
from .page import render_production_tab

__all__ = [
    'ProductionConstants',
    'critical_batches',
    'production_stats',
    'prefill_from_order',
    'parse_raw_materials',
    'ProductionQueries',
    'render_production_tab',
]

# factory_admin/crud/dashboard.py
"""
Stats-card row for entity screens
"""

import logging
from datetime import date
from typing import Any, Dict, Optional

import pandas as pd
import streamlit as st

from ..common import format_currency, format_number
from .listing import compute_stats
from .resources import ResourceSpec

logger = logging.getLogger(__name__)

_MAX_CARDS_PER_ROW = 4
_MONEY_COLUMNS = ('total_value', 'grand_total', 'budget', 'credit_limit')


class ResourceDashboard:
    """Stats cards computed from the fetched list"""

    def __init__(self, resource: ResourceSpec):
        self.resource = resource

    def get_metrics(self, df: Optional[pd.DataFrame], today: Optional[date] = None) -> Dict[str, Any]:
        return compute_stats(df, self.resource.stats, today)

    def _format(self, stat, value: Any) -> str:
        if stat.kind == 'sum' and stat.column in _MONEY_COLUMNS:
            return format_currency(value)
        if stat.kind == 'mean':
            return f"{format_number(value, 1)}%" if 'percentage' in (stat.column or '') else format_number(value, 1)
        return format_number(value, 0)

    def render(self, df: Optional[pd.DataFrame]):
        """Render metric cards, at most four per row"""
        if not self.resource.stats:
            return

        metrics = self.get_metrics(df)
        stats = self.resource.stats
        for start in range(0, len(stats), _MAX_CARDS_PER_ROW):
            row = stats[start:start + _MAX_CARDS_PER_ROW]
            cols = st.columns(len(row))
            for col, stat in zip(cols, row):
                with col:
                    st.metric(
                        label=f"{stat.icon} {stat.label}",
                        value=self._format(stat, metrics.get(stat.label, 0)),
                    )


def render_dashboard(resource: ResourceSpec, df: Optional[pd.DataFrame]):
    """Convenience function to render the stats row"""
    ResourceDashboard(resource).render(df)

# factory_admin/home/__init__.py
"""
Home Dashboard Module

Components:
- queries.py: Dashboard and master-count reads (HomeQueries)
- page.py: Home dashboard rendering
"""

from .queries import HomeQueries, master_counts_frame, status_breakdown
from .page import render_home

__all__ = [
    'HomeQueries',
    'master_counts_frame',
    'status_breakdown',
    'render_home',
]

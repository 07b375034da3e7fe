# factory_admin/crud/__init__.py
"""
Entity CRUD Module
One list + form + status-toggle screen per registry entry

Version: 1.2.0

Components:
- resources.py: Entity registry (ResourceSpec, FieldSpec, ...)
- listing.py: In-memory search, filters, pagination, stats
- validators.py: Required-field validation and form serialization
- queries.py: Backend reads (ResourceQueries)
- manager.py: Create / update / status toggle (ResourceManager)
- forms.py: Create/Edit forms (ResourceForms)
- dialogs.py: Detail, form and status dialogs
- dashboard.py: Stats cards
- page.py: Main tab orchestrator
"""

from .resources import (
    ResourceSpec,
    FieldSpec,
    FilterSpec,
    StatSpec,
    RelatedSpec,
    get_resource,
    list_resources
)
from .queries import ResourceQueries
from .manager import ResourceManager
from .page import render_resource_tab

__all__ = [
    'ResourceSpec',
    'FieldSpec',
    'FilterSpec',
    'StatSpec',
    'RelatedSpec',
    'get_resource',
    'list_resources',
    'ResourceQueries',
    'ResourceManager',
    'render_resource_tab',
]

__version__ = '1.2.0'

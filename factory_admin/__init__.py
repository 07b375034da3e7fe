# factory_admin/__init__.py
"""
Factory Admin Dashboard
Streamlit admin screens over the factory ERP REST backend
"""

__version__ = '1.0.0'

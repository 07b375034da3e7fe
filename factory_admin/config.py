# factory_admin/config.py
"""
Application configuration

Values are resolved in order: Streamlit secrets -> environment variables -> defaults.
Secrets live in .streamlit/secrets.toml, for example:

    API_BASE_URL = "https://erp.example.com/api"
    API_TOKEN = "..."
"""

import logging
import os
from typing import Any, Dict

import streamlit as st

logger = logging.getLogger(__name__)


def _get_setting(name: str, default: Any = None) -> Any:
    """Read a single setting from secrets, then environment"""
    try:
        if name in st.secrets:
            return st.secrets[name]
    except Exception:
        # No secrets.toml present; st.secrets raises on first access
        pass
    return os.environ.get(name, default)


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid integer setting {value!r}, using {default}")
        return default


API_CONFIG: Dict[str, Any] = {
    "base_url": str(_get_setting("API_BASE_URL", "") or "").rstrip("/"),
    "token": _get_setting("API_TOKEN", "") or "",
    "timeout": _as_int(_get_setting("API_TIMEOUT", 30), 30),
}

APP_CONFIG: Dict[str, Any] = {
    "PAGE_SIZE": _as_int(_get_setting("PAGE_SIZE", 10), 10),
    "LOOKUP_CACHE_TTL": _as_int(_get_setting("LOOKUP_CACHE_TTL", 300), 300),
    "COMPANY_NAME": _get_setting("COMPANY_NAME", "Factory Admin"),
    "LOG_LEVEL": str(_get_setting("LOG_LEVEL", "INFO")).upper(),
}


class AppSettings:
    """Attribute access over API_CONFIG / APP_CONFIG"""

    @property
    def base_url(self) -> str:
        return API_CONFIG["base_url"]

    @property
    def token(self) -> str:
        return API_CONFIG["token"]

    @property
    def page_size(self) -> int:
        return APP_CONFIG["PAGE_SIZE"]

    @property
    def company_name(self) -> str:
        return APP_CONFIG["COMPANY_NAME"]

    @property
    def log_level(self) -> int:
        return getattr(logging, APP_CONFIG["LOG_LEVEL"], logging.INFO)

    def is_configured(self) -> bool:
        return bool(API_CONFIG["base_url"])


config = AppSettings()

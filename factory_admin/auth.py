# factory_admin/auth.py
"""
Session gate

The backend token comes from configuration (API_TOKEN). Requests always use
the shared ApiClient built from API_CONFIG; the copy kept here in
st.session_state is only a gate: require_token() stops a page when the
backend URL or the token is missing.
"""

import logging
from typing import Optional

import streamlit as st

from .config import API_CONFIG, APP_CONFIG

logger = logging.getLogger(__name__)


class SessionManager:
    """Session display values (user, company) and the token gate; never sent to the backend"""

    TOKEN_KEY = 'token'
    USERNAME_KEY = 'username'
    COMPANY_KEY = 'company_name'

    def __init__(self):
        self.init_state()

    def init_state(self):
        defaults = {
            self.TOKEN_KEY: API_CONFIG.get('token', ''),
            self.USERNAME_KEY: 'admin',
            self.COMPANY_KEY: APP_CONFIG.get('COMPANY_NAME', 'Factory Admin'),
        }
        for key, value in defaults.items():
            st.session_state.setdefault(key, value)

    def get_token(self) -> Optional[str]:
        return st.session_state.get(self.TOKEN_KEY) or None

    def get_user_display_name(self) -> str:
        return st.session_state.get(self.USERNAME_KEY) or 'admin'

    def require_token(self):
        """Stop rendering the page when the backend is not configured"""
        if not API_CONFIG.get('base_url'):
            st.error("🔌 **Backend not configured**\n\nSet `API_BASE_URL` in secrets or environment.")
            st.stop()

        if not self.get_token():
            logger.warning("Page opened without an API token")
            st.error("🔑 **No session token**\n\nSet `API_TOKEN` in secrets or environment.")
            st.stop()

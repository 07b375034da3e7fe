# factory_admin/layout.py
"""
Page scaffolding shared by app.py and pages/
Page config, logging, session check, header and footer
"""

import logging
from typing import Callable, List, Tuple

import streamlit as st

from . import __version__
from .auth import SessionManager
from .config import config

logger = logging.getLogger(__name__)


def init_page(title: str, icon: str, require_token: bool = True) -> SessionManager:
    """
    Configure the page and the session

    Must run before any other Streamlit call on the page.
    """
    st.set_page_config(
        page_title=f"{title} - {config.company_name}",
        page_icon=icon,
        layout="wide",
        initial_sidebar_state="expanded"
    )
    logging.basicConfig(level=config.log_level)

    session = SessionManager()
    if require_token:
        session.require_token()

    with st.sidebar:
        st.markdown(f"### 👤 {session.get_user_display_name()}")
        st.caption(config.company_name)

    return session


def render_header(title: str):
    """Page title with a Refresh button that drops cached lookups"""
    col1, col2 = st.columns([4, 1])

    with col1:
        st.title(title)

    with col2:
        if st.button("🔄 Refresh", use_container_width=True, key="btn_page_refresh"):
            st.cache_data.clear()
            st.rerun()


def render_tabs(tabs: List[Tuple[str, Callable[[], None]]]):
    """Render (label, render function) pairs as tabs"""
    containers = st.tabs([label for label, _ in tabs])
    for container, (_, render) in zip(containers, tabs):
        with container:
            render()


def run_page(render: Callable[[], None]):
    """Run a page body, showing unexpected errors instead of a traceback"""
    try:
        render()
    except Exception as e:
        st.error(f"An error occurred: {str(e)}")
        logger.error(f"Application error: {e}", exc_info=True)

        if st.button("🔄 Reload"):
            st.rerun()

    render_footer()


def render_footer():
    st.markdown("---")
    st.caption(f"{config.company_name} Admin v{__version__}")

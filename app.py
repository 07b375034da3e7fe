# app.py - Factory Admin Main Entry Point
import logging

import streamlit as st

from factory_admin.api import check_connection
from factory_admin.config import config
from factory_admin.home import render_home
from factory_admin.layout import init_page, run_page

logger = logging.getLogger(__name__)

session = init_page("Dashboard", "🏭")


def main():
    """Home dashboard"""
    col1, col2 = st.columns([4, 1])
    with col1:
        st.title(f"🏭 {config.company_name}")
        st.caption(f"Welcome back, {session.get_user_display_name()}")
    with col2:
        if st.button("🔄 Refresh", use_container_width=True, key="btn_home_refresh"):
            st.cache_data.clear()
            st.rerun()

    ok, error = check_connection()
    if not ok:
        st.error(f"🔌 **Backend Connection Error**\n\n{error}")
        st.info("💡 **Troubleshooting:**\n- Check `API_BASE_URL` and `API_TOKEN`\n- Verify network connection\n- Open ⚙️ Settings to test the connection")
        return

    render_home()


if __name__ == "__main__":
    run_page(main)

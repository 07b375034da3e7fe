# factory_admin/home/page.py
"""
Home dashboard
KPI cards, low stock, critical production, recent activities, charts
"""

import logging

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from ..common import create_status_indicator, format_date, format_number, pick
from .queries import HomeQueries, master_counts_frame, status_breakdown

logger = logging.getLogger(__name__)

_STATUS_COLORS = {
    'pending': '#f1c40f',
    'in_progress': '#3498db',
    'on_hold': '#e67e22',
    'completed': '#2ecc71',
}


# ==================== KPI Cards ====================

def _render_kpis(queries: HomeQueries):
    stats = queries.get_stats()
    if stats is None:
        st.error(f"🔌 **Could not load dashboard**\n\n{queries.get_last_error()}")
        return

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("🏭 Total Production", format_number(stats.get('total_production', 0), 0),
                  help="This month")
    with col2:
        st.metric("⚠️ Reorder Alerts", format_number(stats.get('low_stock_alerts', 0), 0),
                  help="Materials below threshold")
    with col3:
        pass_rate = stats.get('qc_pass_rate', 0)
        st.metric("🔬 QC Pass Rate", f"{pass_rate:.1f}%",
                  delta="below 90%" if pass_rate < 90 else None,
                  delta_color="inverse" if pass_rate < 90 else "off",
                  help="This month")
    with col4:
        st.metric("⏱️ Vendor On-Time", f"{stats.get('avg_vendor_on_time', 0):.1f}%",
                  help="Average delivery performance")


# ==================== Sections ====================

def _render_critical_production(queries: HomeQueries):
    st.markdown("#### 🚨 Critical Production")
    df = queries.get_critical_production()
    if df.empty:
        st.info("✅ Nothing due soon")
        return

    display = pd.DataFrame({
        'Code': df.get('production_code', ''),
        'Product': df.get('product_name', ''),
        'Client': df.get('client_name', ''),
        'Due': df['expected_completion_date'].apply(format_date) if 'expected_completion_date' in df else '',
        'Stage': df.get('current_stage', ''),
        'Progress %': df.get('progress_percentage', 0),
        'Risk': df.get('risk', ''),
    }, index=df.index)
    st.dataframe(
        display,
        use_container_width=True,
        hide_index=True,
        column_config={
            'Progress %': st.column_config.ProgressColumn('Progress', min_value=0, max_value=100, format="%d%%"),
        },
    )

    breakdown = status_breakdown(df, 'batch_status')
    if breakdown:
        fig = go.Figure(data=[go.Pie(
            labels=[create_status_indicator(b['status']) for b in breakdown],
            values=[b['count'] for b in breakdown],
            hole=0.6,
            marker_colors=[_STATUS_COLORS.get(b['status'].lower(), '#95a5a6') for b in breakdown],
            textinfo='value',
            hovertemplate="<b>%{label}</b><br>%{value} batches<br>%{percent}<extra></extra>"
        )])
        fig.update_layout(showlegend=True, height=260, margin=dict(l=20, r=20, t=10, b=10))
        st.plotly_chart(fig, use_container_width=True)


def _render_low_stock(queries: HomeQueries):
    st.markdown("#### 📉 Low Stock")
    df = queries.get_low_stock()
    if df.empty:
        st.info("✅ All stock levels OK")
        return

    st.dataframe(
        df.rename(columns={
            'type': 'Type', 'code': 'Code', 'name': 'Item', 'current': 'Current',
            'reorder': 'Reorder', 'vendor': 'Vendor', 'unit': 'Unit',
        }),
        use_container_width=True,
        hide_index=True,
    )


def _render_recent_activities(queries: HomeQueries):
    st.markdown("#### 🕒 Recent Activity")
    df = queries.get_recent_activities()
    if df.empty:
        st.caption("No recent activity")
        return

    for activity in df.head(10).to_dict('records'):
        activity_type = str(activity.get('activity_type') or '').replace('_', ' ').title()
        extra = str(pick(activity, 'extra', default='N/A')).strip()
        st.write(f"• **{activity_type}** `{activity.get('ref', '')}` · {extra} · "
                 f"{create_status_indicator(activity.get('status'))}")


def _render_master_counts(queries: HomeQueries):
    counts = queries.get_master_counts()
    if not counts:
        return

    df = master_counts_frame(counts).sort_values('count')
    with st.expander("🗃️ Master Data", expanded=False):
        fig = go.Figure(data=[go.Bar(
            x=df['count'],
            y=df['table'],
            orientation='h',
            marker_color='#3498db',
            hovertemplate="<b>%{y}</b><br>%{x} records<extra></extra>"
        )])
        fig.update_layout(height=360, margin=dict(l=20, r=20, t=10, b=10))
        st.plotly_chart(fig, use_container_width=True)


# ==================== Main Render Function ====================

def render_home():
    """Render the home dashboard"""
    queries = HomeQueries()

    _render_kpis(queries)
    st.markdown("---")

    col1, col2 = st.columns([3, 2])
    with col1:
        _render_critical_production(queries)
        _render_low_stock(queries)
    with col2:
        _render_recent_activities(queries)

    _render_master_counts(queries)

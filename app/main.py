import logging
import sys
from pathlib import Path

import plotly.express as px
import streamlit as st

# Add the workspace root to the Python path so energy_engine can be imported
workspace_root = Path(__file__).parent.parent
sys.path.insert(0, str(workspace_root))

from app.logging_config import configure_logging
from app.settings import load_settings
from app.views import (
    TREND_ICONS,
    ViewMode,
    default_series,
    regions_frame,
    top_consumers_frame,
    trend_frame,
)
from energy_engine.cache import AnalyticsEngine
from energy_engine.io import read_table_csv
from energy_engine.sample_data import load_sample_table
from energy_engine.schema import SeriesTable

settings = load_settings()
configure_logging(settings.log_level)
logger = logging.getLogger("app.main")

st.set_page_config(
    page_title="Energy Consumption Analytics",
    layout="wide",
    initial_sidebar_state="expanded",
)

COLORS = ["#3b82f6", "#10b981", "#f59e0b", "#ef4444", "#8b5cf6", "#06b6d4"]


@st.cache_data(show_spinner=False)
def _load_table_cached(data_path: str | None, max_rows: int) -> SeriesTable:
    if data_path:
        logger.info("loading consumption table from %s", data_path)
        return read_table_csv(data_path, max_rows=max_rows)
    return load_sample_table(max_rows=max_rows)


@st.cache_resource(show_spinner=False)
def _engine(version: str, _table: SeriesTable) -> AnalyticsEngine:
    # version keys the resource; _table is not hashed
    return AnalyticsEngine(_table)


table = _load_table_cached(settings.data_path, settings.max_rows)
engine = _engine(table.version, table)

st.title("🔌 India Energy Consumption Analytics Dashboard")
st.caption("Statistical analysis, linear-regression forecasts and regional rollups of state-level demand.")

if not engine.series_names:
    st.warning("No series found in the loaded table.")
    st.stop()

with st.sidebar:
    names = list(engine.series_names)
    preferred = default_series(table)
    selected = st.selectbox(
        "Select State/UT for detailed analysis",
        names,
        index=names.index(preferred) if preferred in names else 0,
    )
    mode = st.radio(
        "View",
        list(ViewMode),
        format_func=lambda m: m.title,
    )

stats = engine.statistics(selected)

if mode == ViewMode.OVERVIEW:
    k1, k2, k3, k4 = st.columns(4)
    k1.metric("Average Consumption (MW)", f"{stats.average:.2f}")
    k2.metric("Total Consumption (MW)", f"{stats.total:.0f}")
    k3.metric("Peak Demand (MW)", f"{stats.maximum:.2f}")
    k4.metric("Minimum Load (MW)", f"{stats.minimum:.2f}")

    st.subheader(f"📈 {selected} - Consumption Trend")
    fig = px.area(trend_frame(table, selected), x="date", y="value", color_discrete_sequence=[COLORS[0]])
    fig.update_layout(height=300, margin=dict(l=10, r=10, t=30, b=10))
    st.plotly_chart(fig, use_container_width=True)

    st.subheader(f"🏆 Top {settings.top_n} Energy Consumers")
    top_df = top_consumers_frame(engine.top_consumers(settings.top_n))
    fig = px.bar(top_df, x="total", y="series", orientation="h", hover_data=["average"], color_discrete_sequence=[COLORS[0]])
    fig.update_layout(height=400, yaxis=dict(autorange="reversed"), margin=dict(l=10, r=10, t=30, b=10))
    st.plotly_chart(fig, use_container_width=True)

elif mode == ViewMode.PREDICTIONS:
    result = engine.forecast(selected, settings.horizon)

    st.subheader(f"🔮 Predictive Analytics - {selected}")
    c1, c2, c3 = st.columns(3)
    c1.metric("Trend Direction", f"{result.trend.value} {TREND_ICONS[result.trend]}")
    c2.metric("Slope (Daily Change)", f"{result.slope:.4f} MW")
    c3.metric("Forecast Period", f"{settings.horizon} Days")

    fig = px.line(result.to_frame(), x="period", y="value", markers=True, color_discrete_sequence=[COLORS[0]])
    fig.update_layout(height=400, yaxis_title="Predicted Consumption (MW)", margin=dict(l=10, r=10, t=30, b=10))
    st.plotly_chart(fig, use_container_width=True)

    st.subheader(f"📊 Statistical Analysis - {selected}")
    s1, s2, s3, s4, s5 = st.columns(5)
    s1.metric("Mean", f"{stats.average:.2f}")
    s2.metric("Std Dev", f"{stats.standard_deviation:.2f}")
    s3.metric("Maximum", f"{stats.maximum:.2f}")
    s4.metric("Minimum", f"{stats.minimum:.2f}")
    s5.metric("Range", f"{stats.range:.2f}")

    with st.expander("All series statistics", expanded=False):
        st.dataframe(engine.statistics_table().round(2), use_container_width=True, hide_index=True)

else:
    reg_df = regions_frame(engine.regions())

    left, right = st.columns(2)
    with left:
        st.subheader("🗺️ Regional Distribution")
        fig = px.pie(reg_df, names="region", values="total", color_discrete_sequence=COLORS)
        fig.update_layout(height=300, margin=dict(l=10, r=10, t=30, b=10))
        st.plotly_chart(fig, use_container_width=True)
    with right:
        st.subheader("📊 Regional Comparison")
        fig = px.bar(reg_df, x="region", y="total", color_discrete_sequence=[COLORS[1]])
        fig.update_layout(height=300, margin=dict(l=10, r=10, t=30, b=10))
        st.plotly_chart(fig, use_container_width=True)

    st.subheader("📋 Regional Summary")
    cols = st.columns(3)
    for idx, row in reg_df.iterrows():
        with cols[idx % 3]:
            st.metric(
                f"{row['region']} ({int(row['members'])} states)",
                f"{row['total']:.0f} MW",
                help=f"{row['share'] * 100:.0f}% of total consumption",
            )

st.divider()
st.caption("🔬 Linear Regression | Statistical Analysis | Regional Aggregation")

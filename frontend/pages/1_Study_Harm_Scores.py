"""
Study Harm Scores

Per-study view with:
- Stacked per-criterion harm chart (flat aggregate chart for studies without a breakdown)
- Criteria toggles kept in the ``criteria`` query parameter
- Harm to users / others / total table
- Criteria definitions and weights
"""

import streamlit as st
import pandas as pd
import logging
from typing import Any, Dict, FrozenSet, List, Optional
from pathlib import Path
import sys

# Add paths
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from src.utils.config import get_settings
from src.utils.logging import setup_logging

settings = get_settings()

st.set_page_config(
    page_title="Study Harm Scores",
    page_icon="📊",
    layout="wide"
)

# Configure logging
setup_logging(settings.log_level, settings.log_file)
logger = logging.getLogger(__name__)

# Import after path setup
from src.drug_harm.models import HarmCategory, StudyId
from src.drug_harm.registry import get_registry
from src.drug_harm.selection import (
    ALL_CATEGORIES,
    clear_category,
    enabled_count,
    encode_criteria_param,
    parse_criteria_param,
    resolve_selection,
    select_category,
    toggle_criterion,
)
from src.drug_harm.studies import STUDY_INFO, aggregate_ranking, parse_study_id, slug_for_study, study_from_slug
from src.drug_harm.views import aggregate_ranking_frame, breakdown_axis_max, study_breakdown_rows, study_summary_frame
from src.visualization.harm_charts import render_criteria_breakdown, render_flat_harm

registry = get_registry()


@st.cache_data
def load_breakdown_rows(study_value: str, enabled: Optional[FrozenSet[str]]) -> List[Dict[str, Any]]:
    return study_breakdown_rows(study_value, enabled)


@st.cache_data
def load_summary_frame(study_value: str, enabled: Optional[FrozenSet[str]]) -> pd.DataFrame:
    return study_summary_frame(study_value, enabled)


def apply_selection(enabled, schema) -> None:
    """Write a criteria selection back to the URL."""
    encoded = encode_criteria_param(enabled, schema)
    if encoded is None:
        if "criteria" in st.query_params:
            del st.query_params["criteria"]
    else:
        st.query_params["criteria"] = encoded


def change_study() -> None:
    study = st.session_state.study_picker
    st.query_params.clear()
    st.query_params["study"] = slug_for_study(study)


# =============================================================================
# Study resolution
# =============================================================================

default_study = parse_study_id(settings.default_study) or StudyId.UK_2010
slug = st.query_params.get("study", slug_for_study(default_study))
study = study_from_slug(slug)

if study is None:
    logger.info("Unknown study slug requested: %s", slug)
    st.error(f"Study not found: '{slug}'")
    st.stop()

info = STUDY_INFO[study]
schema = registry.get_schema(study)
enabled = parse_criteria_param(st.query_params.get_all("criteria"))

st.title(f"📊 {info.name}")
st.markdown(f"[{info.full_name}]({info.link}), *{info.journal}*, {info.experts} experts")

# Follow the URL when it changes outside the picker
st.session_state.study_picker = study
st.selectbox(
    "Study",
    options=list(StudyId),
    format_func=lambda s: STUDY_INFO[s].name,
    key="study_picker",
    on_change=change_study,
)


# =============================================================================
# Sidebar: criteria toggles
# =============================================================================

with st.sidebar:
    st.header("Criteria")
    if not schema.all:
        st.caption("This study published aggregate scores only.")
    else:
        selected = resolve_selection(enabled, schema)
        st.caption(f"{enabled_count(enabled, schema)} of {len(schema.all)} criteria enabled")

        col_all, col_none = st.columns(2)
        col_all.button(
            "Select all", key="all_select", use_container_width=True,
            on_click=apply_selection, args=(select_category(enabled, ALL_CATEGORIES, schema), schema),
        )
        col_none.button(
            "Clear all", key="all_clear", use_container_width=True,
            on_click=apply_selection, args=(clear_category(enabled, ALL_CATEGORIES, schema), schema),
        )

        sections = [
            (HarmCategory.USER, "Harm to Users", schema.user_criteria),
            (HarmCategory.OTHERS, "Harm to Others", schema.others_criteria),
        ]
        for category, heading, criteria in sections:
            st.subheader(f"{heading} ({enabled_count(enabled, schema, category)}/{len(criteria)})")
            col_a, col_b = st.columns(2)
            col_a.button(
                "All", key=f"{category.value}_select", use_container_width=True,
                on_click=apply_selection, args=(select_category(enabled, category, schema), schema),
            )
            col_b.button(
                "None", key=f"{category.value}_clear", use_container_width=True,
                on_click=apply_selection, args=(clear_category(enabled, category, schema), schema),
            )
            for criterion in criteria:
                key = criterion.key.value
                st.checkbox(
                    criterion.short_label,
                    value=key in selected,
                    # Keyed on the current URL state so the box follows button changes
                    key=f"{study.value}:{key}:{encode_criteria_param(enabled, schema)}",
                    help=f"{criterion.description} (weight {criterion.weight:.1f})",
                    on_change=apply_selection,
                    args=(toggle_criterion(enabled, key, schema), schema),
                )


# =============================================================================
# Chart and tables
# =============================================================================

tab1, tab2, tab3 = st.tabs([
    "📈 Harm Chart",
    "📋 Scores Table",
    "📖 Criteria"
])

with tab1:
    if registry.has_criteria_breakdown(study):
        rows = load_breakdown_rows(study.value, enabled)
        chart_criteria = [c for c in schema.all if enabled is None or c.key.value in enabled]
        if not chart_criteria:
            st.warning("No criteria selected. Enable at least one criterion in the sidebar.")
        render_criteria_breakdown(
            rows,
            chart_criteria,
            title=f"{info.name}: Harm Scores by Criterion",
            x_max=breakdown_axis_max(rows),
            height=settings.chart_height,
        )
    else:
        st.info(f"{info.name} did not publish per-criterion scores. Showing aggregate harm to users.")
        render_flat_harm(
            aggregate_ranking(study),
            info.color,
            title=f"{info.name}: Harm to Users",
            height=settings.chart_height,
        )

with tab2:
    if registry.has_criteria_breakdown(study):
        st.dataframe(load_summary_frame(study.value, enabled), hide_index=True, use_container_width=True)
    else:
        frame = aggregate_ranking_frame(study).rename(columns={"drug": "Drug", "score": "Harm to Users"})
        st.dataframe(frame, hide_index=True, use_container_width=True)

with tab3:
    if not schema.all:
        st.markdown("No criteria breakdown is available for this study.")
    else:
        criteria_data = []
        for criterion in schema.all:
            criteria_data.append({
                "Criterion": criterion.label,
                "Category": "Users" if criterion.category == HarmCategory.USER else "Others",
                "Weight (%)": criterion.weight,
                "Description": criterion.description,
            })
        st.dataframe(pd.DataFrame(criteria_data), hide_index=True, use_container_width=True)

st.caption(info.description)

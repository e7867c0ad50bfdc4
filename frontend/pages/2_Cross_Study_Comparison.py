"""
Cross-Study Comparison

Harm to users and harm to others for every comparable drug, grouped by study.
"""

import streamlit as st
import logging
from typing import List
from pathlib import Path
import sys

# Add paths
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from src.utils.config import get_settings
from src.utils.logging import setup_logging

settings = get_settings()

st.set_page_config(
    page_title="Cross-Study Comparison",
    page_icon="🌍",
    layout="wide"
)

setup_logging(settings.log_level, settings.log_file)
logger = logging.getLogger(__name__)

from src.drug_harm.comparison import DEFAULT_REFERENCE_STUDY, build_comparison_rows, comparison_axis_max
from src.drug_harm.models import ComparisonRow, StudyId
from src.drug_harm.selection import parse_bool_param
from src.drug_harm.studies import STUDY_INFO, parse_study_id
from src.drug_harm.views import comparison_table
from src.visualization.harm_charts import render_comparison


@st.cache_data
def load_comparison_rows(show_users: bool, show_others: bool, reference: str) -> List[ComparisonRow]:
    return build_comparison_rows(show_users, show_others, StudyId(reference))


def set_flag(name: str) -> None:
    value = st.session_state[f"toggle_{name}"]
    if value:
        # true is the default
        if name in st.query_params:
            del st.query_params[name]
    else:
        st.query_params[name] = "false"


st.title("🌍 Cross-Study Comparison")
st.markdown("""
Drugs scored by more than one study, with harm to users and harm to others for each panel.
Drugs missing from a study are shown as zero for that study.
""")

show_users = parse_bool_param(st.query_params.get("users"), default=True)
show_others = parse_bool_param(st.query_params.get("others"), default=True)
reference = parse_study_id(settings.comparison_reference_study) or DEFAULT_REFERENCE_STUDY

col1, col2, col3 = st.columns([1, 1, 3])
with col1:
    st.toggle("Harm to Users", value=show_users, key="toggle_users", on_change=set_flag, args=("users",))
with col2:
    st.toggle("Harm to Others", value=show_others, key="toggle_others", on_change=set_flag, args=("others",))
with col3:
    st.markdown(" · ".join(
        f'<span style="color:{STUDY_INFO[s].color};">■</span> {STUDY_INFO[s].name}' for s in StudyId
    ), unsafe_allow_html=True)

rows = load_comparison_rows(show_users, show_others, reference.value)
logger.debug("Rendering %d comparison rows", len(rows))

height = max(settings.comparison_min_height, len(rows) * settings.comparison_row_height)
render_comparison(rows, show_users, show_others, x_max=comparison_axis_max(rows), height=height)

st.subheader("Summary")
st.dataframe(comparison_table(rows, show_users, show_others), hide_index=True, use_container_width=True)
st.caption("Average is taken over the studies that report the drug.")

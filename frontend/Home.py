"""
Drug Harm Rankings - Main Entry Point
"""
import streamlit as st
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.drug_harm.models import StudyId
from src.drug_harm.studies import STUDY_INFO
from src.drug_harm.views import aggregate_comparison_frame
from src.utils.config import get_settings
from src.utils.logging import setup_logging
from src.visualization.harm_charts import render_aggregate_comparison

settings = get_settings()
setup_logging(settings.log_level, settings.log_file)

st.set_page_config(
    page_title=settings.app_title,
    page_icon=settings.page_icon,
    layout="wide",
    initial_sidebar_state="expanded"
)

# Custom CSS
st.markdown("""
<style>
    .main-header {
        font-size: 3rem;
        font-weight: bold;
        margin-bottom: 1rem;
        text-align: center;
    }
    .sub-header {
        font-size: 1.5rem;
        color: #94a3b8;
        margin-bottom: 2rem;
        text-align: center;
    }
    .study-card {
        padding: 1rem 1.25rem;
        border-radius: 0.75rem;
        margin: 0.5rem 0;
        background-color: rgba(148, 163, 184, 0.08);
    }
</style>
""", unsafe_allow_html=True)

# Header
st.markdown(f'<p class="main-header">{settings.page_icon} {settings.app_title}</p>', unsafe_allow_html=True)
st.markdown(
    '<p class="sub-header">Expert multi-criteria decision analysis of drug harms across four studies</p>',
    unsafe_allow_html=True
)

st.markdown("---")

col1, col2 = st.columns([2, 1])

with col1:
    st.markdown("""
    ## Overview

    Each study asked an expert panel to score drugs against up to 16 harm criteria, split into
    **harm to users** and **harm to others**, and weighted them by multi-criteria decision analysis.

    - 📊 **Study Harm Scores**: per-criterion breakdown for one study, with criteria toggles
    - 🌍 **Cross-Study Comparison**: users vs. others harm side by side for every study

    Use the sidebar to open a page. Selections are kept in the URL so views can be shared.
    """)

with col2:
    st.markdown("### 📚 Studies")
    for study in StudyId:
        info = STUDY_INFO[study]
        st.markdown(
            f'<div class="study-card" style="border-left: 4px solid {info.color};">'
            f'<b>{info.name}</b><br>'
            f'<a href="{info.link}" target="_blank">{info.full_name}</a>, <i>{info.journal}</i><br>'
            f'{info.experts} experts</div>',
            unsafe_allow_html=True
        )


@st.cache_data
def load_aggregate_frame():
    return aggregate_comparison_frame()


st.markdown("---")
st.subheader("Harm to Users across Studies")
st.caption("Aggregate scores (0-100 scale), sorted by the four-study average")

render_aggregate_comparison(load_aggregate_frame(), height=settings.chart_height + 200)

with st.expander("About the studies"):
    for study in StudyId:
        info = STUDY_INFO[study]
        st.markdown(f"**{info.name}** ({info.full_name}): {info.description}")

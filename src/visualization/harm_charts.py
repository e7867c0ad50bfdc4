"""
Plotly chart components for MCDA drug harm scores.

Usage:
    import streamlit as st
    from src.visualization.harm_charts import render_criteria_breakdown

    rows = study_breakdown_rows(StudyId.UK_2010, enabled)
    render_criteria_breakdown(rows, enabled_criteria, title="UK 2010")

``build_*`` functions return figures and have no Streamlit dependency;
``render_*`` functions draw them into the current Streamlit page.
"""

from typing import Any, Dict, Sequence, Tuple

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from src.drug_harm.models import ComparisonRow, Criterion, DrugClass, StudyId
from src.drug_harm.studies import STUDY_INFO

AXIS_COLOR = '#334155'
TICK_COLOR = '#64748b'
LABEL_COLOR = '#e2e8f0'
OTHERS_OPACITY = 0.4


def _base_layout(title: str, height: int, x_max: float) -> Dict[str, Any]:
    return dict(
        title=dict(text=f'<b>{title}</b>', x=0.0, font=dict(size=16)),
        xaxis=dict(
            range=[0, x_max],
            gridcolor=AXIS_COLOR,
            tickfont=dict(color=TICK_COLOR, size=11),
            zeroline=False,
        ),
        yaxis=dict(
            autorange='reversed',  # first row at the top
            tickfont=dict(color=LABEL_COLOR, size=12),
        ),
        plot_bgcolor='rgba(0,0,0,0)',
        height=height,
        margin=dict(l=160, r=30, t=60, b=30),
    )


def drug_class_hover(drug_class) -> str:
    """Coloured class label for hover text; blank for an unknown class."""
    try:
        drug_class = DrugClass(drug_class)
    except ValueError:
        return ""
    return f'<span style="color:{drug_class.color}">({drug_class.label})</span>'


def build_criteria_breakdown_figure(
    rows: Sequence[Dict[str, Any]],
    criteria: Sequence[Criterion],
    title: str = "Harm Scores",
    x_max: float = 50,
    height: int = 600,
) -> go.Figure:
    """
    Horizontal stacked bars, one segment per enabled criterion.

    Parameters:
    -----------
    rows : sequence of dict
        Output of ``study_breakdown_rows``; needs ``drug`` plus one column per criterion key
    criteria : sequence of Criterion
        Enabled criteria in schema order (segment and legend order)
    title : str
        Chart title
    x_max : float
        Upper bound of the score axis
    height : int
        Chart height in pixels
    """
    fig = go.Figure()
    drugs = [row["drug"] for row in rows]
    classes = [drug_class_hover(row.get("drug_class")) for row in rows]

    for criterion in criteria:
        key = criterion.key.value
        fig.add_trace(go.Bar(
            y=drugs,
            x=[row.get(key, 0) for row in rows],
            name=criterion.short_label,
            orientation='h',
            marker=dict(color=criterion.color),
            customdata=classes,
            hovertemplate=(
                f"<b>%{{y}}</b> %{{customdata}}<br>{criterion.label}: %{{x}}<br>"
                f"Weight: {criterion.weight:.1f}<extra></extra>"
            ),
        ))

    layout_args = _base_layout(title, height, x_max)
    layout_args.update(
        barmode='stack',
        legend=dict(orientation='h', yanchor='top', y=-0.05, x=0, font=dict(size=10)),
    )
    fig.update_layout(**layout_args)
    return fig


def build_flat_harm_figure(
    ranking: Sequence[Tuple[str, float]],
    color: str,
    title: str = "Harm Scores",
    x_max: float = 45,
    height: int = 600,
) -> go.Figure:
    """Single-colour bars for a study published without a criteria breakdown."""
    fig = go.Figure(go.Bar(
        y=[drug for drug, _ in ranking],
        x=[score for _, score in ranking],
        orientation='h',
        marker=dict(color=color, opacity=0.85),
        hovertemplate="<b>%{y}</b><br>Harm to users: %{x}<extra></extra>",
        showlegend=False,
    ))
    fig.update_layout(**_base_layout(title, height, x_max))
    return fig


def build_aggregate_comparison_figure(frame: pd.DataFrame, height: int = 800) -> go.Figure:
    """
    Grouped bars of the aggregate harm-to-users table, one bar per study.

    Expects the columns of ``aggregate_comparison_frame``.
    """
    fig = go.Figure()
    for study in StudyId:
        info = STUDY_INFO[study]
        fig.add_trace(go.Bar(
            y=frame["drug"],
            x=frame[study.value],
            name=info.name,
            orientation='h',
            marker=dict(color=info.color),
            hovertemplate=f"<b>%{{y}}</b><br>{info.name}: %{{x}}<extra></extra>",
        ))

    x_max = float(frame[[s.value for s in StudyId]].max().max()) + 5 if not frame.empty else 45
    layout_args = _base_layout("Harm to Users across Studies", height, x_max)
    layout_args.update(barmode='group', bargap=0.2, bargroupgap=0.0)
    fig.update_layout(**layout_args)
    return fig


def build_comparison_figure(
    rows: Sequence[ComparisonRow],
    show_users: bool = True,
    show_others: bool = True,
    x_max: float = 80,
    height: int = 800,
) -> go.Figure:
    """
    Grouped bars per drug, one group member per study; each member stacks
    harm to users (solid) under harm to others (faded).
    """
    fig = go.Figure()
    drugs = [row.drug for row in rows]

    for study in StudyId:
        info = STUDY_INFO[study]
        users = [row.for_study(study).users for row in rows]
        others = [row.for_study(study).others for row in rows]

        if show_users:
            fig.add_trace(go.Bar(
                y=drugs,
                x=users,
                name=f"{info.name} Users",
                orientation='h',
                offsetgroup=study.value,
                marker=dict(color=info.color),
                hovertemplate=f"<b>%{{y}}</b><br>{info.name} users: %{{x}}<extra></extra>",
            ))
        if show_others:
            fig.add_trace(go.Bar(
                y=drugs,
                x=others,
                base=users if show_users else None,
                name=f"{info.name} Others",
                orientation='h',
                offsetgroup=study.value,
                marker=dict(color=info.color, opacity=OTHERS_OPACITY),
                hovertemplate=f"<b>%{{y}}</b><br>{info.name} others: %{{x}}<extra></extra>",
            ))

    layout_args = _base_layout("Cross-Study Comparison", height, x_max)
    layout_args.update(barmode='group', bargap=0.2, bargroupgap=0.0)
    fig.update_layout(**layout_args)
    return fig


def comparison_caption(show_users: bool, show_others: bool) -> str:
    if show_users and show_others:
        return "Each bar shows harm to users (solid) and harm to others (faded)"
    if show_users:
        return "Showing harm to users only"
    if show_others:
        return "Showing harm to others only"
    return "Select a harm category to display"


def render_criteria_breakdown(
    rows: Sequence[Dict[str, Any]],
    criteria: Sequence[Criterion],
    title: str = "Harm Scores",
    x_max: float = 50,
    height: int = 600,
) -> None:
    fig = build_criteria_breakdown_figure(rows, criteria, title=title, x_max=x_max, height=height)
    st.plotly_chart(fig, use_container_width=True)


def render_flat_harm(
    ranking: Sequence[Tuple[str, float]],
    color: str,
    title: str = "Harm Scores",
    height: int = 600,
) -> None:
    fig = build_flat_harm_figure(ranking, color, title=title, height=height)
    st.plotly_chart(fig, use_container_width=True)


def render_aggregate_comparison(frame: pd.DataFrame, height: int = 800) -> None:
    st.plotly_chart(build_aggregate_comparison_figure(frame, height=height), use_container_width=True)


def render_comparison(
    rows: Sequence[ComparisonRow],
    show_users: bool,
    show_others: bool,
    x_max: float,
    height: int,
) -> None:
    st.caption(comparison_caption(show_users, show_others))
    fig = build_comparison_figure(rows, show_users, show_others, x_max=x_max, height=height)
    st.plotly_chart(fig, use_container_width=True)

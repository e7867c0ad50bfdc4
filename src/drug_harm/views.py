"""
Tabular views for the dashboard.

Shapes aggregator output into pandas DataFrames that the chart builders and
Streamlit tables consume.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

import pandas as pd

from src.drug_harm.aggregator import normalize_selection, study_harm_totals
from src.drug_harm.comparison import axis_max
from src.drug_harm.models import ComparisonRow, StudyId
from src.drug_harm.registry import get_registry
from src.drug_harm.studies import AGGREGATE_HARM_ROWS, STUDY_INFO, aggregate_ranking, cross_study_average

logger = logging.getLogger(__name__)

EMPTY_BREAKDOWN_AXIS_MAX = 50


def study_breakdown_rows(study_id, enabled_criteria: Optional[Iterable] = None) -> List[Dict[str, Any]]:
    """
    One row per drug with every criterion's contribution and the row total.

    Disabled criteria contribute 0. Rows are sorted by total, most harmful
    first. Studies without a criteria breakdown yield no rows.
    """
    registry = get_registry()
    if not registry.has_criteria_breakdown(study_id):
        return []

    enabled = normalize_selection(enabled_criteria)
    criteria = registry.get_schema(study_id).all
    rows = []
    for record in registry.get_scores(study_id):
        row: Dict[str, Any] = {"drug": record.drug, "drug_class": record.drug_class.value}
        total = 0
        for criterion in criteria:
            key = criterion.key.value
            value = record.get(key, 0) if enabled is None or key in enabled else 0
            row[key] = value
            total += value
        row["total"] = total
        rows.append(row)

    rows.sort(key=lambda r: r["total"], reverse=True)
    return rows


def breakdown_axis_max(rows: Sequence[Dict[str, Any]]) -> int:
    return axis_max([row["total"] for row in rows], EMPTY_BREAKDOWN_AXIS_MAX)


def study_summary_frame(study_id, enabled_criteria: Optional[Iterable] = None) -> pd.DataFrame:
    """Users / others / total per drug, most harmful first."""
    summaries = study_harm_totals(study_id, enabled_criteria)
    frame = pd.DataFrame(
        [
            {
                "Drug": s.drug,
                "Class": s.drug_class.label,
                "Harm to Users": s.users,
                "Harm to Others": s.others,
                "Total": s.total,
            }
            for s in summaries
        ],
        columns=["Drug", "Class", "Harm to Users", "Harm to Others", "Total"],
    )
    return frame.sort_values("Total", ascending=False, kind="stable").reset_index(drop=True)


def aggregate_ranking_frame(study_id) -> pd.DataFrame:
    """Flat harm-to-users scores of one study, most harmful first."""
    return pd.DataFrame(aggregate_ranking(study_id), columns=["drug", "score"])


def aggregate_comparison_frame() -> pd.DataFrame:
    """
    Aggregate table with one column per study plus the four-study average,
    sorted by the average.
    """
    records = []
    for drug, drug_class, *values in AGGREGATE_HARM_ROWS:
        record: Dict[str, Any] = {"drug": drug, "drug_class": drug_class.value}
        for study, value in zip(StudyId, values):
            record[study.value] = value
        record["average"] = cross_study_average(drug)
        records.append(record)
    frame = pd.DataFrame(records)
    return frame.sort_values("average", ascending=False, kind="stable").reset_index(drop=True)


def comparison_table(rows: Sequence[ComparisonRow], show_users: bool, show_others: bool) -> pd.DataFrame:
    """
    Display table for the comparison page.

    Each study cell shows ``users + others = total`` when both categories are
    visible, a single number otherwise, and "-" where the study has no
    data.
    """
    def cell(users: float, others: float) -> str:
        total = users + others
        if total == 0:
            return "-"
        if show_users and show_others:
            return f"{users:g} + {others:g} = {total:g}"
        if show_users:
            return f"{users:g}"
        if show_others:
            return f"{others:g}"
        return "-"

    records = []
    for row in rows:
        record = {"Drug": row.drug}
        for study in row.studies:
            record[STUDY_INFO[study.study_id].name] = cell(study.users, study.others)
        average = row.average_reported
        record["Average"] = "-" if average is None else f"{average:.1f}"
        records.append(record)
    return pd.DataFrame(records)

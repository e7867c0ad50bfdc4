"""
Tests for the DataFrame views behind charts and tables.
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.drug_harm.comparison import build_comparison_rows
from src.drug_harm.models import ComparisonRow, StudyHarm, StudyId
from src.drug_harm.views import (
    aggregate_comparison_frame,
    aggregate_ranking_frame,
    breakdown_axis_max,
    comparison_table,
    study_breakdown_rows,
    study_summary_frame,
)


class TestStudyBreakdown:
    """Tests for study_breakdown_rows() and friends."""

    def test_rows_sorted_by_total(self):
        rows = study_breakdown_rows(StudyId.UK_2010)
        totals = [row["total"] for row in rows]
        assert totals == sorted(totals, reverse=True)
        assert rows[0]["drug"] == "Alcohol"
        assert rows[0]["total"] == 72

    def test_disabled_criteria_are_zero(self):
        rows = study_breakdown_rows(StudyId.UK_2010, {"dependence"})
        alcohol = next(row for row in rows if row["drug"] == "Alcohol")
        assert alcohol["dependence"] == 4
        assert alcohol["economicCost"] == 0
        assert alcohol["total"] == 4

    def test_new_zealand_columns(self):
        row = study_breakdown_rows(StudyId.NEW_ZEALAND_2023)[0]
        assert "culturalHarm" in row
        assert "lossOfRelationships" not in row

    def test_no_breakdown_study(self):
        assert study_breakdown_rows(StudyId.EUROPE_2015) == []

    def test_axis_max(self):
        assert breakdown_axis_max(study_breakdown_rows(StudyId.UK_2010)) == 85
        assert breakdown_axis_max([]) == 50

    def test_australia_rows(self):
        rows = study_breakdown_rows(StudyId.AUSTRALIA_2019)
        assert len(rows) == 18
        assert "Fentanyl" in {row["drug"] for row in rows}
        assert rows[0]["drug_class"] == "depressant"


class TestSummaryFrames:
    """Tests for study_summary_frame() and the aggregate frames."""

    def test_summary_columns(self):
        frame = study_summary_frame(StudyId.UK_2010)
        assert list(frame.columns) == ["Drug", "Class", "Harm to Users", "Harm to Others", "Total"]
        assert frame.iloc[0]["Drug"] == "Alcohol"
        assert frame.iloc[0]["Class"] == "Depressants"

    def test_summary_empty_selection(self):
        frame = study_summary_frame(StudyId.UK_2010, set())
        assert (frame["Total"] == 0).all()

    def test_summary_no_breakdown(self):
        assert study_summary_frame(StudyId.EUROPE_2015).empty

    def test_aggregate_ranking_frame(self):
        frame = aggregate_ranking_frame(StudyId.EUROPE_2015)
        assert list(frame.columns) == ["drug", "score"]
        assert frame.iloc[0]["score"] == frame["score"].max()

    def test_aggregate_comparison_frame(self):
        frame = aggregate_comparison_frame()
        for study in StudyId:
            assert study.value in frame.columns
        heroin = frame[frame["drug"] == "Heroin"].iloc[0]
        assert heroin["average"] == pytest.approx(35.25)
        assert list(frame["average"]) == sorted(frame["average"], reverse=True)


class TestComparisonTable:
    """Tests for comparison_table()."""

    @pytest.fixture
    def row(self):
        return ComparisonRow(drug="Butane", studies=[
            StudyHarm(study_id=StudyId.UK_2010, users=10, others=1),
            StudyHarm(study_id=StudyId.AUSTRALIA_2019),
            StudyHarm(study_id=StudyId.NEW_ZEALAND_2023),
            StudyHarm(study_id=StudyId.EUROPE_2015),
        ])

    def test_both_categories(self, row):
        table = comparison_table([row], True, True)
        assert table.iloc[0]["UK 2010"] == "10 + 1 = 11"
        assert table.iloc[0]["Australia 2019"] == "-"
        assert table.iloc[0]["Average"] == "11.0"

    def test_single_category(self, row):
        assert comparison_table([row], True, False).iloc[0]["UK 2010"] == "10"
        assert comparison_table([row], False, True).iloc[0]["UK 2010"] == "1"

    def test_no_data_average(self):
        row = ComparisonRow(drug="Nothing", studies=[StudyHarm(study_id=s) for s in StudyId])
        assert comparison_table([row], True, True).iloc[0]["Average"] == "-"

    def test_built_rows(self):
        table = comparison_table(build_comparison_rows(), True, True)
        alcohol = table[table["Drug"] == "Alcohol"].iloc[0]
        assert alcohol["UK 2010"] == "26 + 46 = 72"
        assert alcohol["Europe 2015"] == "-"
        assert alcohol["Average"] == "71.3"

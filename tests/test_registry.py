"""
Tests for the study registry, criteria schemas and score tables.
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.drug_harm.criteria import NEW_ZEALAND_SCHEMA, STANDARD_SCHEMA
from src.drug_harm.models import (
    EMPTY_SCHEMA,
    CriteriaKey,
    DrugClass,
    DrugScoreRecord,
    HarmCategory,
    SchemaVariant,
    StudyDataset,
    StudyId,
)
from src.drug_harm.registry import StudyRegistry, get_default_registry, get_registry, get_schema, get_scores
from src.drug_harm.aggregator import user_harm
from src.drug_harm.score_tables import build_records
from src.drug_harm.studies import get_aggregate_scores


FULL_STUDIES = [StudyId.UK_2010, StudyId.AUSTRALIA_2019, StudyId.NEW_ZEALAND_2023]


class TestSchemaLookup:
    """Tests for get_schema()."""

    def test_standard_partition_sizes(self):
        schema = get_schema(StudyId.UK_2010)
        assert len(schema.user_criteria) == 9
        assert len(schema.others_criteria) == 7
        assert len(schema.all) == 16

    def test_new_zealand_partition_sizes(self):
        schema = get_schema(StudyId.NEW_ZEALAND_2023)
        assert len(schema.user_criteria) == 8
        assert len(schema.others_criteria) == 8

    def test_uk_and_australia_share_schema(self):
        """Both standard studies return the very same schema object."""
        assert get_schema(StudyId.UK_2010) is get_schema(StudyId.AUSTRALIA_2019)
        assert get_schema(StudyId.UK_2010) is STANDARD_SCHEMA

    def test_all_is_user_then_others(self):
        for schema in (STANDARD_SCHEMA, NEW_ZEALAND_SCHEMA):
            assert schema.all == schema.user_criteria + schema.others_criteria

    def test_categories_match_partition(self):
        for schema in (STANDARD_SCHEMA, NEW_ZEALAND_SCHEMA):
            assert all(c.category == HarmCategory.USER for c in schema.user_criteria)
            assert all(c.category == HarmCategory.OTHERS for c in schema.others_criteria)

    def test_no_duplicate_keys(self):
        for schema in (STANDARD_SCHEMA, NEW_ZEALAND_SCHEMA):
            assert len(set(schema.all_keys)) == len(schema.all_keys)

    def test_no_breakdown_study_empty(self):
        schema = get_schema(StudyId.EUROPE_2015)
        assert schema.user_criteria == ()
        assert schema.others_criteria == ()
        assert schema.all == ()

    def test_unknown_study_empty(self):
        assert get_schema("atlantis1999") == EMPTY_SCHEMA
        assert get_schema(None) == EMPTY_SCHEMA


class TestScoreTables:
    """Tests for get_scores() and the curated tables."""

    @pytest.mark.parametrize("study", FULL_STUDIES)
    def test_partition_completeness(self, study):
        """Every record carries exactly the schema's keys."""
        schema = get_schema(study)
        expected = set(schema.user_keys) | set(schema.others_keys)
        for record in get_scores(study):
            assert set(record.scores) == expected

    def test_uk_order_is_source_order(self):
        drugs = [r.drug for r in get_scores(StudyId.UK_2010)]
        assert drugs[:3] == ["Alcohol", "Heroin", "Crack Cocaine"]
        assert len(drugs) == 20

    def test_drug_sets_differ(self):
        """Tables are neither padded nor truncated to match each other."""
        uk = {r.drug for r in get_scores(StudyId.UK_2010)}
        australia = {r.drug for r in get_scores(StudyId.AUSTRALIA_2019)}
        assert "Fentanyl" in australia and "Fentanyl" not in uk
        assert "Butane" in uk and "Butane" not in australia

    def test_no_breakdown_study_empty(self):
        assert get_scores(StudyId.EUROPE_2015) == ()

    def test_unknown_study_empty(self):
        assert get_scores("atlantis1999") == ()

    def test_record_access(self):
        alcohol = get_scores(StudyId.UK_2010)[0]
        assert alcohol["economicCost"] == 14
        assert alcohol[CriteriaKey.ECONOMIC_COST] == 14
        assert CriteriaKey.CRIME in alcohol
        assert alcohol.get("culturalHarm") == 0

    def test_scores_are_read_only(self):
        """Shared score tables cannot be rewritten through a record."""
        alcohol = get_scores(StudyId.UK_2010)[0]
        with pytest.raises(TypeError):
            alcohol.scores["dependence"] = 1000
        with pytest.raises(TypeError):
            del alcohol.scores["dependence"]
        assert alcohol["dependence"] == 4
        assert user_harm(alcohol) == 26

    def test_record_copies_input_scores(self):
        """Changing the dict a record was built from leaves the record intact."""
        scores = {"dependence": 3}
        record = DrugScoreRecord(drug="X", drug_class=DrugClass.OTHER, scores=scores)
        scores["dependence"] = 99
        assert record["dependence"] == 3

    def test_records_are_hashable(self):
        alcohol = get_scores(StudyId.UK_2010)[0]
        assert hash(alcohol) == hash(get_scores(StudyId.UK_2010)[0])
        assert len({alcohol, get_scores(StudyId.UK_2010)[1]}) == 2

    @pytest.mark.parametrize("study", [StudyId.AUSTRALIA_2019, StudyId.NEW_ZEALAND_2023])
    def test_user_subtotals_match_aggregate_table(self, study):
        """Per-criterion estimates add up to the study's aggregate harm-to-users score."""
        aggregate = get_aggregate_scores(study)
        variant = get_registry().get_variant(study)
        checked = 0
        for record in get_scores(study):
            if record.drug in aggregate:
                assert user_harm(record, None, variant) == aggregate[record.drug], record.drug
                checked += 1
        assert checked >= 14

    def test_build_records_rejects_short_rows(self):
        rows = [("Bad", DrugClass.OTHER, (1, 2), (1,))]
        with pytest.raises(ValueError):
            build_records(STANDARD_SCHEMA, rows)


class TestStudyRegistry:
    """Tests for StudyRegistry."""

    def test_default_variants(self):
        registry = get_default_registry()
        assert registry.get_variant(StudyId.UK_2010) == SchemaVariant.STANDARD
        assert registry.get_variant(StudyId.AUSTRALIA_2019) == SchemaVariant.STANDARD
        assert registry.get_variant(StudyId.NEW_ZEALAND_2023) == SchemaVariant.NEW_ZEALAND
        assert registry.get_variant(StudyId.EUROPE_2015) == SchemaVariant.AGGREGATE_ONLY

    def test_breakdown_flags(self):
        registry = get_registry()
        assert registry.has_criteria_breakdown(StudyId.UK_2010)
        assert not registry.has_criteria_breakdown(StudyId.EUROPE_2015)
        assert not registry.has_criteria_breakdown("atlantis1999")

    def test_score_tables_in_study_order(self):
        tables = get_registry().score_tables()
        assert list(tables) == list(StudyId)

    def test_unknown_study_variant(self):
        assert get_registry().get_variant("atlantis1999") == SchemaVariant.AGGREGATE_ONLY
        assert get_registry().get_dataset("atlantis1999") is None

    def test_custom_registry(self):
        record = DrugScoreRecord(drug="X", drug_class=DrugClass.OTHER, scores={"dependence": 1})
        assert StudyRegistry().study_ids == ()
        registry = StudyRegistry({
            StudyId.UK_2010: StudyDataset(
                study_id=StudyId.UK_2010,
                variant=SchemaVariant.STANDARD,
                schema=STANDARD_SCHEMA,
                scores=(record,),
                has_criteria_breakdown=True,
            ),
        })
        assert registry.study_ids == (StudyId.UK_2010,)
        assert registry.get_scores(StudyId.UK_2010) == (record,)
        assert registry.get_scores(StudyId.AUSTRALIA_2019) == ()

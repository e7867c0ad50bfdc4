"""
Tests for criteria selection state and query parameter encoding.
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.drug_harm.criteria import NEW_ZEALAND_SCHEMA, STANDARD_SCHEMA
from src.drug_harm.models import EMPTY_SCHEMA, CriteriaKey, HarmCategory
from src.drug_harm.selection import (
    NONE_SENTINEL,
    clear_category,
    enabled_count,
    encode_criteria_param,
    parse_bool_param,
    parse_criteria_param,
    select_category,
    toggle_criterion,
)


class TestParseCriteriaParam:
    """Tests for parse_criteria_param()."""

    @pytest.mark.parametrize("param", [None, "", " , ", []])
    def test_absent_means_all(self, param):
        assert parse_criteria_param(param) is None

    def test_none_sentinel(self):
        """The sentinel is an explicit empty selection, not "all"."""
        assert parse_criteria_param(NONE_SENTINEL) == frozenset()

    def test_comma_separated(self):
        assert parse_criteria_param("dependence, crime") == frozenset({"dependence", "crime"})

    def test_list_form(self):
        assert parse_criteria_param(["dependence,crime", "injury"]) == frozenset({"dependence", "crime", "injury"})

    def test_unknown_keys_kept(self):
        assert parse_criteria_param("bogus") == frozenset({"bogus"})


class TestEncodeCriteriaParam:
    """Tests for encode_criteria_param()."""

    def test_all_selected_clears_param(self):
        assert encode_criteria_param(None, STANDARD_SCHEMA) is None
        assert encode_criteria_param(set(STANDARD_SCHEMA.all_keys), STANDARD_SCHEMA) is None

    def test_empty_selection_uses_sentinel(self):
        assert encode_criteria_param(set(), STANDARD_SCHEMA) == NONE_SENTINEL

    def test_schema_order(self):
        """Keys are written in schema order whatever the set order."""
        assert encode_criteria_param({"crime", "dependence"}, STANDARD_SCHEMA) == "dependence,crime"

    def test_enum_members(self):
        assert encode_criteria_param({CriteriaKey.INJURY}, STANDARD_SCHEMA) == "injury"

    def test_foreign_keys_after_schema_keys(self):
        encoded = encode_criteria_param({"culturalHarm", "injury"}, STANDARD_SCHEMA)
        assert encoded == "injury,culturalHarm"

    def test_round_trip_of_partial_selection(self):
        selection = frozenset({"dependence", "mentalImpairment", "culturalHarm"})
        encoded = encode_criteria_param(selection, NEW_ZEALAND_SCHEMA)
        assert parse_criteria_param(encoded) == selection


class TestSelectionUpdates:
    """Tests for toggle / select / clear."""

    def test_toggle_off_from_all(self):
        selection = toggle_criterion(None, "dependence", STANDARD_SCHEMA)
        assert "dependence" not in selection
        assert len(selection) == 15

    def test_toggle_on(self):
        assert toggle_criterion(frozenset(), CriteriaKey.CRIME, STANDARD_SCHEMA) == frozenset({"crime"})

    def test_toggle_does_not_mutate(self):
        original = {"crime"}
        toggle_criterion(original, "crime", STANDARD_SCHEMA)
        assert original == {"crime"}

    def test_clear_users(self):
        selection = clear_category(None, HarmCategory.USER, STANDARD_SCHEMA)
        assert selection == frozenset(STANDARD_SCHEMA.others_keys)

    def test_clear_all(self):
        assert clear_category(None, "all", STANDARD_SCHEMA) == frozenset()

    def test_select_others(self):
        selection = select_category(frozenset({"dependence"}), "others", STANDARD_SCHEMA)
        assert selection == frozenset(STANDARD_SCHEMA.others_keys) | {"dependence"}

    def test_select_all(self):
        assert select_category(frozenset(), "all", STANDARD_SCHEMA) is None

    def test_enabled_count(self):
        assert enabled_count(None, STANDARD_SCHEMA) == 16
        assert enabled_count(None, NEW_ZEALAND_SCHEMA, HarmCategory.USER) == 8
        assert enabled_count({"dependence", "crime", "bogus"}, STANDARD_SCHEMA) == 2
        assert enabled_count({"dependence", "crime"}, STANDARD_SCHEMA, "others") == 1

    def test_empty_schema(self):
        assert enabled_count(None, EMPTY_SCHEMA) == 0
        assert encode_criteria_param(set(), EMPTY_SCHEMA) == NONE_SENTINEL


class TestParseBoolParam:
    """Tests for parse_bool_param()."""

    @pytest.mark.parametrize("value,expected", [
        ("true", True),
        ("false", False),
        ("False", False),
        ("0", False),
        ("1", True),
        ("garbage", True),
    ])
    def test_values(self, value, expected):
        assert parse_bool_param(value) is expected

    def test_missing_uses_default(self):
        assert parse_bool_param(None) is True
        assert parse_bool_param(None, default=False) is False

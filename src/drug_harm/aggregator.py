"""
Harm Aggregator

Sums a drug's criterion scores into harm-to-users, harm-to-others and total
harm under a caller-supplied criteria selection.

Selection semantics:
- ``enabled_criteria=None`` enables every criterion (select all)
- an explicit empty set enables nothing, so every sum is 0
- keys outside the record or the schema contribute nothing

Records may be ``DrugScoreRecord`` instances or plain mappings of criterion
key to score. Missing entries count as 0.
"""

import logging
from functools import lru_cache
from typing import Dict, FrozenSet, Iterable, Optional, Tuple

from src.drug_harm.criteria import NEW_ZEALAND_SCHEMA, STANDARD_SCHEMA
from src.drug_harm.models import (
    DrugHarmSummary,
    DrugScoreRecord,
    HarmCategory,
    SchemaVariant,
    key_value,
)
from src.drug_harm.registry import get_registry
from src.drug_harm.studies import parse_study_id

logger = logging.getLogger(__name__)


# (user keys, others keys) per schema variant
VARIANT_KEYS: Dict[SchemaVariant, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    SchemaVariant.STANDARD: (tuple(STANDARD_SCHEMA.user_keys), tuple(STANDARD_SCHEMA.others_keys)),
    SchemaVariant.NEW_ZEALAND: (tuple(NEW_ZEALAND_SCHEMA.user_keys), tuple(NEW_ZEALAND_SCHEMA.others_keys)),
    SchemaVariant.AGGREGATE_ONLY: ((), ()),
}


def category_keys(variant: SchemaVariant, category: HarmCategory) -> Tuple[str, ...]:
    """Criterion keys of one harm category for a schema variant."""
    user_keys, others_keys = VARIANT_KEYS[variant]
    if HarmCategory(category) == HarmCategory.USER:
        return user_keys
    return others_keys


def all_keys(variant: SchemaVariant) -> Tuple[str, ...]:
    user_keys, others_keys = VARIANT_KEYS[variant]
    return user_keys + others_keys


def normalize_selection(enabled_criteria: Optional[Iterable]) -> Optional[FrozenSet[str]]:
    """
    Selection as a frozenset of key strings; None stays None (all enabled).

    A single key (string or CriteriaKey) is a one-key selection.
    """
    if enabled_criteria is None:
        return None
    if isinstance(enabled_criteria, str):
        return frozenset({key_value(enabled_criteria)})
    return frozenset(key_value(key) for key in enabled_criteria)


def sum_category(record, category_keys: Iterable, enabled_criteria: Optional[Iterable] = None) -> float:
    """
    Sum a record's scores over ``category_keys``.

    Args:
        record: DrugScoreRecord or mapping of criterion key → score
        category_keys: Keys to sum over
        enabled_criteria: Keys allowed to contribute; None means all of them

    Returns:
        Sum of the enabled scores (0 when nothing is enabled)
    """
    enabled = normalize_selection(enabled_criteria)
    total = 0
    for key in category_keys:
        key = key_value(key)
        if enabled is not None and key not in enabled:
            continue
        value = record.get(key, 0)
        if value:
            total += value
    return total


def user_harm(
    record,
    enabled_criteria: Optional[Iterable] = None,
    variant: SchemaVariant = SchemaVariant.STANDARD,
) -> float:
    """Harm to users: sum of the variant's user-category criteria."""
    return sum_category(record, category_keys(variant, HarmCategory.USER), enabled_criteria)


def others_harm(
    record,
    enabled_criteria: Optional[Iterable] = None,
    variant: SchemaVariant = SchemaVariant.STANDARD,
) -> float:
    """Harm to others: sum of the variant's others-category criteria."""
    return sum_category(record, category_keys(variant, HarmCategory.OTHERS), enabled_criteria)


def total_harm(
    record,
    enabled_criteria: Optional[Iterable] = None,
    variant: SchemaVariant = SchemaVariant.STANDARD,
) -> float:
    """Total harm; always equals ``sum_category(record, all_keys(variant), enabled_criteria)``."""
    enabled = normalize_selection(enabled_criteria)
    return user_harm(record, enabled, variant) + others_harm(record, enabled, variant)


def summarize(
    record: DrugScoreRecord,
    enabled_criteria: Optional[Iterable] = None,
    variant: SchemaVariant = SchemaVariant.STANDARD,
) -> DrugHarmSummary:
    """Users / others / total subtotals of one record."""
    enabled = normalize_selection(enabled_criteria)
    users = user_harm(record, enabled, variant)
    others = others_harm(record, enabled, variant)
    return DrugHarmSummary(
        drug=record.drug,
        drug_class=record.drug_class,
        users=users,
        others=others,
        total=users + others,
    )


def study_harm_totals(study_id, enabled_criteria: Optional[Iterable] = None) -> Tuple[DrugHarmSummary, ...]:
    """
    Subtotals of every drug in a study, in score table order.

    Results are memoised per (study, selection); unknown studies yield ().
    """
    study = parse_study_id(study_id)
    if study is None:
        return ()
    return _cached_study_totals(study.value, normalize_selection(enabled_criteria))


@lru_cache(maxsize=128)
def _cached_study_totals(study: str, enabled: Optional[FrozenSet[str]]) -> Tuple[DrugHarmSummary, ...]:
    logger.debug("Computing harm totals for %s (%s criteria enabled)",
                 study, "all" if enabled is None else len(enabled))
    registry = get_registry()
    variant = registry.get_variant(study)
    return tuple(summarize(record, enabled, variant) for record in registry.get_scores(study))

"""
MCDA drug harm scores

Provides:
- Criteria schemas and per-drug score tables for four published studies
- Harm aggregation under a criteria selection (users / others / total)
- Cross-study comparison with an asymmetric drug eligibility policy
- Query-parameter encoding of criteria selections
"""

from src.drug_harm.models import (
    ComparisonRow,
    CriteriaKey,
    CriteriaSchema,
    Criterion,
    DrugClass,
    DrugHarmSummary,
    DrugScoreRecord,
    HarmCategory,
    SchemaVariant,
    StudyDataset,
    StudyHarm,
    StudyId,
    StudyInfo,
)
from src.drug_harm.registry import (
    StudyRegistry,
    get_dataset,
    get_default_registry,
    get_registry,
    get_schema,
    get_scores,
    get_variant,
)
from src.drug_harm.aggregator import (
    all_keys,
    category_keys,
    others_harm,
    study_harm_totals,
    sum_category,
    summarize,
    total_harm,
    user_harm,
)
from src.drug_harm.comparison import build_comparison_rows, comparable_drugs
from src.drug_harm.studies import STUDY_INFO, study_from_slug

__all__ = [
    # Models
    "ComparisonRow",
    "CriteriaKey",
    "CriteriaSchema",
    "Criterion",
    "DrugClass",
    "DrugHarmSummary",
    "DrugScoreRecord",
    "HarmCategory",
    "SchemaVariant",
    "StudyDataset",
    "StudyHarm",
    "StudyId",
    "StudyInfo",
    # Registry
    "StudyRegistry",
    "get_dataset",
    "get_default_registry",
    "get_registry",
    "get_schema",
    "get_scores",
    "get_variant",
    # Aggregation
    "all_keys",
    "category_keys",
    "others_harm",
    "study_harm_totals",
    "sum_category",
    "summarize",
    "total_harm",
    "user_harm",
    # Comparison
    "build_comparison_rows",
    "comparable_drugs",
    # Studies
    "STUDY_INFO",
    "study_from_slug",
]

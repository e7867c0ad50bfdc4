"""
Cross-study comparison.

A drug is eligible when either:

- it is in the base study (the smallest score table) and in at least one
  other table, or
- it is in the reference study.

Drugs outside both sets are left out even when every other study scores them.
With the shipped data the base table is empty, so the reference study's list
decides. Studies lacking an eligible drug are zero-filled.
"""

import logging
import math
from typing import Dict, List, Mapping, Optional, Sequence

from src.drug_harm.aggregator import others_harm, user_harm
from src.drug_harm.models import ComparisonRow, DrugScoreRecord, StudyHarm, StudyId
from src.drug_harm.registry import StudyRegistry, get_registry

logger = logging.getLogger(__name__)

DEFAULT_REFERENCE_STUDY = StudyId.UK_2010
EMPTY_AXIS_MAX = 80


def comparable_drugs(
    tables: Mapping[StudyId, Sequence[DrugScoreRecord]],
    reference_study: StudyId = DEFAULT_REFERENCE_STUDY,
    base_study: Optional[StudyId] = None,
) -> List[str]:
    """
    Drug names eligible for cross-study comparison, in insertion order.

    Args:
        tables: Score table per study
        reference_study: Study whose drug list is always included
        base_study: Study whose drugs are kept when another table also has them;
            defaults to the study with the smallest table

    Returns:
        Drug names, base-study drugs first, then the remaining reference drugs
    """
    if not tables:
        return []

    if base_study is None:
        base_study = min(tables, key=lambda study: len(tables[study]))

    other_drugs = {
        record.drug
        for study, records in tables.items()
        if study != base_study
        for record in records
    }

    eligible: Dict[str, None] = {}
    for record in tables.get(base_study, ()):
        if record.drug in other_drugs:
            eligible[record.drug] = None
    for record in tables.get(reference_study, ()):
        eligible[record.drug] = None

    return list(eligible)


def build_comparison_rows(
    show_users: bool = True,
    show_others: bool = True,
    reference_study: StudyId = DEFAULT_REFERENCE_STUDY,
    registry: Optional[StudyRegistry] = None,
) -> List[ComparisonRow]:
    """
    Users / others harm per study for every comparable drug.

    Hidden categories and studies without the drug contribute 0. Rows are
    sorted by the mean total over all studies, most harmful first.
    """
    registry = registry or get_registry()
    tables = registry.score_tables()
    by_drug = {
        study: {record.drug: record for record in records}
        for study, records in tables.items()
    }

    rows = []
    for drug in comparable_drugs(tables, reference_study):
        studies = []
        for study in registry.study_ids:
            record = by_drug[study].get(drug)
            variant = registry.get_variant(study)
            studies.append(StudyHarm(
                study_id=study,
                users=user_harm(record, None, variant) if show_users and record else 0,
                others=others_harm(record, None, variant) if show_others and record else 0,
            ))
        rows.append(ComparisonRow(drug=drug, studies=studies))

    rows.sort(key=lambda row: row.mean_total, reverse=True)
    logger.debug("Built %d comparison rows (users=%s, others=%s)", len(rows), show_users, show_others)
    return rows


def axis_max(totals: Sequence[float], empty_default: int) -> int:
    """Chart axis bound: next multiple of ten above the largest value, plus 5."""
    if not totals:
        return empty_default
    return int(math.ceil(max(totals) / 10) * 10 + 5)


def comparison_axis_max(rows: Sequence[ComparisonRow]) -> int:
    return axis_max([max((s.total for s in row.studies), default=0) for row in rows], EMPTY_AXIS_MAX)

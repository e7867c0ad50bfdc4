"""
Study Registry

Maps a study identifier to its criteria schema, score table and schema
variant. Lookups for an unknown study return empty results rather than
raising.
"""

import logging
from typing import Dict, Optional, Tuple

from src.drug_harm.criteria import NEW_ZEALAND_SCHEMA, STANDARD_SCHEMA
from src.drug_harm.models import (
    EMPTY_SCHEMA,
    CriteriaSchema,
    DrugScoreRecord,
    SchemaVariant,
    StudyDataset,
    StudyId,
)
from src.drug_harm.score_tables import (
    AUSTRALIA_2019_SCORES,
    EUROPE_2015_SCORES,
    NEW_ZEALAND_2023_SCORES,
    UK_2010_SCORES,
)
from src.drug_harm.studies import parse_study_id

logger = logging.getLogger(__name__)


class StudyRegistry:
    """
    Registry of study datasets.

    Provides:
    - Schema lookup partitioned into user / others criteria
    - Score table lookup in publication order
    - Schema variant lookup for the aggregator
    """

    def __init__(self, datasets: Optional[Dict[StudyId, StudyDataset]] = None):
        """
        Initialize registry.

        Args:
            datasets: Dictionary of StudyId → StudyDataset
        """
        self._datasets: Dict[StudyId, StudyDataset] = datasets or {}

    def get_dataset(self, study_id) -> Optional[StudyDataset]:
        """Dataset for a study, None if the study is unknown."""
        study = parse_study_id(study_id)
        if study is None:
            return None
        dataset = self._datasets.get(study)
        if dataset is None:
            logger.debug("No dataset registered for %s", study.value)
        return dataset

    def get_schema(self, study_id) -> CriteriaSchema:
        """Criteria of a study partitioned by category; empty for an unknown study."""
        dataset = self.get_dataset(study_id)
        if dataset is None:
            return EMPTY_SCHEMA
        return dataset.schema

    def get_scores(self, study_id) -> Tuple[DrugScoreRecord, ...]:
        """Per-drug score records of a study; empty for an unknown study."""
        dataset = self.get_dataset(study_id)
        if dataset is None:
            return ()
        return dataset.scores

    def get_variant(self, study_id) -> SchemaVariant:
        """Schema variant of a study (AGGREGATE_ONLY for an unknown study)."""
        dataset = self.get_dataset(study_id)
        if dataset is None:
            return SchemaVariant.AGGREGATE_ONLY
        return dataset.variant

    def has_criteria_breakdown(self, study_id) -> bool:
        dataset = self.get_dataset(study_id)
        return dataset is not None and dataset.has_criteria_breakdown

    def score_tables(self) -> Dict[StudyId, Tuple[DrugScoreRecord, ...]]:
        """Score table of every registered study, in StudyId order."""
        return {study: self._datasets[study].scores for study in StudyId if study in self._datasets}

    @property
    def study_ids(self) -> Tuple[StudyId, ...]:
        return tuple(study for study in StudyId if study in self._datasets)


def get_default_registry() -> StudyRegistry:
    """
    Create the registry of the four published studies.

    UK 2010 and Australia 2019 share one schema object.
    """
    return StudyRegistry({
        StudyId.UK_2010: StudyDataset(
            study_id=StudyId.UK_2010,
            variant=SchemaVariant.STANDARD,
            schema=STANDARD_SCHEMA,
            scores=UK_2010_SCORES,
            has_criteria_breakdown=True,
        ),
        StudyId.AUSTRALIA_2019: StudyDataset(
            study_id=StudyId.AUSTRALIA_2019,
            variant=SchemaVariant.STANDARD,
            schema=STANDARD_SCHEMA,
            scores=AUSTRALIA_2019_SCORES,
            has_criteria_breakdown=True,
        ),
        StudyId.NEW_ZEALAND_2023: StudyDataset(
            study_id=StudyId.NEW_ZEALAND_2023,
            variant=SchemaVariant.NEW_ZEALAND,
            schema=NEW_ZEALAND_SCHEMA,
            scores=NEW_ZEALAND_2023_SCORES,
            has_criteria_breakdown=True,
        ),
        StudyId.EUROPE_2015: StudyDataset(
            study_id=StudyId.EUROPE_2015,
            variant=SchemaVariant.AGGREGATE_ONLY,
            schema=EMPTY_SCHEMA,
            scores=EUROPE_2015_SCORES,
            has_criteria_breakdown=False,
        ),
    })


_registry: Optional[StudyRegistry] = None


def get_registry() -> StudyRegistry:
    """Get or create the shared default registry."""
    global _registry
    if _registry is None:
        _registry = get_default_registry()
    return _registry


def get_schema(study_id) -> CriteriaSchema:
    return get_registry().get_schema(study_id)


def get_scores(study_id) -> Tuple[DrugScoreRecord, ...]:
    return get_registry().get_scores(study_id)


def get_dataset(study_id) -> Optional[StudyDataset]:
    return get_registry().get_dataset(study_id)


def get_variant(study_id) -> SchemaVariant:
    return get_registry().get_variant(study_id)

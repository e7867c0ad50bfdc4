"""
Study metadata and the flat aggregate harm table.

The aggregate table carries one "harm to users" score per drug per study
(normalised to a 0-100 scale). It is the only data available for studies
that did not publish a per-criterion breakdown.
"""

import logging
from typing import Dict, List, Optional, Tuple

from src.drug_harm.models import DrugClass, StudyId, StudyInfo

logger = logging.getLogger(__name__)


STUDY_INFO: Dict[StudyId, StudyInfo] = {
    StudyId.UK_2010: StudyInfo(
        name="UK 2010",
        full_name="Nutt et al. (2010)",
        journal="The Lancet",
        link="https://doi.org/10.1016/S0140-6736(10)61462-6",
        color="#6366f1",
        description=(
            "The foundational gold-standard MCDA study. Used 16 harm criteria with swing weighting. "
            "Published in The Lancet (highest impact factor). Most cited drug harm ranking study."
        ),
        experts=15,
        slug="uk-2010",
    ),
    StudyId.AUSTRALIA_2019: StudyInfo(
        name="Australia 2019",
        full_name="Bonomo et al. (2019)",
        journal="J Psychopharmacology",
        link="https://doi.org/10.1177/0269881119841569",
        color="#22c55e",
        description=(
            "Rigorous MCDA replication with diverse Australian experts. Added supplementary "
            "prevalence-adjusted analysis to account for local usage patterns. High methodological quality."
        ),
        experts=25,
        slug="australia-2019",
    ),
    StudyId.NEW_ZEALAND_2023: StudyInfo(
        name="New Zealand 2023",
        full_name="Crossin et al. (2023)",
        journal="J Psychopharmacology",
        link="https://doi.org/10.1177/02698811231182012",
        color="#f97316",
        description=(
            "Most methodologically advanced study. Added culturally-relevant criteria including indigenous "
            "perspectives (non-physical/spiritual harm) and youth-specific harm analysis. Most recent data "
            "reflects current drug landscape."
        ),
        experts=23,
        slug="new-zealand-2023",
    ),
    StudyId.EUROPE_2015: StudyInfo(
        name="Europe 2015",
        full_name="van Amsterdam et al. (2015)",
        journal="J Psychopharmacology",
        link="https://doi.org/10.1177/0269881115581980",
        color="#ec4899",
        description=(
            "EU-wide expert panel providing international perspective. Results validated against original UK "
            "panel with high correlation (r=0.93). Demonstrates cross-cultural consistency of harm rankings "
            "across Western nations."
        ),
        experts=20,
        slug="europe-2015",
    ),
}


def parse_study_id(value) -> Optional[StudyId]:
    """StudyId for an enum member or its string value, None if unknown."""
    if isinstance(value, StudyId):
        return value
    try:
        return StudyId(str(value))
    except ValueError:
        logger.debug("Unknown study identifier: %r", value)
        return None


def study_from_slug(slug: str) -> Optional[StudyId]:
    """Resolve a URL slug (e.g. ``new-zealand-2023``) to a StudyId."""
    for study_id, info in STUDY_INFO.items():
        if info.slug == slug:
            return study_id
    return None


def slug_for_study(study_id: StudyId) -> str:
    return STUDY_INFO[study_id].slug


# =============================================================================
# Aggregate harm-to-users table
# =============================================================================
# drug, class, UK 2010, Australia 2019, New Zealand 2023, Europe 2015

AggregateRow = Tuple[str, DrugClass, int, int, int, int]

AGGREGATE_HARM_ROWS: List[AggregateRow] = [
    ("Heroin", DrugClass.OPIOID, 34, 36, 38, 33),
    ("Crack Cocaine", DrugClass.STIMULANT, 37, 34, 35, 35),
    ("Methamphetamine", DrugClass.STIMULANT, 32, 33, 36, 30),
    ("Alcohol", DrugClass.DEPRESSANT, 26, 29, 27, 25),
    ("Cocaine", DrugClass.STIMULANT, 27, 25, 24, 26),
    ("Tobacco", DrugClass.OTHER, 26, 24, 22, 23),
    ("Amphetamine", DrugClass.STIMULANT, 23, 21, 22, 20),
    ("Cannabis", DrugClass.CANNABINOID, 20, 18, 16, 17),
    ("GHB", DrugClass.DEPRESSANT, 18, 16, 15, 16),
    ("Benzodiazepines", DrugClass.DEPRESSANT, 15, 17, 18, 14),
    ("Ketamine", DrugClass.DISSOCIATIVE, 15, 14, 13, 13),
    ("Methadone", DrugClass.OPIOID, 14, 15, 14, 13),
    ("Mephedrone", DrugClass.STIMULANT, 13, 12, 11, 12),
    ("Anabolic Steroids", DrugClass.OTHER, 10, 9, 8, 9),
    ("MDMA (Ecstasy)", DrugClass.STIMULANT, 9, 8, 9, 8),
    ("Khat", DrugClass.STIMULANT, 9, 7, 6, 8),
    ("LSD", DrugClass.PSYCHEDELIC, 7, 6, 5, 6),
    ("Buprenorphine", DrugClass.OPIOID, 8, 9, 8, 7),
    ("Psilocybin Mushrooms", DrugClass.PSYCHEDELIC, 5, 4, 4, 5),
]

# Column of each study within AGGREGATE_HARM_ROWS
_AGGREGATE_COLUMN: Dict[StudyId, int] = {
    StudyId.UK_2010: 2,
    StudyId.AUSTRALIA_2019: 3,
    StudyId.NEW_ZEALAND_2023: 4,
    StudyId.EUROPE_2015: 5,
}


def get_aggregate_scores(study_id) -> Dict[str, int]:
    """Drug -> aggregate harm-to-users score for a study, in table order."""
    study = parse_study_id(study_id)
    if study is None:
        return {}
    column = _AGGREGATE_COLUMN[study]
    return {row[0]: row[column] for row in AGGREGATE_HARM_ROWS}


def aggregate_ranking(study_id) -> List[Tuple[str, int]]:
    """Aggregate scores for a study sorted from most to least harmful."""
    scores = get_aggregate_scores(study_id)
    return sorted(scores.items(), key=lambda item: item[1], reverse=True)


def cross_study_average(drug: str) -> Optional[float]:
    """Mean aggregate score of a drug over the four studies, None if the drug is not listed."""
    for row in AGGREGATE_HARM_ROWS:
        if row[0] == drug:
            values = [row[column] for column in _AGGREGATE_COLUMN.values()]
            return sum(values) / len(values)
    return None


"""
Data models for MCDA drug harm scores.

Provides:
- Closed enumerations for studies, schema variants, criteria keys and drug classes
- Immutable dataclasses for criteria, per-drug score records and study datasets
- Pydantic result models for per-drug harm summaries and cross-study comparison rows
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, NamedTuple, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class StudyId(str, Enum):
    """The four published MCDA studies."""
    UK_2010 = "uk2010"
    AUSTRALIA_2019 = "australia2019"
    NEW_ZEALAND_2023 = "newzealand2023"
    EUROPE_2015 = "europe2015"


class SchemaVariant(Enum):
    """Criteria schema shapes; each study maps to exactly one."""
    STANDARD = "standard"              # 9 user + 7 others (UK 2010, Australia 2019)
    NEW_ZEALAND = "new_zealand"        # 8 user + 8 others
    AGGREGATE_ONLY = "aggregate_only"  # no criteria breakdown


class HarmCategory(str, Enum):
    """Who bears the harm measured by a criterion."""
    USER = "user"
    OTHERS = "others"


class CriteriaKey(str, Enum):
    """Every criterion key used by any study."""
    # Harm to users
    DRUG_SPECIFIC_MORTALITY = "drugSpecificMortality"
    DRUG_RELATED_MORTALITY = "drugRelatedMortality"
    DRUG_SPECIFIC_DAMAGE = "drugSpecificDamage"
    DRUG_RELATED_DAMAGE = "drugRelatedDamage"
    DEPENDENCE = "dependence"
    DRUG_SPECIFIC_MENTAL_IMPAIRMENT = "drugSpecificMentalImpairment"
    DRUG_RELATED_MENTAL_IMPAIRMENT = "drugRelatedMentalImpairment"
    MENTAL_IMPAIRMENT = "mentalImpairment"
    LOSS_OF_TANGIBLES = "lossOfTangibles"
    LOSS_OF_RELATIONSHIPS = "lossOfRelationships"
    NON_PHYSICAL_HARM = "nonPhysicalHarm"
    # Harm to others
    INJURY = "injury"
    CRIME = "crime"
    ENVIRONMENTAL_DAMAGE = "environmentalDamage"
    FAMILY_ADVERSITIES = "familyAdversities"
    INTERNATIONAL_DAMAGE = "internationalDamage"
    ECONOMIC_COST = "economicCost"
    COMMUNITY = "community"
    CULTURAL_HARM = "culturalHarm"


class DrugClass(str, Enum):
    """Pharmacological class (informational only)."""
    OPIOID = "opioid"
    STIMULANT = "stimulant"
    DEPRESSANT = "depressant"
    CANNABINOID = "cannabinoid"
    DISSOCIATIVE = "dissociative"
    PSYCHEDELIC = "psychedelic"
    OTHER = "other"

    @property
    def label(self) -> str:
        return DRUG_CLASS_LABELS[self]

    @property
    def color(self) -> str:
        return DRUG_CLASS_COLORS[self]


DRUG_CLASS_LABELS: Dict[DrugClass, str] = {
    DrugClass.OPIOID: "Opioids",
    DrugClass.STIMULANT: "Stimulants",
    DrugClass.DEPRESSANT: "Depressants",
    DrugClass.CANNABINOID: "Cannabinoids",
    DrugClass.DISSOCIATIVE: "Dissociatives",
    DrugClass.PSYCHEDELIC: "Psychedelics",
    DrugClass.OTHER: "Other",
}

DRUG_CLASS_COLORS: Dict[DrugClass, str] = {
    DrugClass.OPIOID: "#dc2626",
    DrugClass.STIMULANT: "#f97316",
    DrugClass.DEPRESSANT: "#8b5cf6",
    DrugClass.CANNABINOID: "#22c55e",
    DrugClass.DISSOCIATIVE: "#06b6d4",
    DrugClass.PSYCHEDELIC: "#ec4899",
    DrugClass.OTHER: "#6b7280",
}


@dataclass(frozen=True)
class Criterion:
    """One MCDA harm dimension."""
    key: CriteriaKey
    label: str
    short_label: str
    description: str
    weight: float                       # Swing weight (%), informational only
    color: str
    category: HarmCategory


@dataclass(frozen=True)
class DrugScoreRecord:
    """
    One drug's per-criterion scores for one study.

    Scores are keyed by the criterion key's string value and stored as a
    read-only mapping. Lookups through ``record[key]`` accept either a
    ``CriteriaKey`` or a plain string.
    """
    drug: str
    drug_class: DrugClass
    scores: Mapping[str, float] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, "scores", MappingProxyType(dict(self.scores)))

    def __getitem__(self, key: Union[CriteriaKey, str]) -> float:
        return self.scores[key_value(key)]

    def __contains__(self, key: Union[CriteriaKey, str]) -> bool:
        return key_value(key) in self.scores

    def get(self, key: Union[CriteriaKey, str], default: float = 0) -> float:
        return self.scores.get(key_value(key), default)


class CriteriaSchema(NamedTuple):
    """Criteria of one study, partitioned by harm category in declaration order."""
    user_criteria: Tuple[Criterion, ...]
    others_criteria: Tuple[Criterion, ...]
    all: Tuple[Criterion, ...]

    @property
    def user_keys(self) -> List[str]:
        return [c.key.value for c in self.user_criteria]

    @property
    def others_keys(self) -> List[str]:
        return [c.key.value for c in self.others_criteria]

    @property
    def all_keys(self) -> List[str]:
        return [c.key.value for c in self.all]


EMPTY_SCHEMA = CriteriaSchema(user_criteria=(), others_criteria=(), all=())


@dataclass(frozen=True)
class StudyInfo:
    """Bibliographic and display metadata for a study."""
    name: str
    full_name: str
    journal: str
    link: str
    color: str
    description: str
    experts: int
    slug: str


@dataclass(frozen=True)
class StudyDataset:
    """Schema + score table for one study."""
    study_id: StudyId
    variant: SchemaVariant
    schema: CriteriaSchema
    scores: Tuple[DrugScoreRecord, ...]
    has_criteria_breakdown: bool


# =============================================================================
# Result models
# =============================================================================

class DrugHarmSummary(BaseModel):
    """Harm subtotals for one drug under one criteria selection."""
    model_config = ConfigDict(frozen=True)

    drug: str = Field(...)
    drug_class: DrugClass = Field(DrugClass.OTHER)
    users: float = Field(0, description="Sum of enabled harm-to-users criteria")
    others: float = Field(0, description="Sum of enabled harm-to-others criteria")
    total: float = Field(0, description="users + others")


class StudyHarm(BaseModel):
    """Users/others split for one study within a comparison row."""
    study_id: StudyId = Field(...)
    users: float = Field(0)
    others: float = Field(0)

    @property
    def total(self) -> float:
        return self.users + self.others


class ComparisonRow(BaseModel):
    """One drug's harm across all studies, zero-filled where a study lacks the drug."""
    drug: str = Field(...)
    studies: List[StudyHarm] = Field(default_factory=list)

    def for_study(self, study_id: StudyId) -> StudyHarm:
        for study in self.studies:
            if study.study_id == study_id:
                return study
        return StudyHarm(study_id=study_id)

    @property
    def mean_total(self) -> float:
        """Mean total over every study (used for ordering)."""
        if not self.studies:
            return 0.0
        return sum(s.total for s in self.studies) / len(self.studies)

    @property
    def average_reported(self) -> Optional[float]:
        """Mean total over studies reporting a non-zero total, None if there are none."""
        totals = [s.total for s in self.studies if s.total > 0]
        if not totals:
            return None
        return sum(totals) / len(totals)


def key_value(key: Union[CriteriaKey, str]) -> str:
    """String value of a criterion key given as enum member or plain string."""
    if isinstance(key, Enum):
        return key.value
    return key

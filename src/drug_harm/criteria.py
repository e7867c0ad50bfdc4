"""
Harm criteria definitions.

Standard schema: the 16 criteria of Nutt et al. (2010), The Lancet, reused
unchanged by Bonomo et al. (2019).

New Zealand schema: Crossin et al. (2023) merged the two mental impairment
criteria, folded loss of relationships into family adversities and added
culturally grounded criteria for non-physical harm to users and cultural harm
to others.

Declaration order drives stacked-chart segment order and legend order.
"""

from typing import Tuple

from src.drug_harm.models import CriteriaKey, CriteriaSchema, Criterion, HarmCategory

USER = HarmCategory.USER
OTHERS = HarmCategory.OTHERS


# =============================================================================
# Standard schema (UK 2010, Australia 2019)
# =============================================================================

STANDARD_CRITERIA: Tuple[Criterion, ...] = (
    # Harm to users (9 criteria, cumulative weight 46%)
    Criterion(
        key=CriteriaKey.DRUG_SPECIFIC_MORTALITY,
        label="Drug-specific mortality",
        short_label="Mortality (direct)",
        description="Intrinsic lethality expressed as ratio of lethal dose to standard dose",
        weight=5.1,
        color="#dc2626",
        category=USER,
    ),
    Criterion(
        key=CriteriaKey.DRUG_RELATED_MORTALITY,
        label="Drug-related mortality",
        short_label="Mortality (related)",
        description="Life shortened by drug use (accidents, cancers, HIV, suicide)",
        weight=6.4,
        color="#ef4444",
        category=USER,
    ),
    Criterion(
        key=CriteriaKey.DRUG_SPECIFIC_DAMAGE,
        label="Drug-specific damage",
        short_label="Physical (direct)",
        description="Direct physical damage (cirrhosis, seizures, strokes, cardiomyopathy)",
        weight=4.1,
        color="#f97316",
        category=USER,
    ),
    Criterion(
        key=CriteriaKey.DRUG_RELATED_DAMAGE,
        label="Drug-related damage",
        short_label="Physical (related)",
        description="Indirect physical damage (blood-borne viruses, cutting agents, emphysema)",
        weight=4.1,
        color="#fb923c",
        category=USER,
    ),
    Criterion(
        key=CriteriaKey.DEPENDENCE,
        label="Dependence",
        short_label="Dependence",
        description="Propensity to continue use despite adverse consequences",
        weight=5.7,
        color="#eab308",
        category=USER,
    ),
    Criterion(
        key=CriteriaKey.DRUG_SPECIFIC_MENTAL_IMPAIRMENT,
        label="Drug-specific mental impairment",
        short_label="Mental (direct)",
        description="Direct mental effects (psychosis, intoxication)",
        weight=5.7,
        color="#a855f7",
        category=USER,
    ),
    Criterion(
        key=CriteriaKey.DRUG_RELATED_MENTAL_IMPAIRMENT,
        label="Drug-related mental impairment",
        short_label="Mental (related)",
        description="Secondary mental effects (mood disorders from lifestyle)",
        weight=5.7,
        color="#c084fc",
        category=USER,
    ),
    Criterion(
        key=CriteriaKey.LOSS_OF_TANGIBLES,
        label="Loss of tangibles",
        short_label="Loss tangibles",
        description="Loss of income, housing, job, educational achievements, criminal record",
        weight=4.5,
        color="#ec4899",
        category=USER,
    ),
    Criterion(
        key=CriteriaKey.LOSS_OF_RELATIONSHIPS,
        label="Loss of relationships",
        short_label="Loss relationships",
        description="Loss of family and friend relationships",
        weight=4.5,
        color="#f472b6",
        category=USER,
    ),
    # Harm to others (7 criteria, cumulative weight 54%)
    Criterion(
        key=CriteriaKey.INJURY,
        label="Injury",
        short_label="Injury",
        description="Violence, traffic accidents, fetal harm, drug waste",
        weight=11.5,
        color="#3b82f6",
        category=OTHERS,
    ),
    Criterion(
        key=CriteriaKey.CRIME,
        label="Crime",
        short_label="Crime",
        description="Acquisitive crime volume at population level",
        weight=10.2,
        color="#60a5fa",
        category=OTHERS,
    ),
    Criterion(
        key=CriteriaKey.ENVIRONMENTAL_DAMAGE,
        label="Environmental damage",
        short_label="Environment",
        description="Toxic waste, discarded needles, local pollution",
        weight=3.8,
        color="#10b981",
        category=OTHERS,
    ),
    Criterion(
        key=CriteriaKey.FAMILY_ADVERSITIES,
        label="Family adversities",
        short_label="Family",
        description="Family breakdown, child neglect, economic/emotional wellbeing",
        weight=8.9,
        color="#06b6d4",
        category=OTHERS,
    ),
    Criterion(
        key=CriteriaKey.INTERNATIONAL_DAMAGE,
        label="International damage",
        short_label="International",
        description="Deforestation, country destabilization, international crime",
        weight=3.8,
        color="#34d399",
        category=OTHERS,
    ),
    Criterion(
        key=CriteriaKey.ECONOMIC_COST,
        label="Economic cost",
        short_label="Economic",
        description="Healthcare, police, prisons, social services, lost productivity",
        weight=12.8,
        color="#6366f1",
        category=OTHERS,
    ),
    Criterion(
        key=CriteriaKey.COMMUNITY,
        label="Community",
        short_label="Community",
        description="Social cohesion decline, reputation damage",
        weight=3.2,
        color="#22d3ee",
        category=OTHERS,
    ),
)


# =============================================================================
# New Zealand schema (New Zealand 2023)
# =============================================================================

NEW_ZEALAND_CRITERIA: Tuple[Criterion, ...] = (
    # Harm to users (8 criteria)
    Criterion(
        key=CriteriaKey.DRUG_SPECIFIC_MORTALITY,
        label="Drug-specific mortality",
        short_label="Mortality (direct)",
        description="Intrinsic lethality expressed as ratio of lethal dose to standard dose",
        weight=5.6,
        color="#dc2626",
        category=USER,
    ),
    Criterion(
        key=CriteriaKey.DRUG_RELATED_MORTALITY,
        label="Drug-related mortality",
        short_label="Mortality (related)",
        description="Life shortened by drug use (accidents, cancers, HIV, suicide)",
        weight=6.1,
        color="#ef4444",
        category=USER,
    ),
    Criterion(
        key=CriteriaKey.DRUG_SPECIFIC_DAMAGE,
        label="Drug-specific damage",
        short_label="Physical (direct)",
        description="Direct physical damage (cirrhosis, seizures, strokes, cardiomyopathy)",
        weight=4.4,
        color="#f97316",
        category=USER,
    ),
    Criterion(
        key=CriteriaKey.DRUG_RELATED_DAMAGE,
        label="Drug-related damage",
        short_label="Physical (related)",
        description="Indirect physical damage (blood-borne viruses, cutting agents, emphysema)",
        weight=3.9,
        color="#fb923c",
        category=USER,
    ),
    Criterion(
        key=CriteriaKey.DEPENDENCE,
        label="Dependence",
        short_label="Dependence",
        description="Propensity to continue use despite adverse consequences",
        weight=6.2,
        color="#eab308",
        category=USER,
    ),
    Criterion(
        key=CriteriaKey.MENTAL_IMPAIRMENT,
        label="Mental impairment",
        short_label="Mental",
        description="Drug-specific and drug-related mental health effects, scored together",
        weight=9.8,
        color="#a855f7",
        category=USER,
    ),
    Criterion(
        key=CriteriaKey.LOSS_OF_TANGIBLES,
        label="Loss of tangibles",
        short_label="Loss tangibles",
        description="Loss of income, housing, job, educational achievements, criminal record",
        weight=4.8,
        color="#ec4899",
        category=USER,
    ),
    Criterion(
        key=CriteriaKey.NON_PHYSICAL_HARM,
        label="Non-physical harm",
        short_label="Non-physical",
        description="Spiritual and non-physical harm to the user, including loss of identity and mana",
        weight=4.2,
        color="#f472b6",
        category=USER,
    ),
    # Harm to others (8 criteria)
    Criterion(
        key=CriteriaKey.INJURY,
        label="Injury",
        short_label="Injury",
        description="Violence, traffic accidents, fetal harm, drug waste",
        weight=10.3,
        color="#3b82f6",
        category=OTHERS,
    ),
    Criterion(
        key=CriteriaKey.CRIME,
        label="Crime",
        short_label="Crime",
        description="Acquisitive crime volume at population level",
        weight=9.1,
        color="#60a5fa",
        category=OTHERS,
    ),
    Criterion(
        key=CriteriaKey.ENVIRONMENTAL_DAMAGE,
        label="Environmental damage",
        short_label="Environment",
        description="Toxic waste, discarded needles, local pollution",
        weight=3.1,
        color="#10b981",
        category=OTHERS,
    ),
    Criterion(
        key=CriteriaKey.FAMILY_ADVERSITIES,
        label="Family and whānau adversities",
        short_label="Family/whānau",
        description="Family and whānau breakdown, loss of relationships, child neglect",
        weight=10.4,
        color="#06b6d4",
        category=OTHERS,
    ),
    Criterion(
        key=CriteriaKey.INTERNATIONAL_DAMAGE,
        label="International damage",
        short_label="International",
        description="Deforestation, country destabilization, international crime",
        weight=2.6,
        color="#34d399",
        category=OTHERS,
    ),
    Criterion(
        key=CriteriaKey.ECONOMIC_COST,
        label="Economic cost",
        short_label="Economic",
        description="Healthcare, police, prisons, social services, lost productivity",
        weight=10.7,
        color="#6366f1",
        category=OTHERS,
    ),
    Criterion(
        key=CriteriaKey.COMMUNITY,
        label="Community",
        short_label="Community",
        description="Social cohesion decline, reputation damage",
        weight=3.5,
        color="#22d3ee",
        category=OTHERS,
    ),
    Criterion(
        key=CriteriaKey.CULTURAL_HARM,
        label="Cultural harm",
        short_label="Cultural",
        description="Harm to cultural identity, practices and community connection",
        weight=4.3,
        color="#818cf8",
        category=OTHERS,
    ),
)


def build_schema(criteria: Tuple[Criterion, ...]) -> CriteriaSchema:
    """Partition criteria by category, keeping declaration order."""
    return CriteriaSchema(
        user_criteria=tuple(c for c in criteria if c.category == HarmCategory.USER),
        others_criteria=tuple(c for c in criteria if c.category == HarmCategory.OTHERS),
        all=tuple(criteria),
    )


STANDARD_SCHEMA = build_schema(STANDARD_CRITERIA)
NEW_ZEALAND_SCHEMA = build_schema(NEW_ZEALAND_CRITERIA)

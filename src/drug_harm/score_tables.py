"""
Per-drug, per-criterion harm scores.

UK 2010 scores are estimated from Figure 4 of Nutt et al. (2010); they are
weighted scores that sum to the total harm score shown in the paper
(Alcohol=72, Heroin=55, Crack=54, ...). Their harm-to-users subtotals follow
the figure and differ from the aggregate table in ``studies`` for some drugs.

Australia 2019 and New Zealand 2023 tables are illustrative estimates, not
published per-criterion values. Each harm-to-users subtotal equals the drug's
aggregate score for that study in ``studies.AGGREGATE_HARM_ROWS``; drugs
missing from the aggregate table (Fentanyl, Synthetic Cannabinoids) are
unconstrained. Europe 2015 published aggregate scores only.

Rows list drugs in the order of the source publication. Values are given in
schema declaration order: harm-to-users criteria first, then harm-to-others.
"""

from typing import List, Sequence, Tuple

from src.drug_harm.criteria import NEW_ZEALAND_SCHEMA, STANDARD_SCHEMA
from src.drug_harm.models import CriteriaSchema, DrugClass, DrugScoreRecord

ScoreRow = Tuple[str, DrugClass, Sequence[float], Sequence[float]]

OPIOID = DrugClass.OPIOID
STIMULANT = DrugClass.STIMULANT
DEPRESSANT = DrugClass.DEPRESSANT
CANNABINOID = DrugClass.CANNABINOID
DISSOCIATIVE = DrugClass.DISSOCIATIVE
PSYCHEDELIC = DrugClass.PSYCHEDELIC
OTHER = DrugClass.OTHER


def build_records(schema: CriteriaSchema, rows: List[ScoreRow]) -> Tuple[DrugScoreRecord, ...]:
    """
    Expand positional score rows into records with an explicit entry per criterion.

    Raises:
        ValueError: if a row does not provide exactly one value per criterion
    """
    user_keys = schema.user_keys
    others_keys = schema.others_keys
    records = []
    for drug, drug_class, user_values, others_values in rows:
        if len(user_values) != len(user_keys) or len(others_values) != len(others_keys):
            raise ValueError(
                f"Score row for {drug} has {len(user_values)}+{len(others_values)} values, "
                f"schema expects {len(user_keys)}+{len(others_keys)}"
            )
        scores = dict(zip(user_keys, user_values))
        scores.update(zip(others_keys, others_values))
        records.append(DrugScoreRecord(drug=drug, drug_class=drug_class, scores=scores))
    return tuple(records)


# =============================================================================
# UK 2010 (Nutt et al.)
# =============================================================================
# users:  DSMort DRMort DSDam DRDam Dep DSMent DRMent LossT LossR
# others: Injury Crime Env Family Intl Econ Community

UK_2010_ROWS: List[ScoreRow] = [
    ("Alcohol", DEPRESSANT, (2, 5, 5, 2, 4, 2, 2, 2, 2), (11, 8, 1, 8, 1, 14, 3)),
    ("Heroin", OPIOID, (5, 5, 3, 4, 5, 3, 3, 3, 3), (3, 6, 2, 4, 2, 3, 1)),
    ("Crack Cocaine", STIMULANT, (3, 4, 3, 4, 5, 5, 4, 5, 4), (4, 5, 1, 3, 1, 2, 1)),
    ("Methamphetamine", STIMULANT, (2, 3, 3, 3, 5, 5, 4, 4, 3), (0, 0, 1, 0, 0, 0, 0)),
    ("Cocaine", STIMULANT, (1, 2, 2, 2, 3, 2, 2, 2, 1), (2, 2, 0, 2, 2, 1, 1)),
    ("Tobacco", OTHER, (1, 6, 4, 2, 4, 0, 1, 1, 1), (1, 0, 1, 1, 0, 3, 0)),
    ("Amphetamine", STIMULANT, (1, 2, 2, 2, 3, 3, 2, 1, 1), (1, 2, 1, 1, 0, 1, 0)),
    ("Cannabis", CANNABINOID, (0, 1, 1, 2, 2, 2, 2, 1, 0), (1, 1, 0, 2, 1, 3, 1)),
    ("GHB", DEPRESSANT, (3, 2, 2, 1, 2, 2, 1, 1, 1), (2, 1, 0, 1, 0, 0, 0)),
    ("Benzodiazepines", DEPRESSANT, (1, 2, 1, 1, 2, 1, 1, 1, 0), (2, 1, 0, 1, 0, 1, 0)),
    ("Ketamine", DISSOCIATIVE, (1, 1, 2, 1, 2, 3, 1, 1, 0), (1, 1, 0, 1, 0, 0, 0)),
    ("Methadone", OPIOID, (3, 2, 1, 1, 2, 0, 1, 1, 0), (1, 1, 0, 1, 0, 0, 0)),
    ("Mephedrone", STIMULANT, (1, 1, 1, 1, 2, 2, 1, 1, 0), (1, 1, 0, 1, 0, 0, 0)),
    ("Butane", OTHER, (4, 1, 1, 1, 1, 1, 1, 0, 0), (0, 0, 0, 1, 0, 0, 0)),
    ("Khat", STIMULANT, (0, 1, 1, 1, 1, 1, 1, 1, 0), (0, 0, 0, 1, 0, 1, 0)),
    ("Anabolic Steroids", OTHER, (0, 1, 2, 1, 1, 1, 1, 1, 0), (1, 0, 0, 1, 0, 0, 0)),
    ("MDMA (Ecstasy)", STIMULANT, (1, 1, 1, 1, 1, 1, 1, 0, 0), (1, 0, 0, 1, 0, 0, 0)),
    ("LSD", PSYCHEDELIC, (0, 1, 0, 1, 1, 2, 1, 0, 0), (1, 0, 0, 0, 0, 0, 0)),
    ("Buprenorphine", OPIOID, (1, 1, 1, 1, 1, 0, 1, 0, 0), (0, 0, 0, 1, 0, 0, 0)),
    ("Psilocybin Mushrooms", PSYCHEDELIC, (0, 0, 0, 1, 1, 2, 1, 0, 0), (1, 0, 0, 0, 0, 0, 0)),
]


# =============================================================================
# Australia 2019 (Bonomo et al.)
# =============================================================================
# Same criteria as UK 2010

AUSTRALIA_2019_ROWS: List[ScoreRow] = [
    ("Alcohol", DEPRESSANT, (2, 5, 5, 3, 4, 2, 3, 3, 2), (10, 7, 1, 8, 1, 12, 3)),
    ("Methamphetamine", STIMULANT, (3, 4, 3, 3, 5, 4, 4, 3, 4), (4, 6, 2, 5, 1, 4, 2)),
    ("Heroin", OPIOID, (5, 5, 3, 4, 5, 3, 3, 4, 4), (3, 5, 2, 4, 2, 3, 1)),
    ("Fentanyl", OPIOID, (6, 5, 2, 3, 5, 3, 3, 3, 3), (2, 3, 1, 3, 2, 2, 1)),
    ("Tobacco", OTHER, (1, 7, 5, 3, 4, 0, 1, 2, 1), (1, 0, 1, 1, 1, 4, 0)),
    ("Cocaine", STIMULANT, (2, 3, 3, 3, 4, 3, 3, 2, 2), (2, 2, 0, 2, 2, 1, 1)),
    ("Benzodiazepines", DEPRESSANT, (2, 2, 1, 1, 4, 2, 2, 2, 1), (2, 1, 0, 1, 0, 1, 0)),
    ("Cannabis", CANNABINOID, (0, 2, 1, 3, 3, 3, 3, 2, 1), (1, 1, 0, 2, 1, 2, 1)),
    ("Synthetic Cannabinoids", CANNABINOID, (2, 2, 2, 1, 3, 4, 2, 1, 1), (1, 1, 0, 1, 1, 1, 1)),
    ("GHB", DEPRESSANT, (3, 2, 2, 1, 3, 2, 1, 1, 1), (2, 1, 0, 1, 0, 0, 0)),
    ("Methadone", OPIOID, (3, 3, 1, 1, 3, 1, 1, 1, 1), (1, 1, 0, 1, 0, 1, 0)),
    ("Amphetamine", STIMULANT, (1, 3, 2, 3, 4, 3, 2, 2, 1), (1, 1, 1, 1, 0, 1, 0)),
    ("Ketamine", DISSOCIATIVE, (1, 1, 2, 1, 3, 3, 1, 1, 1), (1, 1, 0, 1, 0, 0, 0)),
    ("Buprenorphine", OPIOID, (1, 1, 1, 1, 2, 1, 1, 1, 0), (0, 0, 0, 1, 0, 0, 0)),
    ("MDMA (Ecstasy)", STIMULANT, (1, 1, 1, 1, 1, 2, 1, 0, 0), (1, 0, 0, 1, 0, 0, 0)),
    ("Anabolic Steroids", OTHER, (0, 1, 2, 1, 2, 1, 1, 1, 0), (1, 0, 0, 1, 0, 0, 0)),
    ("LSD", PSYCHEDELIC, (0, 1, 0, 1, 1, 2, 1, 0, 0), (1, 0, 0, 0, 0, 0, 0)),
    ("Psilocybin Mushrooms", PSYCHEDELIC, (0, 0, 0, 1, 1, 1, 1, 0, 0), (0, 0, 0, 0, 0, 0, 0)),
]


# =============================================================================
# New Zealand 2023 (Crossin et al.)
# =============================================================================
# users:  DSMort DRMort DSDam DRDam Dep Mental LossT NonPhys
# others: Injury Crime Env Family Intl Econ Community Cultural

NEW_ZEALAND_2023_ROWS: List[ScoreRow] = [
    ("Methamphetamine", STIMULANT, (3, 4, 4, 3, 6, 7, 5, 4), (5, 7, 2, 8, 2, 5, 3, 4)),
    ("Alcohol", DEPRESSANT, (2, 5, 5, 2, 4, 3, 3, 3), (10, 6, 1, 9, 1, 11, 3, 3)),
    ("Synthetic Cannabinoids", CANNABINOID, (4, 3, 3, 2, 4, 6, 3, 3), (2, 2, 1, 3, 1, 2, 2, 2)),
    ("Heroin", OPIOID, (6, 6, 3, 4, 6, 5, 4, 4), (3, 4, 2, 4, 2, 2, 1, 2)),
    ("Fentanyl", OPIOID, (7, 5, 2, 3, 5, 4, 3, 3), (2, 2, 1, 3, 2, 2, 1, 1)),
    ("Tobacco", OTHER, (1, 6, 4, 2, 5, 1, 2, 1), (1, 0, 1, 2, 1, 4, 1, 2)),
    ("Cocaine", STIMULANT, (2, 3, 3, 3, 4, 4, 3, 2), (2, 2, 0, 2, 2, 1, 1, 0)),
    ("GHB", DEPRESSANT, (4, 2, 1, 1, 2, 3, 1, 1), (2, 1, 0, 1, 0, 0, 0, 0)),
    ("Benzodiazepines", DEPRESSANT, (2, 3, 1, 2, 3, 4, 2, 1), (2, 1, 0, 2, 0, 1, 0, 0)),
    ("Cannabis", CANNABINOID, (0, 1, 2, 2, 3, 4, 2, 2), (1, 1, 0, 2, 1, 2, 1, 1)),
    ("Methadone", OPIOID, (3, 2, 1, 1, 3, 2, 1, 1), (1, 1, 0, 1, 0, 1, 0, 0)),
    ("Ketamine", DISSOCIATIVE, (1, 1, 2, 1, 2, 4, 1, 1), (1, 0, 0, 1, 0, 0, 0, 0)),
    ("Amphetamine", STIMULANT, (1, 3, 2, 3, 4, 5, 2, 2), (1, 1, 1, 1, 0, 1, 0, 0)),
    ("MDMA (Ecstasy)", STIMULANT, (1, 1, 1, 1, 2, 2, 1, 0), (1, 0, 0, 1, 0, 0, 0, 0)),
    ("LSD", PSYCHEDELIC, (0, 1, 0, 1, 1, 2, 0, 0), (0, 0, 0, 0, 0, 0, 0, 0)),
    ("Psilocybin Mushrooms", PSYCHEDELIC, (0, 0, 0, 1, 1, 2, 0, 0), (0, 0, 0, 0, 0, 0, 0, 0)),
]


UK_2010_SCORES = build_records(STANDARD_SCHEMA, UK_2010_ROWS)
AUSTRALIA_2019_SCORES = build_records(STANDARD_SCHEMA, AUSTRALIA_2019_ROWS)
NEW_ZEALAND_2023_SCORES = build_records(NEW_ZEALAND_SCHEMA, NEW_ZEALAND_2023_ROWS)
EUROPE_2015_SCORES: Tuple[DrugScoreRecord, ...] = ()

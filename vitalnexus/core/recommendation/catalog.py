"""
Specialist Rule Catalog

Static knowledge base: which condition keywords each specialty covers.

Design principles:
  - Keyword text is kept verbatim, including parenthetical qualifiers such as
    "Cardiac Risk (Hypertension)"; ConditionKeyword derives the matching
    literal ("cardiac risk") once at construction.
  - A keyword may belong to several specialties ("High Stress (Heart
    Disease)" is shared by cardiology and psychology).
  - The mapping is read-only after import. Editing the catalog means editing
    _CATALOG_SOURCE below.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import FrozenSet, Iterator, Mapping, Tuple

from .base import ConditionKeyword, Specialty

_CATALOG_SOURCE = {
    Specialty.CARDIOLOGIST: (
        "Tachycardia",
        "Cardiac Risk (Hypertension)",
        "Arrhythmia",
        "Bradycardia",
        "Hypertension",
        "Cardiovascular Disease Risk",
        "High Stress (Heart Disease)",
    ),
    Specialty.PSYCHOLOGIST: (
        "Chronic Stress",
        "Anxiety",
        "Depression Risk",
        "Anxiety Disorder Risk",
        "High Stress (Heart Disease)",
    ),
    Specialty.SLEEP_SPECIALIST: (
        "Sleep Deprivation",
        "Insomnia",
        "Poor Sleep (Sleep Apnea)",
    ),
    Specialty.PULMONOLOGIST: (
        "Sleep Apnea",
    ),
    Specialty.ENDOCRINOLOGIST: (
        "Diabetes Risk",
        "Metabolic Syndrome Risk",
    ),
    Specialty.NUTRITIONIST: (
        "Obesity-related diseases (Diabetes)",
    ),
    Specialty.GENERAL_PHYSICIAN: (
        "Hypotension",
    ),
}

RULE_CATALOG: Mapping[Specialty, FrozenSet[ConditionKeyword]] = MappingProxyType({
    specialty: frozenset(ConditionKeyword(text) for text in keywords)
    for specialty, keywords in _CATALOG_SOURCE.items()
})


def keywords_for(specialty: Specialty) -> FrozenSet[ConditionKeyword]:
    """Keywords covered by one specialty."""
    return RULE_CATALOG[specialty]


def iter_catalog() -> Iterator[Tuple[Specialty, FrozenSet[ConditionKeyword]]]:
    """All (specialty, keywords) pairs, in declaration order."""
    return iter(RULE_CATALOG.items())

"""
Specialist Recommendation Engine

Turns a PredictionRecord into the specialties that should see the patient,
then into department identifiers for the doctor directory.

Usage:
    from vitalnexus.core.recommendation import RecommendationEngine, PredictionRecord

    engine = RecommendationEngine()
    record = PredictionRecord(detected_diseases="Sleep Apnea; Hypertension")
    specialties = engine.recommend(record)
    departments = engine.resolve_departments(specialties)

Matching is substring containment of each keyword literal in the
lower-cased condition. Generic literals (for example "diabetes risk" inside
"no diabetes risk detected") therefore over-recommend; this is accepted
behaviour and is kept as is.
"""
from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, List, Mapping, Optional, Set

from .base import (
    ABSENT_MARKER,
    CONDITION_SEPARATOR,
    ConditionKeyword,
    ConsultationResult,
    DepartmentDirectory,
    PredictionRecord,
    Specialty,
)
from .catalog import RULE_CATALOG
from .departments import DEPARTMENT_MAP

logger = logging.getLogger(__name__)


class RecommendationEngine:
    """
    Maps prediction records to specialties and departments.

    Stateless: the catalog and department map are read-only, so one instance
    can serve concurrent requests.
    """

    def __init__(
        self,
        catalog: Optional[Mapping[Specialty, FrozenSet[ConditionKeyword]]] = None,
        department_map: Optional[Mapping[Specialty, str]] = None,
    ):
        self.catalog = RULE_CATALOG if catalog is None else catalog
        self.department_map = DEPARTMENT_MAP if department_map is None else department_map

    @staticmethod
    def extract_conditions(prediction: Optional[PredictionRecord]) -> List[str]:
        """
        Flatten the three prediction fields into one ordered condition list.

        Fields are read in the order additional → detected → sleep. Omitted,
        empty and ABSENT_MARKER fields contribute nothing. Duplicates and case
        are kept as supplied.
        """
        if prediction is None:
            return []

        conditions: List[str] = []
        for raw in prediction.fields_in_order():
            if not raw or raw == ABSENT_MARKER:
                continue
            conditions.extend(item.strip() for item in raw.split(CONDITION_SEPARATOR))
        return conditions

    def match_condition(self, condition: str) -> Set[Specialty]:
        """Specialties whose keywords occur in a single condition string."""
        matched: Set[Specialty] = set()
        for specialty, keywords in self.catalog.items():
            if any(keyword.matches(condition) for keyword in keywords):
                matched.add(specialty)
        return matched

    def recommend(self, prediction: Optional[PredictionRecord]) -> FrozenSet[Specialty]:
        """
        Recommend specialties for a prediction record.

        Returns:
            Frozen set of specialties; empty when the record carries no
            conditions (the expected result for a healthy prediction).
        """
        specialties: Set[Specialty] = set()
        for condition in self.extract_conditions(prediction):
            specialties |= self.match_condition(condition)

        logger.debug(
            f"RecommendationEngine: {len(specialties)} specialties: "
            + ", ".join(sorted(s.value for s in specialties))
        )
        return frozenset(specialties)

    def resolve_departments(self, specialties: Iterable[Specialty]) -> List[str]:
        """
        Map specialties to department identifiers.

        Specialties without a configured department are dropped silently.
        Each department appears once.
        """
        departments: List[str] = []
        for specialty in specialties:
            department = self.department_map.get(specialty)
            if department is None:
                logger.debug(f"RecommendationEngine: no department for {specialty.value}, skipping")
                continue
            if department not in departments:
                departments.append(department)
        return departments

    def consult(
        self,
        prediction: Optional[PredictionRecord],
        directory: DepartmentDirectory,
    ) -> ConsultationResult:
        """
        Full consultation: recommend, resolve, then query the directory.

        The directory is never called when no department was resolved.
        """
        conditions = self.extract_conditions(prediction)
        specialties = self.recommend(prediction)
        departments = self.resolve_departments(specialties)

        if not departments:
            return ConsultationResult(
                conditions=conditions,
                specialties=specialties,
                departments=[],
            )

        doctors = directory.find_by_departments(departments)
        logger.info(
            f"RecommendationEngine: {len(doctors)} directory record(s) for "
            f"{len(departments)} department(s)"
        )
        return ConsultationResult(
            conditions=conditions,
            specialties=specialties,
            departments=departments,
            doctors=list(doctors),
            directory_queried=True,
        )

    def describe_catalog(self) -> List[dict]:
        """Catalog listing suitable for JSON API responses."""
        return [
            {
                "specialty": specialty.value,
                "department": self.department_map.get(specialty),
                "keywords": sorted(k.text for k in keywords),
            }
            for specialty, keywords in self.catalog.items()
        ]


_default_engine = RecommendationEngine()


def recommend(prediction: Optional[PredictionRecord]) -> FrozenSet[Specialty]:
    """Module-level shortcut using the default catalog and department map."""
    return _default_engine.recommend(prediction)


def resolve_departments(specialties: Iterable[Specialty]) -> List[str]:
    """Module-level shortcut using the default department map."""
    return _default_engine.resolve_departments(specialties)

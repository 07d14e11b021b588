"""
Specialist Recommendation Layer

Transforms health prediction records into specialist recommendations.

Usage:
    from vitalnexus.core.recommendation import RecommendationEngine, PredictionRecord

    engine = RecommendationEngine()
    specialties = engine.recommend(PredictionRecord.from_dict(payload))
"""
from .base import (
    ABSENT_MARKER,
    PREDICTION_FIELD_KEYS,
    ConditionKeyword,
    ConsultationResult,
    DepartmentDirectory,
    PredictionRecord,
    Specialty,
)
from .catalog import RULE_CATALOG, iter_catalog, keywords_for
from .departments import DEPARTMENT_MAP, unmapped_specialties
from .engine import RecommendationEngine, recommend, resolve_departments

__all__ = [
    "ABSENT_MARKER",
    "PREDICTION_FIELD_KEYS",
    "ConditionKeyword",
    "ConsultationResult",
    "DepartmentDirectory",
    "PredictionRecord",
    "Specialty",
    "RULE_CATALOG",
    "iter_catalog",
    "keywords_for",
    "DEPARTMENT_MAP",
    "unmapped_specialties",
    "RecommendationEngine",
    "recommend",
    "resolve_departments",
]

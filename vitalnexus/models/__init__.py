"""Pydantic models for the HTTP API."""
from .schemas import (
    HealthResponse,
    MessageResponse,
    DoctorIn,
    DoctorOut,
    UserRegister,
    UserProfileUpdate,
    UserOut,
    ArticleOut,
    PredictionPayload,
    RecommendationResponse,
    SpecialtyInfo,
)

__all__ = [
    "HealthResponse",
    "MessageResponse",
    "DoctorIn",
    "DoctorOut",
    "UserRegister",
    "UserProfileUpdate",
    "UserOut",
    "ArticleOut",
    "PredictionPayload",
    "RecommendationResponse",
    "SpecialtyInfo",
]

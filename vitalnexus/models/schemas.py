"""
API Request / Response Models
"""
from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from vitalnexus.core.recommendation import PREDICTION_FIELD_KEYS, PredictionRecord


def _wire_keys(field_name: str) -> AliasChoices:
    return AliasChoices(*PREDICTION_FIELD_KEYS[field_name])


# ---- Health ----

class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: str
    uptime_seconds: float


class MessageResponse(BaseModel):
    message: str


# ---- Doctors ----

class DoctorIn(BaseModel):
    """Doctor create / replace payload."""
    name: str = Field(..., min_length=1)
    email: Optional[str] = None
    department: Optional[str] = Field(
        None, description="Department name, e.g. 'Cardiologist'"
    )

    model_config = ConfigDict(json_schema_extra={"example": {
        "name": "Dr. Asha Rao", "email": "asha.rao@example.org", "department": "Cardiologist"
    }})


class DoctorOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    doctor_id: int
    name: str
    email: Optional[str] = None
    department: Optional[str] = None
    created_on: Optional[datetime] = None
    last_login: Optional[datetime] = None


# ---- Users ----

class UserRegister(BaseModel):
    username: str = Field(..., min_length=1, max_length=150)
    email: Optional[str] = None
    password: str = Field(..., min_length=1)


class UserProfileUpdate(BaseModel):
    gender: Optional[str] = None
    age: Optional[int] = Field(None, ge=0, le=150)
    bmi: Optional[float] = Field(None, gt=0)


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: int
    username: str
    email: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[int] = None
    bmi: Optional[float] = None
    created_on: Optional[datetime] = None


# ---- Articles ----

class ArticleOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    article_id: int
    title: str
    content: Optional[str] = None
    author: Optional[str] = None
    created_on: Optional[datetime] = None


# ---- Consultation ----

class PredictionPayload(BaseModel):
    """
    Prediction model output posted by the client.

    Each field is a ';'-joined condition list or "nan". The upper-snake
    keys are what the prediction service emits; camelCase and snake_case
    are accepted too.
    """
    model_config = ConfigDict(extra="ignore", json_schema_extra={"example": {
        "ADDITIONAL_DISEASES": "nan",
        "DETECTED_DISEASES": "Sleep Apnea; Hypertension",
        "SLEEP_DISORDERS": "Insomnia",
    }})

    additional_diseases: Optional[str] = Field(
        None, validation_alias=_wire_keys("additional_diseases")
    )
    detected_diseases: Optional[str] = Field(
        None, validation_alias=_wire_keys("detected_diseases")
    )
    sleep_disorders: Optional[str] = Field(
        None, validation_alias=_wire_keys("sleep_disorders")
    )

    def to_record(self) -> PredictionRecord:
        return PredictionRecord(
            additional_diseases=self.additional_diseases,
            detected_diseases=self.detected_diseases,
            sleep_disorders=self.sleep_disorders,
        )


class RecommendationResponse(BaseModel):
    conditions: List[str]
    specialties: List[str]
    departments: List[str]


class SpecialtyInfo(BaseModel):
    specialty: str
    department: Optional[str] = None
    keywords: List[str]

"""
Specialist Recommendation: Base Types

Data contracts shared by the rule catalog, the engine and its callers.
Nothing here is persisted: records are built per request and discarded.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Protocol, Sequence, Tuple


# Marker the prediction model writes for a field it has no value for.
ABSENT_MARKER = "nan"

CONDITION_SEPARATOR = ";"

# Wire spellings of each prediction field: upper-snake (prediction service),
# camelCase, snake_case. Shared with the HTTP request model.
PREDICTION_FIELD_KEYS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "additional_diseases": ("ADDITIONAL_DISEASES", "additionalDiseases", "additional_diseases"),
    "detected_diseases":   ("DETECTED_DISEASES", "detectedDiseases", "detected_diseases"),
    "sleep_disorders":     ("SLEEP_DISORDERS", "sleepDisorders", "sleep_disorders"),
})


def _scalar_text(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


class Specialty(str, Enum):
    """
    Closed set of medical specialties the recommender can suggest.

    Values are the display names returned to clients.
    """
    CARDIOLOGIST      = "Cardiologist"
    PSYCHOLOGIST      = "Psychologist / Psychiatrist"
    SLEEP_SPECIALIST  = "Sleep Specialist / Neurologist"
    PULMONOLOGIST     = "Pulmonologist"
    ENDOCRINOLOGIST   = "Endocrinologist"
    NUTRITIONIST      = "Nutritionist"
    GENERAL_PHYSICIAN = "General Physician"


@dataclass(frozen=True)
class ConditionKeyword:
    """
    A matchable catalog term, e.g. "Cardiac Risk (Hypertension)".

    Only the text before the first "(" takes part in matching; the
    parenthetical is a human-readable qualifier.
    """
    text: str
    literal: str = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "literal", self.text.split("(")[0].strip().lower())

    def matches(self, condition: str) -> bool:
        """Case-insensitive substring containment of the literal in `condition`."""
        return self.literal in condition.lower()


@dataclass(frozen=True)
class PredictionRecord:
    """
    Output of the upstream health prediction model.

    Each field is a ";"-joined list of condition names, the ABSENT_MARKER,
    or None when the field was omitted.
    """
    additional_diseases: Optional[str] = None
    detected_diseases: Optional[str] = None
    sleep_disorders: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Optional[Mapping[str, Any]]) -> "PredictionRecord":
        """
        Build a record from a raw payload; unknown keys are ignored.

        Numbers are stringified (a float NaN becomes the ABSENT_MARKER).
        Lists, mappings and other non-scalar values are treated as omitted.
        """
        if not payload:
            return cls()
        values: Dict[str, Optional[str]] = {}
        for attr, keys in PREDICTION_FIELD_KEYS.items():
            for key in keys:
                value = _scalar_text(payload.get(key))
                if value is not None:
                    values[attr] = value
                    break
        return cls(**values)

    def fields_in_order(self) -> List[Optional[str]]:
        """Field values in the fixed extraction order."""
        return [self.additional_diseases, self.detected_diseases, self.sleep_disorders]


@dataclass
class ConsultationResult:
    """Everything one consultation produced, returned directly to the caller."""
    conditions: List[str]
    specialties: FrozenSet[Specialty]
    departments: List[str]
    doctors: List[Any] = field(default_factory=list)
    directory_queried: bool = False

    def to_dict(self) -> dict:
        return {
            "conditions": list(self.conditions),
            "specialties": sorted(s.value for s in self.specialties),
            "departments": list(self.departments),
            "doctors": list(self.doctors),
            "directory_queried": self.directory_queried,
        }


class DepartmentDirectory(Protocol):
    """Lookup capability the engine asks for concrete department records."""

    def find_by_departments(self, departments: Sequence[str]) -> List[Any]:
        """Return every record whose department is one of `departments`."""
        ...

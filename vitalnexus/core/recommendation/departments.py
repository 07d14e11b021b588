"""
Specialty → Department table.

Clinical specialty names and the department names used by the doctor
directory are separate vocabularies. They coincide today, but the table is
declared explicitly so either side can be renamed without touching matching.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping

from .base import Specialty
from .catalog import RULE_CATALOG

DEPARTMENT_MAP: Mapping[Specialty, str] = MappingProxyType({
    Specialty.CARDIOLOGIST:      "Cardiologist",
    Specialty.PSYCHOLOGIST:      "Psychologist / Psychiatrist",
    Specialty.SLEEP_SPECIALIST:  "Sleep Specialist / Neurologist",
    Specialty.PULMONOLOGIST:     "Pulmonologist",
    Specialty.ENDOCRINOLOGIST:   "Endocrinologist",
    Specialty.NUTRITIONIST:      "Nutritionist",
    Specialty.GENERAL_PHYSICIAN: "General Physician",
})


def unmapped_specialties(
    department_map: Mapping[Specialty, str] = DEPARTMENT_MAP,
) -> List[Specialty]:
    """Catalog specialties with no department configured (should be empty)."""
    return [s for s in RULE_CATALOG if s not in department_map]

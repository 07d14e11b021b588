"""
Supporting services around the recommendation core.
"""
from .consultation_store import ConsultationStore
from .telemetry import WearableReading, WearableSimulator

__all__ = [
    "ConsultationStore",
    "WearableReading",
    "WearableSimulator",
]

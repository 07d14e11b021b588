"""
Wearable Telemetry Simulator

Produces mock smartwatch readings for the dashboard. Values are drawn
uniformly inside fixed ranges; there is no physiological coupling between
them.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np

# Half-open [low, high) ranges
HEART_RATE_RANGE = (60, 120)        # bpm
SYSTOLIC_RANGE = (90, 140)          # mmHg
DIASTOLIC_RANGE = (60, 90)          # mmHg
SPO2_RANGE = (90, 100)              # %
STRESS_RANGE = (0, 100)             # arbitrary 0-100 score
SLEEP_HOURS_MAX = 9.0


@dataclass(frozen=True)
class WearableReading:
    """A single simulated smartwatch sample."""
    heart_rate: int
    systolic_bp: int
    diastolic_bp: int
    spo2: int
    stress_level: int
    sleep_duration: float

    def to_dict(self) -> Dict[str, Any]:
        """Wire format expected by the dashboard (camelCase keys)."""
        return {
            "heartRate": self.heart_rate,
            "bloodPressure": f"{self.systolic_bp}/{self.diastolic_bp}",
            "spo2": self.spo2,
            "stressLevel": self.stress_level,
            "sleepDuration": f"{self.sleep_duration:.1f}",
        }


class WearableSimulator:
    """
    Random smartwatch data source.

    Pass a seed for reproducible sequences (tests, demos).
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    def _randint(self, bounds) -> int:
        low, high = bounds
        return int(self._rng.integers(low, high))

    def read(self) -> WearableReading:
        return WearableReading(
            heart_rate=self._randint(HEART_RATE_RANGE),
            systolic_bp=self._randint(SYSTOLIC_RANGE),
            diastolic_bp=self._randint(DIASTOLIC_RANGE),
            spo2=self._randint(SPO2_RANGE),
            stress_level=self._randint(STRESS_RANGE),
            sleep_duration=round(float(self._rng.uniform(0.0, SLEEP_HOURS_MAX)), 1),
        )

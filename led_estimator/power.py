# power.py
# Electrical supply planning from summed subsystem power draw.

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict

from led_estimator.errors import require_number
from led_estimator.models import DisplayResult

logger = logging.getLogger(__name__)

DEFAULT_SAFETY_FACTOR = 1.2
REDUNDANCY_BUFFER = 1.2
COST_PER_WATT = 2.5


class Phase(str, Enum):
    SINGLE = "single"
    THREE = "three"

    @property
    def label(self) -> str:
        return "Three Phase" if self is Phase.THREE else "Single Phase"


# (load must exceed W, capacity step W, phase, redundant), first match wins
CAPACITY_BRACKETS = [
    (10_000, 1000, Phase.THREE, True),
    (5_000, 500, Phase.SINGLE, True),
    (float("-inf"), 100, Phase.SINGLE, False),
]


@dataclass
class PowerInputs:
    display_w: float = 0.0
    processor_w: float = 0.0
    computing_w: float = 0.0
    lighting_w: float = 0.0
    audio_w: float = 0.0
    other_w: Dict[str, float] = field(default_factory=dict)
    safety_factor: float = DEFAULT_SAFETY_FACTOR

    @classmethod
    def for_display(cls, result: DisplayResult, **kwargs) -> "PowerInputs":
        """Seed the display subsystem with a sized wall's maximum draw."""
        return cls(display_w=result.total_power_max_w, **kwargs)

    def subsystems(self) -> Dict[str, float]:
        draws = {
            "display": self.display_w,
            "processor": self.processor_w,
            "computing": self.computing_w,
            "lighting": self.lighting_w,
            "audio": self.audio_w,
        }
        for name, watts in self.other_w.items():
            draws[name] = watts
        return draws


@dataclass(frozen=True)
class PowerPlan:
    total_power_w: float
    recommended_capacity_w: float
    recommended_phase: Phase
    redundant: bool
    estimated_cost: float

    @property
    def phase_label(self) -> str:
        return self.recommended_phase.label


def _ceil_to(value: float, step: float) -> float:
    # round() first so 10800.000000000002 does not jump a whole step
    return math.ceil(round(value / step, 9)) * step


def plan_power(inputs: PowerInputs) -> PowerPlan:
    watts = {
        name: require_number(value, f"{name} power (W)", minimum=0)
        for name, value in inputs.subsystems().items()
    }
    safety = require_number(inputs.safety_factor, "safety factor", minimum=0, exclusive=True)

    total = sum(watts.values()) * safety

    for floor_w, step, phase, redundant in CAPACITY_BRACKETS:
        if total > floor_w:
            break
    capacity = _ceil_to(total, step)
    if redundant:
        capacity = math.ceil(round(capacity * REDUNDANCY_BUFFER, 9))

    plan = PowerPlan(
        total_power_w=total,
        recommended_capacity_w=capacity,
        recommended_phase=phase,
        redundant=redundant,
        estimated_cost=capacity * COST_PER_WATT,
    )
    logger.debug("Power plan: load=%.0fW capacity=%sW phase=%s redundant=%s",
                 total, capacity, phase.value, redundant)
    return plan

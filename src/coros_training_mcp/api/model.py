"""
Domain types for building workouts.

The LLM describes steps with these; we validate and convert them to COROS
exercise records. Records themselves stay as plain dicts.
"""

import math
from dataclasses import dataclass
from typing import Optional

from coros_training_mcp.sdk.errors import ValidationError
from coros_training_mcp.sdk.types import IntensityType, TargetType


TARGET_TYPES = {
    "open": TargetType.OPEN,
    "time": TargetType.TIME,
    "distance": TargetType.DISTANCE,
}

INTENSITY_TYPES = {
    "none": IntensityType.NONE,
    "heart_rate": IntensityType.HEART_RATE,
    "pace": IntensityType.PACE,
}


@dataclass
class ExerciseStep:
    """A single warmup / training / cooldown / recovery step.

    target_value is seconds for "time", centimeters for "distance", and
    ignored for "open". Intensity values are BPM for "heart_rate" or the
    COROS pace encoding (sec/km x 1000) for "pace".
    """
    target_type: str = "open"
    target_value: int = 0
    intensity_type: Optional[str] = None
    intensity_value: Optional[int] = None
    intensity_value_extend: Optional[int] = None

    @classmethod
    def from_dict(cls, d: dict) -> "ExerciseStep":
        """Create a step from a plain dict (as the LLM would provide)."""
        return cls(
            target_type=d.get("target_type", "open"),
            target_value=d.get("target_value", 0),
            intensity_type=d.get("intensity_type"),
            intensity_value=d.get("intensity_value"),
            intensity_value_extend=d.get("intensity_value_extend"),
        )

    def validate(self):
        """Validate the step definition.

        Raises:
            ValidationError: If the step is invalid.
        """
        if self.target_type not in TARGET_TYPES:
            raise ValidationError(
                f"Invalid target_type '{self.target_type}'. "
                f"Must be one of: {', '.join(TARGET_TYPES)}"
            )
        if self.intensity_type is not None and self.intensity_type not in INTENSITY_TYPES:
            raise ValidationError(
                f"Invalid intensity_type '{self.intensity_type}'. "
                f"Must be one of: {', '.join(INTENSITY_TYPES)}"
            )
        _require_non_negative_int("target_value", self.target_value)
        if self.intensity_value is not None:
            _require_non_negative_int("intensity_value", self.intensity_value)
        if self.intensity_value_extend is not None:
            _require_non_negative_int("intensity_value_extend", self.intensity_value_extend)

    @property
    def target_code(self) -> TargetType:
        return TARGET_TYPES.get(self.target_type, TargetType.OPEN)

    @property
    def intensity_code(self) -> IntensityType:
        if not self.intensity_type:
            return IntensityType.NONE
        return INTENSITY_TYPES.get(self.intensity_type, IntensityType.NONE)


@dataclass
class IntervalGroup:
    """A repeating training + recovery pair."""
    sets: int
    training: ExerciseStep
    recovery: ExerciseStep

    @classmethod
    def from_dict(cls, d: dict) -> "IntervalGroup":
        return cls(
            sets=d.get("sets", 1),
            training=ensure_step(d.get("training") or {}),
            recovery=ensure_step(d.get("recovery") or {}),
        )

    def validate(self):
        if isinstance(self.sets, bool) or not isinstance(self.sets, int) or self.sets < 1:
            raise ValidationError("sets must be an integer >= 1")
        self.training.validate()
        self.recovery.validate()


def ensure_step(s) -> ExerciseStep:
    """Convert dict or ExerciseStep to ExerciseStep."""
    if isinstance(s, ExerciseStep):
        return s
    if isinstance(s, dict):
        return ExerciseStep.from_dict(s)
    raise ValidationError(f"Expected ExerciseStep or dict, got {type(s).__name__}")


def ensure_interval_group(g) -> IntervalGroup:
    """Convert dict or IntervalGroup to IntervalGroup."""
    if isinstance(g, IntervalGroup):
        return g
    if isinstance(g, dict):
        return IntervalGroup.from_dict(g)
    raise ValidationError(f"Expected IntervalGroup or dict, got {type(g).__name__}")


def _require_non_negative_int(name: str, value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a non-negative number")
    if not math.isfinite(value) or value < 0:
        raise ValidationError(f"{name} must be a non-negative number")

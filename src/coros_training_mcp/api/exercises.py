"""
Exercise plan builder: step descriptors -> COROS exercise records.

COROS has no nested structure for workouts. A plan is one flat, ordered
list; repeat groups are encoded by sortNo spacing and groupId linkage:

    warmup            sortNo = 0 * BASE
    group (isGroup)   sortNo = 1 * BASE          id = G
      training        sortNo = 1 * BASE + CHILD  groupId = G
      recovery        sortNo = 1 * BASE + 2*CHILD groupId = G
    steady block      sortNo = 2 * BASE
    cooldown          sortNo = 3 * BASE

Children always sort between their parent and the next top-level entry
as long as child_count * CHILD < BASE. Only one level of nesting exists.
"""

import itertools
import time
from typing import Iterable, Optional

from coros_training_mcp.api.model import ensure_interval_group, ensure_step
from coros_training_mcp.sdk.errors import UnknownTemplateError
from coros_training_mcp.sdk.types import (
    DEFAULT_DISTANCE_DISPLAY_UNIT,
    DEFAULT_EQUIPMENT,
    DEFAULT_PART,
    EXERCISE_STATUS_ACTIVE,
    EXERCISE_TEMPLATES,
    KIND_TO_EXERCISE_TYPE,
    REST_TYPE_DEFAULT,
    SORT_NO_BASE,
    SORT_NO_CHILD,
    ExerciseType,
    IntensityType,
    TargetType,
)

NO_GROUP = "0"

# COROS expects numeric-string IDs; seeded from the clock so they do not
# collide with IDs generated by an earlier process.
_id_counter = itertools.count(int(time.time() * 1000))


def next_exercise_id() -> str:
    """Unique numeric-string ID for a new exercise record."""
    return str(next(_id_counter))


# ── Public API ──────────────────────────────────────────────────────────


def build_exercise(sport_type: int, kind: str, step, sort_no: int) -> dict:
    """Build one top-level exercise record from the (sport, kind) template.

    Args:
        sport_type: Program sport type code
        kind: "warmup", "training", "cooldown" or "recovery"
        step: ExerciseStep or dict
        sort_no: sortNo to assign

    Raises:
        UnknownTemplateError: If no template exists for (sport_type, kind)
        ValidationError: If the step is invalid
    """
    template = EXERCISE_TEMPLATES.get(sport_type, {}).get(kind)
    if template is None:
        raise UnknownTemplateError(sport_type, kind)

    step = ensure_step(step)
    step.validate()

    record = _base_record(sport_type)
    record.update({
        "exerciseType": int(KIND_TO_EXERCISE_TYPE[kind]),
        "originId": str(template["originId"]),
        "id": next_exercise_id(),
        "name": template["name"],
        "overview": template["overview"],
        "sortNo": sort_no,
        "targetType": int(step.target_code),
        "targetValue": int(step.target_value),
        "intensityType": int(step.intensity_code),
        "intensityValue": int(step.intensity_value or 0),
        "intensityValueExtend": int(step.intensity_value_extend or 0),
    })
    return record


def build_exercises(
    sport_type: int,
    warmup=None,
    intervals=None,
    steady_blocks: Optional[Iterable] = None,
    cooldown=None,
) -> list[dict]:
    """Build the ordered, flat exercise list for a workout.

    Processed in fixed order: warmup, interval group, steady blocks,
    cooldown. Each top-level entity takes the next BASE slot; the interval
    group's training and recovery children sit at +CHILD and +2*CHILD.

    Args:
        sport_type: Program sport type code
        warmup: ExerciseStep or dict
        intervals: IntervalGroup or dict {sets, training, recovery}
        steady_blocks: List of ExerciseStep or dict
        cooldown: ExerciseStep or dict

    Returns:
        List of COROS exercise dicts. Empty input gives an empty list.

    Raises:
        UnknownTemplateError: If any needed template is missing
        ValidationError: If any step is invalid
    """
    exercises = []
    sort_idx = 0

    if warmup is not None:
        exercises.append(build_exercise(sport_type, "warmup", warmup, sort_idx * SORT_NO_BASE))
        sort_idx += 1

    if intervals is not None:
        exercises.extend(_build_interval_group(sport_type, intervals, sort_idx * SORT_NO_BASE))
        sort_idx += 1

    for block in steady_blocks or []:
        exercises.append(build_exercise(sport_type, "training", block, sort_idx * SORT_NO_BASE))
        sort_idx += 1

    if cooldown is not None:
        exercises.append(build_exercise(sport_type, "cooldown", cooldown, sort_idx * SORT_NO_BASE))
        sort_idx += 1

    return exercises


# ── Internal helpers ────────────────────────────────────────────────────


def _build_interval_group(sport_type: int, intervals, group_sort_no: int) -> list[dict]:
    """Group parent followed by its training and recovery children."""
    group = ensure_interval_group(intervals)
    group.validate()

    # Children first: a missing template fails before the parent takes an ID
    training = build_exercise(sport_type, "training", group.training, group_sort_no + SORT_NO_CHILD)
    recovery = build_exercise(sport_type, "recovery", group.recovery, group_sort_no + 2 * SORT_NO_CHILD)

    parent = _base_record(sport_type)
    parent.update({
        "exerciseType": int(ExerciseType.GROUP),
        "originId": "0",
        "id": next_exercise_id(),
        "name": "",
        "overview": "",
        "sortNo": group_sort_no,
        "isGroup": True,
        "sets": group.sets,
    })

    training["groupId"] = parent["id"]
    recovery["groupId"] = parent["id"]
    return [parent, training, recovery]


def _base_record(sport_type: int) -> dict:
    """Field set shared by every exercise record, with fixed defaults."""
    return {
        "exerciseType": int(ExerciseType.TRAINING),
        "originId": "",
        "id": "",
        "name": "",
        "overview": "",
        "sortNo": 0,
        "targetType": int(TargetType.OPEN),
        "targetValue": 0,
        "intensityType": int(IntensityType.NONE),
        "intensityValue": 0,
        "intensityValueExtend": 0,
        "isGroup": False,
        "sets": 1,
        "groupId": NO_GROUP,
        "sportType": int(sport_type),
        "status": EXERCISE_STATUS_ACTIVE,
        "restType": int(REST_TYPE_DEFAULT),
        "restValue": 0,
        "equipment": list(DEFAULT_EQUIPMENT),
        "part": list(DEFAULT_PART),
        "distanceDisplayUnit": int(DEFAULT_DISTANCE_DISPLAY_UNIT),
    }

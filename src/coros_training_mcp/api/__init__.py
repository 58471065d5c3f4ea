"""
High-Level API: workout library and calendar for COROS.

Every function returns a clean dict the LLM can reason about.
Composes with the SDK internally.

Modules:
    exercises  Build steps    (flat, sortNo-encoded exercise records)
    workouts   Saved workouts (list, detail, create, estimate, delete)
    calendar   What's coming  (scheduled workouts, schedule, unschedule)
"""

# Model
from coros_training_mcp.api.model import ExerciseStep, IntervalGroup

# Exercise building
from coros_training_mcp.api.exercises import build_exercise, build_exercises

# Workouts
from coros_training_mcp.api.workouts import (
    list_workouts,
    get_workout,
    create_workout,
    estimate_workout,
    delete_workouts,
)

# Calendar
from coros_training_mcp.api.calendar import get_calendar, schedule_workout, unschedule_workout

__all__ = [
    # Model
    "ExerciseStep", "IntervalGroup",
    # Exercises
    "build_exercise", "build_exercises",
    # Workouts
    "list_workouts", "get_workout", "create_workout", "estimate_workout", "delete_workouts",
    # Calendar
    "get_calendar", "schedule_workout", "unschedule_workout",
]

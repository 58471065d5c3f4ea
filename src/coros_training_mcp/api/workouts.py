"""
Workouts: the saved workout library.

Composes exercises.py for building + SDK for API calls. Every function
returns a clean dict the LLM can reason about.
"""

from coros_training_mcp.api.exercises import build_exercises
from coros_training_mcp.sdk.client import CorosClient
from coros_training_mcp.sdk import programs as sdk_programs
from coros_training_mcp.sdk.errors import ValidationError
from coros_training_mcp.utils import format_duration, get_sport_name, resolve_sport, validate_day


def list_workouts(client: CorosClient, sport: str = None, name_filter: str = None) -> dict:
    """Saved workouts, optionally filtered by sport and name substring."""
    sport_code = resolve_sport(sport) if sport else None
    programs = sdk_programs.list_programs(client, sport_code)

    if name_filter:
        needle = name_filter.lower()
        programs = [p for p in programs if needle in (p.get("name") or "").lower()]

    return {
        "count": len(programs),
        "workouts": [_program_summary(p) for p in programs],
    }


def get_workout(client: CorosClient, workout_id: str) -> dict:
    """Full program detail, exercises included, as returned by COROS."""
    return sdk_programs.get_program(client, workout_id)


def create_workout(
    client: CorosClient,
    name: str,
    sport: str,
    warmup=None,
    intervals=None,
    steady_blocks=None,
    cooldown=None,
    description: str = "",
) -> dict:
    """Build exercises and save the workout to the library.

    Raises:
        ValidationError: If the workout has no steps or a step is invalid
    """
    sport_code = resolve_sport(sport)
    exercises = build_exercises(
        sport_code,
        warmup=warmup,
        intervals=intervals,
        steady_blocks=steady_blocks,
        cooldown=cooldown,
    )
    if not exercises:
        raise ValidationError("Workout must have at least one exercise step.")

    workout_id = sdk_programs.create_program(
        client, name, sport_code, exercises, overview=description or "",
    )
    return {
        "success": True,
        "workout_id": workout_id,
        "name": name,
        "sport": get_sport_name(sport_code),
        "steps": sum(1 for e in exercises if not e["isGroup"]),
        "message": f"Workout \"{name}\" created (ID: {workout_id})",
    }


def estimate_workout(
    client: CorosClient,
    sport: str,
    day: str,
    warmup=None,
    intervals=None,
    steady_blocks=None,
    cooldown=None,
) -> dict:
    """Preview the training load of a workout without saving it."""
    sport_code = resolve_sport(sport)
    validate_day(day)
    exercises = build_exercises(
        sport_code,
        warmup=warmup,
        intervals=intervals,
        steady_blocks=steady_blocks,
        cooldown=cooldown,
    )
    if not exercises:
        raise ValidationError("Workout must have at least one exercise step.")

    result = sdk_programs.estimate_program(client, day, exercises) or {}
    return {
        "day": day,
        "sport": get_sport_name(sport_code),
        "estimated_load": result.get("trainingLoad"),
    }


def delete_workouts(client: CorosClient, workout_ids: list) -> dict:
    """Delete saved workouts by ID."""
    sdk_programs.delete_programs(client, workout_ids)
    return {
        "success": True,
        "deleted": len(workout_ids),
        "message": f"Deleted {len(workout_ids)} workout(s).",
    }


def _program_summary(p: dict) -> dict:
    return {
        "id": str(p.get("id")),
        "name": p.get("name"),
        "sport": get_sport_name(p.get("sportType")),
        "load": p.get("essence") or p.get("trainingLoad") or 0,
        "duration": format_duration(p.get("duration") or 0),
    }

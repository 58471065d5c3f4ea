"""
Calendar: what's scheduled?

Scheduled workouts for a date range, plus putting saved workouts on (and
taking them off) the calendar.
"""

from coros_training_mcp.sdk.client import CorosClient
from coros_training_mcp.sdk import schedule as sdk_schedule
from coros_training_mcp.utils import get_sport_name, validate_day


def get_calendar(client: CorosClient, start_day: str, end_day: str) -> dict:
    """Scheduled workouts between two YYYYMMDD days.

    Links entities to programs via planProgramId; completed entities
    carry a labelId pointing at the recorded activity.
    """
    validate_day(start_day)
    validate_day(end_day)

    plan = sdk_schedule.query_schedule(client, start_day, end_day)

    program_by_id_in_plan = {
        str(p.get("idInPlan")): p for p in plan.get("programs") or []
    }

    workouts = []
    for entity in plan.get("entities") or []:
        program = program_by_id_in_plan.get(str(entity.get("planProgramId")), {})
        sport_data = entity.get("sportData") or {}
        sport = sport_data.get("sportType", program.get("sportType"))
        workouts.append({
            "entity_id": str(entity.get("id")),
            "day": str(entity.get("happenDay")),
            "name": sport_data.get("name") or program.get("name") or "Unknown",
            "sport": get_sport_name(sport),
            "load": sport_data.get("trainingLoad", program.get("trainingLoad", 0)),
            "completed": bool(entity.get("labelId")),
        })

    return {
        "period": {"start_day": start_day, "end_day": end_day},
        "plan_name": plan.get("name"),
        "scheduled_workouts": workouts,
    }


def schedule_workout(client: CorosClient, workout_id: str, day: str) -> dict:
    """Add a saved workout to the calendar on a day."""
    validate_day(day)
    id_in_plan = sdk_schedule.schedule_workout(client, workout_id, day)
    return {
        "success": True,
        "id_in_plan": id_in_plan,
        "message": f"Workout {workout_id} scheduled for {day}.",
    }


def unschedule_workout(client: CorosClient, entity_id: str, day: str) -> dict:
    """Remove a scheduled workout (by entity ID) from a day."""
    validate_day(day)
    sdk_schedule.unschedule_workout(client, entity_id, day, day)
    return {"success": True, "message": f"Workout removed from {day}."}

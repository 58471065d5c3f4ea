"""
COROS training schedule (calendar) SDK functions.
"""

from typing import Any, Dict

from coros_training_mcp.sdk.client import CorosClient
from coros_training_mcp.sdk.errors import ValidationError
from coros_training_mcp.sdk.programs import get_program
from coros_training_mcp.sdk.types import PB_VERSION_SCHEDULE, VersionStatus


def query_schedule(client: CorosClient, start_day: str, end_day: str) -> Dict[str, Any]:
    """
    Get the training plan for a date range.

    GET training/schedule/query

    Args:
        start_day: Start date as YYYYMMDD string
        end_day: End date as YYYYMMDD string

    Returns:
        {id, name, maxPlanProgramId, entities[], programs[], ...}
    """
    return client.get("/training/schedule/query", {
        "startDate": str(start_day),
        "endDate": str(end_day),
        "supportRestExercise": "1",
    }) or {}


def schedule_workout(client: CorosClient, program_id: str, day: str) -> int:
    """
    Put a saved workout on the calendar.

    Query the plan for the next idInPlan, copy the program into it,
    then POST training/schedule/update.

    Returns:
        The idInPlan assigned to the scheduled copy
    """
    plan = query_schedule(client, day, day)
    next_id_in_plan = int(plan.get("maxPlanProgramId") or 0) + 1

    program = get_program(client, program_id)

    payload = {
        "entities": [{
            "happenDay": day,
            "idInPlan": next_id_in_plan,
            "sortNo": 0,
            "dayNo": 0,
            "sortNoInPlan": 0,
            "sortNoInSchedule": 0,
            "exerciseBarChart": program.get("exerciseBarChart") or [],
        }],
        "programs": [{**program, "idInPlan": next_id_in_plan}],
        "versionObjects": [{
            "id": next_id_in_plan,
            "status": int(VersionStatus.NEW),
        }],
        "pbVersion": PB_VERSION_SCHEDULE,
    }

    client.post("/training/schedule/update", payload)
    return next_id_in_plan


def unschedule_workout(
    client: CorosClient, entity_id: str, start_day: str, end_day: str
) -> None:
    """
    Remove a scheduled workout from the calendar.

    Raises:
        ValidationError: If the entity is not in the plan for that range
    """
    plan = query_schedule(client, start_day, end_day)

    entity = None
    for e in plan.get("entities") or []:
        if str(e.get("id")) == str(entity_id):
            entity = e
            break

    if entity is None:
        raise ValidationError(f"Entity {entity_id} not found in calendar")

    payload = {
        "versionObjects": [{
            "id": str(entity.get("idInPlan")),
            "planProgramId": str(entity.get("planProgramId")),
            "planId": plan.get("id"),
            "status": int(VersionStatus.DELETE),
        }],
        "pbVersion": PB_VERSION_SCHEDULE,
    }

    client.post("/training/schedule/update", payload)

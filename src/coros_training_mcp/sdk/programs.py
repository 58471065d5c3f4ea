"""
COROS workout program (workout library) SDK functions.

Each function maps 1:1 to a COROS endpoint.
"""

import re
from typing import Any, Dict, List, Sequence

from coros_training_mcp.sdk.client import CorosClient
from coros_training_mcp.sdk.errors import ValidationError
from coros_training_mcp.sdk.types import PB_VERSION_PROGRAM, PROGRAM_QUERY_LIMIT, PROGRAM_UNIT

_NUMERIC_ID = re.compile(r"[0-9]+")


def list_programs(client: CorosClient, sport_type: int = None) -> List[Dict[str, Any]]:
    """
    List saved workouts from the workout library.

    POST training/program/query

    Args:
        sport_type: Filter by program sport type (None = all)

    Returns:
        List of program summaries {id, name, sportType, essence, trainingLoad, ...}
    """
    body = {
        "name": "",
        "supportRestExercise": 1,
        "startNo": 0,
        "limitSize": PROGRAM_QUERY_LIMIT,
    }
    if sport_type is not None:
        body["sportType"] = int(sport_type)
    return client.post("/training/program/query", body) or []


def get_program(client: CorosClient, program_id: str) -> Dict[str, Any]:
    """
    Get a single workout program with full exercises.

    GET training/program/detail
    """
    return client.get("/training/program/detail", {"id": str(program_id)})


def create_program(
    client: CorosClient,
    name: str,
    sport_type: int,
    exercises: List[Dict[str, Any]],
    overview: str = "",
) -> str:
    """
    Save a new workout to the library.

    POST training/program/add

    Returns:
        New program ID (the endpoint returns it as a bare string)
    """
    data = client.post("/training/program/add", {
        "name": name,
        "sportType": int(sport_type),
        "overview": overview,
        "exercises": exercises,
        "unit": PROGRAM_UNIT,
        "pbVersion": PB_VERSION_PROGRAM,
    })
    return str(data)


def estimate_program(
    client: CorosClient, day: str, exercises: List[Dict[str, Any]]
) -> Dict[str, Any]:
    """
    Estimate training load for a set of exercises before saving.

    POST training/program/estimate

    Args:
        day: Date as YYYYMMDD string
        exercises: Exercise records from build_exercises()

    Returns:
        {trainingLoad, ...}
    """
    return client.post("/training/program/estimate", {"day": day, "exercises": exercises})


def delete_programs(client: CorosClient, program_ids: Sequence[str]) -> None:
    """
    Delete one or more saved workouts.

    POST training/program/delete

    The endpoint expects a JSON array of unquoted numbers. Program IDs are
    18+ digit snowflakes, so the body is spliced from the ID strings instead
    of going through json.dumps(int(...)).

    Raises:
        ValidationError: If any ID is not all digits (nothing is sent)
    """
    ids = [str(pid) for pid in program_ids]
    if not ids:
        raise ValidationError("At least one program ID is required")

    invalid = [pid for pid in ids if not _NUMERIC_ID.fullmatch(pid)]
    if invalid:
        raise ValidationError(f"Program IDs must be numeric: {', '.join(invalid)}")

    client.post_raw("/training/program/delete", "[" + ",".join(ids) + "]")

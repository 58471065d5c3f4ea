"""
Workout library tools for COROS MCP server.

List, inspect, create, estimate and delete saved workouts.
Delegates to api.workouts for the heavy lifting.
"""

import json

from coros_training_mcp.api import workouts as api_workouts
from coros_training_mcp.client_factory import error_response
from coros_training_mcp.sdk.client import CorosClient
from coros_training_mcp.sdk.errors import CorosError


def register_tools(app, client: CorosClient):
    """Register workout library tools with the MCP app."""

    @app.tool()
    async def list_workouts(sport_type: str = None, name_filter: str = None) -> str:
        """
        List saved workouts from COROS Training Hub.

        Args:
            sport_type: Filter by sport: "run" or "bike" (optional)
            name_filter: Case-insensitive substring match on the name (optional)

        Returns:
            JSON list of workouts with id, name, sport, load
        """
        try:
            result = api_workouts.list_workouts(client, sport_type, name_filter)
        except CorosError as e:
            return error_response(e)
        return json.dumps(result, indent=2)

    @app.tool()
    async def get_workout(workout_id: str) -> str:
        """
        Get full details of a saved workout, including all exercise steps.

        Args:
            workout_id: The workout ID from list_workouts

        Returns:
            JSON program with exercises
        """
        try:
            result = api_workouts.get_workout(client, workout_id)
        except CorosError as e:
            return error_response(e)
        return json.dumps(result, indent=2)

    @app.tool()
    async def create_workout(
        name: str,
        sport_type: str,
        description: str = None,
        warmup: dict = None,
        intervals: dict = None,
        steady_blocks: list[dict] = None,
        cooldown: dict = None,
    ) -> str:
        """
        Create a run or bike workout with structured steps and save it to the library.

        Steps are laid out in order: warmup, interval group, steady blocks, cooldown.

        Args:
            name: Workout name (e.g. "6x800m Intervals")
            sport_type: "run" or "bike"
            description: Workout description (optional)
            warmup: Warmup step (optional)
            intervals: Repeating group {sets, training, recovery} where
                training and recovery are steps (optional)
            steady_blocks: List of steady-state training steps (optional)
            cooldown: Cooldown step (optional)
                Each step is a dict with:
                - target_type: "open", "time" (seconds) or "distance" (centimeters)
                - target_value: seconds for time, centimeters for distance, 0 for open
                - intensity_type: "none", "heart_rate" or "pace" (optional)
                - intensity_value: low bound, BPM or sec/km x 1000 (optional)
                - intensity_value_extend: high bound, same unit (optional)
                Example: {
                    "warmup": {"target_type": "time", "target_value": 600},
                    "intervals": {"sets": 6,
                        "training": {"target_type": "distance", "target_value": 80000},
                        "recovery": {"target_type": "time", "target_value": 90}},
                    "cooldown": {"target_type": "time", "target_value": 600}
                }

        Returns:
            JSON with the new workout ID
        """
        try:
            result = api_workouts.create_workout(
                client,
                name,
                sport_type,
                warmup=warmup,
                intervals=intervals,
                steady_blocks=steady_blocks,
                cooldown=cooldown,
                description=description or "",
            )
        except CorosError as e:
            return error_response(e)
        return json.dumps(result, indent=2)

    @app.tool()
    async def estimate_workout_load(
        sport_type: str,
        day: str,
        warmup: dict = None,
        intervals: dict = None,
        steady_blocks: list[dict] = None,
        cooldown: dict = None,
    ) -> str:
        """
        Preview the training load of a workout before creating it.

        Args:
            sport_type: "run" or "bike"
            day: Date in YYYYMMDD format
            warmup, intervals, steady_blocks, cooldown: Same as create_workout

        Returns:
            JSON with estimated training load
        """
        try:
            result = api_workouts.estimate_workout(
                client,
                sport_type,
                day,
                warmup=warmup,
                intervals=intervals,
                steady_blocks=steady_blocks,
                cooldown=cooldown,
            )
        except CorosError as e:
            return error_response(e)
        return json.dumps(result, indent=2)

    @app.tool()
    async def delete_workout(workout_ids: list[str]) -> str:
        """
        Delete one or more saved workouts by ID.

        Args:
            workout_ids: Workout IDs to delete (numeric strings from list_workouts)

        Returns:
            JSON deletion result
        """
        try:
            result = api_workouts.delete_workouts(client, workout_ids)
        except CorosError as e:
            return error_response(e)
        return json.dumps(result, indent=2)

    return app

"""
Calendar tools for COROS MCP server.

View the training calendar and schedule/unschedule saved workouts.
"""

import json

from coros_training_mcp.api import calendar as api_calendar
from coros_training_mcp.client_factory import error_response
from coros_training_mcp.sdk.client import CorosClient
from coros_training_mcp.sdk.errors import CorosError


def register_tools(app, client: CorosClient):
    """Register calendar tools with the MCP app."""

    @app.tool()
    async def get_calendar(start_day: str, end_day: str) -> str:
        """
        Get scheduled workouts for a date range from the COROS training calendar.

        Args:
            start_day: Start date in YYYYMMDD format
            end_day: End date in YYYYMMDD format

        Returns:
            JSON with scheduled workouts (entity ID, day, name, sport, load, completed)
        """
        try:
            result = api_calendar.get_calendar(client, start_day, end_day)
        except CorosError as e:
            return error_response(e)
        return json.dumps(result, indent=2)

    @app.tool()
    async def schedule_workout(workout_id: str, day: str) -> str:
        """
        Add a saved workout to the COROS training calendar on a specific date.

        Args:
            workout_id: The workout ID to schedule (from list_workouts)
            day: Date in YYYYMMDD format

        Returns:
            JSON scheduling result
        """
        try:
            result = api_calendar.schedule_workout(client, workout_id, day)
        except CorosError as e:
            return error_response(e)
        return json.dumps(result, indent=2)

    @app.tool()
    async def unschedule_workout(entity_id: str, day: str) -> str:
        """
        Remove a scheduled workout from the COROS training calendar.

        Args:
            entity_id: The schedule entity ID (from get_calendar)
            day: Date the workout is scheduled on, YYYYMMDD

        Returns:
            JSON removal result
        """
        try:
            result = api_calendar.unschedule_workout(client, entity_id, day)
        except CorosError as e:
            return error_response(e)
        return json.dumps(result, indent=2)

    return app

"""Tests for api/workouts.py: list/create/estimate/delete flows."""

import pytest
from unittest.mock import Mock, patch

from coros_training_mcp.api.workouts import (
    create_workout,
    delete_workouts,
    estimate_workout,
    get_workout,
    list_workouts,
)
from coros_training_mcp.sdk.errors import ValidationError


def _programs():
    return [
        {"id": 101, "name": "Tempo Run", "sportType": 1, "essence": 72, "duration": 3600},
        {"id": 102, "name": "Easy Spin", "sportType": 2, "trainingLoad": 40, "duration": 1530},
        {"id": 103, "name": "Long Run", "sportType": 1, "essence": 120, "duration": 7261},
    ]


@patch("coros_training_mcp.api.workouts.sdk_programs")
def test_list_workouts(mock_programs):
    mock_programs.list_programs.return_value = _programs()

    result = list_workouts(Mock())

    assert result["count"] == 3
    first = result["workouts"][0]
    assert first == {
        "id": "101",
        "name": "Tempo Run",
        "sport": "Run",
        "load": 72,
        "duration": "1h00m00s",
    }
    assert result["workouts"][1]["load"] == 40
    assert result["workouts"][1]["duration"] == "25m30s"
    assert mock_programs.list_programs.call_args.args[1] is None


@patch("coros_training_mcp.api.workouts.sdk_programs")
def test_list_workouts_filters(mock_programs):
    mock_programs.list_programs.return_value = _programs()

    result = list_workouts(Mock(), sport="run", name_filter="LONG")

    assert mock_programs.list_programs.call_args.args[1] == 1
    assert result["count"] == 1
    assert result["workouts"][0]["name"] == "Long Run"


def test_list_workouts_unknown_sport():
    with pytest.raises(ValidationError, match="swim"):
        list_workouts(Mock(), sport="swim")


@patch("coros_training_mcp.api.workouts.sdk_programs")
def test_get_workout(mock_programs):
    mock_programs.get_program.return_value = {"id": "101", "exercises": []}
    client = Mock()
    assert get_workout(client, "101")["id"] == "101"
    mock_programs.get_program.assert_called_once_with(client, "101")


@patch("coros_training_mcp.api.workouts.sdk_programs")
def test_create_workout(mock_programs):
    mock_programs.create_program.return_value = "555"
    client = Mock()

    result = create_workout(
        client,
        name="6x800m",
        sport="run",
        warmup={"target_type": "time", "target_value": 600},
        intervals={
            "sets": 6,
            "training": {"target_type": "distance", "target_value": 80000},
            "recovery": {"target_type": "time", "target_value": 90},
        },
        cooldown={"target_type": "time", "target_value": 600},
        description="Track session",
    )

    assert result["success"] is True
    assert result["workout_id"] == "555"
    assert result["sport"] == "Run"
    assert result["steps"] == 4  # group parent not counted

    args = mock_programs.create_program.call_args
    assert args.args[1] == "6x800m"
    assert args.args[2] == 1
    exercises = args.args[3]
    assert len(exercises) == 5
    assert exercises[1]["isGroup"] is True
    assert args.kwargs["overview"] == "Track session"


@patch("coros_training_mcp.api.workouts.sdk_programs")
def test_create_workout_without_steps(mock_programs):
    with pytest.raises(ValidationError, match="at least one"):
        create_workout(Mock(), name="Empty", sport="bike")
    mock_programs.create_program.assert_not_called()


@patch("coros_training_mcp.api.workouts.sdk_programs")
def test_estimate_workout(mock_programs):
    mock_programs.estimate_program.return_value = {"trainingLoad": 64}

    result = estimate_workout(
        Mock(), "bike", "20260301",
        steady_blocks=[{"target_type": "time", "target_value": 3600}],
    )

    assert result == {"day": "20260301", "sport": "Bike", "estimated_load": 64}
    exercises = mock_programs.estimate_program.call_args.args[2]
    assert exercises[0]["name"] == "T4000"


def test_estimate_workout_bad_day():
    with pytest.raises(ValidationError, match="YYYYMMDD"):
        estimate_workout(
            Mock(), "run", "2026-03-01",
            steady_blocks=[{"target_type": "time", "target_value": 600}],
        )


@patch("coros_training_mcp.api.workouts.sdk_programs")
def test_delete_workouts(mock_programs):
    client = Mock()

    result = delete_workouts(client, ["101", "102"])

    assert result["success"] is True
    assert result["deleted"] == 2
    mock_programs.delete_programs.assert_called_once_with(client, ["101", "102"])

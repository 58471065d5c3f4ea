"""
COROS API types, enums, and constants.

All COROS-specific codes, mappings, and magic values live here.
Integer values cross the wire unchanged and must not be renumbered.
"""

from enum import Enum, IntEnum


class Region(Enum):
    """Data-residency region selecting the API base URL."""
    US = "us"
    EU = "eu"
    CN = "cn"


REGION_URLS = {
    Region.US: "https://teamapi.coros.com",
    Region.EU: "https://teameuapi.coros.com",
    Region.CN: "https://teamcnapi.coros.com",
}

DEFAULT_REGION = Region.US


class SportType(IntEnum):
    """Program sport type codes (workout context)."""
    RUN = 1
    BIKE = 2


class ExerciseType(IntEnum):
    """Exercise type codes within a workout program."""
    GROUP = 0
    WARMUP = 1
    TRAINING = 2
    COOLDOWN = 3
    RECOVERY = 4


class TargetType(IntEnum):
    """Exercise target type codes."""
    OPEN = 1
    TIME = 2
    DISTANCE = 5


class IntensityType(IntEnum):
    """Exercise intensity type codes."""
    NONE = 0
    HEART_RATE = 2
    PACE = 3


class RestType(IntEnum):
    """Rest type between repeat sets."""
    TIMED = 0
    NO_REST = 3


class DistanceDisplayUnit(IntEnum):
    """Display unit for distances on the watch."""
    KILOMETERS = 1
    MILES = 2


class VersionStatus(IntEnum):
    """Status codes for versionObjects in schedule/update."""
    NEW = 1
    MOVE_UPDATE = 2
    DELETE = 3


# Login
ACCOUNT_TYPE_EMAIL = 2

# sortNo spacing: top-level entries step by BASE, group children by CHILD
SORT_NO_BASE = 16777216
SORT_NO_CHILD = 65536

# Fixed exercise defaults
EXERCISE_STATUS_ACTIVE = 1
REST_TYPE_DEFAULT = RestType.NO_REST
DEFAULT_EQUIPMENT = (1,)
DEFAULT_PART = (0,)
DEFAULT_DISTANCE_DISPLAY_UNIT = DistanceDisplayUnit.MILES

# Program / schedule payload versions
PB_VERSION_PROGRAM = 8
PB_VERSION_SCHEDULE = 2
PROGRAM_UNIT = 1
PROGRAM_QUERY_LIMIT = 100

SPORT_TYPE_LABELS = {
    SportType.RUN: "Run",
    SportType.BIKE: "Bike",
}

SPORT_NAME_TO_CODE = {
    "run": SportType.RUN,
    "running": SportType.RUN,
    "bike": SportType.BIKE,
    "cycling": SportType.BIKE,
}

# Step kinds that map onto a template
TEMPLATE_KINDS = ("warmup", "training", "cooldown", "recovery")

KIND_TO_EXERCISE_TYPE = {
    "warmup": ExerciseType.WARMUP,
    "training": ExerciseType.TRAINING,
    "cooldown": ExerciseType.COOLDOWN,
    "recovery": ExerciseType.RECOVERY,
}

# Exercise template metadata from the COROS exercise library,
# keyed by (sport, kind). originIds come from real API responses.
EXERCISE_TEMPLATES = {
    SportType.RUN: {
        "warmup": {
            "originId": "425895398452936705",
            "name": "T1120",
            "overview": "sid_run_warm_up_dist",
        },
        "training": {
            "originId": "426109589008859136",
            "name": "T3001",
            "overview": "sid_run_training",
        },
        "cooldown": {
            "originId": "425895456971866112",
            "name": "T1122",
            "overview": "sid_run_cool_down_dist",
        },
        "recovery": {
            "originId": "425895398452936705",
            "name": "T1123",
            "overview": "sid_run_cool_down_dist",
        },
    },
    SportType.BIKE: {
        "warmup": {
            "originId": "425895398452936705",
            "name": "T1120",
            "overview": "sid_run_warm_up_dist",
        },
        "training": {
            "originId": "426109589008859136",
            "name": "T4000",
            "overview": "sid_bike_training",
        },
        "cooldown": {
            "originId": "425895456971866112",
            "name": "T1122",
            "overview": "sid_run_cool_down_dist",
        },
        "recovery": {
            "originId": "425895398452936705",
            "name": "T1123",
            "overview": "sid_run_cool_down_dist",
        },
    },
}

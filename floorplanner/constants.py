"""Column layouts, label orientations and application-wide constants."""

from enum import IntEnum

VERSION_MAJOR = 2
VERSION_MINOR = 9
CSV_SEPARATOR = ";"


class ColorColumn(IntEnum):
    """Columns of the colour customisation table."""

    DEPARTMENT = 0
    TEAM = 1
    COMPONENT = 2
    COLOR = 3
    REMOVE = 4
    TOTAL_COLUMNS = 5


class MemberColumn(IntEnum):
    """Columns of the member table."""

    FULL_NAME = 0
    LOCATION = 1
    DEPARTMENT = 2
    TEAM = 3
    COMPONENT = 4
    ROLE = 5
    ROOM = 6
    TOTAL_COLUMNS = 7


class RoomColumn(IntEnum):
    """Columns of the room table."""

    NUMBER = 0
    CAPACITY = 1
    TOTAL_COLUMNS = 2


class Orientation(IntEnum):
    """Where a room's number label is placed."""

    DOWN = 0
    LEFT = 1
    UP = 2
    RIGHT = 3
    CENTER = 4


class PeopleColumn(IntEnum):
    """Field order of a line in the people CSV file."""

    SURNAME = 0
    NAME = 1
    LOCATION = 2
    DEPARTMENT = 3
    TEAM = 4
    ROLE = 5
    COMPONENT = 6
    ROOM = 7
    TOTAL_COLUMNS = 8
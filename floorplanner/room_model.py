"""Table of rooms and their capacities."""

from __future__ import annotations

from collections.abc import Iterable

from .constants import RoomColumn
from .room import Room

CAPACITY_MIN = 0
CAPACITY_MAX = 10

_HEADERS = {
    RoomColumn.NUMBER: "Number",
    RoomColumn.CAPACITY: "Capacity",
}


class RoomModel:
    """Rows of rooms; capacities of rooms with desks can be edited."""

    def __init__(self, rooms: Iterable[Room] | None = None) -> None:
        self.rooms: list[Room] = list(rooms) if rooms is not None else []

    def row_count(self) -> int:
        """Number of rooms, including unnumbered outlines."""
        return len(self.rooms)

    def column_count(self) -> int:
        """Number of columns."""
        return int(RoomColumn.TOTAL_COLUMNS)

    def header(self, section: int, horizontal: bool = True) -> str | None:
        """Column title, or the one-based row number for vertical headers."""
        if not horizontal:
            return str(section + 1)
        try:
            return _HEADERS.get(RoomColumn(section))
        except ValueError:
            return None

    def data(self, row: int, column: int) -> int | str:
        """Room number or capacity of a row; an empty string outside the table."""
        if row < 0 or column < 0 or row >= len(self.rooms):
            return ""
        room = self.rooms[row]
        if column == RoomColumn.NUMBER:
            return room.nr
        if column == RoomColumn.CAPACITY:
            return room.capacity
        return ""

    def visible_rows(self) -> list[int]:
        """Indices of the rows shown: every room with a number other than 0."""
        return [row for row, room in enumerate(self.rooms) if room.nr != 0]

    def _find(self, nr: int) -> Room | None:
        return next((room for room in self.rooms if room.nr == nr), None)

    def editable(self, nr: int, column: int) -> bool:
        """Whether a cell can be edited: the capacity of a room with desks."""
        room = self._find(nr)
        if room is None:
            return False
        return column == RoomColumn.CAPACITY and not room.service_room

    def set_capacity(self, nr: int, value) -> bool:
        """Change the capacity of the room numbered nr; False if there is none."""
        try:
            capacity = int(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"invalid capacity {value!r}") from exc
        if not CAPACITY_MIN <= capacity <= CAPACITY_MAX:
            raise ValueError(
                f"capacity out of range {CAPACITY_MIN}..{CAPACITY_MAX}: {capacity}"
            )
        room = self._find(nr)
        if room is None:
            return False
        room.capacity = capacity
        return True
"""Searchable table of staff members and their pending room moves."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .constants import MemberColumn
from .person import Person

ROOM_MIN = 0
ROOM_MAX = 600

_HEADERS = {
    MemberColumn.FULL_NAME: "Name",
    MemberColumn.LOCATION: "Location",
    MemberColumn.DEPARTMENT: "Department",
    MemberColumn.TEAM: "Team",
    MemberColumn.COMPONENT: "Component",
    MemberColumn.ROLE: "Role",
    MemberColumn.ROOM: "Room",
}

_TEXT_FIELDS = {
    MemberColumn.LOCATION: "location",
    MemberColumn.DEPARTMENT: "department",
    MemberColumn.TEAM: "team",
    MemberColumn.COMPONENT: "component",
    MemberColumn.ROLE: "role",
}


class MemberModel:
    """Rows of people with a text filter; only the room column is editable."""

    def __init__(self, people: Iterable[Person] | None = None) -> None:
        self.people: list[Person] = list(people) if people is not None else []
        self.pattern: re.Pattern[str] = re.compile("")

    def row_count(self) -> int:
        """Number of people."""
        return len(self.people)

    def column_count(self) -> int:
        """Number of columns."""
        return int(MemberColumn.TOTAL_COLUMNS)

    def header(self, section: int, horizontal: bool = True) -> str | None:
        """Column title, or the one-based row number for vertical headers."""
        if not horizontal:
            return str(section + 1)
        try:
            return _HEADERS.get(MemberColumn(section))
        except ValueError:
            return None

    def data(self, row: int, column: int) -> str:
        """Display text of a cell; the room column shows the pending room."""
        if row < 0 or column < 0 or row >= len(self.people):
            return ""
        person = self.people[row]
        if column == MemberColumn.FULL_NAME:
            return person.full_name()
        if column == MemberColumn.ROOM:
            return str(person.modified)
        field_name = _TEXT_FIELDS.get(column)
        return getattr(person, field_name) if field_name else ""

    def restore(self, people: Iterable[Person]) -> int:
        """Show another list of people; returns the number of rows."""
        self.people = list(people)
        return len(self.people)

    def _accepts(self, row: int) -> bool:
        return any(
            self.pattern.search(self.data(row, column).lower().strip())
            for column in range(self.column_count())
        )

    def search(self, pattern: str) -> list[Person]:
        """Set the filter and return the people any of whose cells match it.

        Cells are lower-cased and trimmed before the regular expression is applied.
        """
        try:
            self.pattern = re.compile(pattern)
        except re.error as exc:
            raise ValueError(f"invalid search pattern {pattern!r}: {exc}") from exc
        return self.visible()

    def visible(self) -> list[Person]:
        """People accepted by the current filter, in row order."""
        return [person for row, person in enumerate(self.people) if self._accepts(row)]

    def editable(self, column: int) -> bool:
        """Whether a cell of the column can be edited."""
        return column == MemberColumn.ROOM

    def set_room(self, full_name: str, value) -> bool:
        """Set the pending room of the person with this full name.

        Returns False if no such person is shown.
        """
        try:
            room = int(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"invalid room number {value!r}") from exc
        if not ROOM_MIN <= room <= ROOM_MAX:
            raise ValueError(f"room number out of range {ROOM_MIN}..{ROOM_MAX}: {room}")
        for person in self.people:
            if person.full_name() == full_name:
                person.modified = room
                return True
        return False
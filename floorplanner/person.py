"""People shown on the floor plan and how their names are abbreviated."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

Point = tuple[float, float]

_MIN_LONG_PREFIX = 3
_LEAD_MARKERS = ("Team Lead", "Teamlead", "Teamleiter", "Leitung", "Head", "TL")
_LEAD_EXCEPTIONS = frozenset({"Götz"})


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue, self.alpha):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def with_alpha(self, alpha: int) -> Color:
        """Return the same colour with another alpha value."""
        return replace(self, alpha=alpha)


GRAY = Color(160, 160, 164)
WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


def short_name(value: str) -> str:
    """Abbreviate every word to its initial followed by a dot."""
    return "".join(word[:1] + "." for word in value.split(" "))


def long_name(value: str) -> str:
    """Keep the first word, abbreviate the rest.

    A first word shorter than three letters keeps the second word whole.
    """
    words = value.split(" ")
    if len(words) == 1:
        return value
    first, second, *rest = words
    if len(first) < _MIN_LONG_PREFIX:
        result = f"{first} {second}"
    else:
        result = f"{first} {second[:1]}."
    return result + "".join(word[:1] + "." for word in rest)


@dataclass(eq=False)
class Person:
    """A member of staff with a room assignment and a place on the plan."""

    name: str = ""
    surname: str = ""
    location: str = ""
    department: str = ""
    team: str = ""
    role: str = ""
    component: str = ""
    room: int = 0
    modified: int | None = None
    color: Color = GRAY
    coordinates: list[Point] = field(default_factory=list)
    tmp_coordinates: list[Point] = field(default_factory=list)
    offset: tuple[float, float] = (0, 0)
    display_first_name_full: bool = False

    def __post_init__(self) -> None:
        if self.modified is None:
            self.modified = self.room

    def full_name(self) -> str:
        """Surname and name joined by a space."""
        return f"{self.surname} {self.name}"

    def display_name(self) -> str:
        """The abbreviated name drawn on the plan."""
        if self.display_first_name_full:
            return f"{long_name(self.surname)} {short_name(self.name)}"
        return f"{short_name(self.surname)} {long_name(self.name)}"

    def assign_room(self, room: int) -> None:
        """Set the room and reset any pending modification to it."""
        self.room = room
        self.modified = room

    def place(self, coordinates) -> None:
        """Set the polygon the person occupies on the plan."""
        self.coordinates = [(x, y) for x, y in coordinates]
        self.tmp_coordinates = list(self.coordinates)

    def grab(self, x: float, y: float) -> None:
        """Remember where the person was picked up for dragging."""
        self.offset = (x, y)

    def move_to(self, x: float, y: float) -> None:
        """Shift the temporary polygon so that the grab point lies at (x, y)."""
        ox, oy = self.offset
        self.tmp_coordinates = [
            (int(px + x - ox), int(py + y - oy)) for px, py in self.coordinates
        ]

    def clear(self) -> None:
        """Drop any drag state."""
        self.tmp_coordinates = list(self.coordinates)
        self.offset = (0, 0)

    def is_lead(self) -> bool:
        """Whether the person leads a team, judged by role."""
        if any(marker in self.role for marker in _LEAD_MARKERS):
            return True
        return self.name in _LEAD_EXCEPTIONS
"""Rooms on the floor plan and how their occupants are laid out."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import Orientation
from .person import Person, Point

_EMPTY_POLYGON_SIZE = 5


def _fuzzy_equal(a: float, b: float) -> bool:
    return abs(a - b) * 1e12 <= min(abs(a), abs(b))


def _crossing(start: Point, end: Point, x: float, y: float) -> int:
    x1, y1 = start
    x2, y2 = end
    if _fuzzy_equal(y1, y2):
        return 0
    direction = 1
    if y2 < y1:
        x1, x2 = x2, x1
        y1, y2 = y2, y1
        direction = -1
    if y1 <= y < y2:
        cross_x = x1 + ((x2 - x1) / (y2 - y1)) * (y - y1)
        if cross_x <= x:
            return direction
    return 0


def contains_point(polygon, x: float, y: float) -> bool:
    """Winding-rule test of whether (x, y) lies in the implicitly closed polygon."""
    points = list(polygon)
    if not points:
        return False
    start = points[0]
    last = start
    winding = 0
    for point in points[1:]:
        winding += _crossing(last, point, x, y)
        last = point
    if last != start:
        winding += _crossing(last, start, x, y)
    return winding != 0


@dataclass(eq=False)
class Room:
    """A room outline with a number, a capacity and its occupants."""

    nr: int
    capacity: int
    coordinates: list[Point]
    orientation: Orientation = Orientation.DOWN
    rotation: int = -90
    dummy: bool = False
    people: list[Person] = field(default_factory=list)
    _service: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        self.coordinates = [(x, y) for x, y in self.coordinates]
        self._service = self.capacity <= 0

    @classmethod
    def from_flat(
        cls,
        nr: int,
        capacity: int,
        values,
        orientation: Orientation = Orientation.DOWN,
        rotation: int = -90,
        dummy: bool = False,
    ) -> Room:
        """Build a room from a flat list x0, y0, x1, y1, ..."""
        values = list(values)
        if len(values) % 2:
            raise ValueError("room coordinates need an even number of values")
        points = list(zip(values[::2], values[1::2]))
        return cls(nr, capacity, points, orientation, rotation, dummy)

    @property
    def service_room(self) -> bool:
        """Whether the room was defined without desks."""
        return self._service

    def center(self) -> tuple[int, int]:
        """Where the room's number label is drawn."""
        pts = self.coordinates
        count = len(pts)
        if not count:
            return (0, 0)
        x = y = 0
        if self.rotation == -90:
            if self.service_room or self.orientation == Orientation.CENTER:
                y = int((pts[0][1] + pts[1][1]) / 2 + 5)
            elif self.orientation == Orientation.DOWN:
                y = int(pts[0][1] + 15)
            elif self.orientation == Orientation.UP:
                y = int(pts[1][1] - 5)
            else:
                y = int(pts[1][1])
            if count == 4:
                x = int((pts[-1][0] + pts[0][0]) / 2)
                if self.nr >= 10:
                    x -= 10
            else:
                for px, _ in pts:
                    x = int(x + px)
                x = int(x / count)
            return (x - 8, y)

        if self.service_room or self.orientation == Orientation.CENTER:
            for px, py in pts:
                x = int(x + px)
                y = int(y + py)
            x = int(x / count)
            y = int(y / count)
        elif self.orientation == Orientation.RIGHT:
            if count > 2:
                x = int((pts[1][0] + pts[2][0]) / 2 + 10)
                y = int((pts[1][1] + pts[2][1]) / 2)
        elif self.orientation == Orientation.LEFT:
            if count > 3:
                x = int((pts[0][0] + pts[3][0]) / 2 - 35)
                y = int((pts[0][1] + pts[3][1]) / 2 + 5)
        elif self.orientation == Orientation.UP:
            if count > 1:
                x = int((pts[0][0] + pts[1][0]) / 2)
                y = int((pts[0][1] + pts[1][1]) / 2)
        elif count > 1:
            x = int((pts[0][0] + pts[-1][0]) / 2)
            y = int((pts[0][1] + pts[-1][1]) / 2)
        return (x - 5, y)

    def contains(self, x: float, y: float) -> bool:
        """Whether (x, y) lies inside the room outline."""
        return contains_point(self.coordinates, x, y)

    def add_person(self, person: Person) -> bool:
        """Add a person unless someone with the same names is already here."""
        if any(
            p.name == person.name and p.surname == person.surname
            for p in self.people
        ):
            return False
        self.people.append(person)
        return True

    def remove_person(self, person: Person) -> bool:
        """Remove a person and collapse their polygon; False if not present."""
        if not any(
            p.name == person.name and p.surname == person.surname
            for p in self.people
        ):
            return False
        person.place([(0, 0)] * _EMPTY_POLYGON_SIZE)
        for position, p in enumerate(self.people):
            if p is person:
                del self.people[position]
                break
        return True

    def _steps(self) -> tuple[float, float]:
        first, last = self.coordinates[0], self.coordinates[-1]
        count = len(self.people)
        return ((last[0] - first[0]) / count, (last[1] - first[1]) / count)

    def redraw_mates(self) -> None:
        """Split the room into equal strips, one per occupant."""
        if not self.people:
            return
        step_x, step_y = self._steps()
        (x0, y0), (x1, y1) = self.coordinates[0], self.coordinates[1]
        for i, person in enumerate(self.people):
            person.place([
                (int(x0 + i * step_x), int(y0 + i * step_y)),
                (int(x1 + i * step_x), int(y1 + i * step_y)),
                (int(x1 + (i + 1) * step_x), int(y1 + (i + 1) * step_y)),
                (int(x0 + (i + 1) * step_x), int(y0 + (i + 1) * step_y)),
            ])


class Room163(Room):
    """The room with a slanted wall; longest names get the widest strips."""

    def __post_init__(self) -> None:
        super().__post_init__()
        self.nr = 163
        self.orientation = Orientation.DOWN

    def redraw_mates(self) -> None:
        count = len(self.people)
        if not count:
            return
        pts = self.coordinates
        step_x, step_y = self._steps()
        if count == 1:
            offset_y = pts[2][1] - pts[3][1]
        else:
            offset_y = (pts[2][1] - pts[3][1]) / (count - 1)
        self.people = sorted(self.people, key=lambda p: -len(p.display_name()))

        (x0, y0), (x1, y1) = pts[0], pts[1]
        slope = step_y - offset_y
        for i, person in enumerate(self.people):
            p1_y = y1 + (i - 1) * slope if i > 0 else y1 + i * slope
            if i == 0 and count != 1:
                p2_y = y1 + step_y
            elif i == 0:
                p2_y = y1 + slope
            else:
                p2_y = y1 + i * slope
            person.place([
                (int(x0 + i * step_x), int(y0 + i * step_y)),
                (int(x1 + i * step_x), int(p1_y)),
                (int(x1 + (i + 1) * step_x), int(p2_y)),
                (int(x0 + (i + 1) * step_x), int(y0 + (i + 1) * step_y)),
            ])


class Room119(Room):
    """The room whose last strip closes on the outline's fourth corner."""

    def __post_init__(self) -> None:
        super().__post_init__()
        self.orientation = Orientation.RIGHT
        self.rotation = -20

    def redraw_mates(self) -> None:
        count = len(self.people)
        if not count:
            return
        pts = self.coordinates
        step_x, step_y = self._steps()
        (x0, y0), (x1, y1) = pts[0], pts[1]
        for i, person in enumerate(self.people):
            if i == count - 1:
                p2 = (int(pts[3][0]), int(pts[3][1]))
            else:
                p2 = (int(x1 + (i + 1) * step_x), int(y1 + (i + 1) * step_y))
            person.place([
                (int(x0 + i * step_x), int(y0 + i * step_y)),
                (int(x1 + i * step_x), int(y1 + i * step_y)),
                p2,
                (int(x0 + (i + 1) * step_x), int(y0 + (i + 1) * step_y)),
            ])
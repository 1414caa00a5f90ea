"""The floor plan's state: rooms, people, pending moves and persistence."""

from __future__ import annotations

from os import PathLike

from .color_model import ColorModel
from .constants import CSV_SEPARATOR
from .database import Database
from .floorplan import build_rooms, drop_target, person_at
from .member_model import MemberModel
from .person import GRAY, Person
from .room import Room
from .room_model import RoomModel


def _is_office(room: Room) -> bool:
    return not room.dummy and not room.service_room and room.nr != 0


class Planner:
    """Rooms and people of the floor, kept in step with the database."""

    def __init__(self, database: Database) -> None:
        self.database = database
        self.rooms: list[Room] = []
        self.people: list[Person] = []
        self.moving: Person | None = None
        self.unstored = False
        self.first_name_full = not database.display_last_name()
        self.color_model = ColorModel(database, on_updated=self.assign_people_to_rooms)
        self.color_model.restore()
        self.member_model = MemberModel()
        self.room_model = RoomModel()
        self.reset()

    def _find_room(self, nr: int) -> Room | None:
        return next((room for room in self.rooms if room.nr == nr), None)

    @staticmethod
    def _redraw(room: Room) -> None:
        if room.people:
            room.redraw_mates()

    def reset(self) -> None:
        """Drop all unsaved changes and reload rooms and people from the database."""
        self.rooms = build_rooms(self.database.room_capacity)
        self.people = self.database.people()
        self.moving = None
        self.assign_people_to_rooms()
        self.member_model.restore(self.people)
        self.room_model.rooms = self.rooms
        self.set_display_first_name(self.first_name_full)
        self.unstored = False

    def assign_people_to_rooms(self) -> None:
        """Colour everyone and place them into their office."""
        for person in self.people:
            person.color = self.database.read_color(
                person.department, person.team, person.component, GRAY
            )
            current = person.room
            for room in self.rooms:
                if room.nr == current and _is_office(room):
                    room.add_person(person)
                    person.assign_room(current)
                    self._redraw(room)
                    break

    def update_mates(self) -> None:
        """Carry out every pending room change."""
        for person in self.people:
            if person.modified == person.room:
                continue
            source = self._find_room(person.room)
            target = self._find_room(person.modified)
            if source is not None and _is_office(source):
                source.remove_person(person)
                self._redraw(source)
            if target is not None and _is_office(target):
                target.add_person(person)
                self._redraw(target)
            person.assign_room(person.modified)
        self.unstored = True

    def update_capacities(self) -> None:
        """Store the current capacity of every room."""
        for room in self.rooms:
            self.database.room_capacity(room.nr, room.capacity, force=True)

    def export_database(self) -> None:
        """Store everyone's room in the database."""
        if not self.people:
            raise ValueError("nothing to export")
        self.database.export_people(self.people)
        self.unstored = False

    def export_csv(self, path: str | PathLike[str]) -> int:
        """Write everyone to a CSV file; returns the number of lines written."""
        if not self.people:
            raise ValueError("nothing to export")
        with open(path, "w", encoding="utf-8") as handle:
            for person in self.people:
                fields = (
                    person.surname,
                    person.name,
                    person.location,
                    person.department,
                    person.team,
                    person.role,
                    person.component,
                    str(person.room),
                )
                handle.write(CSV_SEPARATOR.join(fields) + "\n")
        return len(self.people)

    def import_csv(self, path: str | PathLike[str]) -> int:
        """Replace the stored people with a CSV file and reload; returns their number."""
        count = self.database.import_csv(path)
        self.reset()
        return count

    def set_display_first_name(self, first_name_full: bool) -> None:
        """Choose whether the first or the last name is drawn in full."""
        self.first_name_full = first_name_full
        for room in self.rooms:
            if _is_office(room):
                for person in room.people:
                    person.display_first_name_full = first_name_full
                self._redraw(room)
        self.database.set_display_last_name(not first_name_full)

    def press(self, x: float, y: float) -> Person | None:
        """Pick up the person at (x, y), if any."""
        self.moving = person_at(self.people, x, y)
        if self.moving is not None:
            self.moving.grab(x, y)
        return self.moving

    def move(self, x: float, y: float) -> None:
        """Drag the picked-up person to (x, y)."""
        if self.moving is None:
            return
        self.moving.move_to(x, y)
        self.unstored = True

    def release(self, x: float, y: float) -> Room | None:
        """Drop the picked-up person; returns the room they moved to, if any."""
        if self.moving is None:
            return None
        target = drop_target(self.rooms, x, y)
        if target is not None:
            self.moving.modified = target.nr
            self.update_mates()
        self.moving.clear()
        self.moving = None
        return target

    def people_report(self) -> str:
        """A listing of everyone with their details and room."""
        lines = [f"============== number or people: {len(self.people)} =============="]
        for number, p in enumerate(self.people, start=1):
            lines.append(
                f"{number}: {p.surname} | {p.name} | {p.location} | {p.department} | "
                f"{p.team} | {p.component} | {p.room}"
            )
        return "\n".join(lines)

    def rooms_report(self) -> str:
        """A listing of every numbered room with its occupants."""
        lines = [f"============== number or rooms: {len(self.rooms)} =============="]
        for room in self.rooms:
            if room.dummy or room.nr == 0:
                continue
            lines.append(f"current: {room.nr}")
            lines.extend(f": {p.surname} | {p.name}" for p in room.people)
        return "\n".join(lines)
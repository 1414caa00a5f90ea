"""The first-floor layout and hit-testing for the plan drawing."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .constants import Orientation
from .person import Person
from .room import Room, Room119, Room163, contains_point

CapacityLookup = Callable[[int, int], int]

_C = Orientation.CENTER
_U = Orientation.UP
_L = Orientation.LEFT
_R = Orientation.RIGHT
_D = Orientation.DOWN

# (class, number, capacity, flat coordinates, orientation, rotation, dummy)
_LAYOUT = (
    (Room, 105, 5, (50, 900, 50, 800, 130, 800, 130, 900), _D, -90, False),
    (Room, 106, 4, (130, 900, 130, 800, 210, 800, 210, 900), _D, -90, False),
    (Room, 108, 3, (210, 900, 210, 800, 260, 800, 260, 900), _D, -90, False),
    (Room, 109, 3, (260, 900, 260, 800, 310, 800, 310, 900), _D, -90, False),
    (Room, 110, 2, (310, 900, 310, 800, 360, 800, 360, 900), _D, -90, False),
    (Room, 111, 2, (360, 900, 360, 800, 410, 800, 410, 900), _D, -90, False),
    (Room, 113, 3, (410, 900, 410, 800, 460, 800, 460, 900), _D, -90, False),
    (Room, 114, 3, (460, 900, 460, 800, 510, 800, 510, 900), _D, -90, False),
    (Room, 115, 3, (510, 900, 510, 800, 560, 800, 560, 900), _D, -90, False),
    (Room, 116, 2, (560, 900, 560, 800, 610, 800, 610, 900), _D, -90, False),
    (Room, 159, 2, (610, 900, 610, 800, 660, 800, 660, 900), _D, -90, False),
    (Room, 160, 3, (660, 900, 660, 800, 710, 800, 710, 900), _D, -90, False),
    (Room, 161, 3, (710, 900, 710, 800, 760, 800, 760, 900), _D, -90, False),
    (Room, 162, 3, (760, 900, 760, 800, 810, 800, 810, 900), _D, -90, False),
    (Room163, 163, 4, (810, 900, 810, 800, 840, 800, 900, 860, 900, 900), _D, -90, False),
    (Room, 0, 0, (900, 900, 900, 960, 960, 960), _C, -90, True),
    (Room, 176, 6, (960, 960, 960, 860, 1060, 860, 1060, 960), _D, -90, False),
    (Room, 175, 2, (1060, 960, 1060, 900, 1120, 900, 1120, 960), _D, -90, False),
    (Room, 173, 3, (1120, 960, 1120, 900, 1180, 900, 1180, 960), _D, -90, False),
    (Room, 174, 0, (1070, 900, 1070, 860, 1170, 860, 1170, 900), _D, -90, False),
    (Room, 172, 6, (1180, 960, 1180, 860, 1300, 860, 1300, 960), _D, -90, False),
    (Room, 171, 5, (1300, 960, 1300, 860, 1400, 860, 1400, 960), _D, -90, False),
    (Room, 0, 0, (1350, 860, 1350, 760, 1310, 760), _C, -90, True),
    (Room, 0, 0, (1190, 840, 1190, 760, 1310, 760, 1310, 840), _C, -90, False),
    (Room, 169, 2, (1130, 840, 1130, 760, 1190, 760, 1190, 840), _U, -90, False),
    (Room, 168, 3, (1060, 840, 1060, 760, 1130, 760, 1130, 840), _U, -90, False),
    (Room, 166, 3, (980, 840, 980, 760, 1060, 760, 1060, 840), _U, -90, False),
    (Room, 0, 0, (930, 840, 930, 700, 980, 700, 980, 840), _C, -90, False),
    (Room, 164, 0, (860, 770, 860, 700, 930, 700, 930, 840), _C, -90, False),
    (Room, 158, 4, (880, 700, 880, 610, 980, 610, 980, 700), _U, -90, False),
    (Room, 157, 3, (810, 680, 810, 610, 880, 610, 880, 680), _U, -90, False),
    (Room, 156, 2, (740, 680, 740, 610, 810, 610, 810, 680), _U, -90, False),
    (Room, 155, 3, (670, 680, 670, 610, 740, 610, 740, 680), _U, -90, False),
    (Room, 154, 5, (610, 740, 610, 610, 670, 610, 670, 740), _U, -90, False),
    (Room, 153, 0, (610, 780, 610, 740, 670, 740, 670, 780), _C, -90, False),
    (Room, 165, 0, (695, 780, 695, 700, 835, 700, 835, 780), _C, -90, False),
    (Room, 117, 0, (505, 780, 505, 710, 610, 710, 610, 780), _C, -90, False),
    (Room, 118, 0, (505, 710, 505, 620, 610, 620, 610, 710), _C, -90, False),
    (Room, 0, 0, (50, 800, 50, 780), _C, -90, True),
    (Room, 0, 0, (50, 780, 50, 700, 130, 700, 130, 780), _D, -90, False),
    (Room, 0, 0, (130, 780, 130, 740, 150, 740, 150, 780, 130, 780), _C, -90, True),
    (Room, 0, 0, (130, 740, 130, 700, 150, 700, 150, 740, 130, 740), _C, -90, True),
    (Room, 104, 5, (50, 700, 50, 590, 130, 590, 130, 700), _U, -90, False),
    (Room, 103, 6, (130, 680, 130, 590, 210, 590, 210, 680), _U, -90, False),
    (Room, 101, 4, (210, 680, 210, 610, 310, 610, 310, 680), _U, -90, False),
    (Room, 107, 0, (170, 780, 170, 700, 240, 700, 240, 780), _C, -90, False),
    (Room, 102, 0, (240, 780, 240, 700, 310, 700, 310, 780), _C, -90, False),
    (Room, 0, 0, (310, 780, 310, 700, 350, 700, 350, 780), _C, -90, False),
    (Room, 112, 0, (350, 780, 350, 700, 430, 700, 430, 780), _C, -90, False),
    (Room, 0, 0, (430, 780, 430, 700, 470, 700, 470, 780, 430, 780), _C, -90, True),
    (Room119, 119, 4, (490, 565, 587, 530, 610, 610, 610, 620, 505, 620), _D, -90, False),
    (Room, 120, 4, (475, 510, 572, 475, 587, 530, 490, 565), _R, -18, False),
    (Room, 121, 0, (355, 550, 444, 520, 462, 595, 345, 595), _C, 0, False),
    (Room, 149, 2, (448, 435, 551, 400, 572, 475, 470, 511), _R, -18, False),
    (Room, 148, 1, (426, 359, 529, 324, 551, 400, 448, 435), _R, -18, False),
    (Room, 147, 1, (415, 321, 518, 286, 529, 324, 426, 359), _R, -18, False),
    (Room, 146, 2, (404, 283, 507, 248, 518, 286, 415, 321), _R, -18, False),
    (Room, 145, 2, (393, 245, 496, 210, 507, 248, 404, 283), _R, -18, False),
    (Room, 144, 3, (381, 205, 484, 170, 496, 210, 393, 245), _R, -18, False),
    (Room, 143, 0, (349, 93, 452, 58, 484, 170, 381, 205), _R, -18, False),
    (Room, 0, 0, (181, 590, 181, 486), _C, -90, True),
    (Room, 131, 2, (170, 448, 273, 413, 284, 451, 181, 486), _L, -18, False),
    (Room, 132, 2, (159, 410, 262, 375, 273, 413, 170, 448), _L, -18, False),
    (Room, 133, 3, (148, 372, 251, 337, 262, 375, 159, 410), _L, -18, False),
    (Room, 134, 3, (137, 334, 240, 299, 251, 337, 148, 372), _L, -18, False),
    (Room, 135, 3, (126, 296, 229, 261, 240, 299, 137, 334), _L, -18, False),
    (Room, 136, 3, (115, 258, 218, 223, 229, 261, 126, 296), _L, -18, False),
    (Room, 137, 3, (104, 220, 207, 185, 218, 223, 115, 258), _L, -19, False),
    (Room, 138, 4, (88, 163, 191, 128, 207, 185, 104, 220), _L, -18, False),
    (Room, 139, 4, (72, 106, 175, 71, 191, 128, 88, 163), _L, -18, False),
    (Room, 151, 0, (270, 302, 368, 268, 408, 406, 308, 438), _C, -18, False),
    (Room, 140, 0, (202, 61, 301, 28, 333, 136, 232, 168), _C, -18, False),
)


def build_rooms(capacity_lookup: CapacityLookup | None = None) -> list[Room]:
    """Create every room and outline of the first floor.

    For each numbered, non-dummy room the capacity is replaced by
    capacity_lookup(nr, capacity), typically the stored value.
    Whether a room is a service room depends on the built-in capacity only.
    """
    rooms = []
    for cls, nr, capacity, values, orientation, rotation, dummy in _LAYOUT:
        room = cls.from_flat(nr, capacity, values, orientation, rotation, dummy)
        if capacity_lookup is not None and room.nr != 0 and not room.dummy:
            room.capacity = capacity_lookup(room.nr, capacity)
        rooms.append(room)
    return rooms


def person_at(people: Iterable[Person], x: float, y: float) -> Person | None:
    """The first person whose polygon contains (x, y), or None."""
    return next(
        (p for p in people if contains_point(p.coordinates, x, y)), None
    )


def drop_target(rooms: Iterable[Room], x: float, y: float) -> Room | None:
    """The first numbered room with desks that contains (x, y), or None."""
    return next(
        (
            r
            for r in rooms
            if r.contains(x, y) and r.nr != 0 and r.capacity > 0
        ),
        None,
    )


def tooltip(person: Person) -> str:
    """The hover text describing a person."""
    lines = [
        f"{person.surname} {person.name}",
        f"Department: {person.department}",
        f"Team: {person.team}",
    ]
    if len(person.component) > 1:
        lines.append(f"Component: {person.component}")
    lines.append(f"Position: {person.role}")
    lines.append(f"Room: {person.room}")
    return "\r\n".join(lines)


def room_label(room: Room) -> str | None:
    """The text drawn at a room's centre; None for dummy outlines."""
    if room.dummy:
        return None
    if room.service_room:
        return str(room.nr)
    return f"{room.nr}({room.capacity})"
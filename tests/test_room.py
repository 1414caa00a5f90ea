import pytest

from floorplanner.constants import Orientation
from floorplanner.person import Person
from floorplanner.room import Room, Room119, Room163, contains_point

SQUARE = [(0, 0), (0, 10), (10, 10), (10, 0)]


def _people(*names):
    return [Person(name=n, surname="Erika") for n in names]


def test_contains_point_inside_and_outside():
    assert contains_point(SQUARE, 5, 5) is True
    assert contains_point(SQUARE, 15, 5) is False
    assert contains_point(SQUARE, 5, -1) is False


def test_contains_point_empty_polygon():
    assert contains_point([], 0, 0) is False


def test_room_contains():
    room = Room.from_flat(105, 5, [50, 900, 50, 800, 130, 800, 130, 900])
    assert room.contains(90, 850) is True
    assert room.contains(200, 850) is False


def test_from_flat_pairs_values():
    room = Room.from_flat(1, 1, [1, 2, 3, 4])
    assert room.coordinates == [(1, 2), (3, 4)]
    assert room.orientation == Orientation.DOWN
    assert room.rotation == -90
    assert room.dummy is False


def test_from_flat_rejects_odd_count():
    with pytest.raises(ValueError):
        Room.from_flat(1, 1, [1, 2, 3])


def test_service_room_fixed_at_creation():
    service = Room(117, 0, SQUARE)
    office = Room(105, 3, SQUARE)
    assert service.service_room is True
    assert office.service_room is False
    service.capacity = 4
    assert service.service_room is True


def test_center_of_empty_room():
    assert Room(1, 1, []).center() == (0, 0)


def test_center_of_centered_room():
    room = Room(5, 0, SQUARE, Orientation.CENTER, 0)
    assert room.center() == (0, 5)


def test_add_person_rejects_same_names():
    room = Room(105, 5, SQUARE)
    assert room.add_person(Person(name="Muster", surname="Erika")) is True
    assert room.add_person(Person(name="Muster", surname="Erika")) is False
    assert len(room.people) == 1


def test_remove_person_collapses_polygon():
    room = Room(105, 5, SQUARE)
    person = Person(name="Muster", surname="Erika")
    room.add_person(person)
    room.redraw_mates()
    assert room.remove_person(person) is True
    assert room.people == []
    assert person.coordinates == [(0, 0)] * 5


def test_remove_absent_person():
    room = Room(105, 5, SQUARE)
    assert room.remove_person(Person(name="Nobody")) is False


def test_redraw_mates_tiles_room():
    room = Room.from_flat(105, 5, [50, 900, 50, 800, 130, 800, 130, 900])
    for person in _people("A", "B"):
        room.add_person(person)
    room.redraw_mates()
    first, second = room.people
    assert all(len(p.coordinates) == 4 for p in room.people)
    assert first.coordinates[0] == room.coordinates[0]
    assert second.coordinates[3] == room.coordinates[-1]
    assert first.coordinates[3] == second.coordinates[0]
    assert first.coordinates[2] == second.coordinates[1]


def test_redraw_mates_without_people_is_noop():
    room = Room(105, 5, SQUARE)
    room.redraw_mates()
    assert room.people == []


def test_room163_forces_number_and_orientation():
    room = Room163.from_flat(1, 4, [810, 900, 810, 800, 840, 800, 900, 860, 900, 900])
    assert room.nr == 163
    assert room.orientation == Orientation.DOWN
    assert room.rotation == -90


def test_room163_orders_by_name_length():
    room = Room163.from_flat(163, 4, [810, 900, 810, 800, 840, 800, 900, 860, 900, 900])
    for person in _people("Bo", "Maximilian", "Anna"):
        room.add_person(person)
    room.redraw_mates()
    lengths = [len(p.display_name()) for p in room.people]
    assert lengths == sorted(lengths, reverse=True)
    assert room.people[0].coordinates[0] == room.coordinates[0]
    assert room.people[-1].coordinates[3] == room.coordinates[-1]


def test_room119_orientation_and_last_corner():
    room = Room119.from_flat(119, 4, [490, 565, 587, 530, 610, 610, 610, 620, 505, 620])
    assert room.orientation == Orientation.RIGHT
    assert room.rotation == -20
    for person in _people("A", "B", "C"):
        room.add_person(person)
    room.redraw_mates()
    assert room.people[-1].coordinates[2] == room.coordinates[3]
    assert room.people[0].coordinates[0] == room.coordinates[0]
import pytest

from floorplanner.person import Color, Person, long_name, short_name


def test_short_name_initials():
    assert short_name("Anna Berta") == "A.B."


def test_long_name_single_word_unchanged():
    assert long_name("Maximilian") == "Maximilian"


def test_long_name_abbreviates_following_words():
    assert long_name("Anna Berta Clara") == "Anna B.C."


def test_long_name_short_prefix_keeps_second_word():
    assert long_name("Li Wei") == "Li Wei"


def test_full_name_joins_surname_and_name():
    person = Person(name="Muster", surname="Erika")
    assert person.full_name() == "Erika Muster"


def test_display_name_default_and_first_name_full():
    person = Person(name="Muster Frau", surname="Erika Maria")
    assert person.display_name() == (
        short_name("Erika Maria") + " " + long_name("Muster Frau")
    )
    person.display_first_name_full = True
    assert person.display_name() == (
        long_name("Erika Maria") + " " + short_name("Muster Frau")
    )


def test_modified_defaults_to_room():
    person = Person(room=105)
    assert person.modified == 105


def test_assign_room_resets_modification():
    person = Person(room=105)
    person.modified = 106
    person.assign_room(171)
    assert person.room == 171
    assert person.modified == 171


def test_place_copies_to_temporary_polygon():
    person = Person()
    person.place([(1, 2), (3, 4)])
    assert person.tmp_coordinates == person.coordinates == [(1, 2), (3, 4)]
    person.tmp_coordinates.append((9, 9))
    assert person.coordinates == [(1, 2), (3, 4)]


def test_move_to_grab_point_keeps_polygon():
    person = Person()
    person.place([(10, 20), (30, 40)])
    person.grab(15, 25)
    person.move_to(15, 25)
    assert person.tmp_coordinates == person.coordinates


def test_move_to_shifts_grabbed_corner_to_target():
    person = Person()
    person.place([(10, 20), (30, 40)])
    person.grab(10, 20)
    person.move_to(13, 27)
    assert person.tmp_coordinates[0] == (13, 27)
    assert person.coordinates[0] == (10, 20)


def test_clear_drops_drag_state():
    person = Person()
    person.place([(10, 20)])
    person.grab(10, 20)
    person.move_to(50, 60)
    person.clear()
    assert person.tmp_coordinates == person.coordinates
    assert person.offset == (0, 0)


@pytest.mark.parametrize(
    "role", ["Team Lead", "Teamlead", "Teamleiter", "Leitung", "Head of QA", "TL"]
)
def test_lead_roles(role):
    assert Person(role=role).is_lead() is True


def test_non_lead_role():
    assert Person(role="Developer").is_lead() is False


def test_lead_exception_by_name():
    assert Person(name="Götz", role="Developer").is_lead() is True


def test_color_rejects_out_of_range_channel():
    with pytest.raises(ValueError):
        Color(256, 0, 0)


def test_color_with_alpha():
    color = Color(0x1A, 0x5F, 0xB4)
    assert color.alpha == 255
    assert color.with_alpha(127) == Color(0x1A, 0x5F, 0xB4, 127)
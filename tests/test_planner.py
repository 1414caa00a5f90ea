import pytest

from floorplanner.database import Database
from floorplanner.person import Color
from floorplanner.planner import Planner

LINES = [
    "Doe;John;Berlin;TPS;TPS Tech1;Developer;;105",
    "Roe;Jane;Berlin;TPS;TPS Tech1;Team Lead;;105",
]


@pytest.fixture
def database(tmp_path):
    csv = tmp_path / "people.csv"
    csv.write_text("\n".join(LINES) + "\n", encoding="utf-8")
    db = Database(tmp_path / "data.db")
    db.import_csv(csv)
    yield db
    db.close()


@pytest.fixture
def planner(database):
    return Planner(database)


def room(planner, nr):
    return next(r for r in planner.rooms if r.nr == nr)


def person(planner, name):
    return next(p for p in planner.people if p.name == name)


def test_people_are_placed_in_their_rooms(planner):
    assert {p.name for p in room(planner, 105).people} == {"John", "Jane"}
    assert all(p.coordinates for p in planner.people)


def test_drag_and_drop_moves_person(planner):
    john = person(planner, "John")
    x, y = john.coordinates[0]
    grabbed = planner.press(x + 5, y - 5)
    assert grabbed is not None
    planner.move(170, 850)
    assert planner.unstored is True
    target = planner.release(170, 850)
    assert target is room(planner, 106)
    assert grabbed.room == 106
    assert grabbed in room(planner, 106).people
    assert grabbed not in room(planner, 105).people
    assert planner.moving is None


def test_release_outside_keeps_room(planner):
    john = person(planner, "John")
    x, y = john.coordinates[0]
    planner.press(x + 5, y - 5)
    assert planner.release(-100, -100) is None
    assert john.room == 105
    assert planner.moving is None


def test_press_on_empty_space(planner):
    assert planner.press(-10, -10) is None
    assert planner.release(170, 850) is None


def test_reset_undoes_changes(planner):
    john = person(planner, "John")
    john.modified = 106
    planner.update_mates()
    assert john.room == 106
    planner.reset()
    assert person(planner, "John").room == 105
    assert planner.unstored is False


def test_export_database_persists(planner, database):
    john = person(planner, "John")
    john.modified = 106
    planner.update_mates()
    planner.export_database()
    assert planner.unstored is False
    planner.reset()
    assert person(planner, "John").room == 106


def test_export_csv_round_trip(planner, tmp_path):
    out = tmp_path / "out.csv"
    assert planner.export_csv(out) == 2
    assert out.read_text(encoding="utf-8").splitlines() == LINES


def test_import_csv_reloads(planner, tmp_path):
    csv = tmp_path / "other.csv"
    csv.write_text("Poe;Max;Berlin;TPS;TPS Tech2;QA;;106\n", encoding="utf-8")
    assert planner.import_csv(csv) == 1
    assert [p.name for p in planner.people] == ["Max"]
    assert [p.name for p in room(planner, 106).people] == ["Max"]


def test_nothing_to_export(tmp_path):
    with Database(tmp_path / "empty.db") as db:
        planner = Planner(db)
        with pytest.raises(ValueError):
            planner.export_database()
        with pytest.raises(ValueError):
            planner.export_csv(tmp_path / "x.csv")


def test_update_capacities_stores_values(planner, database):
    assert planner.room_model.set_capacity(106, 7) is True
    planner.update_capacities()
    assert database.room_capacity(106, 0) == 7


def test_display_first_name_setting(planner, database):
    planner.set_display_first_name(True)
    assert database.display_last_name() is False
    assert all(p.display_first_name_full for p in planner.people)
    planner.set_display_first_name(False)
    assert database.display_last_name() is True
    assert not any(p.display_first_name_full for p in planner.people)


def test_saving_colors_recolors_people(planner):
    model = planner.color_model
    model.add_row()
    model.set_data(0, 0, "TPS")
    model.set_data(0, 3, Color(1, 2, 3))
    model.save()
    assert person(planner, "John").color == Color(1, 2, 3)


def test_reports(planner):
    people = planner.people_report()
    assert "Doe | John" in people
    assert people.splitlines()[0].startswith("============== number or people: 2")
    rooms = planner.rooms_report()
    assert "current: 105" in rooms
    assert ": Roe | Jane" in rooms
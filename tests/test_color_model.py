import pytest

from floorplanner.color_model import ColorModel, ColorRow
from floorplanner.constants import ColorColumn
from floorplanner.database import Database, DatabaseError
from floorplanner.person import Color

CSV_LINES = [
    "Doe;Jane;Berlin;Dev;Alpha;Engineer;Core;105",
    "Roe;Rick;Berlin;Dev;Beta;Engineer;;106",
    "Poe;Ann;Hamburg;Ops;Gamma;Team Lead;Net;0",
]


@pytest.fixture
def database(tmp_path):
    csv_path = tmp_path / "people.csv"
    csv_path.write_text("\n".join(CSV_LINES) + "\n", encoding="utf-8")
    db = Database(tmp_path / "data.db")
    db.import_csv(csv_path)
    yield db
    db.close()


@pytest.fixture
def model(database):
    return ColorModel(database)


def test_headers(model):
    assert model.header(ColorColumn.DEPARTMENT) == "Department"
    assert model.header(ColorColumn.COLOR) == "Color"
    assert model.header(ColorColumn.REMOVE) == "Remove row"
    assert model.header(2, horizontal=False) == "3"
    assert model.header(99) is None


def test_column_count(model):
    assert model.column_count() == int(ColorColumn.TOTAL_COLUMNS)


def test_load_default(model):
    model.load_default()
    assert model.row_count() == 37
    assert model.data(0, ColorColumn.DEPARTMENT) == "TPS"
    assert model.data(0, ColorColumn.TEAM) == "TPS Tech1"
    assert model.data(0, ColorColumn.COLOR) == Color(0x1A, 0x5F, 0xB4)
    assert model.data(9, ColorColumn.COMPONENT) == "RTC"


def test_add_row_is_empty(model):
    model.add_row()
    assert model.row_count() == 1
    assert model.data(0, ColorColumn.DEPARTMENT) == ""
    assert model.data(0, ColorColumn.COLOR) is None
    assert model.data(0, ColorColumn.REMOVE) is None


def test_department_change_selects_first_team(model):
    model.add_row()
    assert model.set_data(0, ColorColumn.DEPARTMENT, "Dev") is True
    assert model.data(0, ColorColumn.TEAM) == "Alpha"


def test_same_department_keeps_team(model):
    model.add_row()
    model.set_data(0, ColorColumn.DEPARTMENT, "Dev")
    model.set_data(0, ColorColumn.TEAM, "Beta")
    model.set_data(0, ColorColumn.DEPARTMENT, "Dev")
    assert model.data(0, ColorColumn.TEAM) == "Beta"


def test_unknown_department_clears_team(model):
    model.add_row()
    model.set_data(0, ColorColumn.TEAM, "Beta")
    model.set_data(0, ColorColumn.DEPARTMENT, "Nowhere")
    assert model.data(0, ColorColumn.TEAM) == ""


def test_set_data_out_of_range(model):
    assert model.set_data(0, ColorColumn.TEAM, "Alpha") is False
    assert model.data(5, ColorColumn.TEAM) is None


def test_set_color_requires_color(model):
    model.add_row()
    with pytest.raises(TypeError):
        model.set_data(0, ColorColumn.COLOR, "red")


def test_remove_rows(model):
    model.load_default()
    total = model.row_count()
    second = model.data(1, ColorColumn.TEAM)
    assert model.remove_row(0) is True
    assert model.row_count() == total - 1
    assert model.data(0, ColorColumn.TEAM) == second
    assert model.remove_rows(total, 1) is False
    assert model.remove_rows(-1, 1) is False
    model.remove_all()
    assert model.row_count() == 0


def test_choices(model):
    model.add_row()
    model.set_data(0, ColorColumn.DEPARTMENT, "Dev")
    assert model.choices(0, ColorColumn.DEPARTMENT) == ["Ops", "Dev"]
    assert model.choices(0, ColorColumn.TEAM) == ["Alpha", "Beta"]
    assert model.choices(0, ColorColumn.COMPONENT) == ["Core"]
    assert model.choices(0, ColorColumn.COLOR) == []


def test_save_and_restore_round_trip(database):
    calls = []
    model = ColorModel(database, on_updated=lambda: calls.append(True))
    model.add_row()
    model.set_data(0, ColorColumn.DEPARTMENT, "Dev")
    model.set_data(0, ColorColumn.COMPONENT, "Core")
    model.set_data(0, ColorColumn.COLOR, Color(10, 20, 30, 40))
    model.add_row()
    model.set_data(1, ColorColumn.DEPARTMENT, "Ops")
    model.set_data(1, ColorColumn.COLOR, Color(1, 2, 3))
    expected = model.snapshot()
    model.save()
    assert calls == [True]

    other = ColorModel(database)
    assert other.restore() == 2
    key = lambda row: (row.department, row.team, row.component)
    assert sorted(other.rows, key=key) == sorted(expected, key=key)


def test_restore_replaces_rows(model):
    model.load_default()
    model.database.clear_colors()
    assert model.restore() == 0
    assert model.rows == []


def test_save_without_color_table_fails(tmp_path):
    with Database(tmp_path / "empty.db") as db:
        model = ColorModel(db)
        model.rows.append(ColorRow("Dev", "Alpha", "", Color(1, 1, 1)))
        with pytest.raises(DatabaseError):
            model.save()
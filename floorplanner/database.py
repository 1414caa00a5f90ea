"""SQLite storage for people, rooms, colours and settings."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable
from os import PathLike

from .constants import CSV_SEPARATOR, VERSION_MAJOR, VERSION_MINOR, PeopleColumn
from .person import GRAY, Color, Person

DB_NAME = "data.db"

_LOOKUP_TABLES = (
    ("departments", "department", PeopleColumn.DEPARTMENT),
    ("locations", "location", PeopleColumn.LOCATION),
    ("teams", "team", PeopleColumn.TEAM),
    ("components", "component", PeopleColumn.COMPONENT),
)

_PEOPLE_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS people (id integer, surname VARCHAR, name VARCHAR, "
    "location_id integer, department_id integer, team_id integer, component_id integer, "
    "role VARCHAR, room integer, "
    "FOREIGN KEY (location_id) REFERENCES locations(id), "
    "FOREIGN KEY (department_id) REFERENCES departments(id), "
    "FOREIGN KEY (team_id) REFERENCES teams(id), "
    "FOREIGN KEY (component_id) REFERENCES components(id), PRIMARY KEY(id))"
)

_COLORS_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS colors (id integer, department_id integer, "
    "team_id integer, component_id integer, "
    "red integer, green integer, blue integer, alpha integer, "
    "FOREIGN KEY (department_id) REFERENCES departments(id), "
    "FOREIGN KEY (team_id) REFERENCES teams(id), "
    "FOREIGN KEY (component_id) REFERENCES components(id), PRIMARY KEY(id))"
)

_ROOMS_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS rooms (room_nr integer, room_capacity integer, "
    "PRIMARY KEY(room_nr))"
)

_INSERT_PERSON = (
    "INSERT INTO people (surname, name, location_id, department_id, team_id, "
    "role, component_id, room) VALUES (?, ?, "
    "(SELECT id FROM locations WHERE locations.location = ?), "
    "(SELECT id FROM departments WHERE departments.department = ?), "
    "(SELECT id FROM teams WHERE teams.team = ?), ?, "
    "(SELECT id FROM components WHERE components.component = ?), ?)"
)

_SELECT_PEOPLE = (
    "SELECT surname, name, location, department, team, component, role, room "
    "FROM people "
    "INNER JOIN locations ON locations.id = people.location_id "
    "INNER JOIN departments ON departments.id = people.department_id "
    "INNER JOIN teams ON teams.id = people.team_id "
    "LEFT JOIN components ON components.id = people.component_id"
)

_SELECT_COLOR = (
    "SELECT red, green, blue, alpha FROM colors WHERE "
    "department_id = (SELECT id FROM departments WHERE departments.department = ?) AND "
    "team_id = (SELECT id FROM teams WHERE teams.team = ?) AND "
    "component_id = (SELECT id FROM components WHERE components.component = ?)"
)

_INSERT_COLOR = (
    "INSERT INTO colors (department_id, team_id, component_id, red, green, blue, alpha) "
    "VALUES ((SELECT id FROM departments WHERE departments.department = ?), "
    "(SELECT id FROM teams WHERE teams.team = ?), "
    "(SELECT id FROM components WHERE components.component = ?), ?, ?, ?, ?)"
)

_SELECT_COLOR_TABLE = (
    "SELECT department, team, component, red, green, blue, alpha "
    "FROM departments INNER JOIN colors ON departments.id = colors.department_id "
    "INNER JOIN teams ON colors.team_id = teams.id "
    "INNER JOIN components ON colors.component_id = components.id"
)


class DatabaseError(Exception):
    """A statement against the database failed."""


class Database:
    """The application's SQLite file with its version and settings tables."""

    def __init__(self, path: str | PathLike[str] = DB_NAME) -> None:
        self.path = str(path)
        self._conn = sqlite3.connect(self.path, isolation_level=None)
        self._run("CREATE TABLE IF NOT EXISTS version (type TEXT, number integer)")
        self._prev_major = self._stored_version("MAJOR")
        self._prev_minor = self._stored_version("MINOR")
        self._store_version("MAJOR", self._prev_major, VERSION_MAJOR)
        self._store_version("MINOR", self._prev_minor, VERSION_MINOR)
        self._run(
            "CREATE TABLE IF NOT EXISTS settings "
            "(name VARCHAR, value integer, PRIMARY KEY(name))"
        )
        self._run(
            "INSERT OR IGNORE INTO settings (name, value) "
            "VALUES ('display_last_name', 1)"
        )
        self._compatible = self._prev_major == VERSION_MAJOR

    # -- plumbing ---------------------------------------------------------

    def _run(self, sql: str, params: Iterable = ()) -> None:
        try:
            self._conn.execute(sql, tuple(params))
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def _fetch(self, sql: str, params: Iterable = ()) -> list[tuple]:
        try:
            return self._conn.execute(sql, tuple(params)).fetchall()
        except sqlite3.OperationalError:
            return []

    def _column(self, sql: str, params: Iterable = ()) -> list[str]:
        return ["" if value is None else str(value) for value, in self._fetch(sql, params)]

    def _stored_version(self, kind: str) -> int:
        rows = self._fetch("SELECT number FROM version WHERE type = ?", (kind,))
        return int(rows[0][0]) if rows else -1

    def _store_version(self, kind: str, previous: int, value: int) -> None:
        if previous != -1:
            self._run("UPDATE version SET number = ? WHERE type = ?", (value, kind))
        else:
            self._run("INSERT INTO version (type, number) VALUES (?, ?)", (kind, value))

    def _customize_colors(self) -> None:
        if not self._compatible:
            self._run("DROP TABLE IF EXISTS colors")
        self._run(_COLORS_SCHEMA)

    def _customize_rooms(self) -> None:
        self._run(_ROOMS_SCHEMA)

    # -- lifecycle --------------------------------------------------------

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()

    def __enter__(self) -> Database:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def compatible(self) -> bool:
        """Whether the file was last written by the same major version."""
        return self._compatible

    # -- people -----------------------------------------------------------

    def import_csv(self, path: str | PathLike[str]) -> int:
        """Replace all people and lookup tables with the contents of a CSV file.

        Returns the number of people imported.
        """
        with open(path, encoding="utf-8") as handle:
            lines = [line.rstrip("\n") for line in handle]

        for table in ("people", "components", "teams", "departments", "locations"):
            self._run(f"DROP TABLE IF EXISTS {table}")
        for table, column, _ in _LOOKUP_TABLES:
            self._run(
                f"CREATE TABLE IF NOT EXISTS {table} "
                f"(id integer, {column} VARCHAR, PRIMARY KEY(id))"
            )
        self._run(_PEOPLE_SCHEMA)

        collected: dict[int, list[str]] = {
            field: [] for _, _, field in _LOOKUP_TABLES
        }
        collected[PeopleColumn.COMPONENT].append("")
        for line in lines:
            values = line.split(CSV_SEPARATOR)
            for position, value in enumerate(values[:-1]):
                bucket = collected.get(position)
                if bucket is not None and value not in bucket:
                    bucket.append(value)
        for table, column, field in _LOOKUP_TABLES:
            for value in collected[field]:
                self._run(f"INSERT INTO {table} ({column}) VALUES (?)", (value,))

        self._customize_colors()
        self._customize_rooms()

        imported = 0
        for number, line in enumerate(lines, start=1):
            values = line.split(CSV_SEPARATOR)
            if len(values) < PeopleColumn.TOTAL_COLUMNS:
                raise DatabaseError(
                    f"line {number}: expected {int(PeopleColumn.TOTAL_COLUMNS)} fields, "
                    f"got {len(values)}"
                )
            raw_room = values[PeopleColumn.ROOM]
            try:
                room = int(raw_room) if raw_room else 0
            except ValueError as exc:
                raise DatabaseError(f"line {number}: invalid room {raw_room!r}") from exc
            self._run(
                _INSERT_PERSON,
                (
                    values[PeopleColumn.SURNAME],
                    values[PeopleColumn.NAME],
                    values[PeopleColumn.LOCATION],
                    values[PeopleColumn.DEPARTMENT],
                    values[PeopleColumn.TEAM],
                    values[PeopleColumn.ROLE],
                    values[PeopleColumn.COMPONENT],
                    room,
                ),
            )
            imported += 1
        return imported

    def export_people(self, people: Iterable[Person]) -> None:
        """Store each person's room, matched by name and surname."""
        for person in people:
            self._run(
                "UPDATE people SET room = ? WHERE name = ? AND surname = ?",
                (person.room, person.name, person.surname),
            )

    def people(self) -> list[Person]:
        """Everyone stored in the people table."""
        result = []
        for surname, name, location, department, team, component, role, room in (
            self._fetch(_SELECT_PEOPLE)
        ):
            result.append(
                Person(
                    name=name or "",
                    surname=surname or "",
                    location=location or "",
                    department=department or "",
                    team=team or "",
                    role=role or "",
                    component=component or "",
                    room=int(room or 0),
                )
            )
        return result

    # -- rooms ------------------------------------------------------------

    def room_capacity(self, nr: int, capacity: int, force: bool = False) -> int:
        """Return the stored capacity of a room, storing the given one first.

        Without force an existing capacity is kept; with force it is replaced.
        """
        self._customize_rooms()
        if force:
            self._run(
                "INSERT INTO rooms (room_nr, room_capacity) VALUES (?, ?) "
                "ON CONFLICT(room_nr) DO UPDATE SET room_capacity = excluded.room_capacity",
                (nr, capacity),
            )
        else:
            self._run(
                "INSERT OR IGNORE INTO rooms (room_nr, room_capacity) VALUES (?, ?)",
                (nr, capacity),
            )
        rows = self._fetch("SELECT room_capacity FROM rooms WHERE room_nr = ?", (nr,))
        return int(rows[0][0] or 0) if rows else 0

    # -- colours ----------------------------------------------------------

    def read_color(
        self, department: str, team: str, component: str, default: Color = GRAY
    ) -> Color:
        """The colour for a department, team and component.

        Falls back to the team's colour without component, then to the default.
        """
        color = default
        for red, green, blue, alpha in self._fetch(_SELECT_COLOR, (department, team, "")):
            color = Color(int(red), int(green), int(blue), int(alpha))
        if component != "":
            for red, green, blue, alpha in self._fetch(
                _SELECT_COLOR, (department, team, component)
            ):
                color = Color(int(red), int(green), int(blue), int(alpha))
        return color

    def write_color(self, department: str, team: str, component: str, color: Color) -> None:
        """Add a colour entry."""
        self._run(
            _INSERT_COLOR,
            (department, team, component, color.red, color.green, color.blue, color.alpha),
        )

    def clear_colors(self) -> None:
        """Delete every colour entry."""
        self._run("DELETE FROM colors")

    def color_table(self) -> list[tuple[str, str, str, Color]]:
        """All colour entries as (department, team, component, colour)."""
        return [
            (str(department), str(team), str(component),
             Color(int(red), int(green), int(blue), int(alpha)))
            for department, team, component, red, green, blue, alpha in self._fetch(
                _SELECT_COLOR_TABLE
            )
        ]

    def color_entries(self) -> int:
        """Number of rows in the colour table."""
        rows = self._fetch("SELECT count(*) FROM colors")
        return int(rows[0][0]) if rows else 0

    # -- lookups ----------------------------------------------------------

    def departments(self) -> list[str]:
        """All departments, in descending order."""
        return self._column("SELECT department FROM departments ORDER BY department DESC")

    def teams(self, department: str) -> list[str]:
        """Teams that have members in the department, in ascending order."""
        return self._column(
            "SELECT DISTINCT team FROM teams INNER JOIN people ON people.team_id = teams.id "
            "INNER JOIN departments ON people.department_id = departments.id "
            "WHERE departments.department = ? ORDER BY team ASC",
            (department,),
        )

    def components_of_team(self, team: str) -> list[str]:
        """Components that members of the team work on, in ascending order."""
        return self._column(
            "SELECT DISTINCT component FROM components "
            "INNER JOIN people ON people.component_id = components.id "
            "INNER JOIN teams ON people.team_id = teams.id "
            "WHERE teams.team = ? ORDER BY component ASC",
            (team,),
        )

    def components(self, department: str, team: str) -> list[str]:
        """Components of a team within a department, in ascending order."""
        return self._column(
            "SELECT DISTINCT component FROM components "
            "INNER JOIN people ON people.component_id = components.id "
            "INNER JOIN teams ON people.team_id = teams.id "
            "INNER JOIN departments ON people.department_id = departments.id "
            "WHERE teams.team = ? AND departments.department = ? ORDER BY component ASC",
            (team, department),
        )

    # -- settings ---------------------------------------------------------

    def display_last_name(self) -> bool:
        """Whether names are drawn with the last name in full."""
        rows = self._fetch("SELECT value FROM settings WHERE name = 'display_last_name'")
        return bool(rows) and int(rows[0][0] or 0) > 0

    def set_display_last_name(self, value: bool) -> None:
        """Store whether names are drawn with the last name in full."""
        self._run(
            "UPDATE settings SET value = ? WHERE name = 'display_last_name'",
            (1 if value else 0,),
        )
"""Table of colour assignments per department, team and component."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace

from .constants import ColorColumn
from .database import Database
from .person import BLACK, Color

_HEADERS = {
    ColorColumn.DEPARTMENT: "Department",
    ColorColumn.TEAM: "Team",
    ColorColumn.COMPONENT: "Component",
    ColorColumn.COLOR: "Color",
    ColorColumn.REMOVE: "Remove row",
}

_TEXT_FIELDS = {
    ColorColumn.DEPARTMENT: "department",
    ColorColumn.TEAM: "team",
    ColorColumn.COMPONENT: "component",
}

_DEFAULTS = (
    ("TPS", "TPS Tech1", "", 0x1A5FB4),
    ("TPS", "TPS Tech1 R&D-Plan", "", 0x1A5FB4),
    ("TPS", "TPS Tech1 R&D-Plan Dev1", "", 0x99C1F1),
    ("TPS", "TPS Tech1 R&D-Plan Dev2", "", 0x62A0EA),
    ("TPS", "TPS Tech1 R&D-Plan Dev3", "", 0x3584E4),
    ("TPS", "TPS Tech1 R&D-Plan QA", "", 0x8349FF),
    ("TPS", "TPS Tech2", "", 0x26A269),
    ("TPS", "TPS Tech2 R&D-Live", "", 0x26A269),
    ("TPS", "TPS Tech2 R&D-Live Dev1", "", 0x26A269),
    ("TPS", "TPS Tech2 R&D-Live Dev1", "RTC", 0x33D17A),
    ("TPS", "TPS Tech2 R&D-Live Dev1", "D&P", 0x43A047),
    ("TPS", "TPS Tech2 R&D-Live Dev1", "RISE", 0x8FF0A4),
    ("TPS", "TPS Tech2 R&D-Live Dev2", "", 0x42BC20),
    ("TPS", "TPS Tech2 R&D-Live Dev2", "RISE", 0x8FF0A4),
    ("TPS", "TPS Tech2 R&D-Live QA", "", 0x48AEB5),
    ("TPS", "TPS Tech2 R&D-TRW", "", 0xDC8ADD),
    ("TPS", "TPS PLM Plan", "", 0x865E3C),
    ("TPS", "TPS PLM Live", "", 0xCDAB8F),
    ("TPS", "TPS Tech1 Production", "", 0xF66151),
    ("TPS", "TPS Tech1 Platform, Deployment and Hosting", "", 0xA51D2D),
    ("TPS", "TPS Tech1 CustomerCare", "", 0x6CFD0C),
    ("TPS", "TPS Bid", "", 0x547474),
    ("TPS", "TPS Sales Logistics", "", 0x547474),
    ("TPS", "TPS Bid Documentation", "", 0xC9DAB0),
    ("TPS", "TPS Tech1 SMiP", "", 0xE5A50A),
    ("TPS", "TPS Tech2 SMiP", "", 0xF9F06B),
    ("TPS", "TPS PLM", "", 0xC64600),
    ("TPS", "TPS PLM Plan", "", 0xE66100),
    ("TPS", "TPS PLM Live", "", 0xFFBE6F),
    ("TPS", "TPS PLM TRW", "", 0xF708FB),
    ("TPS", "TPS Tech1 PM", "", 0xF5A798),
    ("TPS", "TPS Tech2 PM", "", 0xD2F8E0),
    ("TPS", "TPS Excellence", "", 0x04FCED),
    ("HACON Management", "Managing Directors", "", 0xFF0000),
    ("HACON Functions", "Management Assistance", "", 0xFF007F),
    ("HACON Management", "TPS Sales Logistics", "", 0xAAAA7F),
    ("HACON Management", "TPS Techn.Advisor", "", 0xAAAA7F),
)


def _rgb(value: int) -> Color:
    return Color((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


@dataclass
class ColorRow:
    """One colour assignment; an unset colour is None."""

    department: str = ""
    team: str = ""
    component: str = ""
    color: Color | None = None


class ColorModel:
    """Editable rows of colour assignments backed by the database."""

    def __init__(
        self,
        database: Database,
        on_updated: Callable[[], None] | None = None,
    ) -> None:
        self.database = database
        self.rows: list[ColorRow] = []
        self.listeners: list[Callable[[], None]] = []
        if on_updated is not None:
            self.listeners.append(on_updated)

    def row_count(self) -> int:
        """Number of rows."""
        return len(self.rows)

    def column_count(self) -> int:
        """Number of columns."""
        return int(ColorColumn.TOTAL_COLUMNS)

    def header(self, section: int, horizontal: bool = True) -> str | None:
        """Column title, or the one-based row number for vertical headers."""
        if not horizontal:
            return str(section + 1)
        try:
            return _HEADERS.get(ColorColumn(section))
        except ValueError:
            return None

    def _row(self, row: int) -> ColorRow | None:
        if 0 <= row < len(self.rows):
            return self.rows[row]
        return None

    def data(self, row: int, column: int):
        """Text of a name column, the colour of the colour column, else None."""
        entry = self._row(row)
        if entry is None:
            return None
        if column in _TEXT_FIELDS:
            return getattr(entry, _TEXT_FIELDS[ColorColumn(column)])
        if column == ColorColumn.COLOR:
            return entry.color
        return None

    def set_data(self, row: int, column: int, value) -> bool:
        """Change a cell; a new department also selects its first team."""
        entry = self._row(row)
        if entry is None:
            return False
        if column == ColorColumn.DEPARTMENT:
            department = str(value)
            changed = entry.department != department
            entry.department = department
            if changed:
                entry.team = self._first_team(department)
            return True
        if column == ColorColumn.TEAM:
            entry.team = str(value)
            return True
        if column == ColorColumn.COMPONENT:
            entry.component = str(value)
            return True
        if column == ColorColumn.COLOR:
            if not isinstance(value, Color):
                raise TypeError(f"expected a Color, got {type(value).__name__}")
            entry.color = value
            return True
        return column == ColorColumn.REMOVE

    def add_row(self) -> None:
        """Append an empty row."""
        self.rows.append(ColorRow())

    def remove_row(self, row: int) -> bool:
        """Remove one row."""
        return self.remove_rows(row, 1)

    def remove_rows(self, row: int, count: int) -> bool:
        """Remove count rows starting at row; False if row is out of range."""
        if row < 0 or row >= len(self.rows):
            return False
        del self.rows[row:row + count]
        return True

    def remove_all(self) -> None:
        """Remove every row."""
        self.rows.clear()

    def save(self) -> None:
        """Replace the stored colour table with these rows and notify listeners."""
        self.database.clear_colors()
        for entry in self.rows:
            self.database.write_color(
                entry.department,
                entry.team,
                entry.component,
                entry.color if entry.color is not None else BLACK,
            )
        for listener in self.listeners:
            listener()

    def restore(self) -> int:
        """Reload the rows from the stored colour table; returns their number."""
        self.remove_all()
        self.rows = [
            ColorRow(department, team, component, color)
            for department, team, component, color in self.database.color_table()
        ]
        return len(self.rows)

    def load_default(self) -> None:
        """Replace the rows with the built-in default colours."""
        self.rows = [
            ColorRow(department, team, component, _rgb(value))
            for department, team, component, value in _DEFAULTS
        ]

    def choices(self, row: int, column: int) -> list[str]:
        """Values offered when editing a name cell of a row."""
        entry = self._row(row)
        if column == ColorColumn.DEPARTMENT:
            return self.database.departments()
        if entry is None:
            return []
        if column == ColorColumn.TEAM:
            return self.database.teams(entry.department)
        if column == ColorColumn.COMPONENT:
            return self.database.components(entry.department, entry.team)
        return []

    def _first_team(self, department: str) -> str:
        teams = self.database.teams(department)
        return teams[0] if teams else ""

    def snapshot(self) -> list[ColorRow]:
        """Copies of the current rows."""
        return [replace(entry) for entry in self.rows]
"""Office floor plan: rooms, people, room assignment and team colours stored in SQLite."""

__version__ = "2.9.0"
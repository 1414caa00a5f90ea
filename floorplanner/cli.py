"""Command line entry: import people and print the floor's listings."""

from __future__ import annotations

import argparse
import sys

from .database import DB_NAME, Database, DatabaseError
from .planner import Planner


class _UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise _UsageError(message)


def _parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="floorplanner", description="Room assignment for the first floor.")
    parser.add_argument(
        "-i", "--import", "-import", dest="import_file", metavar="file",
        help="Import from csv to database.",
    )
    parser.add_argument(
        "-p", "--people", "-people", action="store_true", help="Display people",
    )
    parser.add_argument(
        "-r", "--rooms", "-rooms", action="store_true", help="Display rooms",
    )
    parser.add_argument("--db", default=DB_NAME, help="Database file.")
    return parser


def main(argv=None) -> int:
    """Run the command; returns the exit status."""
    try:
        args = _parser().parse_args(argv)
    except _UsageError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        with Database(args.db) as database:
            if args.import_file is not None:
                count = database.import_csv(args.import_file)
                print(f"Imported {count} people from {args.import_file}")
                return 0
            planner = Planner(database)
            if args.people:
                print(planner.people_report())
            elif args.rooms:
                print(planner.rooms_report())
            else:
                print(planner.people_report())
                print(planner.rooms_report())
    except (DatabaseError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
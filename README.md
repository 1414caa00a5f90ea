# floorplanner

Keeps track of who sits in which room on an office floor. People are
read from a semicolon-separated CSV file and stored in a local SQLite
database (`data.db` in the working directory by default). They are then
placed into the rooms of the floor plan and coloured by department, team
and component.

## Installation

    pip install .

## Command line

Load people from a CSV file into the database, replacing those stored:

    floorplanner --import people.csv

List the people and their rooms:

    floorplanner --people

List the numbered rooms and who sits in them:

    floorplanner --rooms

Without any of these options both listings are printed. Single-dash long
options (`-import`, `-people`, `-rooms`) and the short forms `-i`, `-p`,
`-r` are accepted too. `--db FILE` selects another database file. The
command exits with status 1 on a usage error or when the database or the
CSV file cannot be read.

## CSV format

One person per line, fields separated by `;`:

    surname;name;location;department;team;role;component;room

An empty room field is stored as room 0 (unassigned). A line with fewer
than eight fields, or a room that is not a number, raises
`floorplanner.database.DatabaseError`.

## Library use

    from floorplanner.database import Database
    from floorplanner.planner import Planner

    with Database("data.db") as database:
        planner = Planner(database)
        print(planner.people_report())
        planner.people[0].modified = 105
        planner.update_mates()
        planner.export_database()
        planner.export_csv("out.csv")

`Planner` holds the rooms and people of the floor. It offers pending room
moves (`update_mates`), drag and drop by coordinates (`press`, `move`,
`release`), storing room capacities (`update_capacities`) and the display
choice between first and last name in full (`set_display_first_name`).

`floorplanner.database.Database` gives direct access to the stored people,
room capacities, colour table and display settings.
`floorplanner.color_model.ColorModel`, `floorplanner.member_model.MemberModel`
and `floorplanner.room_model.RoomModel` are table models for editing
colours, members' rooms and room capacities. `floorplanner.floorplan`
defines the floor layout (`build_rooms`) together with hit-testing, tooltip
and label helpers.

## What it does not do

There is no graphical window. The package computes the polygons, label
positions and colours of the plan, but it does not draw them, show editing
dialogs or take screenshots.

## Running the tests

    pip install .[test]
    pytest
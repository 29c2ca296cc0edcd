# timetabler

Build university timetables by exhaustive search. You give it a set of
courses, instructors and time slots. `timetabler` tries every way of pairing
courses with time slots, and every instructor available in each slot. It
reports every timetable that reaches the lowest total penalty.

## Penalties

Each assignment of a course to a time slot and an instructor scores:

- **+1** if the time slot is not among the course's preferred time slots;
- **+2** if the course is not among the instructor's preferred courses.

A timetable's penalty is the sum over its assignments. Only time slots in
which at least one instructor is available are used. The number of
assignments in a timetable is the smaller of two numbers: the usable time
slots and the courses.

Two time slots are equal when their day, start time and end time match. Two
courses are equal when their names match.

The search is exhaustive. Its cost grows factorially, so keep inputs small.

## Input format

A university is described by a JSON document:

```json
{
    "courses": [
        {
            "courseName": "Algebra",
            "preferredTimeSlots": [
                {"day": "Monday", "startTime": "09:00", "endTime": "10:30"}
            ]
        }
    ],
    "instructors": [
        {
            "name": "Instructor A",
            "availability": [
                {"day": "Monday", "startTime": "09:00", "endTime": "10:30"}
            ],
            "preferredCourses": [
                {"courseName": "Algebra", "preferredTimeSlots": []}
            ]
        }
    ],
    "timeSlots": [
        {"day": "Monday", "startTime": "09:00", "endTime": "10:30"}
    ]
}
```

Loading a document with a missing or wrongly typed field raises `ValueError`.

## Command line

```
timetabler [DIRECTORY]
```

`DIRECTORY` holds the `.json` files to choose from. It defaults to
`../resources/`, relative to the working directory. The menu lists every
`.json` file in it, sorted by name, each with its counts of courses,
instructors and time slots. Enter a file's number to pick it. Invalid input
prompts again.

The screen is then cleared and the program shows:

- the time taken;
- how many timetables were considered;
- the minimum penalty;
- every timetable that reaches that penalty, as a table.

It then waits for Enter. Errors, such as a directory with no JSON files or a
malformed file, are written to standard error.

## Library use

```python
from timetabler.university import University
from timetabler.bruteforce import BruteForceScheduler

uni = University.load("university.json")
results = BruteForceScheduler(uni).schedule()

print(results.min_penalty, results.time_tables_count, results.time_taken)
for table in results.time_tables:
    print(table.render())
```

You can also build a `University` in code. Use `add_course`,
`add_instructor` and `add_time_slot` with `TimeSlot`, `Course` and
`Instructor` from `timetabler.model`. `save` writes the university as JSON
with four-space indentation and sorted keys. `describe` returns a readable
listing of its contents.

`TimeTable` and `Assignment` live in `timetabler.timetable`.
`TimeTable.count_penalty()` scores every assignment and returns the total.
`render()` returns the table as text.

`timetabler.bruteforce` also offers two generators:

- `cartesian_product`, which varies the first set fastest;
- `combinations_as_indexes`, which yields each k-subset of `range(n)` as
  sorted indexes.

## Development

```
pip install -e ".[test]"
pytest
```
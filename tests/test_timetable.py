import pytest

from timetabler.model import Course, Instructor, TimeSlot
from timetabler.timetable import Assignment, TimeTable

MON = TimeSlot("Monday", "09:00", "10:00")
TUE = TimeSlot("Tuesday", "09:00", "10:00")
MATH = Course("Math", [MON])


@pytest.mark.parametrize(
    "slot, preferred, expected",
    [
        (MON, [MATH], 0),
        (TUE, [MATH], 1),
        (MON, [], 2),
        (TUE, [], 3),
    ],
)
def test_single_assignment_penalty(slot, preferred, expected):
    table = TimeTable()
    assignment = Assignment(slot, MATH, Instructor("Ann", [slot], preferred))
    table.add(assignment)
    assert table.count_penalty() == expected
    assert assignment.penalty == expected


def test_penalty_is_sum_of_assignments():
    table = TimeTable()
    table.add(Assignment(TUE, MATH, Instructor("Ann", [TUE], [MATH])))
    table.add(Assignment(MON, Course("Art"), Instructor("Bob", [MON], [MATH])))
    total = table.count_penalty()
    assert total == sum(a.penalty for a in table)
    assert [a.penalty for a in table] == [1, 3]


def test_preferred_course_matched_by_name():
    table = TimeTable()
    table.add(Assignment(MON, MATH, Instructor("Ann", [MON], [Course("Math")])))
    assert table.count_penalty() == 0


def test_new_assignment_penalty_unset():
    assignment = Assignment(MON, MATH, Instructor("Ann"))
    assert assignment.penalty == -1


def test_render_layout():
    table = TimeTable()
    table.add(Assignment(MON, MATH, Instructor("Ann", [MON], [MATH])))
    table.count_penalty()
    text = table.render()
    assert text.endswith("|\n\n\n")
    lines = text.rstrip("\n").split("\n")
    assert len(lines) == 5
    assert len({len(line) for line in lines}) == 1
    assert "Time Slot" in lines[1] and "Penalty" in lines[1]
    row = lines[3]
    assert row.startswith("| " + MON.info())
    assert "| Math " in row and "| Ann " in row
    assert row.endswith("| 0         |")


def test_len_and_iter():
    table = TimeTable()
    first = Assignment(MON, MATH, Instructor("Ann"))
    second = Assignment(TUE, MATH, Instructor("Bob"))
    table.add(first)
    table.add(second)
    assert len(table) == 2
    assert list(table) == [first, second]
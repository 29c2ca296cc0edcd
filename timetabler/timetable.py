"""Timetables: assignments of courses and instructors to time slots."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from timetabler.model import Course, Instructor, TimeSlot

_WIDTHS = (28, 35, 35, 11)


def _rule(fill: str) -> str:
    return "|" + "|".join(fill * width for width in _WIDTHS) + "|"


_TOP = "_" * (sum(_WIDTHS) + len(_WIDTHS) + 1)
_HEADER = (
    "|" + " " * 9 + "Time Slot" + " " * 10
    + "|" + " " * 12 + "Course Name" + " " * 12
    + "|" + " " * 13 + "Instructor" + " " * 12
    + "|" + "  Penalty  " + "|"
)
_SEPARATOR = _rule("-")
_BOTTOM = _rule("_")


@dataclass
class Assignment:
    """One course taught by one instructor in one time slot."""

    time_slot: TimeSlot
    course: Course
    instructor: Instructor
    penalty: int = -1


@dataclass
class TimeTable:
    """An ordered collection of assignments."""

    assignments: list[Assignment] = field(default_factory=list)

    def __iter__(self) -> Iterator[Assignment]:
        return iter(self.assignments)

    def __len__(self) -> int:
        return len(self.assignments)

    def add(self, assignment: Assignment) -> None:
        self.assignments.append(assignment)

    def count_penalty(self) -> int:
        """Score every assignment and return the total.

        An unpreferred time slot for the course costs 1, a course the
        instructor does not prefer costs 2.
        """
        total = 0
        for assignment in self.assignments:
            penalty = 0
            if assignment.time_slot not in assignment.course.preferred_time_slots:
                penalty += 1
            if assignment.course not in assignment.instructor.preferred_courses:
                penalty += 2
            assignment.penalty = penalty
            total += penalty
        return total

    def render(self) -> str:
        rows = [
            f"| {a.time_slot.info():<27}| {a.course.course_name:<34}"
            f"| {a.instructor.name:<34}| {a.penalty:<10}|"
            for a in self.assignments
        ]
        lines = [_TOP, _HEADER, _SEPARATOR, *rows, _BOTTOM]
        return "\n".join(lines) + "\n\n\n"
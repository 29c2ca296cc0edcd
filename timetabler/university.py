"""A university: the courses, instructors and time slots to schedule."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from timetabler.model import Course, Instructor, TimeSlot


def _items(data: Any, key: str) -> list:
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    value = data.get(key)
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be an array")
    return value


@dataclass
class University:
    """Holds everything a scheduler needs and reads or writes it as JSON."""

    courses: list[Course] = field(default_factory=list)
    instructors: list[Instructor] = field(default_factory=list)
    time_slots: list[TimeSlot] = field(default_factory=list)

    def add_course(self, course: Course) -> None:
        self.courses.append(course)

    def add_instructor(self, instructor: Instructor) -> None:
        self.instructors.append(instructor)

    def add_time_slot(self, time_slot: TimeSlot) -> None:
        self.time_slots.append(time_slot)

    def to_dict(self) -> dict[str, Any]:
        return {
            "courses": [course.to_dict() for course in self.courses],
            "instructors": [instructor.to_dict() for instructor in self.instructors],
            "timeSlots": [slot.to_dict() for slot in self.time_slots],
        }

    @classmethod
    def from_dict(cls, data: Any) -> University:
        return cls(
            [Course.from_dict(item) for item in _items(data, "courses")],
            [Instructor.from_dict(item) for item in _items(data, "instructors")],
            [TimeSlot.from_dict(item) for item in _items(data, "timeSlots")],
        )

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the university as indented JSON with sorted keys."""
        text = json.dumps(self.to_dict(), indent=4, sort_keys=True, ensure_ascii=False)
        Path(path).write_text(text, encoding="utf-8")

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> University:
        """Read a university from a JSON file; raises ValueError on bad content."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls.from_dict(data)

    def describe(self) -> str:
        parts = ["Courses: \n"]
        parts.extend(course.describe(1) for course in self.courses)
        parts.append("\nInstructors: \n")
        parts.extend(instructor.describe(1) for instructor in self.instructors)
        parts.append("\nTime Slots: \n")
        parts.extend(slot.describe(1) for slot in self.time_slots)
        return "".join(parts)
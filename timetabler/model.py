"""Core scheduling entities: time slots, courses and instructors."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

INDENT = 4


def _field(data: Any, key: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None


def _string(data: Any, key: str) -> str:
    value = _field(data, key)
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _array(data: Any, key: str) -> list:
    value = _field(data, key)
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be an array")
    return value


def _pad(nested_level: int, space_count: int) -> str:
    return " " * (nested_level * space_count)


@dataclass(frozen=True, eq=False)
class TimeSlot:
    """A day with a start and an end time."""

    day: str
    start_time: str
    end_time: str

    def _key(self) -> str:
        return self.day + self.start_time + self.end_time

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeSlot):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def info(self) -> str:
        """Short one-line form used in timetables."""
        return f"{self.day}, {self.start_time} - {self.end_time}"

    def describe(self, nested_level: int = 0, space_count: int = INDENT) -> str:
        return (
            f"{_pad(nested_level, space_count)}Day: {self.day}, "
            f"Start Time: {self.start_time}, End Time: {self.end_time}.\n"
        )

    def to_dict(self) -> dict[str, str]:
        return {"day": self.day, "startTime": self.start_time, "endTime": self.end_time}

    @classmethod
    def from_dict(cls, data: Any) -> TimeSlot:
        return cls(_string(data, "day"), _string(data, "startTime"), _string(data, "endTime"))


@dataclass(frozen=True, eq=False)
class Course:
    """A course; two courses are the same when their names match."""

    course_name: str
    preferred_time_slots: tuple[TimeSlot, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "preferred_time_slots", tuple(self.preferred_time_slots))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Course):
            return NotImplemented
        return self.course_name == other.course_name

    def __hash__(self) -> int:
        return hash(self.course_name)

    def describe(self, nested_level: int = 0, space_count: int = INDENT) -> str:
        parts = [
            f"{_pad(nested_level, space_count)}Course name: {self.course_name}\n",
            f"{_pad(nested_level + 1, space_count)}Preferred Time Slots: \n",
        ]
        parts.extend(slot.describe(nested_level + 2) for slot in self.preferred_time_slots)
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "courseName": self.course_name,
            "preferredTimeSlots": [slot.to_dict() for slot in self.preferred_time_slots],
        }

    @classmethod
    def from_dict(cls, data: Any) -> Course:
        return cls(
            _string(data, "courseName"),
            tuple(TimeSlot.from_dict(item) for item in _array(data, "preferredTimeSlots")),
        )


@dataclass(frozen=True)
class Instructor:
    """An instructor with the slots they can teach in and the courses they like."""

    name: str
    availability: tuple[TimeSlot, ...] = ()
    preferred_courses: tuple[Course, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "availability", tuple(self.availability))
        object.__setattr__(self, "preferred_courses", tuple(self.preferred_courses))

    def is_available(self, time_slot: TimeSlot) -> bool:
        return time_slot in self.availability

    def describe(self, nested_level: int = 0, space_count: int = INDENT) -> str:
        parts = [
            f"{_pad(nested_level, space_count)}Instructor name: {self.name}\n",
            f"{_pad(nested_level + 1, space_count)}Availability: \n",
        ]
        parts.extend(slot.describe(nested_level + 2) for slot in self.availability)
        parts.append(f"{_pad(nested_level + 1, space_count)}Preferred Courses: \n")
        parts.extend(course.describe(nested_level + 3) for course in self.preferred_courses)
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "availability": [slot.to_dict() for slot in self.availability],
            "preferredCourses": [course.to_dict() for course in self.preferred_courses],
        }

    @classmethod
    def from_dict(cls, data: Any) -> Instructor:
        return cls(
            _string(data, "name"),
            _parse_all(TimeSlot, _array(data, "availability")),
            _parse_all(Course, _array(data, "preferredCourses")),
        )


def _parse_all(kind: Any, items: Iterable[Any]) -> tuple:
    return tuple(kind.from_dict(item) for item in items)
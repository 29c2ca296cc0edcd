"""Exhaustive search for the timetables with the lowest penalty."""

from __future__ import annotations

import itertools
import time
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from timetabler.timetable import Assignment, TimeTable
from timetabler.university import University


@dataclass
class SchedulingResults:
    """Best timetables found, their penalty, how many were tried and how long it took."""

    time_tables: list[TimeTable] = field(default_factory=list)
    min_penalty: int = -1
    time_tables_count: int = -1
    time_taken: float = -1.0


def cartesian_product(sets: Sequence[Sequence[int]]) -> Iterator[tuple[int, ...]]:
    """Yield every pick of one element per set; the first set varies fastest."""
    for combo in itertools.product(*(tuple(s) for s in reversed(sets))):
        yield combo[::-1]


def combinations_as_indexes(n: int, k: int) -> Iterator[tuple[int, ...]]:
    """Yield each k-subset of range(n) as sorted indexes.

    The order is that of the length-n 0/1 masks with k ones, taken in
    ascending lexicographic order starting from the mask whose ones come last.
    """
    if not 0 <= k <= n:
        raise ValueError(f"cannot choose {k} of {n}")
    positions = range(n)
    for zeros in itertools.combinations(positions, n - k):
        zero_set = set(zeros)
        yield tuple(i for i in positions if i not in zero_set)


class BruteForceScheduler:
    """Tries every assignment of courses, usable time slots and instructors."""

    def __init__(self, university: University) -> None:
        self.courses = list(university.courses)
        self.instructors = list(university.instructors)
        self.time_slots = [
            slot
            for slot in university.time_slots
            if any(inst.is_available(slot) for inst in self.instructors)
        ]
        self.slot_instructors = [
            [j for j, inst in enumerate(self.instructors) if inst.is_available(slot)]
            for slot in self.time_slots
        ]
        self._smaller = min(len(self.time_slots), len(self.courses))
        self._larger = max(len(self.time_slots), len(self.courses))

    def _picks_slots(self) -> bool:
        return len(self.time_slots) == self._larger

    def _picks_courses(self) -> bool:
        return not self._picks_slots() and len(self.courses) == self._larger

    def _build(self, indexes: Sequence[int], instructor_indexes: Sequence[int]) -> TimeTable:
        picks_slots = self._picks_slots()
        picks_courses = self._picks_courses()
        table = TimeTable()
        for position, (index, inst_index) in enumerate(zip(indexes, instructor_indexes)):
            table.add(
                Assignment(
                    self.time_slots[index if picks_slots else position],
                    self.courses[index if picks_courses else position],
                    self.instructors[inst_index],
                )
            )
        return table

    def schedule(self) -> SchedulingResults:
        start = time.perf_counter()
        picks_slots = self._picks_slots()
        best: list[TimeTable] = []
        best_penalty: int | None = None
        count = 0
        for chosen in combinations_as_indexes(self._larger, self._smaller):
            for indexes in itertools.permutations(chosen):
                options = [
                    self.slot_instructors[index if picks_slots else position]
                    for position, index in enumerate(indexes)
                ]
                for instructor_indexes in cartesian_product(options):
                    count += 1
                    table = self._build(indexes, instructor_indexes)
                    penalty = table.count_penalty()
                    if best_penalty is None or penalty < best_penalty:
                        best = []
                        best_penalty = penalty
                    if penalty == best_penalty:
                        best.append(table)
        return SchedulingResults(
            time_tables=best,
            min_penalty=-1 if best_penalty is None else best_penalty,
            time_tables_count=count,
            time_taken=time.perf_counter() - start,
        )
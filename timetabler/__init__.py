"""Exhaustive university timetable scheduling with preference penalties."""

__version__ = "0.1.0"
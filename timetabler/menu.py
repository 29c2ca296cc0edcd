"""Interactive console menu: pick a JSON file, schedule it, show the best timetables."""

from __future__ import annotations

import argparse
import json
import os
import subprocess
import sys
import time
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, TextIO

from timetabler.bruteforce import BruteForceScheduler, SchedulingResults
from timetabler.university import University

DEFAULT_DIRECTORY = "../resources/"
_UNDERLINE = "\033[4m"
_RESET = "\033[0m"
_INVALID = "Invalid input. Try again: "
_PAUSE_PROMPT = "Press enter to continue..."


def clear_screen() -> None:
    """Clear the terminal using the platform's own command."""
    try:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass


def _pause(stdin: TextIO, stdout: TextIO) -> None:
    stdout.write(_PAUSE_PROMPT)
    stdout.flush()
    stdin.readline()


def wait_for_enter() -> None:
    """Prompt on standard output and wait for a line on standard input."""
    _pause(sys.stdin, sys.stdout)


def _count(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, (list, dict)):
        return len(value)
    return 1


class Menu:
    """Lists the JSON files of a directory and runs the scheduler on the chosen one."""

    def __init__(
        self,
        directory: str | os.PathLike[str] = DEFAULT_DIRECTORY,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        clear: Callable[[], None] | None = None,
    ) -> None:
        self.directory = Path(directory)
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._clear = clear if clear is not None else clear_screen
        self.file_names = sorted(
            entry.name
            for entry in self.directory.iterdir()
            if entry.is_file() and entry.suffix == ".json"
        )
        if not self.file_names:
            raise RuntimeError("Error: There are no JSON files in the directory")

    def files_info(self) -> list[str]:
        """One summary line per file: how many courses, instructors and time slots."""
        result = []
        for name in self.file_names:
            path = self.directory / name
            try:
                text = path.read_text(encoding="utf-8")
            except OSError as exc:
                raise RuntimeError(
                    f"Error: Could not open file: {path} to read info."
                ) from exc
            data = json.loads(text)
            if not isinstance(data, dict):
                data = {}
            result.append(
                f"Courses: {_count(data.get('courses'))}"
                f", instructors: {_count(data.get('instructors'))}"
                f", timeSlots: {_count(data.get('timeSlots'))}"
            )
        return result

    def display(self) -> None:
        infos = self.files_info()
        self._out.write(
            "Choose the file you want to schedule (located in the 'resources' directory).\n\n"
        )
        for number, (name, info) in enumerate(zip(self.file_names, infos), start=1):
            self._out.write(f"{number}) {name}\n{info}\n\n")

    def file_name_by_index(self, index: int) -> str:
        """Return the file name for a 1-based index."""
        if index > len(self.file_names) or index <= 0:
            raise IndexError("Error: File index out of range")
        return self.file_names[index - 1]

    def interact(self) -> int:
        """Ask until a number in range is entered; raises EOFError if input ends."""
        count = len(self.file_names)
        self._out.write(f"Choose number in range [1, {count}]: ")
        self._out.flush()
        for line in self._in:
            for token in line.split():
                try:
                    choice = int(token)
                except ValueError:
                    self._out.write(_INVALID)
                    self._out.flush()
                    break
                if 1 <= choice <= count:
                    return choice
                self._out.write(_INVALID)
                self._out.flush()
        raise EOFError("input ended before a valid choice was made")

    def schedule_brute_force(self, file_name: str) -> SchedulingResults:
        university = University.load(self.directory / file_name)
        start = time.perf_counter()
        results = BruteForceScheduler(university).schedule()
        results.time_taken = time.perf_counter() - start
        return results

    def output_results(self, results: SchedulingResults) -> None:
        self._clear()
        out = self._out
        out.write(f"Time taken: {_UNDERLINE}{results.time_taken:g}{_RESET} seconds\n")
        out.write(
            f"TimeTables combination considered: "
            f"{_UNDERLINE}{results.time_tables_count}{_RESET}\n"
        )
        out.write(f"Minimum penalty is: {_UNDERLINE}{results.min_penalty}{_RESET}\n")
        out.write(
            f"Count of timeTables with minimum penalty: "
            f"{_UNDERLINE}{len(results.time_tables)}{_RESET}\n"
        )
        for table in results.time_tables:
            out.write("\n")
            out.write(table.render())
        _pause(self._in, out)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="timetabler", description="Find the timetables with the lowest penalty."
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=DEFAULT_DIRECTORY,
        help="directory holding the JSON files to choose from",
    )
    args = parser.parse_args(argv)
    try:
        menu = Menu(args.directory)
        menu.display()
        choice = menu.interact()
        file_name = menu.file_name_by_index(choice)
        sys.stdout.write("\nProcessing...\n\n")
        results = menu.schedule_brute_force(file_name)
        menu.output_results(results)
    except (RuntimeError, IndexError, ValueError, OSError, EOFError) as exc:
        sys.stderr.write(f"{exc}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
import io
import json
import os
import sys
from unittest import mock

import pytest

from timetabler.bruteforce import SchedulingResults
from timetabler.menu import Menu, main, wait_for_enter
from timetabler.model import Course, Instructor, TimeSlot
from timetabler.university import University


MONDAY = TimeSlot("Monday", "09:00", "10:30")
TUESDAY = TimeSlot("Tuesday", "11:00", "12:30")


def _small_university():
    course = Course("Algebra", (MONDAY,))
    return University(
        courses=[course],
        instructors=[Instructor("Ada", (MONDAY,), (course,))],
        time_slots=[MONDAY, TUESDAY],
    )


@pytest.fixture
def resources(tmp_path):
    _small_university().save(tmp_path / "a.json")
    (tmp_path / "b.json").write_text(json.dumps({"courses": []}), encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
    return tmp_path


def _menu(directory, text=""):
    out = io.StringIO()
    calls = []
    menu = Menu(directory, stdin=io.StringIO(text), stdout=out, clear=lambda: calls.append(1))
    return menu, out, calls


def test_empty_directory_raises(tmp_path):
    (tmp_path / "data.txt").write_text("x", encoding="utf-8")
    with pytest.raises(RuntimeError, match="no JSON files"):
        Menu(tmp_path)


def test_only_json_files_listed_sorted(resources):
    menu, _, _ = _menu(resources)
    assert menu.file_names == ["a.json", "b.json"]


def test_files_info_counts(resources):
    menu, _, _ = _menu(resources)
    assert menu.files_info() == [
        "Courses: 1, instructors: 1, timeSlots: 2",
        "Courses: 0, instructors: 0, timeSlots: 0",
    ]


def test_display_lists_files(resources):
    menu, out, _ = _menu(resources)
    menu.display()
    text = out.getvalue()
    assert text.startswith("Choose the file you want to schedule")
    assert "1) a.json\nCourses: 1, instructors: 1, timeSlots: 2\n\n" in text
    assert "2) b.json\n" in text


def test_file_name_by_index(resources):
    menu, _, _ = _menu(resources)
    assert menu.file_name_by_index(1) == "a.json"
    assert menu.file_name_by_index(2) == "b.json"


@pytest.mark.parametrize("index", [0, -1, 3])
def test_file_name_by_index_out_of_range(resources, index):
    menu, _, _ = _menu(resources)
    with pytest.raises(IndexError, match="out of range"):
        menu.file_name_by_index(index)


def test_interact_retries_until_valid(resources):
    menu, out, _ = _menu(resources, "abc\n\n7\n2\n")
    assert menu.interact() == 2
    text = out.getvalue()
    assert text.startswith("Choose number in range [1, 2]: ")
    assert text.count("Invalid input. Try again: ") == 2


def test_interact_end_of_input(resources):
    menu, _, _ = _menu(resources, "9\n")
    with pytest.raises(EOFError):
        menu.interact()


def test_schedule_brute_force(resources):
    menu, _, _ = _menu(resources)
    results = menu.schedule_brute_force("a.json")
    assert results.min_penalty == 0
    assert results.time_tables_count == 1
    assert len(results.time_tables) == 1
    assert results.time_taken >= 0


def test_schedule_missing_file(resources):
    menu, _, _ = _menu(resources)
    with pytest.raises(FileNotFoundError):
        menu.schedule_brute_force("missing.json")


def test_output_results(resources):
    menu, out, calls = _menu(resources, "\n")
    results = menu.schedule_brute_force("a.json")
    menu.output_results(results)
    text = out.getvalue()
    assert calls == [1]
    assert "Minimum penalty is: \033[4m0\033[0m\n" in text
    assert "TimeTables combination considered: \033[4m1\033[0m\n" in text
    assert "Count of timeTables with minimum penalty: \033[4m1\033[0m\n" in text
    assert "Algebra" in text
    assert text.endswith("Press enter to continue...")


def test_output_results_without_tables(resources):
    menu, out, _ = _menu(resources, "\n")
    menu.output_results(SchedulingResults(time_tables=[], min_penalty=3, time_tables_count=5, time_taken=0.5))
    text = out.getvalue()
    assert "Time taken: \033[4m0.5\033[0m seconds\n" in text
    assert "Count of timeTables with minimum penalty: \033[4m0\033[0m\n" in text


def test_wait_for_enter(monkeypatch):
    stdin = io.StringIO("\nrest\n")
    stdout = io.StringIO()
    monkeypatch.setattr(sys, "stdin", stdin)
    monkeypatch.setattr(sys, "stdout", stdout)
    wait_for_enter()
    assert stdout.getvalue() == "Press enter to continue..."
    assert stdin.read() == "rest\n"


def test_main_full_run(resources, monkeypatch):
    stdout = io.StringIO()
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n\n"))
    monkeypatch.setattr(sys, "stdout", stdout)
    with mock.patch("subprocess.run") as run:
        assert main([str(resources)]) == 0
    text = stdout.getvalue()
    assert "\nProcessing...\n\n" in text
    assert "Minimum penalty is: \033[4m0\033[0m" in text
    expected = "cls" if os.name == "nt" else ["clear"]
    assert run.call_count == 1
    assert run.call_args.args[0] == expected


def test_main_tolerates_missing_clear_command(resources, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n\n"))
    with mock.patch("subprocess.run", side_effect=FileNotFoundError) as run:
        assert main([str(resources)]) == 0
    captured = capsys.readouterr()
    assert run.call_count == 1
    assert "Minimum penalty is: \033[4m0\033[0m" in captured.out
    assert captured.err == ""


def test_main_reports_errors(tmp_path, capsys):
    assert main([str(tmp_path)]) == 0
    captured = capsys.readouterr()
    assert "no JSON files" in captured.err
    assert captured.out == ""
[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "timetabler"
version = "0.1.0"
description = "Exhaustive university timetable scheduler that finds every timetable with the lowest preference penalty"
requires-python = ">=3.10"
dependencies = []
keywords = ["timetable", "scheduling", "university", "brute-force", "courses"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
timetabler = "timetabler.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["timetabler"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

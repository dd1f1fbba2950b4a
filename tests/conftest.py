"""Pytest fixtures for the semester planner tests."""

import json
import sys
from pathlib import Path

import pytest

# Add parent directory to path so the top-level modules import
sys.path.insert(0, str(Path(__file__).parent.parent))

from course import Course
from scheduler import Scheduler


@pytest.fixture(autouse=True)
def silence_logs(monkeypatch):
    """Keep the logger quiet and away from the log file."""
    monkeypatch.setenv("ENV", "test")
    return monkeypatch


def build_scheduler(layout):
    """Build a scheduler from a list of (name, [prerequisite names]) pairs."""
    courses = [Course(name=name) for name, _ in layout]
    id_to_vertex = {name: vertex for vertex, (name, _) in enumerate(layout)}
    raw_prerequisites = [list(prereqs) for _, prereqs in layout]
    return Scheduler(courses, id_to_vertex, raw_prerequisites)


@pytest.fixture
def make_scheduler():
    return build_scheduler


@pytest.fixture
def physics_track():
    return build_scheduler(
        [
            ("Math1", []),
            ("Math2", ["Math1"]),
            ("Phys1", ["Math1"]),
        ]
    )


@pytest.fixture
def chain_track():
    return build_scheduler(
        [
            ("CS101", []),
            ("CS102", ["CS101"]),
            ("CS201", ["CS102"]),
            ("CS301", ["CS201", "CS102"]),
        ]
    )


@pytest.fixture
def sample_course_data():
    return {
        "courses": [
            {"name": "MATH 1", "title": "Calculus I"},
            {"name": "MATH 2", "title": "Calculus II", "prerequisites": ["MATH 1"]},
            {"name": "PHYS 1", "prerequisites": ["MATH 1"]},
        ]
    }


@pytest.fixture
def course_file(tmp_path, sample_course_data):
    path = tmp_path / "courses.json"
    path.write_text(json.dumps(sample_course_data))
    return path

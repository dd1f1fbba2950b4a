import json
from typing import Dict, List

from pydantic import BaseModel, Field, ValidationError, field_validator

from course import Course
from logger import logger


class CourseEntry(BaseModel):
    """One course as written in the course-list file."""

    name: str
    title: str = ""
    prerequisites: List[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("course name must not be empty")
        return value

    @field_validator("prerequisites")
    @classmethod
    def strip_prerequisites(cls, value: List[str]) -> List[str]:
        return [p.strip() for p in value if p.strip()]


class CourseFile(BaseModel):
    courses: List[CourseEntry]


class ParsedCourseList(BaseModel):
    courses: List[Course]
    id_to_vertex: Dict[str, int]
    raw_prerequisites: List[List[str]]


def load_json(path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return data
    except FileNotFoundError as e:
        raise FileNotFoundError(f"File not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Failed to parse {path} as JSON: {e}") from e


def parse_course_list(data) -> ParsedCourseList:
    """Turn a decoded course file into scheduler inputs.

    Accepts either a bare list of course objects or an object with a
    `courses` list. Prerequisite names are not resolved here.

    Raises:
        ValueError: on schema violations or duplicate course names
    """
    if isinstance(data, list):
        data = {"courses": data}

    try:
        course_file = CourseFile.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid course list: {e}") from e

    courses = []
    id_to_vertex = {}
    raw_prerequisites = []

    for vertex, entry in enumerate(course_file.courses):
        if entry.name in id_to_vertex:
            raise ValueError(f"Course {entry.name} is declared more than once")
        id_to_vertex[entry.name] = vertex
        courses.append(Course(name=entry.name, title=entry.title))
        raw_prerequisites.append(list(entry.prerequisites))

    logger.debug(f"Parsed {len(courses)} courses")
    return ParsedCourseList(
        courses=courses,
        id_to_vertex=id_to_vertex,
        raw_prerequisites=raw_prerequisites,
    )


def load_course_list(path) -> ParsedCourseList:
    logger.info(f"Loading course list from {path}")
    return parse_course_list(load_json(path))

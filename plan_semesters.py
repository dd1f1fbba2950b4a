#!/usr/bin/env python3
"""
plan_semesters.py

Interactively plan a student's semesters from a course-list file.

Usage:
    python plan_semesters.py [courses.json] [plan-output.json]

When the arguments are omitted they are read from COURSES_PATH and
PLAN_OUTPUT_PATH (a .env file is honoured).

Each semester the eligible courses are listed; enter a number to take that
course, `n` to move to the next semester, or `q` to stop.
"""

import json
import os
import sys

from dotenv import load_dotenv

from course_parser import load_course_list
from logger import logger
from scheduler import INVALID_INDEX, Scheduler, SchedulerError

NEXT_SEMESTER = "n"
QUIT = "q"


def parse_args(argv):
    """Parse and validate command-line arguments.

    Args:
        argv: list of command-line arguments (excluding script name)

    Returns:
        tuple of (courses_path, output_path or None)

    Raises:
        ValueError: if arguments are invalid
    """
    courses_path = argv[0] if len(argv) >= 1 else os.getenv("COURSES_PATH")
    output_path = argv[1] if len(argv) >= 2 else os.getenv("PLAN_OUTPUT_PATH")

    if not courses_path:
        raise ValueError(
            "Usage: plan_semesters.py <courses.json> [plan-output.json] "
            "(or set COURSES_PATH)"
        )
    if not os.path.exists(courses_path):
        raise ValueError(f"{courses_path} does not exist")
    if not os.path.isfile(courses_path):
        raise ValueError(f"{courses_path} must be a file")
    if output_path and os.path.isdir(output_path):
        raise ValueError(f"{output_path} must be a file")

    return courses_path, output_path or None


def run_session(scheduler: Scheduler, read_line=input, write=print) -> None:
    """Drive the scheduler from user input until every course is taken."""
    while not scheduler.all_courses_taken():
        if not scheduler.get_available_courses():
            write(
                f"No classes available in semester {scheduler.current_semester}, "
                "moving on."
            )
            scheduler.advance_semester()
            continue

        write(scheduler.get_available_classes())
        try:
            answer = read_line(
                f"Select a class, '{NEXT_SEMESTER}' for next semester or '{QUIT}' to quit: "
            )
        except EOFError:
            break

        answer = answer.strip().lower()
        if answer == QUIT:
            break
        if answer == NEXT_SEMESTER:
            scheduler.advance_semester()
            continue

        try:
            display_index = int(answer)
        except ValueError:
            write(f"Invalid selection: {answer!r}")
            continue

        vertex = scheduler.convert_index_to_vertex(display_index)
        if vertex == INVALID_INDEX:
            write(f"No class numbered {display_index} this semester")
            continue

        scheduler.add_class_to_semester(vertex)
        write(f"Added {scheduler.course_list[vertex]}")

    if scheduler.all_courses_taken():
        write("All classes have been scheduled.")


def format_plan(scheduler: Scheduler) -> str:
    plan = scheduler.semester_plan()
    if not plan:
        return "No classes scheduled."

    lines = []
    for semester, courses in plan.items():
        lines.append(f"Semester {semester}: {', '.join(str(c) for c in courses)}")

    remaining = scheduler.remaining_courses()
    if remaining:
        lines.append(f"Not yet scheduled: {', '.join(c.name for c in remaining)}")
    return "\n".join(lines)


def write_plan(scheduler: Scheduler, output_path) -> None:
    plan = {
        "semesters": [
            {"semester": semester, "courses": [c.name for c in courses]}
            for semester, courses in scheduler.semester_plan().items()
        ],
        "remaining": [c.name for c in scheduler.remaining_courses()],
    }
    try:
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(plan, f, indent=2)
    except OSError as e:
        raise ValueError(f"Failed to write plan to {output_path}: {e}") from e
    logger.info(f"Plan written to {output_path}")


def main(argv, read_line=input, write=print) -> int:
    """Run one planning session.

    Returns:
        process exit status
    """
    try:
        courses_path, output_path = parse_args(argv)
        parsed = load_course_list(courses_path)
        scheduler = Scheduler.from_parsed(parsed)
    except (SchedulerError, ValueError, FileNotFoundError) as e:
        logger.error(str(e))
        return 1

    run_session(scheduler, read_line=read_line, write=write)
    write(format_plan(scheduler))

    if output_path:
        try:
            write_plan(scheduler, output_path)
        except ValueError as e:
            logger.error(str(e))
            return 1

    return 0


def cli():
    load_dotenv()
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()

import pytest

from course import COURSE_NOT_TAKEN, PREREQ_NOT_COMPLETED, Course


def test_new_course_defaults():
    course = Course(name="CS101")
    assert course.prereq_satisfied_semester == PREREQ_NOT_COMPLETED
    assert course.taken_semester == COURSE_NOT_TAKEN
    assert not course.is_taken
    assert not course.prereqs_satisfied


def test_str_includes_title():
    assert str(Course(name="CS101")) == "CS101"
    assert str(Course(name="CS101", title="Intro")) == "CS101: Intro"


def test_mark_taken():
    course = Course(name="CS101")
    course.mark_taken(2)
    assert course.taken_semester == 2
    assert course.is_taken


def test_mark_taken_twice_is_rejected():
    course = Course(name="CS101")
    course.mark_taken(1)
    with pytest.raises(ValueError, match="already taken"):
        course.mark_taken(3)
    assert course.taken_semester == 1

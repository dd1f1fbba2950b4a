import sys

from pydantic import BaseModel

# Semester sentinels
PREREQ_NOT_COMPLETED = sys.maxsize
COURSE_NOT_TAKEN = -1


class Course(BaseModel):
    """A single course in the student's plan.

    `prereq_satisfied_semester` is the semester in which the last outstanding
    prerequisite was completed; the course becomes takeable the semester after.
    `taken_semester` is the semester the student took the course in.
    """

    name: str
    title: str = ""
    prereq_satisfied_semester: int = PREREQ_NOT_COMPLETED
    taken_semester: int = COURSE_NOT_TAKEN

    @property
    def is_taken(self) -> bool:
        return self.taken_semester != COURSE_NOT_TAKEN

    @property
    def prereqs_satisfied(self) -> bool:
        return self.prereq_satisfied_semester != PREREQ_NOT_COMPLETED

    def mark_taken(self, semester: int) -> None:
        if self.is_taken:
            raise ValueError(
                f"Course {self.name} was already taken in semester {self.taken_semester}"
            )
        self.taken_semester = semester

    def __str__(self) -> str:
        if self.title:
            return f"{self.name}: {self.title}"
        return self.name

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from adj_list import AdjList, EdgeKind
from course import COURSE_NOT_TAKEN, PREREQ_NOT_COMPLETED, Course
from course_parser import ParsedCourseList
from logger import logger

INVALID_INDEX = -1

UNVISITED = 0
IN_STACK = 1
VISITED = 2


class SchedulerError(ValueError):
    """Raised when the course structure cannot be scheduled."""


class UndeclaredPrerequisiteError(SchedulerError):
    def __init__(self, prerequisite: str, course: str):
        self.prerequisite = prerequisite
        self.course = course
        super().__init__(
            f"The given prerequisite {prerequisite} for class {course} "
            "was not declared in the input file"
        )


class PrerequisiteCycleError(SchedulerError):
    def __init__(self, cycle: List[int], message: str):
        self.cycle = cycle
        super().__init__(message)


def find_cycle(graph: AdjList) -> Tuple[bool, List[int]]:
    """Three-colour DFS over every vertex of `graph`.

    Returns:
        - found: whether a cycle exists
        - path: the cycle as vertex indices, starting at the vertex the back
          edge points to and walking back through the DFS stack until the
          path closes on that vertex again
    """
    color = [UNVISITED] * graph.node_count

    def dfs(vertex) -> Optional[List[int]]:
        color[vertex] = IN_STACK
        for edge in graph.neighbors(vertex):
            neighbor = edge.vertex
            if color[neighbor] == UNVISITED:
                path = dfs(neighbor)
                if path is not None:
                    if path[0] != path[-1]:
                        path.append(vertex)
                    return path
            elif color[neighbor] == IN_STACK:
                return [neighbor, vertex]
        color[vertex] = VISITED
        return None

    for vertex in range(graph.node_count):
        if color[vertex] == UNVISITED:
            path = dfs(vertex)
            if path is not None:
                return True, path

    return False, []


def build_cycle_message(courses: Sequence[Course], cycle: List[int]) -> str:
    """Explain a prerequisite cycle, one "X requires Y" line per edge."""
    first = courses[cycle[0]].name
    second = courses[cycle[1]].name if len(cycle) > 1 else first

    lines = [
        "Error: There is a cycle in the provided course structure.",
        f"The course {second} requires {first} to be taken before it can be taken.",
        f"However, {first} also requires {second} to be taken before it at some point.",
        "Thus this provided ordering makes taking the two courses impossible.",
        "Here is the cycle:",
    ]

    required = first
    for vertex in cycle[1:]:
        requiring = courses[vertex].name
        lines.append(f"{requiring} requires {required}")
        required = requiring

    return "\n".join(lines)


class Scheduler:
    """Tracks one student's progress through a course structure.

    Two graphs are kept over the same vertices:
        - dependency_graph: both directions of every prerequisite relation,
          used to find the dependents of a completed course
        - prereq_graph: only "requires" edges; an edge disappears once the
          prerequisite is taken, so a vertex with no outgoing edges has all
          of its prerequisites satisfied
    """

    def __init__(
        self,
        courses: List[Course],
        id_to_vertex: Mapping[str, int],
        raw_prerequisites: Sequence[Sequence[str]],
    ):
        self._courses = courses
        self.dependency_graph = AdjList(len(courses))
        self.prereq_graph = AdjList(len(courses))
        self._current_semester = 1

        self._build_graph(id_to_vertex, raw_prerequisites)
        self._check_if_cycle()
        self._mark_initial_classes()

        logger.info(
            f"Scheduler ready: {len(courses)} courses, "
            f"{self.prereq_graph.edge_count()} prerequisite links"
        )

    @classmethod
    def from_parsed(cls, parsed: ParsedCourseList) -> "Scheduler":
        return cls(parsed.courses, parsed.id_to_vertex, parsed.raw_prerequisites)

    def _build_graph(self, id_to_vertex, raw_prerequisites):
        for vertex, prerequisites in enumerate(raw_prerequisites):
            for name in prerequisites:
                prereq_vertex = id_to_vertex.get(name)
                if prereq_vertex is None:
                    raise UndeclaredPrerequisiteError(name, self._courses[vertex].name)

                self.dependency_graph.add_edge(
                    vertex, prereq_vertex, EdgeKind.PREREQUISITE_TO_THIS
                )
                self.dependency_graph.add_edge(
                    prereq_vertex, vertex, EdgeKind.PREREQUISITE_FOR_ANOTHER
                )
                self.prereq_graph.add_edge(
                    vertex, prereq_vertex, EdgeKind.PREREQUISITE_TO_THIS
                )

    def _check_if_cycle(self):
        has_cycle, cycle = find_cycle(self.prereq_graph)
        if has_cycle:
            message = build_cycle_message(self._courses, cycle)
            logger.error(
                "Cycle detected in prerequisites involving "
                + ", ".join(self._courses[v].name for v in cycle)
            )
            raise PrerequisiteCycleError(cycle, message)

    def _mark_initial_classes(self):
        # Satisfied "in semester 0" so they can be taken from semester 1 on
        for vertex in range(self.prereq_graph.node_count):
            if self.prereq_graph.out_degree(vertex) == 0:
                self._courses[vertex].prereq_satisfied_semester = 0

    # Queries

    @property
    def course_list(self) -> List[Course]:
        return self._courses

    @property
    def current_semester(self) -> int:
        return self._current_semester

    def get_course_list(self) -> List[Course]:
        return self._courses

    def get_current_semester(self) -> int:
        return self._current_semester

    def can_be_taken(self, vertex: int) -> bool:
        course = self._courses[vertex]
        return (
            self._current_semester > course.prereq_satisfied_semester
            and course.taken_semester == COURSE_NOT_TAKEN
        )

    def get_available_courses(self) -> List[Course]:
        return [
            course
            for vertex, course in enumerate(self._courses)
            if self.can_be_taken(vertex)
        ]

    def get_available_classes(self) -> str:
        lines = [f"Available Classes for Semester: {self._current_semester}"]
        for index, course in enumerate(self.get_available_courses(), 1):
            lines.append(f"{index}) {course}")
        return "\n".join(lines) + "\n"

    def convert_index_to_vertex(self, display_index: int) -> int:
        """Map a 1-based position in the available list to its vertex."""
        if display_index <= 0:
            return INVALID_INDEX

        remaining = display_index
        for vertex in range(len(self._courses)):
            if self.can_be_taken(vertex):
                remaining -= 1
                if remaining == 0:
                    return vertex

        return INVALID_INDEX

    def remaining_courses(self) -> List[Course]:
        return [course for course in self._courses if not course.is_taken]

    def all_courses_taken(self) -> bool:
        return all(course.is_taken for course in self._courses)

    def semester_plan(self) -> Dict[int, List[Course]]:
        plan: Dict[int, List[Course]] = {}
        for course in self._courses:
            if course.is_taken:
                plan.setdefault(course.taken_semester, []).append(course)
        return dict(sorted(plan.items()))

    # Commands

    def add_class_to_semester(self, vertex: int) -> None:
        """Record `vertex` as taken this semester and unlock its dependents.

        The caller is expected to have checked `can_be_taken(vertex)`.
        """
        taken = self._courses[vertex]
        taken.mark_taken(self._current_semester)
        logger.info(f"Semester {self._current_semester}: took {taken.name}")

        for edge in self.dependency_graph.neighbors(vertex):
            if edge.kind != EdgeKind.PREREQUISITE_FOR_ANOTHER:
                continue

            dependent = edge.vertex
            if not self.prereq_graph.remove_edge(dependent, vertex):
                continue

            if self.prereq_graph.out_degree(dependent) == 0:
                self._courses[dependent].prereq_satisfied_semester = (
                    self._current_semester
                )
                logger.debug(
                    f"{self._courses[dependent].name} unlocked for semester "
                    f"{self._current_semester + 1}"
                )

    def set_current_semester(self, semester: int) -> bool:
        if semester < 0 or semester == PREREQ_NOT_COMPLETED:
            logger.warn(f"Rejected invalid semester: {semester}")
            return False
        self._current_semester = semester
        logger.debug(f"Current semester set to {semester}")
        return True

    def advance_semester(self) -> bool:
        return self.set_current_semester(self._current_semester + 1)

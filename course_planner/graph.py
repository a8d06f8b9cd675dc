import heapq
from typing import Dict, List, Tuple

from course_planner.logger import logger
from course_planner.models import Catalog


class DependencyGraph:
    """Prerequisite graph derived from a catalog snapshot.

    Edges run prerequisite -> dependent course. Repeated prerequisite
    entries are not collapsed: each one adds a successor entry and one unit
    of in-degree.
    """

    def __init__(self):
        self.successors: Dict[str, List[str]] = {}
        self.in_degree: Dict[str, int] = {}

    def __len__(self) -> int:
        return len(self.in_degree)

    def __contains__(self, course_code) -> bool:
        return course_code in self.in_degree

    def add_course(self, course_code: str) -> None:
        """Add a course with no edges."""
        if course_code not in self.in_degree:
            self.successors[course_code] = []
            self.in_degree[course_code] = 0

    def add_edge(self, prerequisite_code: str, course_code: str) -> None:
        """Record that prerequisite_code must come before course_code."""
        self.add_course(prerequisite_code)
        self.add_course(course_code)
        self.successors[prerequisite_code].append(course_code)
        self.in_degree[course_code] += 1

    def get_successors(self, course_code: str) -> List[str]:
        """Courses that list this course as a prerequisite."""
        return self.successors.get(course_code, [])


def build_dependency_graph(catalog: Catalog) -> DependencyGraph:
    """Build the prerequisite graph for every course in the catalog.

    Only prerequisites that are themselves catalog courses become edges;
    dangling references are left out of the graph.
    """
    graph = DependencyGraph()

    for code in catalog.codes():
        graph.add_course(code)

    for course in catalog.courses():
        for prereq_code in course.prerequisites:
            if prereq_code in catalog:
                graph.add_edge(prereq_code, course.code)
            else:
                logger.debug(
                    f"Ignoring prerequisite {prereq_code} of {course.code}: not in catalog"
                )

    return graph


def topological_sort(graph: DependencyGraph) -> Tuple[List[str], bool]:
    """Order courses so every course follows its in-catalog prerequisites.

    Kahn's algorithm. When several courses are ready at once the
    lexicographically smallest code is taken first, so the result is
    deterministic.

    Returns:
        - sorted_courses: course codes in order (partial if a cycle exists)
        - has_cycle: True if some courses could not be ordered
    """
    remaining = dict(graph.in_degree)
    ready = [code for code, degree in remaining.items() if degree == 0]
    heapq.heapify(ready)
    sorted_courses = []

    while ready:
        course = heapq.heappop(ready)
        sorted_courses.append(course)

        for successor in graph.get_successors(course):
            remaining[successor] -= 1
            if remaining[successor] == 0:
                heapq.heappush(ready, successor)

    has_cycle = len(sorted_courses) != len(graph)
    if has_cycle:
        unordered = unresolved_courses(graph, sorted_courses)
        logger.error(
            f"Cycle detected in prerequisites involving {', '.join(unordered)}"
        )

    return sorted_courses, has_cycle


def unresolved_courses(graph: DependencyGraph, sorted_courses: List[str]) -> List[str]:
    """Courses missing from a (partial) order, sorted by code."""
    placed = set(sorted_courses)
    return sorted(code for code in graph.in_degree if code not in placed)


def recommended_order(catalog: Catalog) -> Tuple[List[str], bool]:
    return topological_sort(build_dependency_graph(catalog))

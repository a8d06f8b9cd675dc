"""Text reports over a loaded catalog.

Each function returns the lines to show; printing is left to the caller.
"""

from typing import List

from course_planner.graph import build_dependency_graph, topological_sort, unresolved_courses
from course_planner.models import Catalog, Course
from course_planner.normalize import normalize_code

EMPTY_CATALOG_MESSAGE = "No data loaded. Please load the data structure first."
TITLE_UNAVAILABLE = "(title unavailable)"
CYCLE_WARNING = "Warning: Circular dependency detected."


def format_course_list(catalog: Catalog) -> List[str]:
    if catalog.is_empty():
        return [EMPTY_CATALOG_MESSAGE]

    lines = ["Here is a sample schedule:"]
    lines.extend(f"{course.code}, {course.title}" for course in catalog.courses())
    return lines


def format_prerequisite(catalog: Catalog, prereq_code: str) -> str:
    prereq = catalog.get(prereq_code)
    if prereq is None:
        return f"{prereq_code} {TITLE_UNAVAILABLE}"
    return f"{prereq.code}, {prereq.title}"


def format_course_detail(catalog: Catalog, query: str) -> List[str]:
    """Title and prerequisites of one course, looked up by normalized code."""
    if catalog.is_empty():
        return [EMPTY_CATALOG_MESSAGE]

    course = catalog.get(normalize_code(query))
    if course is None:
        return [f"Course {query.strip()} was not found."]

    return [f"{course.code}, {course.title}", _prerequisites_line(catalog, course)]


def _prerequisites_line(catalog: Catalog, course: Course) -> str:
    if not course.prerequisites:
        return "Prerequisites: None"
    rendered = [format_prerequisite(catalog, p) for p in course.prerequisites]
    return "Prerequisites: " + "; ".join(rendered)


def format_recommended_order(catalog: Catalog) -> List[str]:
    if catalog.is_empty():
        return [EMPTY_CATALOG_MESSAGE]

    graph = build_dependency_graph(catalog)
    sorted_courses, has_cycle = topological_sort(graph)

    lines = ["Recommended Course Order:"]
    for position, code in enumerate(sorted_courses, start=1):
        lines.append(f"{position}. {code} - {catalog.get(code).title}")

    if has_cycle:
        lines.append("")
        lines.append(CYCLE_WARNING)
        lines.append(
            "Unordered courses: " + ", ".join(unresolved_courses(graph, sorted_courses))
        )
    return lines

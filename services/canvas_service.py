"""Canvas service layer for formatting Canvas data."""

from typing import Any, List
from canvas_api.courses import CourseResource
from canvas_api.models import Course
from utils.datetime_utils import format_local


def format_course_dates(course: Course, fmt: str = "%b %d, %Y") -> str:
    """Return the course's start and end dates in local time."""
    if not course.start_at and not course.end_at:
        return "No dates"

    start = format_local(course.start_at, fmt) if course.start_at else "?"
    end = format_local(course.end_at, fmt) if course.end_at else "?"
    return f"{start} → {end}"


def get_formatted_courses(resource: CourseResource, **filters: Any) -> List[str]:
    """Fetch courses from Canvas and return formatted display strings."""
    courses = resource.list_courses(**filters)
    formatted: List[str] = []

    for course in courses:
        course_id = course.id if course.id is not None else "N/A"
        name = course.name or "Unnamed Course"
        code = course.course_code or ""

        if code:
            formatted.append(f"{course_id} – {code}: {name}")
        else:
            formatted.append(f"{course_id} – {name}")

    return formatted

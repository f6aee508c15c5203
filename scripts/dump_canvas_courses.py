import logging

from canvas_api.courses import CourseResource
from config import LOG_LEVEL
from services.canvas_service import format_course_dates


def main():
    logging.basicConfig(level=LOG_LEVEL)
    resource = CourseResource.from_config()
    courses = resource.list_courses()
    with open("canvas_courses_dump.txt", "w", encoding="utf-8") as f:
        for course in courses:
            f.write(f"=== Course {course.id}: {course.name or ''} ===\n")
            f.write(f"  code: {course.course_code} | state: {course.workflow_state}\n")
            f.write(f"  dates: {format_course_dates(course)}\n")
            f.write("\n")
    print(f"Wrote {len(courses)} courses to canvas_courses_dump.txt")

if __name__ == "__main__":
    main()

"""Services package for business logic operations."""

from .canvas_service import get_formatted_courses, format_course_dates

__all__ = ['get_formatted_courses', 'format_course_dates']

"""Canvas API client package for interacting with the Canvas LMS API."""

from .client import CanvasClient, CanvasAPIError, ResponseParseError
from .courses import CourseResource
from .enums import CourseIncludes, CourseState, EnrollmentType
from .messenger import CanvasMessenger
from .models import Course, Delete
from .response import Response, ResponseParser
from .url_builder import build_canvas_url, build_parameters

__all__ = [
    'CanvasClient',
    'CanvasAPIError',
    'ResponseParseError',
    'CourseResource',
    'CourseIncludes',
    'CourseState',
    'EnrollmentType',
    'CanvasMessenger',
    'Course',
    'Delete',
    'Response',
    'ResponseParser',
    'build_canvas_url',
    'build_parameters',
]

"""Enumerations accepted as filters by the Canvas courses endpoints."""

from enum import Enum


class EnrollmentType(Enum):
    TEACHER = "TEACHER"
    STUDENT = "STUDENT"
    TA = "TA"
    OBSERVER = "OBSERVER"
    DESIGNER = "DESIGNER"


class CourseIncludes(Enum):
    NEEDS_GRADING_COUNT = "NEEDS_GRADING_COUNT"
    SYLLABUS_BODY = "SYLLABUS_BODY"
    PUBLIC_DESCRIPTION = "PUBLIC_DESCRIPTION"
    TOTAL_SCORES = "TOTAL_SCORES"
    CURRENT_GRADING_PERIOD_SCORES = "CURRENT_GRADING_PERIOD_SCORES"
    TERM = "TERM"
    COURSE_PROGRESS = "COURSE_PROGRESS"
    SECTIONS = "SECTIONS"
    STORAGE_QUOTA_USED_MB = "STORAGE_QUOTA_USED_MB"
    TOTAL_STUDENTS = "TOTAL_STUDENTS"
    PASSBACK_STATUS = "PASSBACK_STATUS"
    FAVORITES = "FAVORITES"
    TEACHERS = "TEACHERS"
    OBSERVED_USERS = "OBSERVED_USERS"


class CourseState(Enum):
    UNPUBLISHED = "UNPUBLISHED"
    AVAILABLE = "AVAILABLE"
    COMPLETED = "COMPLETED"
    DELETED = "DELETED"

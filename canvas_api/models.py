"""Typed records deserialized from Canvas API responses."""

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from utils.datetime_utils import parse_canvas_datetime


def _optional_datetime(value: Any) -> Optional[datetime]:
    if not value:
        return None
    if not isinstance(value, str):
        raise ValueError(f"Expected an ISO8601 string, got {value!r}")
    return parse_canvas_datetime(value)


def _frozen(value: Optional[Dict[str, Any]]) -> Optional[Mapping[str, Any]]:
    return MappingProxyType(dict(value)) if value is not None else None


@dataclass(frozen=True)
class Course:
    """
    A Canvas course as returned by the courses endpoints.

    Nested JSON objects are stored as read-only mappings and left out of
    the hash, so a Course can be used as a dict key or set member.
    """

    id: Optional[int] = None
    name: Optional[str] = None
    course_code: Optional[str] = None
    account_id: Optional[int] = None
    root_account_id: Optional[int] = None
    enrollment_term_id: Optional[int] = None
    sis_course_id: Optional[str] = None
    uuid: Optional[str] = None
    workflow_state: Optional[str] = None
    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    default_view: Optional[str] = None
    time_zone: Optional[str] = None
    is_public: Optional[bool] = None
    public_syllabus: Optional[bool] = None
    public_description: Optional[str] = None
    license: Optional[str] = None
    total_students: Optional[int] = None
    needs_grading_count: Optional[int] = None
    syllabus_body: Optional[str] = None
    enrollments: Tuple[Mapping[str, Any], ...] = field(default_factory=tuple, hash=False)
    term: Optional[Mapping[str, Any]] = field(default=None, hash=False)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Course":
        """Build a Course from a decoded JSON object, ignoring unknown keys."""
        return cls(
            id=data.get("id"),
            name=data.get("name"),
            course_code=data.get("course_code"),
            account_id=data.get("account_id"),
            root_account_id=data.get("root_account_id"),
            enrollment_term_id=data.get("enrollment_term_id"),
            sis_course_id=data.get("sis_course_id"),
            uuid=data.get("uuid"),
            workflow_state=data.get("workflow_state"),
            start_at=_optional_datetime(data.get("start_at")),
            end_at=_optional_datetime(data.get("end_at")),
            created_at=_optional_datetime(data.get("created_at")),
            default_view=data.get("default_view"),
            time_zone=data.get("time_zone"),
            is_public=data.get("is_public"),
            public_syllabus=data.get("public_syllabus"),
            public_description=data.get("public_description"),
            license=data.get("license"),
            total_students=data.get("total_students"),
            needs_grading_count=data.get("needs_grading_count"),
            syllabus_body=data.get("syllabus_body"),
            enrollments=tuple(_frozen(e) for e in data.get("enrollments") or ()),
            term=_frozen(data.get("term")),
        )

    def to_form_params(self) -> Dict[str, str]:
        """Form fields sent when creating this course."""
        return {
            "course[course_code]": self.course_code or "",
            "course[name]": self.name or "",
        }


@dataclass(frozen=True)
class Delete:
    """Body of a course delete response, e.g. {"delete": true}."""

    delete: bool

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Delete":
        value = data["delete"]
        if not isinstance(value, bool):
            raise ValueError(f"Expected a boolean delete flag, got {value!r}")
        return cls(delete=value)

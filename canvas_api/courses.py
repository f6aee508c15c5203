"""Course resource: list, get, create and delete Canvas courses."""

import logging
from typing import Iterable, List, Optional

from config import CANVAS_ACCOUNT_ID, CANVAS_API_VERSION, CANVAS_BASE_URL, CANVAS_TOKEN
from constants import DELETE_EVENT, HTTP_OK
from .client import ResponseParseError
from .enums import CourseIncludes, CourseState, EnrollmentType
from .messenger import CanvasMessenger
from .models import Course, Delete
from .response import Response, ResponseParser
from .url_builder import ParameterMap, build_canvas_url

logger = logging.getLogger(__name__)


def _succeeded(response: Response) -> bool:
    return not response.error_happened and response.status_code == HTTP_OK


class CourseResource:
    """
    Maps course operations onto Canvas HTTP calls.

    Any status other than 200, or a response flagged as an error by the
    messenger, is reported as "did not succeed" (None or False); not found,
    unauthorized and network failures are not told apart.
    """

    def __init__(self, canvas_base_url: str, api_version: int, oauth_token: str,
                 messenger: CanvasMessenger,
                 response_parser: Optional[ResponseParser] = None,
                 account_id: str = CANVAS_ACCOUNT_ID) -> None:
        self.canvas_base_url = canvas_base_url
        self.api_version = api_version
        self.oauth_token = oauth_token
        self.messenger = messenger
        self.response_parser = response_parser or ResponseParser()
        self.account_id = account_id

    @classmethod
    def from_config(cls, messenger: Optional[CanvasMessenger] = None) -> "CourseResource":
        """Build a resource from the environment-driven configuration."""
        if not CANVAS_BASE_URL or not CANVAS_TOKEN:
            raise ValueError("Canvas API base URL and token are required")
        return cls(CANVAS_BASE_URL, CANVAS_API_VERSION, CANVAS_TOKEN,
                   messenger or CanvasMessenger())

    def _url(self, path: str, parameters: Optional[ParameterMap] = None) -> str:
        return build_canvas_url(self.canvas_base_url, self.api_version, path, parameters or {})

    def list_courses(self, enrollment_type: Optional[EnrollmentType] = None,
                     enrollment_role_id: Optional[int] = None,
                     includes: Iterable[CourseIncludes] = (),
                     states: Iterable[CourseState] = ()) -> List[Course]:
        """Fetch every course visible to the current user, across all pages."""
        logger.info("listing courses for user")
        parameters: ParameterMap = {}
        if enrollment_type is not None:
            parameters["enrollment_type"] = [enrollment_type.value]
        if enrollment_role_id is not None:
            parameters["enrollment_role_id"] = [str(enrollment_role_id)]
        parameters["include[]"] = [include.value for include in includes]
        parameters["state[]"] = [state.value for state in states]

        url = self._url("courses/", parameters)
        logger.debug("Final URL of API call: %s", url)

        courses: List[Course] = []
        for response in self.messenger.get_from_canvas(self.oauth_token, url):
            courses.extend(self.response_parser.parse_to_list(Course, response))
        return courses

    def get_single_course(self, course_id: str,
                          includes: Iterable[CourseIncludes] = ()) -> Optional[Course]:
        """Fetch one course, or None if Canvas did not answer with 200."""
        logger.debug("getting course %s", course_id)
        parameters: ParameterMap = {"include[]": [include.value for include in includes]}
        url = self._url(f"courses/{course_id}", parameters)
        logger.debug("Final URL of API call: %s", url)

        response = self.messenger.get_single_response_from_canvas(self.oauth_token, url)
        if not _succeeded(response):
            return None
        return self.response_parser.parse_to_object(Course, response)

    def create_course(self, oauth_token: str, course: Course) -> Optional[Course]:
        """Create course under the configured account and return Canvas' copy of it."""
        url = self._url(f"accounts/{self.account_id}/courses")
        logger.debug("create URL for course creation: %s", url)

        response = self.messenger.send_to_canvas(oauth_token, url, course.to_form_params())
        if not _succeeded(response):
            logger.debug("Failed to create course, error message: %s", response)
            return None
        return self.response_parser.parse_to_object(Course, response)

    def delete_course(self, oauth_token: str, course_id: str) -> bool:
        """
        Delete a course.

        Returns False when Canvas did not answer with 200. Raises
        ResponseParseError when a 200 body has no 'delete' field.
        """
        url = self._url(f"courses/{course_id}")
        response = self.messenger.delete_from_canvas(oauth_token, url, {"event": DELETE_EVENT})
        logger.debug("response %s", response)
        if not _succeeded(response):
            logger.debug("Failed to delete course, error message: %s", response)
            return False

        parsed = self.response_parser.parse_to_object(Delete, response)
        if parsed is None:
            raise ResponseParseError(f"Unexpected delete response for course {course_id}: {response.content!r}")
        return parsed.delete

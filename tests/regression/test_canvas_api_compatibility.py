"""
Regression tests for Canvas API compatibility.
Ensures the client keeps working with Canvas API responses.
"""

import unittest
from unittest.mock import Mock, patch
from canvas_api.client import CanvasClient
from canvas_api.courses import CourseResource
from canvas_api.messenger import CanvasMessenger
from canvas_api.models import Course


def http_response(status_code=200, text="[]", link=""):
    response = Mock()
    response.status_code = status_code
    response.text = text
    response.headers = {"Link": link} if link else {}
    return response


class TestCanvasAPIRegression(unittest.TestCase):
    """Regression tests for Canvas API behavior."""

    def setUp(self):
        """Set up test fixtures."""
        self.resource = CourseResource(
            "https://test.canvas.com", 1, "test", CanvasMessenger(CanvasClient()))

    def test_client_handles_pagination_link_header(self):
        """
        REGRESSION: Client should parse Link header for pagination.
        Canvas uses RFC 5988 Link headers with rel="next".
        """
        with patch('canvas_api.client.requests.request') as mock_request:
            mock_request.side_effect = [
                http_response(200, '[{"id": 1}]',
                              '<https://test.canvas.com/api/v1/courses?page=2>; rel="next", '
                              '<https://test.canvas.com/api/v1/courses?page=2>; rel="last"'),
                http_response(200, '[{"id": 2}]'),
            ]

            result = self.resource.list_courses()

            self.assertEqual(len(result), 2)
            self.assertEqual(mock_request.call_count, 2)

    def test_client_sets_per_page_parameter(self):
        """
        REGRESSION: Client should automatically add per_page=100 for efficiency.
        """
        with patch('canvas_api.client.requests.request') as mock_request:
            mock_request.return_value = http_response()

            self.resource.list_courses()

            self.assertEqual(mock_request.call_args.kwargs['params']['per_page'], 100)

    def test_client_has_request_timeout(self):
        """
        REGRESSION: Client should set reasonable timeout to prevent hanging.
        """
        with patch('canvas_api.client.requests.request') as mock_request:
            mock_request.return_value = http_response(200, '{"id": 1}')

            self.resource.get_single_course("1")

            self.assertGreater(mock_request.call_args.kwargs['timeout'], 0)

    def test_unauthorized_collapses_to_empty_result(self):
        """
        REGRESSION: 401 responses are reported like any other failure,
        not raised.
        """
        with patch('canvas_api.client.requests.request') as mock_request:
            mock_request.return_value = http_response(401, '{"errors": [{"message": "Invalid access token."}]}')

            self.assertIsNone(self.resource.get_single_course("1"))
            self.assertFalse(self.resource.delete_course("test", "1"))

    def test_empty_token_is_sent_and_rejected_by_canvas(self):
        """
        REGRESSION: An empty token used to raise ValueError before any request.
        The request must go out and the 401 collapse into None/False.
        """
        resource = CourseResource("https://test.canvas.com", 1, "", CanvasMessenger(CanvasClient()))
        unauthorized = '{"errors": [{"message": "Invalid access token."}]}'

        with patch('canvas_api.client.requests.request') as mock_request:
            mock_request.return_value = http_response(401, unauthorized)

            self.assertIsNone(resource.create_course("", Course(name="a", course_code="b")))
            self.assertFalse(resource.delete_course("", "1"))
            self.assertIsNone(resource.get_single_course("1"))
            self.assertEqual(mock_request.call_count, 3)
            self.assertEqual(mock_request.call_args.kwargs["headers"]["Authorization"], "Bearer ")

    def test_error_page_during_listing_is_not_raised(self):
        """
        REGRESSION: An error body on a listing page yields no courses
        rather than a decoding exception.
        """
        with patch('canvas_api.client.requests.request') as mock_request:
            mock_request.return_value = http_response(401, '{"errors": [{"message": "Invalid access token."}]}')

            self.assertEqual(self.resource.list_courses(), [])

    def test_courses_handle_missing_optional_fields(self):
        """
        REGRESSION: Optional course fields should default to None.
        """
        with patch('canvas_api.client.requests.request') as mock_request:
            mock_request.return_value = http_response(200, '[{"id": 1, "name": "Minimal Course"}]')

            result = self.resource.list_courses()

            self.assertIsNone(result[0].course_code)
            self.assertIsNone(result[0].start_at)
            self.assertIsNone(result[0].end_at)


if __name__ == "__main__":
    unittest.main()

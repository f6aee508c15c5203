"""Messenger that turns Canvas HTTP exchanges into response envelopes."""

import logging
from typing import Dict, List, Optional
from urllib.parse import parse_qs, urlsplit

import requests

from constants import DEFAULT_PER_PAGE, HTTP_ERROR_THRESHOLD
from .client import CanvasAPIError, CanvasClient, parse_next_link
from .response import Response

logger = logging.getLogger(__name__)


class CanvasMessenger:
    """
    Performs the request/response cycle for resource handlers.

    Single requests never raise on transport failure: the returned Response
    carries error_happened=True and no status code. Paginated GETs raise
    CanvasAPIError instead, since a partial page list cannot be flagged.
    """

    def __init__(self, client: Optional[CanvasClient] = None) -> None:
        self.client = client or CanvasClient()

    @staticmethod
    def _envelope(url: str, raw: requests.Response) -> Response:
        return Response(
            status_code=raw.status_code,
            error_happened=raw.status_code >= HTTP_ERROR_THRESHOLD,
            content=raw.text,
            url=url,
            next_link=parse_next_link(raw.headers.get("Link", "")),
        )

    def _send(self, method: str, oauth_token: str, url: str,
              params: Optional[Dict[str, str]] = None,
              data: Optional[Dict[str, str]] = None) -> Response:
        try:
            raw = self.client.request(method, url, oauth_token, params=params, data=data)
        except requests.RequestException as e:
            logger.warning("Canvas %s %s failed: %s", method, url, e)
            return Response(status_code=None, error_happened=True, url=url)
        return self._envelope(url, raw)

    def get_single_response_from_canvas(self, oauth_token: str, url: str) -> Response:
        """GET url once without following pagination."""
        return self._send("GET", oauth_token, url)

    def get_from_canvas(self, oauth_token: str, url: str) -> List[Response]:
        """GET url and every page linked from it via rel="next"."""
        # Set default pagination unless the caller already chose a page size
        params: Optional[Dict[str, int]] = None
        if "per_page" not in parse_qs(urlsplit(url).query):
            params = {"per_page": DEFAULT_PER_PAGE}

        responses: List[Response] = []
        next_url: Optional[str] = url
        try:
            while next_url:
                raw = self.client.request("GET", next_url, oauth_token, params=params)
                response = self._envelope(next_url, raw)
                responses.append(response)
                next_url = response.next_link
                params = None  # Only use params on first request
        except requests.exceptions.RequestException as e:
            raise CanvasAPIError(f"Canvas API request failed: {e}") from e

        logger.debug("Fetched %d page(s) from %s", len(responses), url)
        return responses

    def send_to_canvas(self, oauth_token: str, url: str,
                       post_params: Dict[str, str]) -> Response:
        """POST post_params to url as a form body."""
        return self._send("POST", oauth_token, url, data=post_params)

    def delete_from_canvas(self, oauth_token: str, url: str,
                           params: Dict[str, str]) -> Response:
        """Send a DELETE to url with params as a form body."""
        return self._send("DELETE", oauth_token, url, data=params)

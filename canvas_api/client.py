"""Canvas API client for making authenticated requests."""

import requests
from typing import Dict, Any, Optional
from constants import REQUEST_TIMEOUT


class CanvasAPIError(Exception):
    """Custom exception for Canvas API errors."""
    pass


class ResponseParseError(CanvasAPIError):
    """Raised when a successful response body does not have the expected shape."""
    pass


def parse_next_link(link: Optional[str]) -> Optional[str]:
    """Return the rel="next" URL from an RFC 5988 Link header, if any."""
    if not link:
        return None
    for part in link.split(','):
        if 'rel="next"' in part:
            return part[part.find('<') + 1:part.find('>')]
    return None


class CanvasClient:
    """Raw HTTP transport to the Canvas LMS API."""

    def __init__(self, timeout: float = REQUEST_TIMEOUT) -> None:
        self.timeout = timeout

    @staticmethod
    def headers(oauth_token: str) -> Dict[str, str]:
        """Authorization headers for a request made with oauth_token."""
        # A missing token is left for Canvas to reject with 401
        return {"Authorization": f"Bearer {oauth_token or ''}"}

    def request(self, method: str, url: str, oauth_token: str,
                params: Optional[Dict[str, Any]] = None,
                data: Optional[Dict[str, Any]] = None) -> requests.Response:
        """Send one request; transport failures surface as requests.RequestException."""
        return requests.request(
            method,
            url,
            headers=self.headers(oauth_token),
            params=params,
            data=data,
            timeout=self.timeout,
        )

"""Helpers for building Canvas API URLs and query strings."""

from typing import Dict, List, Mapping, Sequence
from urllib.parse import urlencode

ParameterMap = Dict[str, List[str]]


def build_parameters(parameters: Mapping[str, Sequence[str]]) -> str:
    """
    Build a query string from a parameter mapping.
    Keys with no values are dropped. Array keys such as 'include[]' are
    repeated once per value and their brackets are left unescaped.
    """
    pairs = [
        (key, value)
        for key, values in parameters.items()
        for value in values
    ]
    if not pairs:
        return ""
    return "?" + urlencode(pairs, safe="[]")


def build_canvas_url(base_url: str, api_version: int, path: str,
                     parameters: Mapping[str, Sequence[str]]) -> str:
    """Return '{base_url}/api/v{api_version}/{path}' plus the encoded parameters."""
    url = f"{base_url.rstrip('/')}/api/v{api_version}/{path.lstrip('/')}"
    return url + build_parameters(parameters)

"""Response envelope returned by the messenger and the parser that consumes it."""

import json
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Response:
    """Status, error flag and raw body of one HTTP exchange with Canvas."""

    status_code: Optional[int]
    error_happened: bool
    content: str = ""
    url: Optional[str] = None
    next_link: Optional[str] = None


class ResponseParser:
    """Decodes response bodies into model records built via ``model.from_json``."""

    def _decode(self, response: Response) -> Any:
        try:
            return json.loads(response.content)
        except (TypeError, ValueError):
            logger.warning("Could not decode JSON body from %s", response.url)
            return None

    def _build(self, model: Type[T], data: Any) -> Optional[T]:
        if not isinstance(data, dict):
            return None
        try:
            return model.from_json(data)  # type: ignore[attr-defined]
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Could not build %s from response: %s", model.__name__, e)
            return None

    def parse_to_object(self, model: Type[T], response: Response) -> Optional[T]:
        """Return a single record, or None when the body is not a matching JSON object."""
        data = self._decode(response)
        if not isinstance(data, dict):
            if data is not None:
                logger.warning("Expected a JSON object from %s", response.url)
            return None
        return self._build(model, data)

    def parse_to_list(self, model: Type[T], response: Response) -> List[T]:
        """Return every record in a JSON array body; anything else yields an empty list."""
        data = self._decode(response)
        if not isinstance(data, list):
            if data is not None:
                logger.warning("Expected a JSON array from %s", response.url)
            return []

        parsed: List[T] = []
        for item in data:
            # Skip entries that are not objects or fail to build
            record = self._build(model, item)
            if record is not None:
                parsed.append(record)
        return parsed

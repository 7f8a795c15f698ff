"""Column types shared by the models."""

from __future__ import annotations

import json
import logging
from typing import Any

from sqlalchemy import Text
from sqlalchemy.types import TypeDecorator

logger = logging.getLogger(__name__)


class JSONEncodedList(TypeDecorator):
    """A list of strings stored as JSON text in a plain text column.

    Rows written by older clients may hold text that is not a JSON array;
    those read back as an empty list instead of failing the whole query.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: list[str] | None, dialect: Any) -> str:
        return json.dumps(list(value or []))

    def process_result_value(self, value: str | None, dialect: Any) -> list[str]:
        if not value:
            return []
        try:
            decoded = json.loads(value)
        except json.JSONDecodeError:
            logger.warning("json_list_decode_failed value=%r", value[:80])
            return []
        if not isinstance(decoded, list):
            logger.warning("json_list_not_a_list value=%r", value[:80])
            return []
        return [str(item) for item in decoded]

import re
from typing import Any

from ..config import settings

_CONTROL_CHARACTERS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")


def sanitize_input(value: Any, max_length: int | None = None) -> str:
    if not isinstance(value, str):
        return ""

    limit = max_length if max_length is not None else settings.max_input_length
    return _CONTROL_CHARACTERS.sub("", value.strip())[:limit]


def validate_language(language: Any) -> str | None:
    if not isinstance(language, str):
        return None
    return language.strip() or None

"""Text-safety helpers for DSL tokens."""
from __future__ import annotations

import re

from c4dsl.dsl.errors import InvalidText

_LINE_BREAKS = ("\n", "\r")

# Unquoted values (include expressions, style properties) cannot open blocks or strings.
TOKEN_PATTERN = r'^[^\s{}"]+$'
_TOKEN_RE = re.compile(TOKEN_PATTERN)


def ensure_single_line(value: str, field: str) -> str:
    if any(ch in value for ch in _LINE_BREAKS):
        raise InvalidText(field, value)
    return value


def ensure_token(value: str, field: str) -> str:
    if not _TOKEN_RE.fullmatch(value):
        raise InvalidText(field, value, reason="must be a single token without whitespace, braces or quotes")
    return value


def escape_dsl_string(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def quote(value: str, field: str) -> str:
    """Return ``value`` as a double-quoted DSL string."""
    return f'"{escape_dsl_string(ensure_single_line(value, field))}"'

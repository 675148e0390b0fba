"""Scrubs bearer tokens from anything that ends up in a log line."""

import re
from collections.abc import Mapping
from typing import Any

_MASK = "[REDACTED]"

_TOKEN_PATTERNS = (
    re.compile(r"(bearer\s+)[^\s\"',;]+", re.IGNORECASE),
    re.compile(r"(authorization[\"']?\s*[:=]\s*[\"']?)(?!bearer\s)[^\s\"',;]+", re.IGNORECASE),
    re.compile(r"(api_token[\"']?\s*[:=]\s*[\"']?)[^\s\"',;]+", re.IGNORECASE),
)

_SENSITIVE_KEYS = frozenset({"authorization", "api_token", "token", "credential"})


def redact_text(text: str) -> str:
    if not text:
        return text
    for pattern in _TOKEN_PATTERNS:
        text = pattern.sub(lambda m: m.group(1) + _MASK, text)
    return text


def redact_mapping(values: Mapping[str, Any]) -> dict[str, Any]:
    """Copy of ``values`` with sensitive keys masked and string values scrubbed."""
    redacted: dict[str, Any] = {}
    for key, value in values.items():
        if key.lower() in _SENSITIVE_KEYS:
            redacted[key] = _MASK
        elif isinstance(value, str):
            redacted[key] = redact_text(value)
        else:
            redacted[key] = value
    return redacted

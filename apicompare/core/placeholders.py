"""`{{token}}` placeholder substitution for URLs and header values."""

from __future__ import annotations

import re
from typing import Mapping

BASE_URL_TOKEN = "baseUrl"

_PLACEHOLDER_RE = re.compile(r"\{\{([^{}]+)\}\}")


def substitute(text: str, replacements: Mapping[str, str]) -> str:
    """Replace known `{{token}}` occurrences; unknown tokens are kept verbatim."""
    if not replacements or "{{" not in text:
        return text

    def _replace(match: re.Match[str]) -> str:
        token = match.group(1)
        if token in replacements:
            return str(replacements[token])
        return match.group(0)

    return _PLACEHOLDER_RE.sub(_replace, text)


def replace_base_url(url: str, base_url: str) -> str:
    return substitute(url, {BASE_URL_TOKEN: base_url})


def replace_header_placeholders(
    headers: Mapping[str, str] | None,
    replacements: Mapping[str, str],
) -> dict[str, str]:
    if not headers:
        return {}
    return {name: substitute(value, replacements) for name, value in headers.items()}

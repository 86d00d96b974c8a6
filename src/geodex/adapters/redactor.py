"""Regex-based redactor.

Masks passwords and tokens in database URLs (``user:pass@``, query-string
secrets, ODBC ``Pwd=`` pairs, ``key: value`` fragments, ``Bearer`` tokens)
and credential-bearing HTTP headers. Strict mode also hides user names.
"""

import re
from collections.abc import Mapping

from geodex.interfaces import redactor
from geodex.interfaces.redactor import RedactorMode

# pylint: disable=too-few-public-methods

PLACEHOLDER = "***"
SECRET_KEYWORDS = [
    "password",
    "passwd",
    "pwd",
    "secret",
    "token",
    "api_key",
    "access_token",
    "refresh_token",
    "authorization",
    "signature",
]
STRICT_MODE_KEYWORDS = [*SECRET_KEYWORDS, "user", "username", "uid"]
SECRET_HEADERS = frozenset(
    {"authorization", "proxy-authorization", "cookie", "set-cookie", "x-api-key"}
)


def _keyword_pattern(keywords: list[str]) -> str:
    return "|".join(kw.replace("_", "[-_]?") for kw in keywords)


def _compile(keywords: list[str]) -> tuple[re.Pattern[str], re.Pattern[str]]:
    pattern = _keyword_pattern(keywords)
    return (
        re.compile(rf"([?&](?:{pattern})=)[^&#\s;]*", re.IGNORECASE),
        re.compile(rf"(\b(?:{pattern})\s*:\s*)\S+", re.IGNORECASE),
    )


LENIENT_PATTERNS = _compile(SECRET_KEYWORDS)
STRICT_PATTERNS = _compile(STRICT_MODE_KEYWORDS)
BEARER_PATTERN = re.compile(r"Bearer\s[0-9a-zA-Z\.\-_~+/]*=*", re.IGNORECASE)
PWD_PATTERN = re.compile(r"\bpwd=[^;\s]+", re.IGNORECASE)
UID_PATTERN = re.compile(r"\buid=[^;]+", re.IGNORECASE)
URL_PASSWORD_PATTERN = re.compile(r"(?<=://)([^:@/]+):([^@/]+)@")
URL_USER_PATTERN = re.compile(r"(?<=://)([^:@/]+)(?=:(?:\*\*\*|[^@/]*)@)")


class Redactor(redactor.Redactor):
    """Redactor implementation using regex-based sanitization."""

    def __init__(self, mode: RedactorMode = RedactorMode.LENIENT) -> None:
        self._mode = mode

    @property
    def _strict(self) -> bool:
        return self._mode is RedactorMode.STRICT

    def sanitize_db_url(self, raw_url: str) -> str:
        query_pattern, key_value_pattern = (
            STRICT_PATTERNS if self._strict else LENIENT_PATTERNS
        )

        sanitized = URL_PASSWORD_PATTERN.sub(rf"\1:{PLACEHOLDER}@", str(raw_url))
        if self._strict:
            sanitized = URL_USER_PATTERN.sub(PLACEHOLDER, sanitized)
        sanitized = BEARER_PATTERN.sub(PLACEHOLDER, sanitized)
        sanitized = query_pattern.sub(rf"\1{PLACEHOLDER}", sanitized)
        sanitized = PWD_PATTERN.sub(f"Pwd={PLACEHOLDER}", sanitized)
        if self._strict:
            sanitized = UID_PATTERN.sub(f"Uid={PLACEHOLDER}", sanitized)
        return key_value_pattern.sub(rf"\1{PLACEHOLDER}", sanitized)

    def sanitize_headers(self, headers: Mapping[str, str]) -> dict[str, str]:
        return {
            name: PLACEHOLDER if name.lower() in SECRET_HEADERS else value
            for name, value in headers.items()
        }

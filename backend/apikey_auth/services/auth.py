"""API key extraction from request headers.

Clients send ``Authorization: ApiKey <token>``. The extractor only checks the
header shape and hands the token back; it does not verify the key.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from fastapi import HTTPException, Request

AUTH_HEADER = "Authorization"
API_KEY_SCHEME = "ApiKey"


class AuthErrorKind(str, Enum):
    NO_AUTH_HEADER = "no_auth_header"
    MALFORMED_SCHEME = "malformed_scheme"
    MALFORMED_MISSING_KEY = "malformed_missing_key"


class AuthError(Exception):
    """Base class for Authorization header failures."""

    kind: AuthErrorKind

    def __init__(self, message: str, kind: AuthErrorKind) -> None:
        super().__init__(message)
        self.kind = kind


class NoAuthHeaderIncludedError(AuthError):
    """Raised when the request carries no Authorization header at all."""

    def __init__(self) -> None:
        super().__init__("no authorization header included", AuthErrorKind.NO_AUTH_HEADER)


class MalformedAuthHeaderError(AuthError):
    """Raised when the Authorization header is not ``ApiKey <token>``."""

    def __init__(self, reason: str, kind: AuthErrorKind = AuthErrorKind.MALFORMED_SCHEME) -> None:
        super().__init__(f"malformed authorization header: {reason}", kind)
        self.reason = reason


def _first_header_value(headers: Any, name: str) -> str | None:
    # Starlette and httpx Headers are already case-insensitive.
    # Starlette spells it getlist, httpx get_list.
    getlist = getattr(headers, "getlist", None) or getattr(headers, "get_list", None)
    if callable(getlist):
        values = getlist(name)
        return values[0] if values else None

    if not isinstance(headers, Mapping):
        raise TypeError(f"headers must be a mapping, got {type(headers).__name__}")

    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() != wanted:
            continue
        if isinstance(value, str):
            return value
        if isinstance(value, (bytes, bytearray)):
            raise TypeError(f"header values must be str, got {type(value).__name__}")
        if isinstance(value, Sequence) and value:
            if not isinstance(value[0], str):
                raise TypeError(f"header values must be str, got {type(value[0]).__name__}")
            return value[0]
        return None
    return None


def parse_authorization(value: str) -> str:
    """Return the token from an ``ApiKey <token>`` header value."""
    scheme, sep, credential = value.partition(" ")
    if not sep:
        if scheme == API_KEY_SCHEME:
            raise MalformedAuthHeaderError("missing api key", AuthErrorKind.MALFORMED_MISSING_KEY)
        raise MalformedAuthHeaderError(f"expected '{API_KEY_SCHEME} <key>'")
    if scheme != API_KEY_SCHEME:
        raise MalformedAuthHeaderError(f"unsupported scheme '{scheme}'")
    if not credential:
        raise MalformedAuthHeaderError("missing api key", AuthErrorKind.MALFORMED_MISSING_KEY)
    return credential


def get_api_key(headers: Any) -> str:
    """Extract the API key from a set of HTTP headers.

    ``headers`` may be a Starlette/httpx ``Headers`` object or a plain mapping
    of header name to a value or a list of values. Name lookup is
    case-insensitive and only the first value is consulted.

    Raises:
        NoAuthHeaderIncludedError: no Authorization header is present.
        MalformedAuthHeaderError: the header is not ``ApiKey <key>``.
    """
    value = _first_header_value(headers, AUTH_HEADER)
    if value is None:
        raise NoAuthHeaderIncludedError()
    return parse_authorization(value)


def auth_error_status(exc: AuthError) -> int:
    """401 when no credential was offered, 400 when it was malformed."""
    if exc.kind is AuthErrorKind.NO_AUTH_HEADER:
        return 401
    return 400


def auth_error_headers(exc: AuthError) -> dict[str, str]:
    if exc.kind is AuthErrorKind.NO_AUTH_HEADER:
        return {"WWW-Authenticate": API_KEY_SCHEME}
    return {}


def extract_api_key(request: Request) -> str:
    """FastAPI dependency returning the request's API key.

    Reuses the key stored by ``APIKeyAuthMiddleware`` when it ran.
    """
    cached = getattr(request.state, "api_key", None)
    if cached:
        return cached
    try:
        return get_api_key(request.headers)
    except AuthError as exc:
        raise HTTPException(
            status_code=auth_error_status(exc),
            detail=str(exc),
            headers=auth_error_headers(exc) or None,
        ) from exc

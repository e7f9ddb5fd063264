"""Environment-driven settings for the API key middleware.

Auth is on by default. It can be switched off with APIKEY_AUTH_NO_AUTH=true,
which the test suite does for endpoints that are not about auth.

APIKEY_AUTH_PUBLIC_PATHS adds comma-separated paths that skip the check;
/api/health is always public. APIKEY_AUTH_PROTECTED_PREFIX selects the
guarded paths (default /api/).
"""

from __future__ import annotations

import os

_ALWAYS_PUBLIC = {"/api/health"}
_DEFAULT_PREFIX = "/api/"


def auth_enabled() -> bool:
    return os.environ.get("APIKEY_AUTH_NO_AUTH", "").lower() != "true"


def public_paths() -> set[str]:
    raw = os.environ.get("APIKEY_AUTH_PUBLIC_PATHS", "")
    extra = {p.strip() for p in raw.split(",") if p.strip()}
    return _ALWAYS_PUBLIC | extra


def protected_prefix() -> str:
    return os.environ.get("APIKEY_AUTH_PROTECTED_PREFIX") or _DEFAULT_PREFIX


def is_protected_path(path: str) -> bool:
    """True if requests to ``path`` must carry an API key."""
    if not path.startswith(protected_prefix()):
        return False
    return path not in public_paths()

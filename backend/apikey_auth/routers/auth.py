import logging

from fastapi import APIRouter, Depends

from apikey_auth.models.auth_models import AuthCheckResponse
from apikey_auth.services.auth import API_KEY_SCHEME, extract_api_key

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])

_VISIBLE_CHARS = 4


def mask_api_key(api_key: str) -> str:
    """Mask everything except the last few characters of a key."""
    if len(api_key) <= _VISIBLE_CHARS:
        return "*" * len(api_key)
    return "*" * (len(api_key) - _VISIBLE_CHARS) + api_key[-_VISIBLE_CHARS:]


@router.get("/check", response_model=AuthCheckResponse)
async def check_auth(api_key: str = Depends(extract_api_key)) -> AuthCheckResponse:
    """Confirm the request carried a well-formed API key."""
    hint = mask_api_key(api_key)
    logger.debug("Auth check passed for key %s", hint)
    return AuthCheckResponse(authenticated=True, scheme=API_KEY_SCHEME, key_hint=hint)

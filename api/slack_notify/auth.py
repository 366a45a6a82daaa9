import logging
import secrets
from typing import Optional

from fastapi import HTTPException, Request, Security
from fastapi.security import APIKeyHeader

from slack_notify.config import settings

logger = logging.getLogger(__name__)

api_key_header = APIKeyHeader(name="apikey", auto_error=False)


def _get_client_ip(request: Request) -> str:
    cf_ip = request.headers.get("CF-Connecting-IP")
    if cf_ip:
        return cf_ip
    xff = request.headers.get("X-Forwarded-For")
    if xff:
        return xff.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def _bearer_token(request: Request) -> Optional[str]:
    scheme, _, token = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() == "bearer" and token:
        return token.strip()
    return None


async def require_function_key(
    request: Request,
    api_key: Optional[str] = Security(api_key_header),
) -> None:
    """Check the shared function key when one is configured."""
    expected = settings.function_api_key
    if not expected:
        return

    supplied = api_key or _bearer_token(request)
    if not supplied:
        raise HTTPException(status_code=401, detail="Missing API key")

    if not secrets.compare_digest(supplied, expected):
        logger.warning("Failed auth attempt from %s", _get_client_ip(request))
        raise HTTPException(status_code=401, detail="Invalid API key")

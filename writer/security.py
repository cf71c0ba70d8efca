from typing import Optional

from fastapi import Depends, HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from fastapi.security.api_key import APIKeyHeader
from starlette.status import HTTP_403_FORBIDDEN

from writer.settings import Settings, settings

API_KEY_NAME = "X-Writer-Key"
api_key_header = APIKeyHeader(name=API_KEY_NAME, auto_error=False)
access_token_bearer = HTTPBearer(auto_error=False)


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_api_key(
    api_key_header: str = Security(api_key_header),
    current_settings: Settings = Depends(get_settings),
):
    if api_key_header == current_settings.WRITER_API_KEY:
        return api_key_header
    raise HTTPException(
        status_code=HTTP_403_FORBIDDEN,
        detail="Could not validate API key",
    )


def get_access_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(
        access_token_bearer
    ),
) -> Optional[str]:
    """
    GitHub OAuth access token forwarded by the session layer as a bearer token.
    A missing token is passed through so the commit step reports it.
    """
    if credentials is None:
        return None
    return credentials.credentials

"""
Bearer token guard of the API gateway.

The gateway does not own user accounts: it trusts any token signed with the
shared secret and exposes the ``sub`` / ``username`` claims.
"""

from typing import Annotated, Any, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from blich_cms.core.errors import AuthenticationError
from blich_cms.core.security import decode_access_token

from .config import gateway_settings

_bearer = HTTPBearer(auto_error=False)


async def get_current_claims(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(_bearer)],
) -> Dict[str, Any]:
    """Verify the ``Authorization: Bearer`` token and return its claims (401 otherwise)."""
    jwt_config = gateway_settings.jwt
    try:
        return decode_access_token(
            credentials.credentials if credentials else "",
            secret=jwt_config.secret,
            algorithm=jwt_config.algorithm,
        )
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


CurrentClaimsDep = Annotated[Dict[str, Any], Depends(get_current_claims)]

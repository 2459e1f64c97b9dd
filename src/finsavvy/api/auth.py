"""Bearer-token guard for the advisor API."""

from fastapi import HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..config import settings

security = HTTPBearer()


async def verify_token(
    credentials: HTTPAuthorizationCredentials = Security(security),
) -> str:
    """Check the bearer token against the configured service token.

    This authenticates the calling front end, not the end user; user ids are
    passed through unverified.

    Args:
        credentials: HTTP Bearer credentials from the request.

    Returns:
        The verified token.

    Raises:
        HTTPException: 401 if the token does not match.
    """
    if credentials.credentials != settings.api_token:
        raise HTTPException(status_code=401, detail="Invalid authentication token")
    return credentials.credentials

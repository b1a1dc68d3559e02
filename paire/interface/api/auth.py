"""Cookie session authentication for routes."""

from fastapi import HTTPException, status

from paire.domain.service import JWTService
from paire.util.jwt import JWTError, TokenPayload


def authenticate(jwt_service: JWTService, auth_token: str | None) -> TokenPayload:
    """Verify the ``auth_token`` cookie.

    Raises:
        HTTPException: 401 if the cookie is missing or invalid
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        return jwt_service.verify_token(auth_token)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )

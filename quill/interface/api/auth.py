"""Bearer token helpers for routes."""

from fastapi import HTTPException, status

from quill.domain.service import JWTService
from quill.domain.value import AccountId


def _token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


def optional_account_id(
    jwt_service: JWTService, authorization: str | None
) -> AccountId | None:
    """Account id of the caller, or None for anonymous or invalid tokens."""
    return jwt_service.get_account_id_from_token(_token(authorization))


def require_account_id(jwt_service: JWTService, authorization: str | None) -> AccountId:
    """Account id of the caller.

    Raises:
        HTTPException: 401 if the bearer token is missing or invalid
    """
    account_id = optional_account_id(jwt_service, authorization)
    if account_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return account_id

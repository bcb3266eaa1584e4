"""JWT token domain service."""

import logfire

from quill.config import AuthSettings
from quill.domain.value import AccountId
from quill.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Identity gate: maps bearer tokens to account ids."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, account_id: AccountId, username: str) -> str:
        """Create a bearer token for an account."""
        with logfire.span(
            "jwt_service.create_token", account_id=account_id, username=username
        ):
            token = create_token(account_id, username, self.auth_settings)
            logfire.info("JWT token created", account_id=account_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_account_id_from_token(self, token: str | None) -> AccountId | None:
        """Extract the account id from a token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Account ID if token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            return AccountId(self.verify_token(token).account_id)
        except JWTError:
            return None

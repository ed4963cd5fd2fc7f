"""Get current user use case."""

from pydantic import BaseModel

from scribe.domain.service import JWTService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Authenticated principal."""

    user_id: str


class GetCurrentUserUseCase:
    """Use case for resolving the authenticated user from a token.

    Users are managed elsewhere; a verified token is all the API needs
    to scope posts to their owner.
    """

    def __init__(self, jwt_service: JWTService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
        """
        self.jwt_service = jwt_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Verify the token and return the user it was issued to.

        Args:
            request: Request with JWT token

        Returns:
            The authenticated user

        Raises:
            JWTError: If token is invalid or expired
        """
        payload = self.jwt_service.verify_token(request.token)
        return GetCurrentUserResponse(user_id=str(payload.user_id))

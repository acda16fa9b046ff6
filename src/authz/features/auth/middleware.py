"""Authentication and authorization middleware for FastAPI.

Every request either starts an authentication flow (the configured
authentication endpoint), or must carry a bearer token issued by that
endpoint. Authenticated requests get a ``RequestAuthorization`` compiled
from the user's roles on ``request.state.authz``.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from ...config.constants import ErrorMessages
from ...config.settings import AuthZSettings
from ...core.exceptions import (
    AuthZError,
    AuthenticationError,
    InvalidUserError,
    create_error_response,
    get_http_status_code,
    response_error,
)
from ...utils import maybe_await, request_kind
from .entities.protocols import RolesProviderProtocol, UserIdentifierProtocol
from .entities.request_authorization import RequestAuthorization
from .models.responses import TokenResponse
from .services.token_service import TokenService

logger = logging.getLogger(__name__)


class AuthZMiddleware(BaseHTTPMiddleware):
    """FastAPI middleware for JWT authentication and role compilation."""

    def __init__(
        self,
        app,
        settings: AuthZSettings,
        user_identifier: UserIdentifierProtocol,
        roles_provider: RolesProviderProtocol,
        token_service: TokenService = None,
    ):
        super().__init__(app)
        self.settings = settings
        self.user_identifier = user_identifier
        self.roles_provider = roles_provider
        self.token_service = token_service or TokenService(settings)
        self._authentication_kind = request_kind(
            settings.authentication_method.value, settings.authentication_path
        )

    async def dispatch(self, request: Request, call_next) -> Response:
        """Authenticate the request and attach its authorization object."""
        path = request.url.path

        if any(path.startswith(prefix) for prefix in self.settings.exempt_paths):
            return await call_next(request)

        if request_kind(request.method, path) == self._authentication_kind:
            return await self._authenticate(request)

        try:
            user_id = self.token_service.validate(request.headers.get("Authorization"))
        except AuthenticationError as e:
            logger.warning(f"Authentication failed for {request.method} {path}: {e.message}")
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content=response_error(f"{ErrorMessages.AUTHENTICATION_ERROR}: {e.message}"),
            )

        roles = await maybe_await(self.roles_provider(user_id))
        request.state.authz = RequestAuthorization.build(user_id, roles or [])

        logger.info(f"User authenticated: user_id={user_id!r}, roles={len(roles or [])}, path={path}")
        return await call_next(request)

    async def _identify(self, request: Request) -> Any:
        """Run the user identifier, raising InvalidUserError when it yields no user."""
        try:
            user_id = await maybe_await(self.user_identifier(request))
        except Exception as e:
            raise InvalidUserError(f"{ErrorMessages.INVALID_USER}: {e}") from e

        if user_id is None:
            raise InvalidUserError(ErrorMessages.INVALID_USER)
        return user_id

    async def _authenticate(self, request: Request) -> Response:
        """Identify the user and issue a token."""
        try:
            user_id = await self._identify(request)
        except InvalidUserError as e:
            logger.warning(f"User identification failed: {e.message}")
            return JSONResponse(
                status_code=get_http_status_code(e),
                content=create_error_response(e),
            )

        issued = self.token_service.issue(user_id)
        logger.info(f"Issued token for user_id={user_id!r}")
        return JSONResponse(
            content=TokenResponse(token=issued.token, expires_in=issued.expires_in).model_dump(by_alias=True)
        )


# Exception handlers for authz errors

def configure_authz_exception_handlers(app: FastAPI) -> None:
    """Render authz errors raised by routes and dependencies."""

    @app.exception_handler(AuthZError)
    async def authz_exception_handler(request: Request, exc: AuthZError):
        status_code = get_http_status_code(exc)
        if status_code >= 500:
            logger.error(f"Authz error on {request.url.path}: {exc.message}")
        else:
            logger.warning(f"Authz error on {request.url.path}: {exc.message}")
        return JSONResponse(status_code=status_code, content=create_error_response(exc))

    logger.info("Configured authz exception handlers")

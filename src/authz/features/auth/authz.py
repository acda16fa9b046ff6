"""AuthZ facade wiring authentication and authorization into a FastAPI app."""

import logging
from typing import Optional

from fastapi import FastAPI

from ...config.settings import AuthZSettings, get_settings
from . import dependencies
from .entities.protocols import RolesProviderProtocol, UserIdentifierProtocol
from .middleware import AuthZMiddleware, configure_authz_exception_handlers
from .routers.iam_router import create_iam_router
from .services.token_service import TokenService

logger = logging.getLogger(__name__)


class AuthZ:
    """Entry point for applications.

    Example:
        authz = AuthZ(user_identifier=identify, roles_provider=load_roles)
        authz.install(app)

        @app.get("/reports", dependencies=[Depends(authz.with_actions("Report.Read"))])
        async def list_reports(): ...
    """

    # Route guards
    with_permissions = staticmethod(dependencies.require_permissions)
    with_global_permissions = staticmethod(dependencies.require_global_permissions)
    with_local_permissions = staticmethod(dependencies.require_local_permissions)
    with_actions = staticmethod(dependencies.require_actions)
    with_global_actions = staticmethod(dependencies.require_global_actions)
    with_local_actions = staticmethod(dependencies.require_local_actions)

    get_authorization = staticmethod(dependencies.get_authorization)

    def __init__(
        self,
        user_identifier: UserIdentifierProtocol,
        roles_provider: RolesProviderProtocol,
        settings: Optional[AuthZSettings] = None,
    ):
        self.settings = settings or get_settings()
        self.user_identifier = user_identifier
        self.roles_provider = roles_provider
        self.token_service = TokenService(self.settings)

    def install(self, app: FastAPI) -> FastAPI:
        """Add the middleware, exception handlers and IAM endpoint to ``app``."""
        app.add_middleware(
            AuthZMiddleware,
            settings=self.settings,
            user_identifier=self.user_identifier,
            roles_provider=self.roles_provider,
            token_service=self.token_service,
        )
        logger.info("Added authz middleware")

        configure_authz_exception_handlers(app)

        if self.settings.iam_endpoint_enabled:
            app.include_router(create_iam_router(self.settings))
            logger.info(
                f"IAM endpoint enabled at {self.settings.iam_method.value} {self.settings.iam_path}"
            )

        return app

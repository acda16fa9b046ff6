"""IAM introspection router."""

import logging

from fastapi import APIRouter

from ....config.settings import AuthZSettings
from ..dependencies import CurrentAuthorization
from ..models.responses import IamResponse

logger = logging.getLogger(__name__)


def create_iam_router(settings: AuthZSettings) -> APIRouter:
    """Router serving the current user's identity, roles and permissions."""
    router = APIRouter(tags=["Authorization"])

    @router.api_route(
        settings.iam_path,
        methods=[settings.iam_method.value],
        response_model=IamResponse,
        response_model_by_alias=True,
    )
    async def get_iam(authorization: CurrentAuthorization):
        """Report the effective permissions of the caller."""
        logger.debug(f"IAM requested by {authorization.get_user_identifier()!r}")
        return authorization.to_iam()

    return router

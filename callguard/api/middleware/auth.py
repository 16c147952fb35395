"""JWT authentication for API requests."""

import os
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from pydantic import ValidationError

from callguard.access.models import RequesterContext
from callguard.api.dependencies import SettingsDep
from callguard.api.exceptions import UnauthorizedError
from callguard.observability.logging import get_logger
from callguard.privacy.roles import UserRole

logger = get_logger(__name__)

JWT_SECRET_ENV = "CALLGUARD_JWT_SECRET"

security_scheme = HTTPBearer(auto_error=False)


def get_jwt_secret() -> str:
    """Get the JWT signing secret from the environment."""
    secret = os.environ.get(JWT_SECRET_ENV)
    if not secret:
        raise RuntimeError(f"{JWT_SECRET_ENV} environment variable not set")
    return secret


async def get_requester_context(
    request: Request,
    settings: SettingsDep,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security_scheme)],
) -> RequesterContext:
    """Validate the bearer token and build the requester context.

    The ``sub`` claim is the user id. The ``role`` claim is optional; users
    without one are clients.

    Raises:
        UnauthorizedError: Token missing, invalid, expired or without ``sub``
    """
    if credentials is None:
        logger.warning("auth_missing_token", path=request.url.path)
        raise UnauthorizedError("Unauthorized")

    try:
        payload = jwt.decode(
            credentials.credentials,
            get_jwt_secret(),
            algorithms=[settings.api.jwt_algorithm],
            options={"verify_aud": False},
        )
    except JWTError as e:
        logger.warning("auth_jwt_error", error=str(e), path=request.url.path)
        raise UnauthorizedError("Invalid token") from None

    try:
        context = RequesterContext(
            user_id=payload.get("sub") or "",
            role=UserRole.parse(payload.get("role")),
        )
    except ValidationError as e:
        logger.warning("auth_invalid_claims", error=str(e), path=request.url.path)
        raise UnauthorizedError("Invalid token") from None

    logger.debug("auth_success", user_id=context.user_id, role=context.role.value)
    return context


RequesterContextDep = Annotated[RequesterContext, Depends(get_requester_context)]

"""
API dependencies: bearer token verification and service lookup.

Protected routes expect `Authorization: Bearer <token>` where the token
matches the configured API_AUTH_TOKEN.
"""

import secrets

import structlog
from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.config import AppConfig
from core.services.client_service import ClientService

logger = structlog.get_logger(__name__)

# auto_error is off so a missing header answers 401 like a bad token does
security = HTTPBearer(auto_error=False)


def get_app_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_client_service(request: Request) -> ClientService:
    return request.app.state.client_service


def require_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    config: AppConfig = Depends(get_app_config),
) -> str:
    """Verify the bearer token from the Authorization header."""
    if credentials is None:
        logger.info("auth_rejected", reason="missing_token")
        raise HTTPException(
            status_code=401,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not secrets.compare_digest(
        credentials.credentials.encode(), config.auth.api_token.encode()
    ):
        logger.info("auth_rejected", reason="invalid_token")
        raise HTTPException(
            status_code=401,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return credentials.credentials

# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

import secrets
from typing import Annotated

from fastapi import Depends, Header

from app.config import Settings, get_settings
from app.exceptions import AdminDisabledError, AdminUnauthorizedError
from core.models.catalog import Service
from core.services.catalog_service import CatalogService


def get_services() -> list[Service]:
    """
    Current service catalog.

    Loaded once per request so a handler works on a consistent snapshot.
    """
    return CatalogService.list_services()


# Type aliases for dependency injection
ServicesDep = Annotated[list[Service], Depends(get_services)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


def require_admin(
    config: SettingsDep,
    x_admin_key: Annotated[str | None, Header()] = None,
) -> None:
    """
    Guard for the admin routes.

    Raises:
        AdminDisabledError: If ADMIN_API_KEY is not configured
        AdminUnauthorizedError: If the X-Admin-Key header doesn't match
    """
    if not config.ADMIN_API_KEY:
        raise AdminDisabledError()
    if x_admin_key is None or not secrets.compare_digest(
        x_admin_key.encode(), config.ADMIN_API_KEY.encode()
    ):
        raise AdminUnauthorizedError()

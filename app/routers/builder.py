# =============================================================================
# app/routers/builder.py - Event Builder Endpoints
# =============================================================================
# Lookup tables for the builder steps and budget-tiered package generation.
# =============================================================================

import logging

from fastapi import APIRouter

from app.dependencies import ServicesDep
from core.models.builder import BuilderOptions, GeneratedPackage, PackageRequest
from core.services.catalog_service import CatalogService
from core.services.package_service import generate_event_packages

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/options", response_model=BuilderOptions)
async def get_builder_options():
    """Event types, themes, colour palettes, guest sizes, venues and budgets."""
    return CatalogService.builder_options()


@router.post("/packages", response_model=list[GeneratedPackage])
async def generate_packages(request: PackageRequest, services: ServicesDep):
    """
    Generate essential, standard and premium packages.

    Returns up to three packages in tier order. An unknown event type,
    guest size or budget id returns an empty list, as does a budget too
    small for any service.
    """
    packages = generate_event_packages(
        request.event_type_id,
        request.theme_id,
        request.color_palette_id,
        request.guest_size_id,
        request.venue_type_id,
        request.budget_id,
        services=services,
        vendors=CatalogService.list_vendors(),
    )
    logger.info(
        f"Generated {len(packages)} packages for "
        f"{request.event_type_id}/{request.guest_size_id}/{request.budget_id}"
    )
    return packages

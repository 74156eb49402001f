# =============================================================================
# app/routers/catalog.py - Catalog Endpoints
# =============================================================================
# Read-only access to categories, vendors and services.
# =============================================================================

from fastapi import APIRouter, Path, Query

from core.models.catalog import Category, Service, Vendor
from core.services.catalog_service import CatalogService

router = APIRouter()


@router.get("/categories", response_model=list[Category])
async def list_categories():
    """List service categories."""
    return CatalogService.list_categories()


@router.get("/vendors", response_model=list[Vendor])
async def list_vendors():
    """List vendors."""
    return CatalogService.list_vendors()


@router.get("/vendors/{vendor_id}", response_model=Vendor)
async def get_vendor(
    vendor_id: str = Path(..., description="Vendor ID", examples=["v1"]),
):
    """
    Get a vendor.

    Returns 404 VENDOR_NOT_FOUND for an unknown id.
    """
    return CatalogService.get_vendor(vendor_id)


@router.get("/vendors/{vendor_id}/services", response_model=list[Service])
async def list_vendor_services(
    vendor_id: str = Path(..., description="Vendor ID", examples=["v1"]),
):
    """List the services a vendor offers."""
    CatalogService.get_vendor(vendor_id)
    return CatalogService.services_by_vendor(vendor_id)


@router.get("/services", response_model=list[Service])
async def list_services(
    q: str = Query(default="", description="Free-text search", examples=["catering"]),
    category: str | None = Query(default=None, description="Category id", examples=["weddings"]),
):
    """
    Search services.

    Without parameters this returns the whole catalog. `q` matches name,
    description, vendor name and category; `category` restricts the
    results to one category.
    """
    return CatalogService.search_services(query=q, category_id=category)


@router.get("/services/{service_id}", response_model=Service)
async def get_service(
    service_id: str = Path(..., description="Service ID", examples=["s1"]),
):
    """
    Get a service.

    Returns 404 SERVICE_NOT_FOUND for an unknown id.
    """
    return CatalogService.get_service(service_id)

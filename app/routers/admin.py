# =============================================================================
# app/routers/admin.py - Catalog Back-Office Endpoints
# =============================================================================
# Create, update and delete categories, vendors and services.
# Every route needs the X-Admin-Key header (see app.dependencies.require_admin).
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from app.dependencies import require_admin
from core.models.catalog import (
    Category,
    CategoryCreate,
    CategoryUpdate,
    Service,
    ServiceCategory,
    ServiceCreate,
    ServiceUpdate,
    Vendor,
    VendorCreate,
    VendorUpdate,
)
from core.services.catalog_admin_service import CatalogAdminService

router = APIRouter(dependencies=[Depends(require_admin)])

ServiceId = Annotated[str, Path(description="Service id", examples=["s1"])]
VendorId = Annotated[str, Path(description="Vendor id", examples=["v1"])]
CategoryId = Annotated[ServiceCategory, Path(description="Category id")]


# =============================================================================
# Services
# =============================================================================

@router.post("/services", response_model=Service, status_code=status.HTTP_201_CREATED)
async def create_service(request: ServiceCreate):
    """
    Add a service listing.

    Returns 404 VENDOR_NOT_FOUND if vendor_id is unknown.
    """
    return CatalogAdminService.create_service(request)


@router.patch("/services/{service_id}", response_model=Service)
async def update_service(service_id: ServiceId, request: ServiceUpdate):
    return CatalogAdminService.update_service(service_id, request)


@router.delete("/services/{service_id}")
async def delete_service(service_id: ServiceId):
    CatalogAdminService.delete_service(service_id)
    return {"id": service_id, "message": "Service deleted successfully"}


# =============================================================================
# Vendors
# =============================================================================

@router.post("/vendors", response_model=Vendor, status_code=status.HTTP_201_CREATED)
async def create_vendor(request: VendorCreate):
    return CatalogAdminService.create_vendor(request)


@router.patch("/vendors/{vendor_id}", response_model=Vendor)
async def update_vendor(vendor_id: VendorId, request: VendorUpdate):
    return CatalogAdminService.update_vendor(vendor_id, request)


@router.delete("/vendors/{vendor_id}")
async def delete_vendor(vendor_id: VendorId):
    """
    Delete a vendor.

    Fails with CATALOG_WRITE_FAILED while services still reference it.
    """
    CatalogAdminService.delete_vendor(vendor_id)
    return {"id": vendor_id, "message": "Vendor deleted successfully"}


# =============================================================================
# Categories
# =============================================================================

@router.post("/categories", response_model=Category, status_code=status.HTTP_201_CREATED)
async def create_category(request: CategoryCreate):
    return CatalogAdminService.create_category(request)


@router.patch("/categories/{category_id}", response_model=Category)
async def update_category(category_id: CategoryId, request: CategoryUpdate):
    return CatalogAdminService.update_category(category_id, request)


@router.delete("/categories/{category_id}")
async def delete_category(category_id: CategoryId):
    CatalogAdminService.delete_category(category_id)
    return {"id": category_id.value, "message": "Category deleted successfully"}

from typing import List

from fastapi import APIRouter, Depends

from app.dependencies import (
    get_apartment_filters, get_apartment_service, get_principal, require_admin, require_user
)
from app.models import Apartment
from app.schemas.apartment import (
    ApartmentCreate, ApartmentUpdate, ApartmentResponse, ApartmentListResponse, ApartmentActionResponse
)
from app.schemas.filters import ApartmentFilters
from app.services.apartment_service import ApartmentService
from app.services.visibility import Principal, VisibilityPolicy


router = APIRouter(prefix="/apartments", tags=["apartments"])


def to_list_response(apartments: List[Apartment]) -> ApartmentListResponse:
    return ApartmentListResponse(
        items=[ApartmentResponse.model_validate(a) for a in apartments],
        count=len(apartments),
    )


@router.get("", response_model=ApartmentListResponse)
def get_apartments(
    filters: ApartmentFilters = Depends(get_apartment_filters),
    principal: Principal = Depends(get_principal),
    service: ApartmentService = Depends(get_apartment_service),
):
    """Browse apartments. Only available ones unless isAvailable is given"""
    return to_list_response(service.search_listings(filters, principal))


@router.get("/admin", response_model=ApartmentListResponse)
def get_apartments_admin(
    filters: ApartmentFilters = Depends(get_apartment_filters),
    principal: Principal = Depends(require_admin),
    service: ApartmentService = Depends(get_apartment_service),
):
    """All apartments regardless of availability"""
    return to_list_response(service.search_listings_admin(filters, principal))


@router.get("/my-listings", response_model=ApartmentListResponse)
def get_my_listings(
    principal: Principal = Depends(require_user),
    service: ApartmentService = Depends(get_apartment_service),
):
    return to_list_response(service.my_listings(principal.id))


@router.get("/favorites", response_model=ApartmentListResponse)
def get_favorites(
    principal: Principal = Depends(require_user),
    service: ApartmentService = Depends(get_apartment_service),
):
    return to_list_response(service.favorites(principal.id))


@router.get("/{apartment_id}", response_model=ApartmentResponse)
def get_apartment(apartment_id: int, service: ApartmentService = Depends(get_apartment_service)):
    return service.get_listing(apartment_id)


@router.post("", response_model=ApartmentResponse, status_code=201)
def create_apartment(
    data: ApartmentCreate,
    principal: Principal = Depends(require_user),
    service: ApartmentService = Depends(get_apartment_service),
):
    """Publish an apartment. The caller becomes its agent"""
    VisibilityPolicy.ensure_can_create(principal)
    return service.create_listing(data, owner_id=principal.id)


@router.put("/{apartment_id}", response_model=ApartmentResponse)
def update_apartment(
    apartment_id: int,
    data: ApartmentUpdate,
    principal: Principal = Depends(require_user),
    service: ApartmentService = Depends(get_apartment_service),
):
    apartment = service.get_listing(apartment_id)
    VisibilityPolicy.ensure_can_modify(apartment, principal)
    return service.update_listing(apartment_id, data)


@router.delete("/{apartment_id}")
def delete_apartment(
    apartment_id: int,
    principal: Principal = Depends(require_user),
    service: ApartmentService = Depends(get_apartment_service),
):
    apartment = service.get_listing(apartment_id)
    VisibilityPolicy.ensure_can_modify(apartment, principal)
    service.delete_listing(apartment_id)
    return {"message": "Apartment deleted successfully", "id": apartment_id}


@router.put("/{apartment_id}/toggle-availability", response_model=ApartmentActionResponse)
def toggle_availability(
    apartment_id: int,
    principal: Principal = Depends(require_user),
    service: ApartmentService = Depends(get_apartment_service),
):
    apartment = service.get_listing(apartment_id)
    VisibilityPolicy.ensure_can_modify(apartment, principal)

    apartment = service.toggle_availability(apartment_id)
    state = "available" if apartment.is_available else "unavailable"
    return ApartmentActionResponse(
        message=f"Apartment marked as {state}",
        item=ApartmentResponse.model_validate(apartment),
    )


@router.post("/{apartment_id}/favorite", response_model=ApartmentActionResponse)
def add_to_favorites(
    apartment_id: int,
    principal: Principal = Depends(require_user),
    service: ApartmentService = Depends(get_apartment_service),
):
    apartment = service.add_favorite(apartment_id, principal.id)
    return ApartmentActionResponse(
        message="Apartment added to favorites",
        item=ApartmentResponse.model_validate(apartment),
    )


@router.delete("/{apartment_id}/favorite", response_model=ApartmentActionResponse)
def remove_from_favorites(
    apartment_id: int,
    principal: Principal = Depends(require_user),
    service: ApartmentService = Depends(get_apartment_service),
):
    apartment = service.remove_favorite(apartment_id, principal.id)
    return ApartmentActionResponse(
        message="Apartment removed from favorites",
        item=ApartmentResponse.model_validate(apartment),
    )

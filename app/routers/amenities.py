from fastapi import APIRouter, Depends

from app.dependencies import get_amenity_service, require_admin
from app.schemas.reference import AmenityCreate, AmenityUpdate, AmenityResponse, AmenityListResponse
from app.services.reference_service import ReferenceService
from app.services.visibility import Principal

router = APIRouter(prefix="/amenities", tags=["amenities"])


@router.get("", response_model=AmenityListResponse)
def get_amenities(service: ReferenceService = Depends(get_amenity_service)):
    amenities = service.list_all()
    return AmenityListResponse(items=[AmenityResponse.model_validate(a) for a in amenities], count=len(amenities))


@router.get("/{amenity_id}", response_model=AmenityResponse)
def get_amenity(amenity_id: int, service: ReferenceService = Depends(get_amenity_service)):
    return service.get(amenity_id)


@router.post("", response_model=AmenityResponse, status_code=201)
def create_amenity(
    data: AmenityCreate,
    principal: Principal = Depends(require_admin),
    service: ReferenceService = Depends(get_amenity_service),
):
    return service.create(data.model_dump())


@router.put("/{amenity_id}", response_model=AmenityResponse)
def update_amenity(
    amenity_id: int,
    data: AmenityUpdate,
    principal: Principal = Depends(require_admin),
    service: ReferenceService = Depends(get_amenity_service),
):
    return service.update(amenity_id, data.model_dump(exclude_unset=True))


@router.delete("/{amenity_id}")
def delete_amenity(
    amenity_id: int,
    principal: Principal = Depends(require_admin),
    service: ReferenceService = Depends(get_amenity_service),
):
    service.delete(amenity_id)
    return {"message": "Amenity deleted successfully", "id": amenity_id}

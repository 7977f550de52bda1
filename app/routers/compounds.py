from fastapi import APIRouter, Depends

from app.dependencies import get_apartment_service, get_compound_service, require_admin
from app.routers.apartments import to_list_response
from app.schemas.apartment import ApartmentListResponse
from app.schemas.reference import CompoundCreate, CompoundUpdate, CompoundResponse, CompoundListResponse
from app.services.apartment_service import ApartmentService
from app.services.reference_service import ReferenceService
from app.services.visibility import Principal

router = APIRouter(prefix="/compounds", tags=["compounds"])


@router.get("", response_model=CompoundListResponse)
def get_compounds(service: ReferenceService = Depends(get_compound_service)):
    compounds = service.list_all()
    return CompoundListResponse(items=[CompoundResponse.model_validate(c) for c in compounds], count=len(compounds))


@router.get("/{compound_id}", response_model=CompoundResponse)
def get_compound(compound_id: int, service: ReferenceService = Depends(get_compound_service)):
    return service.get(compound_id)


@router.get("/{compound_id}/apartments", response_model=ApartmentListResponse)
def get_compound_apartments(
    compound_id: int,
    service: ApartmentService = Depends(get_apartment_service),
    compounds: ReferenceService = Depends(get_compound_service),
):
    """Available apartments inside the compound"""
    compounds.get(compound_id)
    return to_list_response(service.listings_by_compound(compound_id))


@router.post("", response_model=CompoundResponse, status_code=201)
def create_compound(
    data: CompoundCreate,
    principal: Principal = Depends(require_admin),
    service: ReferenceService = Depends(get_compound_service),
):
    return service.create(data.model_dump())


@router.put("/{compound_id}", response_model=CompoundResponse)
def update_compound(
    compound_id: int,
    data: CompoundUpdate,
    principal: Principal = Depends(require_admin),
    service: ReferenceService = Depends(get_compound_service),
):
    return service.update(compound_id, data.model_dump(exclude_unset=True))


@router.delete("/{compound_id}")
def delete_compound(
    compound_id: int,
    principal: Principal = Depends(require_admin),
    service: ReferenceService = Depends(get_compound_service),
):
    service.delete(compound_id)
    return {"message": "Compound deleted successfully", "id": compound_id}

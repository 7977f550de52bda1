from fastapi import APIRouter, Depends

from app.dependencies import get_apartment_service, get_developer_service, require_admin
from app.routers.apartments import to_list_response
from app.schemas.apartment import ApartmentListResponse
from app.schemas.reference import DeveloperCreate, DeveloperUpdate, DeveloperResponse, DeveloperListResponse
from app.services.apartment_service import ApartmentService
from app.services.reference_service import ReferenceService
from app.services.visibility import Principal

router = APIRouter(prefix="/developers", tags=["developers"])


@router.get("", response_model=DeveloperListResponse)
def get_developers(service: ReferenceService = Depends(get_developer_service)):
    developers = service.list_all()
    return DeveloperListResponse(items=[DeveloperResponse.model_validate(d) for d in developers], count=len(developers))


@router.get("/{developer_id}", response_model=DeveloperResponse)
def get_developer(developer_id: int, service: ReferenceService = Depends(get_developer_service)):
    return service.get(developer_id)


@router.get("/{developer_id}/apartments", response_model=ApartmentListResponse)
def get_developer_apartments(
    developer_id: int,
    service: ApartmentService = Depends(get_apartment_service),
    developers: ReferenceService = Depends(get_developer_service),
):
    """Available apartments built by the developer"""
    developers.get(developer_id)
    return to_list_response(service.listings_by_developer(developer_id))


@router.post("", response_model=DeveloperResponse, status_code=201)
def create_developer(
    data: DeveloperCreate,
    principal: Principal = Depends(require_admin),
    service: ReferenceService = Depends(get_developer_service),
):
    return service.create(data.model_dump())


@router.put("/{developer_id}", response_model=DeveloperResponse)
def update_developer(
    developer_id: int,
    data: DeveloperUpdate,
    principal: Principal = Depends(require_admin),
    service: ReferenceService = Depends(get_developer_service),
):
    return service.update(developer_id, data.model_dump(exclude_unset=True))


@router.delete("/{developer_id}")
def delete_developer(
    developer_id: int,
    principal: Principal = Depends(require_admin),
    service: ReferenceService = Depends(get_developer_service),
):
    service.delete(developer_id)
    return {"message": "Developer deleted successfully", "id": developer_id}

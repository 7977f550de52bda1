"""
Shared API dependencies: principal resolution, filters and service wiring.
Services are assembled per request from the request's session.
"""
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request
from sqlalchemy.orm import Session

from app.config import get_settings
from app.database import get_db
from app.models import User
from app.repositories import ApartmentRepository, DeveloperRepository, CompoundRepository, AmenityRepository
from app.schemas.filters import ApartmentFilters
from app.services.apartment_service import ApartmentService
from app.services.reference_service import ReferenceService
from app.services.visibility import ANONYMOUS, Principal, VisibilityPolicy

settings = get_settings()


def get_principal(
    user_id: Optional[str] = Header(None, alias=settings.principal_header),
    db: Session = Depends(get_db),
) -> Principal:
    """
    Resolve the caller from the header set by the auth gateway.
    No header means an anonymous caller.
    """
    if user_id is None:
        return ANONYMOUS
    try:
        parsed_id = int(user_id)
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid user id")

    user = db.query(User).filter(User.id == parsed_id).first()
    if not user or not user.is_active:
        raise HTTPException(status_code=401, detail="Unknown or inactive user")
    return Principal.from_user(user)


def require_user(principal: Principal = Depends(get_principal)) -> Principal:
    if not principal.is_authenticated:
        raise HTTPException(status_code=401, detail="Authentication required")
    return principal


def require_admin(principal: Principal = Depends(require_user)) -> Principal:
    VisibilityPolicy.ensure_admin(principal)
    return principal


def get_apartment_filters(request: Request) -> ApartmentFilters:
    """Search filters from the query string, camelCase or snake_case keys"""
    return ApartmentFilters.from_query(dict(request.query_params))


def get_apartment_service(db: Session = Depends(get_db)) -> ApartmentService:
    developers = DeveloperRepository(db)
    compounds = CompoundRepository(db)
    return ApartmentService(
        apartments=ApartmentRepository(db),
        developers=developers,
        compounds=compounds,
        amenities=AmenityRepository(db),
        policy=VisibilityPolicy(developers=developers, compounds=compounds),
    )


def get_developer_service(db: Session = Depends(get_db)) -> ReferenceService:
    return ReferenceService(DeveloperRepository(db), "Developer")


def get_compound_service(db: Session = Depends(get_db)) -> ReferenceService:
    return ReferenceService(CompoundRepository(db), "Compound")


def get_amenity_service(db: Session = Depends(get_db)) -> ReferenceService:
    return ReferenceService(AmenityRepository(db), "Amenity")

from app.schemas.filters import ApartmentFilters
from app.schemas.apartment import (
    ApartmentCreate, ApartmentUpdate, ApartmentResponse, ApartmentListResponse, ApartmentActionResponse
)
from app.schemas.reference import (
    DeveloperCreate, DeveloperUpdate, DeveloperResponse, DeveloperListResponse,
    CompoundCreate, CompoundUpdate, CompoundResponse, CompoundListResponse,
    AmenityCreate, AmenityUpdate, AmenityResponse, AmenityListResponse,
)

__all__ = [
    "ApartmentFilters",
    "ApartmentCreate", "ApartmentUpdate", "ApartmentResponse", "ApartmentListResponse", "ApartmentActionResponse",
    "DeveloperCreate", "DeveloperUpdate", "DeveloperResponse", "DeveloperListResponse",
    "CompoundCreate", "CompoundUpdate", "CompoundResponse", "CompoundListResponse",
    "AmenityCreate", "AmenityUpdate", "AmenityResponse", "AmenityListResponse",
]

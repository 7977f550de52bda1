from app.repositories.apartment_repository import ApartmentRepository
from app.repositories.reference_repository import (
    ReferenceRepository, DeveloperRepository, CompoundRepository, AmenityRepository
)

__all__ = [
    "ApartmentRepository",
    "ReferenceRepository", "DeveloperRepository", "CompoundRepository", "AmenityRepository",
]

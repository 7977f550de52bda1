from app.models.user import User, UserRole
from app.models.developer import Developer
from app.models.compound import Compound
from app.models.amenity import Amenity
from app.models.apartment import Apartment, apartment_amenities, apartment_favorites

__all__ = [
    "User", "UserRole", "Developer", "Compound", "Amenity",
    "Apartment", "apartment_amenities", "apartment_favorites",
]

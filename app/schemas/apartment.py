import re
from typing import Optional, List, Literal
from datetime import datetime
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

ListingType = Literal["rent", "sale"]


IMAGE_PATTERN = re.compile(r"^(https?://.+|/.*|data:image/.*)$", re.DOTALL)


def _validate_images(images: Optional[List[str]]) -> Optional[List[str]]:
    if images is None:
        return images
    cleaned = [image.strip() for image in images]
    for image in cleaned:
        if not IMAGE_PATTERN.match(image):
            raise ValueError("Image URL must be a valid URL, path, or base64 data URL")
    return cleaned


class ApartmentBase(BaseModel):
    """Base apartment schema"""
    unit_name: str = Field(..., min_length=1, max_length=100)
    unit_number: str = Field(..., min_length=1, max_length=20)
    project: str = Field(..., min_length=1, max_length=200)
    address: str = Field(..., min_length=1, max_length=500)
    city: str = Field(..., min_length=1, max_length=100)
    state: Optional[str] = Field(None, max_length=100)
    price: float = Field(..., ge=0, le=999_999_999)
    listing_type: ListingType = "rent"
    bedrooms: int = Field(..., ge=0, le=20)
    bathrooms: int = Field(..., ge=0, le=20)
    square_feet: float = Field(..., ge=0, le=100_000)
    description: str = Field(..., min_length=1, max_length=2000)


class ApartmentCreate(ApartmentBase):
    """Payload for publishing an apartment; the owner comes from the principal"""
    model_config = ConfigDict(str_strip_whitespace=True)

    developer_id: int
    compound_id: int
    amenity_ids: List[int] = []
    images: List[str] = []
    is_available: bool = True

    @field_validator("images")
    @classmethod
    def validate_images(cls, v):
        return _validate_images(v)


class ApartmentUpdate(BaseModel):
    """Partial update; only fields that were sent are applied"""
    model_config = ConfigDict(str_strip_whitespace=True)

    unit_name: Optional[str] = Field(None, min_length=1, max_length=100)
    unit_number: Optional[str] = Field(None, min_length=1, max_length=20)
    project: Optional[str] = Field(None, min_length=1, max_length=200)
    address: Optional[str] = Field(None, min_length=1, max_length=500)
    city: Optional[str] = Field(None, min_length=1, max_length=100)
    state: Optional[str] = Field(None, max_length=100)
    price: Optional[float] = Field(None, ge=0, le=999_999_999)
    listing_type: Optional[ListingType] = None
    bedrooms: Optional[int] = Field(None, ge=0, le=20)
    bathrooms: Optional[int] = Field(None, ge=0, le=20)
    square_feet: Optional[float] = Field(None, ge=0, le=100_000)
    description: Optional[str] = Field(None, min_length=1, max_length=2000)
    developer_id: Optional[int] = None
    compound_id: Optional[int] = None
    amenity_ids: Optional[List[int]] = None
    images: Optional[List[str]] = None
    is_available: Optional[bool] = None

    @field_validator("images")
    @classmethod
    def validate_images(cls, v):
        return _validate_images(v)


class NamedSummary(BaseModel):
    """Developer, compound or amenity embedded into an apartment"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class AgentSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email: str


class ApartmentResponse(ApartmentBase):
    """Apartment with references expanded and derived fields"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    images: List[str] = []
    is_available: bool
    developer: NamedSummary
    compound: NamedSummary
    amenities: List[NamedSummary] = []
    agent: AgentSummary
    favorites: List[int] = Field(default_factory=list, validation_alias=AliasChoices("favorite_ids", "favorites"))

    full_address: str
    price_formatted: str
    title: str

    created_at: datetime
    updated_at: datetime


class ApartmentListResponse(BaseModel):
    """Ordered list of apartments, newest first"""
    items: List[ApartmentResponse]
    count: int


class ApartmentActionResponse(BaseModel):
    message: str
    item: ApartmentResponse

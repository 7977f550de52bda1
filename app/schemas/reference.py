from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class ReferenceBase(BaseModel):
    """Shared fields of developers, compounds and amenities"""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None


class DeveloperCreate(ReferenceBase):
    website: Optional[str] = Field(None, max_length=500)


class DeveloperUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    website: Optional[str] = Field(None, max_length=500)


class DeveloperResponse(DeveloperCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime


class CompoundCreate(ReferenceBase):
    location: Optional[str] = Field(None, max_length=500)


class CompoundUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    location: Optional[str] = Field(None, max_length=500)
    description: Optional[str] = None


class CompoundResponse(CompoundCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime


class AmenityCreate(ReferenceBase):
    name: str = Field(..., min_length=1, max_length=100)


class AmenityUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None


class AmenityResponse(AmenityCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime


class DeveloperListResponse(BaseModel):
    items: List[DeveloperResponse]
    count: int


class CompoundListResponse(BaseModel):
    items: List[CompoundResponse]
    count: int


class AmenityListResponse(BaseModel):
    items: List[AmenityResponse]
    count: int

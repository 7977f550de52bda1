"""
Apartment search filters.

Raw values usually arrive as query-string text. They are normalized here once
(numbers parsed, text trimmed, ``isAvailable`` mapped to a bool) so that nothing
downstream has to guess whether an absent field means zero or false.
"""
import math
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from app.errors import FilterValidationError

INVALID_FILTER_VALUE = "invalid_filter_value"
EMPTY_FILTER_VALUE = "empty_filter_value"

LISTING_TYPES = ("rent", "sale")


def _field_label(info: ValidationInfo) -> str:
    return to_camel(info.field_name)


def _parse_number(value: Any, label: str) -> float:
    if isinstance(value, bool):
        raise PydanticCustomError(INVALID_FILTER_VALUE, "{field} must be a valid number", {"field": label})
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise PydanticCustomError(INVALID_FILTER_VALUE, "{field} must be a valid number", {"field": label})
    else:
        raise PydanticCustomError(INVALID_FILTER_VALUE, "{field} must be a valid number", {"field": label})

    if not math.isfinite(number):
        raise PydanticCustomError(INVALID_FILTER_VALUE, "{field} must be a valid number", {"field": label})
    if number < 0:
        raise PydanticCustomError(INVALID_FILTER_VALUE, "{field} must be at least 0", {"field": label})
    return number


class ApartmentFilters(BaseModel):
    """Validated apartment search criteria. Every field is optional."""
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    search: Optional[str] = None
    listing_type: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    city: Optional[str] = None
    state: Optional[str] = None
    compound_name: Optional[str] = None
    developer_name: Optional[str] = None
    is_available: Optional[bool] = None
    min_square_feet: Optional[float] = None
    max_square_feet: Optional[float] = None

    @field_validator("search", "listing_type", "city", "state", "compound_name", "developer_name", mode="before")
    @classmethod
    def validate_text(cls, value: Any, info: ValidationInfo):
        if value is None:
            return None
        label = _field_label(info)
        if not isinstance(value, str):
            raise PydanticCustomError(INVALID_FILTER_VALUE, "{field} must be a valid string", {"field": label})
        value = value.strip()
        if not value:
            raise PydanticCustomError(EMPTY_FILTER_VALUE, "{field} cannot be empty", {"field": label})
        if info.field_name == "listing_type":
            value = value.lower()
            if value not in LISTING_TYPES:
                raise PydanticCustomError(
                    INVALID_FILTER_VALUE, '{field} must be either "rent" or "sale"', {"field": label}
                )
        return value

    @field_validator("min_price", "max_price", "min_square_feet", "max_square_feet", mode="before")
    @classmethod
    def validate_amount(cls, value: Any, info: ValidationInfo):
        if value is None:
            return None
        return _parse_number(value, _field_label(info))

    @field_validator("bedrooms", "bathrooms", mode="before")
    @classmethod
    def validate_room_count(cls, value: Any, info: ValidationInfo):
        if value is None:
            return None
        label = _field_label(info)
        number = _parse_number(value, label)
        if not number.is_integer():
            raise PydanticCustomError(INVALID_FILTER_VALUE, "{field} must be a whole number", {"field": label})
        if number > 10:
            raise PydanticCustomError(INVALID_FILTER_VALUE, "{field} cannot exceed 10", {"field": label})
        return int(number)

    @field_validator("is_available", mode="before")
    @classmethod
    def validate_is_available(cls, value: Any):
        if value is None:
            return None
        if isinstance(value, bool):
            return value
        return value == "true"

    @classmethod
    def from_query(cls, params: Mapping[str, Any]) -> "ApartmentFilters":
        """Build filters from raw query params, reporting every bad field at once"""
        try:
            return cls.model_validate(dict(params))
        except ValidationError as exc:
            errors = []
            for error in exc.errors():
                kind = error["type"]
                if kind not in (INVALID_FILTER_VALUE, EMPTY_FILTER_VALUE):
                    kind = INVALID_FILTER_VALUE
                errors.append({
                    "field": str(error["loc"][0]) if error["loc"] else "",
                    "kind": kind,
                    "message": error["msg"],
                })
            raise FilterValidationError(errors) from exc

    @property
    def has_name_filters(self) -> bool:
        return self.compound_name is not None or self.developer_name is not None

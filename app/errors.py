"""Error hierarchy raised by services and repositories."""

from typing import Any, Dict, List, Optional


class ListingsError(Exception):
    """Base exception for the listings backend."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"detail": self.message}


class FilterValidationError(ListingsError):
    """One or more search filters are malformed.

    ``errors`` holds every violated field, not just the first one:
    ``[{"field": "minPrice", "kind": "invalid_filter_value", "message": ...}]``
    """

    def __init__(self, errors: List[Dict[str, str]]):
        fields = ", ".join(error["field"] for error in errors)
        super().__init__(f"Invalid filter values: {fields}")
        self.errors = errors

    def to_dict(self) -> Dict[str, Any]:
        return {"detail": self.message, "errors": self.errors}


class NotFoundError(ListingsError):
    """Entity id does not resolve."""

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class DuplicateNameError(ListingsError):
    """Name uniqueness violation on a developer, compound or amenity."""

    def __init__(self, entity: str, name: str):
        super().__init__(f"{entity} with this name already exists")
        self.entity = entity
        self.name = name


class ReferenceNotFoundError(ListingsError):
    """A referenced developer, compound or amenity does not exist."""

    def __init__(self, reference: str, reference_id: Any):
        super().__init__(f"{reference.capitalize()} not found: {reference_id}")
        self.reference = reference
        self.reference_id = reference_id

    def to_dict(self) -> Dict[str, Any]:
        return {"detail": self.message, "reference": self.reference}


class ReferenceInUseError(ListingsError):
    """Developer or compound still has apartments pointing at it."""

    def __init__(self, entity: str, entity_id: Any, apartment_count: int):
        super().__init__(f"{entity} is still used by {apartment_count} apartment(s)")
        self.entity = entity
        self.entity_id = entity_id
        self.apartment_count = apartment_count


class PermissionDeniedError(ListingsError):
    """Principal lacks the role or ownership the operation needs."""
    pass


class StoreFailureError(ListingsError):
    """Database operation error."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause

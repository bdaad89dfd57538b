"""Domain exceptions."""

from collections.abc import Iterable


class StaffPermError(Exception):
    """Base exception for staffperm."""

    pass


class InvalidPermission(StaffPermError):
    """One or more permission identifiers are not in the catalog."""

    def __init__(self, identifiers: Iterable[str]) -> None:
        self.identifiers = sorted({str(i) for i in identifiers})
        super().__init__(f"Unknown permission(s): {', '.join(self.identifiers)}")


class Unauthorized(StaffPermError):
    """Caller does not hold the permission required for the operation."""

    pass


class NotFound(StaffPermError):
    """Requested resource was not found."""

    def __init__(self, entity: str, key: str) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found: {key}")


class ValidationError(StaffPermError):
    """Validation failed for input data."""

    pass

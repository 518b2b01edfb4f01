"""Domain-specific exceptions — framework-independent."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """A single field-level validation violation."""

    message: str
    field: str


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ValidationFailedError(Exception):
    """Raised when a payload violates one or more field rules.

    Carries every violation found, in rule order, so the caller can fix all
    of them in one round trip.
    """

    def __init__(self, errors: list[FieldError]):
        self.errors = list(errors)
        fields = ", ".join(e.field for e in self.errors)
        super().__init__(f"Validation failed for: {fields}")

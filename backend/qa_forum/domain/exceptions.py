"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class PermissionDeniedError(Exception):
    """Raised when the acting user does not own the resource being mutated.

    The message names only the action and the entity type.
    """

    def __init__(self, entity_type: str, action: str):
        self.entity_type = entity_type
        self.action = action
        super().__init__(f"You are not authorized to {action} this {entity_type.lower()}")


class ContentValidationError(Exception):
    """Raised when submitted content breaks a minimum-content rule."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)

"""Domain exceptions raised by the application services."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} not found: {entity_id}")


class DomainValidationError(Exception):
    """Raised when a request is well-formed but violates a business rule.

    Examples: an unknown sort field, removing a favourite room that is not
    in the animal's favourites.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

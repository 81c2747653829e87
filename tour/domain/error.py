"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Raised when an operation is not allowed in the entity's current state.

    Examples: resending an accepted invitation, inviting to an archived tour.
    """

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user acts on a resource they don't control."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DeliveryError(DomainError):
    """Raised when an outbound message (invitation email) could not be sent."""

    pass

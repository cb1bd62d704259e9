"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error, always detected before any store access."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"Invalid {field}: {message}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found.

    Also raised for resources the requester may not read, so that their
    existence is not revealed.
    """

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts an action they are not allowed to perform."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class InvalidStateError(DomainError):
    """Raised when mutating content whose state forbids it (e.g. tombstoned)."""

    def __init__(self, resource: str, resource_id: str, reason: str):
        self.resource = resource
        self.resource_id = resource_id
        self.reason = reason
        super().__init__(f"Cannot modify {resource} {resource_id}: {reason}")

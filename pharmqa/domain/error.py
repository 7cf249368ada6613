"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidVoteError(ValidationError):
    """Raised when a vote value is outside {-1, 0, 1}."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid vote value: {value!r} (expected -1, 0 or 1)")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a concurrent write to the same vote could not be resolved.

    The request is safe to retry.
    """

    pass


class StorageUnavailableError(DomainError):
    """Raised when the database cannot be reached or fails mid-operation."""

    pass

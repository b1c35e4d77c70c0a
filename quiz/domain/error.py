"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class AlreadyExistsError(DomainError):
    """Raised when creating something that already exists."""

    def __init__(self, message: str):
        super().__init__(message)


class InvalidCredentialsError(DomainError):
    """Raised when an email/password pair does not authenticate.

    Unknown emails and wrong passwords raise the same error.
    """

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")

"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class AccountNotResolvedError(DomainError):
    """Raised when an operation needs a local account but none is signed in."""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"No local account resolved for {provider} connection")


class NotAuthorizedError(DomainError):
    """Raised when an account acts on a resource it does not own."""

    def __init__(self, resource: str, resource_id: str, account_id: str):
        super().__init__(
            f"Account {account_id} is not authorized to use {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")

"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError, ValueError):
    """Domain validation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a moderator-only action runs without a moderator session."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Moderator session required to {action}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConfirmationRequiredError(DomainError):
    """Raised when a cascading delete is attempted without confirmation."""

    def __init__(self, comment_id: str, reply_count: int, message: str):
        self.comment_id = comment_id
        self.reply_count = reply_count
        super().__init__(message)


class AlreadySubscribedError(DomainError):
    """Raised when an email is already on the newsletter list."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("Email already subscribed")


class StoreUnavailableError(DomainError):
    """Raised when the record store cannot be read or written.

    The operation may be retried; the record set should be re-fetched
    before assuming anything about its state.
    """

    def __init__(self, operation: str, cause: str):
        self.operation = operation
        super().__init__(f"Record store unavailable during {operation}: {cause}")

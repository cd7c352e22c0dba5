"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a referenced question, answer or tag does not exist."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidInputError(DomainError):
    """Raised when a required field is missing or malformed."""

    pass


class InvalidOrderError(InvalidInputError):
    """Raised when a listing is requested with an unknown order key."""

    def __init__(self, order: str):
        self.order = order
        super().__init__(f"Invalid order: {order}")


class InvalidReferenceError(DomainError):
    """Raised when a voter or commenter identity does not resolve to a user."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"Unknown {resource}: {identifier}")


class DataIntegrityError(DomainError):
    """Raised when stored records reference something that no longer exists.

    This is an internal consistency fault, never a user error.
    """

    pass

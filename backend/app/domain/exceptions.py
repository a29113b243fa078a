"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class AuthenticationRequiredError(Exception):
    """Raised when no bearer token is available for an authenticated call."""

    def __init__(self, message: str = "Authentication token not found."):
        self.message = message
        super().__init__(message)


class UpstreamApiError(Exception):
    """Raised when the Honda Aid API answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class UnexpectedResponseFormatError(Exception):
    """Raised when a collection endpoint returns neither ``{data: [...]}`` nor a list."""

    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(f"Received unexpected data format for {resource}.")


class InvalidInputError(Exception):
    """Raised when a form fails the dashboard's input checks."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

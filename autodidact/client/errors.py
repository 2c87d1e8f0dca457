"""Client-side error taxonomy."""


class ClientError(Exception):
    """Base class for everything the API client raises."""


class TransportFailure(ClientError):
    """Network error or non-2xx response for ``operation``."""

    def __init__(self, operation: str, message: str, status_code: int | None = None):
        self.operation = operation
        self.message = message
        self.status_code = status_code
        super().__init__(f"{operation} failed: {message}")


class NotFound(TransportFailure):
    """The requested record does not exist."""

    def __init__(self, operation: str, message: str = "Not found"):
        super().__init__(operation, message, status_code=404)


class ValidationFailure(ClientError):
    """Required input missing; raised before any request is sent."""

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__("Please fill in all required fields: " + ", ".join(self.missing))

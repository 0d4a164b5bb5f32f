"""Domain-layer exceptions.

These keep the domain layer free of HTTP awareness. Global exception
handlers in main.py map them to the appropriate HTTP status codes.
"""


class DomainValidationError(Exception):
    """Business-rule validation failure. Maps to HTTP 400."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class MalformedInputError(DomainValidationError):
    """Atom collection does not match the expected shape. Fails the whole call."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        super().__init__(f"{operation}: malformed input: {detail}")

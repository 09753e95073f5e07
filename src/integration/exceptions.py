class IntegrationException(Exception):
    """Base exception for integration layer errors."""
    pass


class RemoteCallException(IntegrationException):
    """Raised when a call to a remote provider (AWS, metadata endpoint) fails.

    The string form is the provider's own message so that callers can append it
    to their own context.
    """

    def __init__(self, message: str, operation: str | None = None, error_code: str | None = None):
        super().__init__(message)
        self.operation = operation
        self.error_code = error_code

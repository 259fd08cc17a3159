"""Order Service error taxonomy.

ValidationError is raised for malformed input (never retried), RepositoryError
for any failure reading or writing persisted order state (propagated so the
event bus can redeliver).
"""


class OrderServiceError(Exception):
    """Base exception for Order Service errors."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class ValidationError(OrderServiceError):
    """Input (command or integration event) is malformed."""

    pass


class RepositoryError(OrderServiceError):
    """Persisted order state could not be read or written."""

    pass

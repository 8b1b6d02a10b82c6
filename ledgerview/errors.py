"""Exception hierarchy for ledgerview."""


class LedgerViewError(Exception):
    """Base class for all ledgerview errors."""


class TransportError(LedgerViewError):
    """Network or HTTP failure talking to the budget API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(TransportError):
    """The API has no record for the requested identifier."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=404)


class ValidationError(LedgerViewError):
    """Input failed required, range or pattern checks.

    Attributes:
        fields: Mapping of field name to error message.
    """

    def __init__(self, fields: dict[str, str]) -> None:
        super().__init__("; ".join(f"{name}: {message}" for name, message in fields.items()))
        self.fields = fields


class StorageError(LedgerViewError):
    """Local key-value store failure."""

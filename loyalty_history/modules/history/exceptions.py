"""History domain specific exceptions."""


class HistoryError(Exception):
    """Base class for history domain errors."""


class ValidationError(HistoryError):
    """Raised when a write request is missing a required field."""

    def __init__(self, message: str = "Campos obrigatórios ausentes.") -> None:
        super().__init__(message)
        self.message = message


class StoreAccessError(HistoryError):
    """Raised when the record store fails to read or write."""

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details if details is not None else message

"""Application exceptions raised by the note lifecycle and mapped to HTTP statuses."""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """A required field is missing or empty, or the request body is malformed."""

    def __init__(self, message: str = "Validation failed") -> None:
        super().__init__(message, code="VAL_VALIDATION_ERROR")


class AuthError(ApplicationError):
    """The presented password does not match the note's digest."""

    def __init__(self, message: str = "Wrong password") -> None:
        super().__init__(message, code="AUTH_PASSWORD_MISMATCH")


class NotFoundError(ApplicationError):
    """No record for the id, or the record could not be fetched or decoded."""

    def __init__(self, message: str = "note does not exist or has been deleted") -> None:
        super().__init__(message, code="RES_NOT_FOUND")


class InternalError(ApplicationError):
    """Writing a new record to the store failed."""

    def __init__(self, message: str = "Internal error") -> None:
        super().__init__(message, code="SYS_INTERNAL_ERROR")

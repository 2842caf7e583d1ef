class AppError(Exception):
    """Base application exception."""

    status = 500

    def __init__(self, message: str, code: str = "APP_ERROR", field: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.field = field


class DuplicateKey(AppError):
    """A position or engine with the same normalized key already exists."""

    status = 409

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, code="DUPLICATE_KEY", field=field)


class NotFound(AppError):
    status = 404

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, code="NOT_FOUND", field=field)


class ValidationError(AppError):
    status = 400

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, code="VALIDATION_ERROR", field=field)


class StorageError(AppError):
    """Database or filesystem failure."""

    status = 500

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, code="STORAGE_ERROR", field=field)

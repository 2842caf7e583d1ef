from .exceptions import AppError, DuplicateKey, NotFound, ValidationError, StorageError
from .handlers import register_error_handlers

"""Commit helper shared by the services."""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..errors import DuplicateKey, StorageError
from ..extensions import db


def commit(duplicate_message: str = "record already exists", field: str | None = None) -> None:
    """Commit the session, translating driver errors.

    Unique constraint violations become DuplicateKey, any other database
    failure becomes StorageError. The session is rolled back in both cases.
    """
    try:
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        raise DuplicateKey(duplicate_message, field=field) from e
    except SQLAlchemyError as e:
        db.session.rollback()
        raise StorageError(f"database error: {e.__class__.__name__}") from e

from contextlib import contextmanager

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from ..errors import ServiceError, StorageError
from ..extensions import db


@contextmanager
def atomic():
    """Run a block as one transaction on the request session.

    Commits when the block finishes, rolls back on any exception. Service
    errors (NOT_FOUND, CONFLICT, ...) propagate unchanged; driver errors are
    logged and re-raised as StorageError so no internals leak to the caller.
    """
    session = db.session
    # objects outlive commits (expire_on_commit=False); reload them in this transaction
    session.expire_all()
    try:
        yield session
        session.commit()
    except ServiceError as e:
        session.rollback()
        current_app.logger.warning(f"Transaction aborted: {e.code} {e.message}")
        raise
    except SQLAlchemyError as e:
        session.rollback()
        current_app.logger.error(f"Transaction failed: {e}", exc_info=True)
        raise StorageError() from e
    except BaseException:
        session.rollback()
        raise

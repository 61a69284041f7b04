from contextlib import contextmanager
import logging
from sqlalchemy.exc import SQLAlchemyError
from models import db

@contextmanager
def transactional(message="DB transaction failed", error_cls=None):
    """Commit on exit, roll back and re-raise on failure.

    With ``error_cls`` a SQLAlchemy failure is re-raised as that type.
    """
    try:
        yield
        db.session.commit()
    except SQLAlchemyError as e:
        logging.error(f"{message}: %s", e, exc_info=True)
        db.session.rollback()
        if error_cls is not None:
            raise error_cls(message) from e
        raise
    except Exception:
        db.session.rollback()
        raise

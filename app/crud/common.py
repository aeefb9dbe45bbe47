import logging
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.exceptions import translate_integrity_error


def commit(db: Session):
    """Commit the pending write, or roll it back and raise a store error."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logging.error(f"Integrity error: {str(e.orig)}")
        raise translate_integrity_error(e) from e
    except SQLAlchemyError as e:
        db.rollback()
        logging.error(f"Database error: {str(e)}")
        raise

from typing import Optional

from sqlalchemy.exc import IntegrityError


class StoreError(Exception):
    """Base class for everything the entity store refuses to do.

    Subclasses map to one failure kind each so the API layer can turn
    them into responses without looking at messages.
    """

    error_type = "store error"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict:
        return {
            "name": type(self).__name__,
            "message": self.message,
            "errors": [
                {
                    "message": self.message,
                    "type": self.error_type,
                    "path": self.field,
                }
            ],
        }


class ValidationError(StoreError):
    error_type = "Validation error"


class UniquenessViolation(StoreError):
    error_type = "unique violation"


class ReferentialViolation(StoreError):
    error_type = "foreign key violation"


class NotFound(StoreError):
    error_type = "not found"


class AuthenticationFailure(StoreError):
    error_type = "authentication failure"

    def __init__(self, message: str, reason: Optional[str] = None):
        super().__init__(message)
        # "email" or "password"; only ever logged
        self.reason = reason


def translate_integrity_error(exc: IntegrityError) -> StoreError:
    """Map a driver-level integrity error onto the store taxonomy."""
    detail = str(exc.orig).lower()
    if "not null" in detail or "not-null" in detail:
        return ValidationError(str(exc.orig))
    if "unique" in detail or "duplicate" in detail:
        return UniquenessViolation(str(exc.orig))
    if "foreign key" in detail:
        return ReferentialViolation(str(exc.orig))
    return StoreError(str(exc.orig))

"""
User store.

Every write goes through ``_prepare_user_values``, which validates the
attributes and swaps a plaintext password for its bcrypt hash, so no code
path can persist an unhashed password.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload, selectinload

from app.core import validators
from app.core.exceptions import AuthenticationFailure, UniquenessViolation, ValidationError
from app.core.security import hash_password
from app.crud.common import commit
from app.db.models.comment import Comment
from app.db.models.user import User

LOGIN_FAILED_MESSAGE = "Incorrect email or password"


def _prepare_user_values(db: Session, values: dict, partial: bool = False, user_id: Optional[int] = None) -> dict:
    cleaned = validators.validate_user(values, partial=partial)

    if "email" in cleaned:
        existing = db.query(User.id).filter(User.email == cleaned["email"])
        if user_id is not None:
            existing = existing.filter(User.id != user_id)
        if existing.first():
            raise UniquenessViolation("email must be unique", field="email")

    # Only a password present in this payload gets hashed; the stored hash
    # is never hashed again.
    if "password" in cleaned:
        try:
            cleaned["password"] = hash_password(cleaned["password"])
        except (ValueError, TypeError) as e:
            logging.error(f"Password hashing failed: {str(e)}")
            raise ValidationError("password could not be hashed", field="password") from e
    return cleaned


def get_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.id).all()


def get_user(db: Session, user_id: int, with_posts: bool = False) -> Optional[User]:
    if not validators.in_id_range(user_id):
        return None
    query = db.query(User).filter(User.id == user_id)
    if with_posts:
        query = query.options(
            selectinload(User.posts),
            selectinload(User.comments).joinedload(Comment.post),
            selectinload(User.voted_posts),
        )
    return query.first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def create_user(db: Session, values: dict) -> User:
    user = User(**_prepare_user_values(db, values))
    db.add(user)
    commit(db)
    db.refresh(user)
    logging.info(f"Created user {user.id}")
    return user


def update_user(db: Session, user_id: int, values: dict) -> int:
    # No matching row means nothing to write, whatever the payload says
    if not validators.in_id_range(user_id) or db.get(User, user_id) is None:
        return 0
    cleaned = _prepare_user_values(db, values, partial=True, user_id=user_id)
    if not cleaned:
        return 1
    query = db.query(User).filter(User.id == user_id)
    count = query.update(cleaned, synchronize_session=False)
    commit(db)
    return count


def delete_user(db: Session, user_id: int) -> int:
    if not validators.in_id_range(user_id):
        return 0
    count = db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
    commit(db)
    if count:
        logging.info(f"Deleted user {user_id}")
    return count


def authenticate_user(db: Session, email: str, password: str) -> User:
    user = get_user_by_email(db, email)
    if not user:
        logging.info("Login failed: unknown email")
        raise AuthenticationFailure(LOGIN_FAILED_MESSAGE, reason="email")
    if not user.check_password(password):
        logging.info(f"Login failed: wrong password for user {user.id}")
        raise AuthenticationFailure(LOGIN_FAILED_MESSAGE, reason="password")
    return user

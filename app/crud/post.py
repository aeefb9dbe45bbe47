"""
Post store.

Reads always go through ``_post_query`` so the author and the live
``vote_count`` come back with every row. ``populate_existing`` makes a post
already held by the session pick up votes committed since it was loaded.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload, selectinload

from app.core import validators
from app.core.exceptions import ReferentialViolation
from app.crud.common import commit
from app.crud.vote import create_vote
from app.db.models.comment import Comment
from app.db.models.post import Post
from app.db.models.user import User


def _post_query(db: Session, with_comments: bool = False):
    query = db.query(Post).options(joinedload(Post.user)).populate_existing()
    if with_comments:
        query = query.options(selectinload(Post.comments).joinedload(Comment.user))
    return query


def get_posts(db: Session, skip: int = 0, limit: Optional[int] = None) -> List[Post]:
    query = _post_query(db).order_by(Post.created_at.desc(), Post.id.desc()).offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def get_post(db: Session, post_id: int, with_comments: bool = False) -> Optional[Post]:
    if not validators.in_id_range(post_id):
        return None
    return _post_query(db, with_comments=with_comments).filter(Post.id == post_id).first()


def create_post(db: Session, values: dict) -> Post:
    cleaned = validators.validate_post(values)
    if db.get(User, cleaned["user_id"]) is None:
        raise ReferentialViolation("user_id does not reference an existing user", field="user_id")

    post = Post(**cleaned)
    db.add(post)
    commit(db)
    db.refresh(post)
    logging.info(f"Created post {post.id} by user {post.user_id}")
    return post


def update_post(db: Session, post_id: int, values: dict) -> int:
    cleaned = validators.validate_post(values, partial=True)
    if not validators.in_id_range(post_id):
        return 0
    query = db.query(Post).filter(Post.id == post_id)
    if not cleaned:
        return query.count()
    count = query.update(cleaned, synchronize_session=False)
    commit(db)
    return count


def delete_post(db: Session, post_id: int) -> int:
    if not validators.in_id_range(post_id):
        return 0
    count = db.query(Post).filter(Post.id == post_id).delete(synchronize_session=False)
    commit(db)
    if count:
        logging.info(f"Deleted post {post_id}")
    return count


def upvote(db: Session, user_id: int, post_id: int) -> Optional[Post]:
    """Record a vote, then read the post back with its new count and comments.

    The read only runs once the vote is committed. A failed vote raises
    before any read; a failed read leaves the vote in place.
    """
    create_vote(db, {"user_id": user_id, "post_id": post_id})
    return get_post(db, post_id, with_comments=True)

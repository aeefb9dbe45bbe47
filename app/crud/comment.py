import logging
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
from app.core import validators
from app.core.exceptions import ReferentialViolation
from app.crud.common import commit
from app.db.models.comment import Comment
from app.db.models.post import Post
from app.db.models.user import User


def get_comments(db: Session) -> List[Comment]:
    return (
        db.query(Comment)
        .options(joinedload(Comment.user))
        .order_by(Comment.created_at.desc(), Comment.id.desc())
        .all()
    )


def get_comment(db: Session, comment_id: int) -> Optional[Comment]:
    if not validators.in_id_range(comment_id):
        return None
    return db.query(Comment).options(joinedload(Comment.user)).filter(Comment.id == comment_id).first()


def create_comment(db: Session, values: dict) -> Comment:
    cleaned = validators.validate_comment(values)
    if db.get(User, cleaned["user_id"]) is None:
        raise ReferentialViolation("user_id does not reference an existing user", field="user_id")
    if db.get(Post, cleaned["post_id"]) is None:
        raise ReferentialViolation("post_id does not reference an existing post", field="post_id")

    comment = Comment(**cleaned)
    db.add(comment)
    commit(db)
    db.refresh(comment)
    logging.info(f"Created comment {comment.id} on post {comment.post_id}")
    return comment


def delete_comment(db: Session, comment_id: int) -> int:
    if not validators.in_id_range(comment_id):
        return 0
    count = db.query(Comment).filter(Comment.id == comment_id).delete(synchronize_session=False)
    commit(db)
    return count

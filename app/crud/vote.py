import logging
from sqlalchemy.orm import Session
from app.core import validators
from app.core.exceptions import ReferentialViolation, UniquenessViolation
from app.crud.common import commit
from app.db.models.post import Post
from app.db.models.user import User
from app.db.models.vote import Vote


def create_vote(db: Session, values: dict) -> Vote:
    cleaned = validators.validate_vote(values)
    if db.get(User, cleaned["user_id"]) is None:
        raise ReferentialViolation("user_id does not reference an existing user", field="user_id")
    if db.get(Post, cleaned["post_id"]) is None:
        raise ReferentialViolation("post_id does not reference an existing post", field="post_id")

    already_voted = db.query(Vote.id).filter(
        Vote.user_id == cleaned["user_id"],
        Vote.post_id == cleaned["post_id"]
    ).first()
    if already_voted:
        raise UniquenessViolation("user has already voted on this post", field="post_id")

    vote = Vote(**cleaned)
    db.add(vote)
    commit(db)
    db.refresh(vote)
    logging.info(f"User {vote.user_id} voted on post {vote.post_id}")
    return vote

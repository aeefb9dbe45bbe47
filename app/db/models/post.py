from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, select, func
from sqlalchemy.orm import relationship, column_property
from datetime import datetime
from app.db.base import Base
from app.db.models.vote import Vote


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    post_url = Column(String, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Correlated count, read with every row and never stored
    vote_count = column_property(
        select(func.count(Vote.id))
        .where(Vote.post_id == id)
        .correlate_except(Vote)
        .scalar_subquery()
    )

    user = relationship("User", back_populates="posts")
    comments = relationship(
        "Comment",
        back_populates="post",
        passive_deletes=True,
        order_by="Comment.created_at",
    )
    votes = relationship("Vote", back_populates="post", passive_deletes=True)

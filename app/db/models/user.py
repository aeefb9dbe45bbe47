from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.db.base import Base
from app.core.security import verify_password


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    # bcrypt hash, never the plaintext
    password = Column(String, nullable=False)

    posts = relationship("Post", back_populates="user", passive_deletes=True)
    comments = relationship("Comment", back_populates="user", passive_deletes=True)
    votes = relationship("Vote", back_populates="user", passive_deletes=True)
    voted_posts = relationship("Post", secondary="votes", viewonly=True)

    def check_password(self, plaintext: str) -> bool:
        return verify_password(plaintext, self.password)

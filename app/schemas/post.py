from pydantic import BaseModel
from datetime import datetime
from typing import List, Optional
from app.schemas.comment import CommentOut


class PostBase(BaseModel):
    title: Optional[str] = None
    post_url: Optional[str] = None

class PostCreate(PostBase):
    user_id: Optional[int] = None

class PostUpdate(BaseModel):
    title: Optional[str] = None

class VoteCreate(BaseModel):
    user_id: Optional[int] = None
    post_id: Optional[int] = None

class PostAuthor(BaseModel):
    username: str

    class Config:
        from_attributes = True

class PostOut(BaseModel):
    id: int
    title: str
    post_url: str
    user_id: int
    created_at: datetime
    updated_at: datetime
    vote_count: int = 0
    user: Optional[PostAuthor] = None

    class Config:
        from_attributes = True

class PostDetail(PostOut):
    comments: List[CommentOut] = []

    class Config:
        from_attributes = True

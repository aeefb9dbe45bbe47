from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class CommentCreate(BaseModel):
    comment_text: Optional[str] = None
    user_id: Optional[int] = None
    post_id: Optional[int] = None

class CommentAuthor(BaseModel):
    username: str

    class Config:
        from_attributes = True

class CommentOut(BaseModel):
    id: int
    comment_text: str
    post_id: int
    user_id: int
    created_at: datetime
    user: Optional[CommentAuthor] = None

    class Config:
        from_attributes = True

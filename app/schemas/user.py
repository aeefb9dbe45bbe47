from pydantic import BaseModel
from datetime import datetime
from typing import List, Optional


# Fields are optional here; the store decides what is required.
class UserBase(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

class UserCreate(UserBase):
    pass

class UserUpdate(UserBase):
    pass

class UserLogin(BaseModel):
    email: str
    password: str


class UserOut(BaseModel):
    id: int
    username: str
    email: str

    class Config:
        from_attributes = True

class UserPost(BaseModel):
    id: int
    title: str
    post_url: str
    created_at: datetime

    class Config:
        from_attributes = True

class PostTitle(BaseModel):
    title: str

    class Config:
        from_attributes = True

class UserComment(BaseModel):
    id: int
    comment_text: str
    created_at: datetime
    post: PostTitle

    class Config:
        from_attributes = True

class UserDetail(UserOut):
    posts: List[UserPost] = []
    comments: List[UserComment] = []
    voted_posts: List[PostTitle] = []

    class Config:
        from_attributes = True

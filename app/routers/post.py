from fastapi import APIRouter, Depends
from typing import List, Optional
from sqlalchemy.orm import Session
from app.core.exceptions import NotFound
from app.crud import post as crud
from app.db.session import get_db
from app.schemas.post import PostCreate, PostDetail, PostOut, PostUpdate, VoteCreate

router = APIRouter()

POST_NOT_FOUND = "No post found with this id"


# Newest first, each with its author's username and vote count
@router.get("", response_model=List[PostOut])
def get_posts(skip: int = 0, limit: Optional[int] = None, db: Session = Depends(get_db)):
    return crud.get_posts(db, skip=skip, limit=limit)


@router.get("/{post_id}", response_model=PostDetail)
def get_post_by_id(post_id: int, db: Session = Depends(get_db)):
    post = crud.get_post(db, post_id, with_comments=True)
    if not post:
        raise NotFound(POST_NOT_FOUND)
    return post


# expects {title, post_url, user_id}
@router.post("", response_model=PostOut)
def create_post(post_in: PostCreate, db: Session = Depends(get_db)):
    return crud.create_post(db, post_in.model_dump(exclude_unset=True))


# Must be registered before PUT /{post_id} or "upvote" is parsed as an id
@router.put("/upvote", response_model=PostDetail)
def upvote(vote_in: VoteCreate, db: Session = Depends(get_db)):
    values = vote_in.model_dump(exclude_unset=True)
    post = crud.upvote(db, values.get("user_id"), values.get("post_id"))
    if not post:
        raise NotFound(POST_NOT_FOUND)
    return post


@router.put("/{post_id}")
def update_post(post_id: int, post_in: PostUpdate, db: Session = Depends(get_db)):
    count = crud.update_post(db, post_id, post_in.model_dump(exclude_unset=True))
    if not count:
        raise NotFound(POST_NOT_FOUND)
    return [count]


@router.delete("/{post_id}")
def delete_post(post_id: int, db: Session = Depends(get_db)):
    count = crud.delete_post(db, post_id)
    if not count:
        raise NotFound(POST_NOT_FOUND)
    return count

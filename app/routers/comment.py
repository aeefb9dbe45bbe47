from fastapi import APIRouter, Depends
from typing import List
from sqlalchemy.orm import Session
from app.core.exceptions import NotFound
from app.crud import comment as crud
from app.db.session import get_db
from app.schemas.comment import CommentCreate, CommentOut

router = APIRouter()


@router.get("", response_model=List[CommentOut])
def get_comments(db: Session = Depends(get_db)):
    return crud.get_comments(db)


# expects {comment_text, user_id, post_id}
@router.post("", response_model=CommentOut)
def create_comment(comment_in: CommentCreate, db: Session = Depends(get_db)):
    return crud.create_comment(db, comment_in.model_dump(exclude_unset=True))


@router.delete("/{comment_id}")
def delete_comment(comment_id: int, db: Session = Depends(get_db)):
    count = crud.delete_comment(db, comment_id)
    if not count:
        raise NotFound("No comment found with this id")
    return count

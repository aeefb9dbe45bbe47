from fastapi import APIRouter, Depends
from typing import List
from sqlalchemy.orm import Session
from app.core.exceptions import NotFound
from app.crud import user as crud
from app.db.session import get_db
from app.schemas.user import UserCreate, UserDetail, UserLogin, UserOut, UserUpdate
from app.schemas.login import LoginResponse


router = APIRouter()

USER_NOT_FOUND = "No user found with this id"


@router.get("", response_model=List[UserOut])
def get_users(db: Session = Depends(get_db)):
    return crud.get_users(db)


# Get one user with their posts, comments and the posts they voted on
@router.get("/{user_id}", response_model=UserDetail)
def get_user(user_id: int, db: Session = Depends(get_db)):
    user = crud.get_user(db, user_id, with_posts=True)
    if not user:
        raise NotFound(USER_NOT_FOUND)
    return user


# expects {username, email, password}; the response never carries the password
@router.post("", response_model=UserOut)
def create_user(user_in: UserCreate, db: Session = Depends(get_db)):
    return crud.create_user(db, user_in.model_dump(exclude_unset=True))


@router.post("/login", response_model=LoginResponse)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    user = crud.authenticate_user(db, credentials.email, credentials.password)
    return {"user": user, "message": "You are now logged in!"}


@router.put("/{user_id}")
def update_user(user_id: int, user_in: UserUpdate, db: Session = Depends(get_db)):
    count = crud.update_user(db, user_id, user_in.model_dump(exclude_unset=True))
    if not count:
        raise NotFound(USER_NOT_FOUND)
    return [count]


@router.delete("/{user_id}")
def delete_user(user_id: int, db: Session = Depends(get_db)):
    count = crud.delete_user(db, user_id)
    if not count:
        raise NotFound(USER_NOT_FOUND)
    return count

import itertools
import os

# Must be set before the app (and its engine) is imported
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from app.crud import post as post_crud
from app.crud import user as user_crud
from app.crud import vote as vote_crud
from app.db.base import Base
from app.db.session import SessionLocal, engine, get_db
from main import app


@pytest.fixture(autouse=True)
def _fresh_schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session):
    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def user_factory(db_session):
    counter = itertools.count(1)

    def _create(username=None, email=None, password="password1234"):
        n = next(counter)
        return user_crud.create_user(db_session, {
            "username": username or f"user{n}",
            "email": email or f"user{n}@mail.com",
            "password": password,
        })
    return _create


@pytest.fixture
def post_factory(db_session, user_factory):
    counter = itertools.count(1)

    def _create(user=None, title=None, post_url=None):
        n = next(counter)
        author = user or user_factory()
        return post_crud.create_post(db_session, {
            "title": title or f"Story {n}",
            "post_url": post_url or f"https://news.example.com/story-{n}",
            "user_id": author.id,
        })
    return _create


@pytest.fixture
def vote_factory(db_session, user_factory):
    def _create(post, user=None):
        voter = user or user_factory()
        return vote_crud.create_vote(db_session, {"user_id": voter.id, "post_id": post.id})
    return _create

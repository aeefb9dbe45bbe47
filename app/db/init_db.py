"""
Table creation for the newsfeed schema.

Importing the model modules registers every table on ``Base.metadata``;
``init_db`` then creates whatever is missing. ``force=True`` drops the
tables first, which wipes all data.
"""
import logging

from app.db.base import Base
from app.db.session import engine
from app.db.models import comment, post, user, vote  # noqa: F401


def init_db(force: bool = False, bind=None):
    bind = bind or engine
    if force:
        logging.warning("Dropping all tables before sync")
        Base.metadata.drop_all(bind=bind)
    Base.metadata.create_all(bind=bind)

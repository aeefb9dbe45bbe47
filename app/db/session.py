import logging
import os
import psycopg2
from psycopg2 import sql
from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def get_database_url() -> str:
    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")
    return (
        f"postgresql://{os.getenv('DB_USER')}:{os.getenv('DB_PASS')}"
        f"@{os.getenv('DB_HOST', 'localhost')}:{os.getenv('DB_PORT', '5432')}/{os.getenv('DB_NAME')}"
    )


def ensure_database(url: str):
    """Try to create the PostgreSQL database if it doesn't exist. Other backends are left alone."""
    db_url = make_url(url)
    if db_url.get_backend_name() != "postgresql":
        return
    try:
        conn = psycopg2.connect(
            dbname="postgres",
            user=db_url.username,
            password=db_url.password,
            host=db_url.host,
            port=db_url.port,
        )
        conn.autocommit = True
        cur = conn.cursor()
        cur.execute(sql.SQL("CREATE DATABASE {}").format(sql.Identifier(db_url.database)))
        cur.close()
        conn.close()
        logging.info(f"Created database {db_url.database}")
    except psycopg2.errors.DuplicateDatabase:
        pass
    except psycopg2.Error as e:
        logging.warning(f"Could not create database {db_url.database}: {e}")


def _engine_options(url: str) -> dict:
    db_url = make_url(url)
    if db_url.get_backend_name() != "sqlite":
        return {}
    options = {"connect_args": {"check_same_thread": False}}
    # In-memory databases live as long as their single connection
    if db_url.database in (None, "", ":memory:"):
        options["poolclass"] = StaticPool
    return options


SQLALCHEMY_DATABASE_URL = get_database_url()

engine = create_engine(SQLALCHEMY_DATABASE_URL, **_engine_options(SQLALCHEMY_DATABASE_URL))

if engine.dialect.name == "sqlite":
    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

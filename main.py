import logging
import os
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from app.api.v1 import user
from app.core.exceptions import AuthenticationFailure, NotFound, StoreError
from app.db.init_db import init_db
from app.db.session import SQLALCHEMY_DATABASE_URL, ensure_database
from app.routers import comment
from app.routers import post

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))

ensure_database(SQLALCHEMY_DATABASE_URL)
init_db(force=os.getenv("DB_FORCE_SYNC", "").lower() in ("1", "true"))

app = FastAPI()

app.include_router(user.router, prefix="/api/users", tags=["Users"])
app.include_router(post.router, prefix="/api/posts", tags=["Posts"])
app.include_router(comment.router, prefix="/api/comments", tags=["Comments"])


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    return JSONResponse(status_code=404, content={"message": exc.message})


@app.exception_handler(AuthenticationFailure)
async def authentication_failure_handler(request: Request, exc: AuthenticationFailure):
    return JSONResponse(status_code=400, content={"message": exc.message})


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    logging.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=500, content=exc.to_dict())


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logging.error(f"Database error on {request.method} {request.url.path}: {str(exc)}")
    return JSONResponse(status_code=500, content={"name": type(exc).__name__, "message": str(exc)})


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=int(os.getenv("PORT", "3001")))

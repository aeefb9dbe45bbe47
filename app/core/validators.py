"""
Column rules checked before anything is written.

Each ``validate_*`` function takes the raw attribute dict for one entity,
drops keys that are not columns of that entity and raises
``ValidationError`` on the first rule that fails. With ``partial=True``
missing fields are skipped (updates) but an explicit ``None`` for a
required column is still rejected.
"""
from typing import Iterable

from pydantic import AnyUrl, EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from app.core.exceptions import ValidationError

PASSWORD_MIN_LENGTH = 4
COMMENT_MIN_LENGTH = 1
URL_PROTOCOLS = ("http", "https", "ftp")
# Largest value a BIGINT primary key can hold
MAX_ID = 2 ** 63 - 1

USER_FIELDS = ("username", "email", "password")
POST_FIELDS = ("title", "post_url", "user_id")
POST_UPDATABLE_FIELDS = ("title",)
COMMENT_FIELDS = ("comment_text", "user_id", "post_id")
VOTE_FIELDS = ("user_id", "post_id")

_email_adapter = TypeAdapter(EmailStr)
_url_adapter = TypeAdapter(AnyUrl)


def _pick(values: dict, fields: Iterable[str], partial: bool, entity: str) -> dict:
    cleaned = {}
    for field in fields:
        if field not in values:
            if partial:
                continue
            raise ValidationError(f"{entity}.{field} cannot be null", field=field)
        if values[field] is None:
            raise ValidationError(f"{entity}.{field} cannot be null", field=field)
        cleaned[field] = values[field]
    return cleaned


def _check_string(entity: str, field: str, value) -> None:
    if not isinstance(value, str):
        raise ValidationError(f"{entity}.{field} must be a string", field=field)


def in_id_range(value: int) -> bool:
    return -MAX_ID - 1 <= value <= MAX_ID


def _check_id(entity: str, field: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{entity}.{field} must be an integer", field=field)
    if not in_id_range(value):
        raise ValidationError(f"{entity}.{field} is out of range", field=field)


def check_email(value: str) -> None:
    try:
        _email_adapter.validate_python(value)
    except PydanticValidationError:
        raise ValidationError("Validation isEmail on email failed", field="email")


def check_url(value: str) -> None:
    # Bare hosts like "example.com/press" count as http URLs.
    candidate = value if "://" in value else f"http://{value}"
    try:
        url = _url_adapter.validate_python(candidate)
    except PydanticValidationError:
        raise ValidationError("Validation isURL on post_url failed", field="post_url")
    if url.scheme not in URL_PROTOCOLS or not url.host or "." not in url.host:
        raise ValidationError("Validation isURL on post_url failed", field="post_url")


def validate_user(values: dict, partial: bool = False) -> dict:
    cleaned = _pick(values, USER_FIELDS, partial, "user")
    for field, value in cleaned.items():
        _check_string("user", field, value)
    if "email" in cleaned:
        check_email(cleaned["email"])
    if "password" in cleaned and len(cleaned["password"]) < PASSWORD_MIN_LENGTH:
        raise ValidationError("Validation len on password failed", field="password")
    return cleaned


def validate_post(values: dict, partial: bool = False) -> dict:
    fields = POST_UPDATABLE_FIELDS if partial else POST_FIELDS
    cleaned = _pick(values, fields, partial, "post")
    if "title" in cleaned:
        _check_string("post", "title", cleaned["title"])
    if "post_url" in cleaned:
        _check_string("post", "post_url", cleaned["post_url"])
        check_url(cleaned["post_url"])
    if "user_id" in cleaned:
        _check_id("post", "user_id", cleaned["user_id"])
    return cleaned


def validate_comment(values: dict) -> dict:
    cleaned = _pick(values, COMMENT_FIELDS, False, "comment")
    _check_string("comment", "comment_text", cleaned["comment_text"])
    if len(cleaned["comment_text"]) < COMMENT_MIN_LENGTH:
        raise ValidationError("Validation len on comment_text failed", field="comment_text")
    _check_id("comment", "user_id", cleaned["user_id"])
    _check_id("comment", "post_id", cleaned["post_id"])
    return cleaned


def validate_vote(values: dict) -> dict:
    cleaned = _pick(values, VOTE_FIELDS, False, "vote")
    for field, value in cleaned.items():
        _check_id("vote", field, value)
    return cleaned

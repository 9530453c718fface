from __future__ import annotations

import logging
import re
from typing import Any, List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from user_registry.deps import get_store
from user_registry.errors import BadRequestError, InternalError, NotFoundError
from user_registry.models import User
from user_registry.user_store import InMemoryUserStore

logger = logging.getLogger("user_registry.users")

router = APIRouter(prefix="/users", tags=["users"])

# ASCII digits only: str.isdigit() and \d also accept other Unicode digits.
_USER_ID_RE = re.compile(r"[0-9]+")


def parse_user_id(raw: str | None) -> str | None:
    """Return the id from the ``/users/{id}`` segment, or None when there isn't one.

    Only a non-empty run of decimal digits counts as an id. Anything else is
    treated as "no id", which the handlers answer with 404 rather than 400.
    """
    if raw is None or not _USER_ID_RE.fullmatch(raw):
        return None
    return raw


def _require_user_id(raw: str) -> str:
    user_id = parse_user_id(raw)
    if user_id is None:
        raise NotFoundError(f"path segment {raw!r} is not a user id")
    return user_id


def _json(content: Any) -> JSONResponse:
    # Serialization runs after the store call has returned, never under its lock.
    try:
        return JSONResponse(content=content, status_code=200)
    except (TypeError, ValueError) as e:
        logger.exception("Failed to serialize response")
        raise InternalError(f"serialization failed: {type(e).__name__}") from e


# Handlers are plain ``def`` so FastAPI runs each request on its own worker
# thread; the store's lock is what keeps them consistent.


@router.get("", response_model=List[User])
@router.get("/", response_model=List[User], include_in_schema=False)
def list_users(store: InMemoryUserStore = Depends(get_store)) -> JSONResponse:
    users = store.list()
    return _json([u.model_dump() for u in users])


@router.get("/{user_id}", response_model=User)
def get_user(user_id: str, store: InMemoryUserStore = Depends(get_store)) -> JSONResponse:
    user = store.get(_require_user_id(user_id))
    return _json(user.model_dump())


async def _read_body(request: Request) -> bytes:
    # The body is decoded as JSON whatever the content-type header says.
    return await request.body()


def decode_user(body: bytes) -> User:
    try:
        return User.model_validate_json(body)
    except ValidationError as e:
        raise BadRequestError(f"undecodable user body: {e.error_count()} error(s)") from e


@router.post("", response_model=User)
@router.post("/", response_model=User, include_in_schema=False)
def create_user(
    body: bytes = Depends(_read_body),
    store: InMemoryUserStore = Depends(get_store),
) -> JSONResponse:
    """Insert or replace the user keyed by the decoded body's ``id``.

    Always 200 with the stored record; replacing an existing id is not
    reported differently from creating a new one.
    """
    user = store.upsert(decode_user(body))
    return _json(user.model_dump())


@router.delete("/{user_id}", response_model=User)
def delete_user(user_id: str, store: InMemoryUserStore = Depends(get_store)) -> JSONResponse:
    user = store.delete(_require_user_id(user_id))
    logger.info("Deleted user %r", user.id)
    return _json(user.model_dump())

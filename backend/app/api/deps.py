"""Shared request dependencies and the authorization guard."""
from collections.abc import Iterator
from contextlib import contextmanager
import logging
from typing import Any

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from app.config import Settings
from app.services.broadcast import ConnectionRegistry
from app.storage import OwnedCollection, Record, Storage, StorageError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_broadcaster(request: Request) -> ConnectionRegistry:
    return request.app.state.broadcaster


@contextmanager
def storage_errors(action: str) -> Iterator[None]:
    """Turn a storage fault into a generic 500; the detail only goes to the log."""
    try:
        yield
    except StorageError:
        logger.exception(f"Storage failure while {action}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error {action}",
        )


def decode_access_token(token: str, settings: Settings) -> int | None:
    """Return the user id carried by a valid access token, else ``None``."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None
    if payload.get("type") != "access":
        return None
    try:
        return int(payload.get("sub"))
    except (TypeError, ValueError):
        return None


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_app_settings),
    storage: Storage = Depends(get_storage),
) -> Record:
    """Authenticate the request or fail with 401."""
    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise unauthorized

    user_id = decode_access_token(credentials.credentials, settings)
    if user_id is None:
        raise unauthorized

    with storage_errors("authenticating"):
        user = await storage.users.get(user_id)
    if user is None:
        raise unauthorized
    return user


async def get_owned_record(
    collection: OwnedCollection,
    record_id: int,
    current_user: dict[str, Any],
    label: str,
) -> Record:
    """Fetch a record the caller owns.

    Missing records and records owned by someone else both produce the same
    404, so callers cannot probe which ids exist.
    """
    with storage_errors(f"fetching {label.lower()}"):
        record = await collection.get(record_id)
    if record is None or record["user_id"] != current_user["id"]:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{label} not found",
        )
    return record

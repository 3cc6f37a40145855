"""Wedding settings API endpoints."""
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from app.api.deps import get_broadcaster, get_current_user, get_storage, storage_errors
from app.api.resources import parse_body, serialize
from app.schemas.wedding import WeddingSettingsResponse, WeddingSettingsWrite
from app.services.broadcast import ConnectionRegistry
from app.storage import Record, Storage

router = APIRouter(prefix="/wedding-settings", tags=["wedding-settings"])


@router.get("")
async def get_wedding_settings(
    current_user: Record = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    """Get the caller's wedding settings, or ``{}`` if none have been saved."""
    with storage_errors("fetching wedding settings"):
        settings = await storage.wedding_settings.get_by_user(current_user["id"])
    if settings is None:
        return {}
    return serialize(WeddingSettingsResponse, settings)


@router.post("", response_model=WeddingSettingsResponse)
async def save_wedding_settings(
    payload: dict[str, Any] = Body(...),
    current_user: Record = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
    broadcaster: ConnectionRegistry = Depends(get_broadcaster),
):
    """Create the settings record, or update it if the caller already has one.

    There is one settings record per user, so a second create is applied as an
    update (200) rather than inserting a duplicate (201).
    """
    data = parse_body(WeddingSettingsWrite, payload, "wedding settings")

    with storage_errors("saving wedding settings"):
        existing = await storage.wedding_settings.get_by_user(current_user["id"])
        if existing is not None:
            record = await storage.wedding_settings.update(existing["id"], data.changes())
            status_code, event = status.HTTP_200_OK, "WEDDING_SETTINGS_UPDATED"
        else:
            record = await storage.wedding_settings.create({**data.to_record(), "user_id": current_user["id"]})
            status_code, event = status.HTTP_201_CREATED, "WEDDING_SETTINGS_CREATED"

    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Wedding settings not found")

    body = serialize(WeddingSettingsResponse, record)
    await broadcaster.broadcast(event, body)
    return JSONResponse(content=body, status_code=status_code)

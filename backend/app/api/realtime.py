"""WebSocket endpoint for live mutation events."""
import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect, status

from app.api.deps import decode_access_token
from app.storage import StorageError

logger = logging.getLogger(__name__)

router = APIRouter()


async def _authorized(websocket: WebSocket, token: str | None) -> bool:
    settings = websocket.app.state.settings
    if not settings.ws_require_auth:
        return True
    user_id = decode_access_token(token, settings) if token else None
    if user_id is None:
        return False
    try:
        return await websocket.app.state.storage.users.get(user_id) is not None
    except StorageError:
        logger.exception("Storage failure while authenticating WebSocket")
        return False


def _frame_kind(message: dict) -> str:
    if message.get("bytes") is not None:
        return "binary"
    try:
        json.loads(message.get("text") or "")
    except ValueError:
        return "malformed text"
    return "text"


@router.websocket("/ws")
async def events_socket(websocket: WebSocket, token: str | None = None):
    """Push ``{type, payload}`` frames for every successful mutation.

    Clients must fetch current state themselves after connecting; nothing is
    replayed. Inbound frames, text or binary, are read only to notice
    disconnects.
    """
    if not await _authorized(websocket, token):
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    broadcaster = websocket.app.state.broadcaster
    await broadcaster.register(websocket)
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
            logger.debug(f"Ignoring inbound WebSocket frame ({_frame_kind(message)})")
    except WebSocketDisconnect:
        pass
    finally:
        broadcaster.unregister(websocket)

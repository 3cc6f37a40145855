"""Best-effort fan-out of mutation events to connected WebSocket clients."""
import logging
from typing import Any

from starlette.websockets import WebSocket, WebSocketDisconnect, WebSocketState

logger = logging.getLogger(__name__)


class ConnectionRegistry:
    """Connections currently subscribed to mutation events.

    One registry lives for the lifetime of the application (``app.state``).
    Delivery is at-most-once: clients that are not connected when an event is
    broadcast never see it, and new clients get no backlog. The REST list
    endpoints remain the source of truth.
    """

    def __init__(self):
        self._connections: list[WebSocket] = []

    def __len__(self) -> int:
        return len(self._connections)

    async def register(self, websocket: WebSocket) -> None:
        """Accept the handshake and start delivering events to the connection.

        The connection is listed before the accept frame is sent, so a client
        that has seen the handshake complete is guaranteed to get later events.
        """
        self._connections.append(websocket)
        try:
            await websocket.accept()
        except Exception:
            self.unregister(websocket)
            raise
        logger.info(f"WebSocket client connected ({len(self._connections)} open)")

    @staticmethod
    def is_open(websocket: WebSocket) -> bool:
        return (
            websocket.client_state == WebSocketState.CONNECTED
            and websocket.application_state == WebSocketState.CONNECTED
        )

    def unregister(self, websocket: WebSocket) -> None:
        if websocket in self._connections:
            self._connections.remove(websocket)
            logger.info(f"WebSocket client disconnected ({len(self._connections)} open)")

    async def fan_out(self, event: dict[str, Any]) -> int:
        """Send ``event`` to every open connection; return how many received it."""
        delivered = 0
        # Snapshot: a disconnect during fan-out must not disturb iteration
        for websocket in list(self._connections):
            if not self.is_open(websocket):
                logger.debug("Skipping connection that is not open")
                continue
            try:
                await websocket.send_json(event)
            except (WebSocketDisconnect, RuntimeError, OSError) as exc:
                logger.debug(f"Dropping connection after failed send: {exc}")
                self.unregister(websocket)
                continue
            delivered += 1
        return delivered

    async def broadcast(self, kind: str, payload: Any) -> int:
        """Publish a ``{type, payload}`` event, e.g. ``TASK_CREATED``."""
        return await self.fan_out({"type": kind, "payload": payload})

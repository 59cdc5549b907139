from __future__ import annotations

import json
import logging
from typing import Any
from uuid import uuid4

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError
from starlette.websockets import WebSocketState

from chatbot.container import ServiceContainer
from chatbot.schemas import CHAT_MESSAGE_EVENT, ChatEvent

router = APIRouter(tags=["chat"])
logger = logging.getLogger(__name__)


class WebSocketChannel:
    """ChatChannel backed by a Starlette WebSocket; sends after close are no-ops."""

    def __init__(self, websocket: WebSocket) -> None:
        self._websocket = websocket
        self._connection_id = uuid4().hex
        self._closed = False

    @property
    def connection_id(self) -> str:
        return self._connection_id

    @property
    def closed(self) -> bool:
        return self._closed or self._websocket.application_state != WebSocketState.CONNECTED

    def mark_closed(self) -> None:
        self._closed = True

    async def send(self, event: str, payload: dict[str, Any]) -> bool:
        if self.closed:
            logger.info("chat_send_skipped connection_id=%s event=%s", self._connection_id, event)
            return False
        try:
            await self._websocket.send_json(ChatEvent(event=event, data=payload).model_dump())
        except (WebSocketDisconnect, RuntimeError, OSError) as exc:
            self._closed = True
            logger.info(
                "chat_send_failed connection_id=%s event=%s err=%s",
                self._connection_id,
                event,
                exc,
            )
            return False
        return True


def _get_container(websocket: WebSocket) -> ServiceContainer:
    return websocket.app.state.container


def _parse_frame(raw: str) -> ChatEvent | None:
    try:
        return ChatEvent.model_validate(json.loads(raw))
    except (json.JSONDecodeError, ValidationError):
        return None


@router.websocket("/ws")
async def chat_websocket(websocket: WebSocket) -> None:
    handler = _get_container(websocket).connection_handler
    await websocket.accept()
    channel = WebSocketChannel(websocket)
    await handler.on_connect(channel)
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
            raw = message.get("text")
            frame = _parse_frame(raw) if raw is not None else None
            if frame is None:
                logger.warning("chat_frame_invalid connection_id=%s", channel.connection_id)
                continue
            if frame.event != CHAT_MESSAGE_EVENT:
                logger.warning(
                    "chat_event_ignored connection_id=%s event=%s",
                    channel.connection_id,
                    frame.event,
                )
                continue
            await handler.on_message(channel, frame.data)
    finally:
        channel.mark_closed()
        await handler.on_disconnect(channel)

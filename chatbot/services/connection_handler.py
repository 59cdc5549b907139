from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol

from pydantic import ValidationError

from chatbot.intelligence.catalog import WELCOME_TEXT
from chatbot.schemas import CHAT_MESSAGE_EVENT, ChatMessage, InboundChatMessage
from chatbot.services.chat_service import ChatService

logger = logging.getLogger(__name__)


class ChatChannel(Protocol):
    """Transport-side handle for one connected client."""

    @property
    def connection_id(self) -> str: ...

    @property
    def closed(self) -> bool: ...

    async def send(self, event: str, payload: dict[str, Any]) -> bool: ...


class ConnectionHandler:
    """Drive the welcome/echo/delayed-reply exchange for each connection.

    Replies are scheduled as independent tasks and are never cancelled; a reply
    that comes due after the client left is dropped by the channel.
    """

    def __init__(self, chat_service: ChatService) -> None:
        self._chat_service = chat_service
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def pending_reply_count(self) -> int:
        return len(self._pending)

    async def on_connect(self, channel: ChatChannel) -> None:
        logger.info("chat_connected connection_id=%s", channel.connection_id)
        await self._push(channel, ChatMessage(text=WELCOME_TEXT, sender="bot"))

    async def on_message(self, channel: ChatChannel, payload: Any) -> asyncio.Task[None] | None:
        try:
            inbound = InboundChatMessage.model_validate(payload)
        except ValidationError as exc:
            logger.warning(
                "chat_message_rejected connection_id=%s errors=%s",
                channel.connection_id,
                exc.error_count(),
            )
            return None

        logger.info(
            "chat_message_received connection_id=%s text=%r",
            channel.connection_id,
            inbound.text,
        )
        await self._push(channel, ChatMessage(text=inbound.text, sender="user"))

        task = asyncio.create_task(self._reply_later(channel, inbound.text))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def on_disconnect(self, channel: ChatChannel) -> None:
        logger.info("chat_disconnected connection_id=%s", channel.connection_id)

    async def _reply_later(self, channel: ChatChannel, text: str) -> None:
        await asyncio.sleep(self._chat_service.reply_delay_sec())
        reply = self._chat_service.select_response(text)
        if channel.closed:
            logger.info("chat_reply_dropped connection_id=%s reason=closed", channel.connection_id)
            return
        await self._push(channel, ChatMessage(text=reply, sender="bot"))

    async def _push(self, channel: ChatChannel, message: ChatMessage) -> None:
        await channel.send(CHAT_MESSAGE_EVENT, message.model_dump())

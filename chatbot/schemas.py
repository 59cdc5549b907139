from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

CHAT_MESSAGE_EVENT = "chat message"


def utc_now_iso() -> str:
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = Field(min_length=1)
    sender: Literal["user", "bot"]
    timestamp: str = Field(default_factory=utc_now_iso)


class InboundChatMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: str = Field(min_length=1)


class ChatEvent(BaseModel):
    event: str = Field(min_length=1)
    data: dict[str, Any] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    status: Literal["OK"] = "OK"
    timestamp: str = Field(default_factory=utc_now_iso)

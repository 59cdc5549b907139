from __future__ import annotations

import random
from dataclasses import dataclass
from os import getenv
from pathlib import Path

from chatbot.services.chat_service import ChatService
from chatbot.services.connection_handler import ConnectionHandler

DEFAULT_PUBLIC_DIR = Path(__file__).resolve().parent.parent / "public"


@dataclass
class ServiceContainer:
    chat_service: ChatService
    connection_handler: ConnectionHandler
    public_dir: Path
    cors_origins: list[str]


@dataclass(frozen=True)
class ServerSettings:
    host: str
    port: int


def build_container(*, rng: random.Random | None = None) -> ServiceContainer:
    chat_service = ChatService(
        rng=rng,
        reply_delay_min_sec=_parse_float(getenv("CHATBOT_REPLY_DELAY_MIN_SEC"), default=1.0),
        reply_delay_max_sec=_parse_float(getenv("CHATBOT_REPLY_DELAY_MAX_SEC"), default=3.0),
    )
    public_dir = getenv("CHATBOT_PUBLIC_DIR")
    cors_origins = [
        origin.strip()
        for origin in getenv("CHATBOT_CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ]

    return ServiceContainer(
        chat_service=chat_service,
        connection_handler=ConnectionHandler(chat_service=chat_service),
        public_dir=Path(public_dir) if public_dir else DEFAULT_PUBLIC_DIR,
        cors_origins=cors_origins or ["*"],
    )


def load_server_settings() -> ServerSettings:
    return ServerSettings(
        host=getenv("HOST", "0.0.0.0"),
        port=_parse_int(getenv("PORT"), default=3000),
    )


def _parse_int(value: str | None, *, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _parse_float(value: str | None, *, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default

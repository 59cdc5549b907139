import random

from chatbot.intelligence.catalog import (
    DOCKER_REPLY,
    MULTISTAGE_REPLY,
    RESPONSE_CATALOG,
)
from chatbot.services.chat_service import ChatService


class _FixedRandom(random.Random):
    def __init__(self, value: float) -> None:
        super().__init__(0)
        self._value = value

    def random(self) -> float:
        return self._value


def test_select_response_greeting_is_from_catalog() -> None:
    service = ChatService(rng=random.Random(7))

    for _ in range(20):
        assert service.select_response("Hello") in RESPONSE_CATALOG["greeting"]


def test_select_response_farewell_and_thanks() -> None:
    service = ChatService(rng=random.Random(11))

    assert service.select_response("ok, goodbye") in RESPONSE_CATALOG["farewell"]
    assert service.select_response("THANKS!") in RESPONSE_CATALOG["thanks"]


def test_select_response_fixed_replies() -> None:
    service = ChatService()

    assert service.select_response("tell me about docker") == DOCKER_REPLY
    assert service.select_response("Container images") == DOCKER_REPLY
    assert service.select_response("Multi-Stage builds") == MULTISTAGE_REPLY


def test_select_response_priority_greeting_over_farewell() -> None:
    service = ChatService(rng=random.Random(3))

    assert service.select_response("hi, bye") in RESPONSE_CATALOG["greeting"]


def test_select_response_default_varies_within_category() -> None:
    service = ChatService(rng=random.Random(42))

    replies = {service.select_response("what about kubernetes") for _ in range(200)}

    assert replies <= set(RESPONSE_CATALOG["default"])
    assert len(replies) > 1


def test_select_response_empty_string_uses_default() -> None:
    service = ChatService(rng=random.Random(1))

    assert service.select_response("") in RESPONSE_CATALOG["default"]


def test_catalog_is_read_only() -> None:
    try:
        RESPONSE_CATALOG["greeting"] = ("nope",)  # type: ignore[index]
    except TypeError:
        pass
    else:
        raise AssertionError("catalog should not accept assignment")
    assert all(RESPONSE_CATALOG[name] for name in ("greeting", "farewell", "thanks", "default"))


def test_reply_delay_default_window() -> None:
    assert ChatService(rng=_FixedRandom(0.0)).reply_delay_sec() == 1.0
    assert ChatService(rng=_FixedRandom(0.5)).reply_delay_sec() == 2.0
    high = ChatService(rng=_FixedRandom(0.999999)).reply_delay_sec()
    assert 2.99 < high < 3.0


def test_reply_delay_bounds_are_clamped() -> None:
    service = ChatService(reply_delay_min_sec=-1.0, reply_delay_max_sec=-5.0)

    assert service.reply_delay_bounds == (0.0, 0.0)
    assert service.reply_delay_sec() == 0.0

    collapsed = ChatService(reply_delay_min_sec=2.0, reply_delay_max_sec=1.0)
    assert collapsed.reply_delay_bounds == (2.0, 2.0)

from __future__ import annotations

import random

from chatbot.intelligence.catalog import FIXED_REPLIES, RESPONSE_CATALOG
from chatbot.intelligence.intent import classify_intent


class ChatService:
    """Keyword-matched canned replies with a randomized typing delay."""

    def __init__(
        self,
        *,
        rng: random.Random | None = None,
        reply_delay_min_sec: float = 1.0,
        reply_delay_max_sec: float = 3.0,
    ) -> None:
        self._rng = rng or random.Random()
        self._delay_min = max(float(reply_delay_min_sec), 0.0)
        self._delay_max = max(float(reply_delay_max_sec), self._delay_min)

    @property
    def reply_delay_bounds(self) -> tuple[float, float]:
        return self._delay_min, self._delay_max

    def select_response(self, message: str) -> str:
        intent = classify_intent(message)
        fixed = FIXED_REPLIES.get(intent)
        if fixed is not None:
            return fixed
        return self._rng.choice(RESPONSE_CATALOG[intent])

    def reply_delay_sec(self) -> float:
        return self._delay_min + self._rng.random() * (self._delay_max - self._delay_min)

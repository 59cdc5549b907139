from __future__ import annotations

from typing import Literal

Intent = Literal["greeting", "farewell", "thanks", "docker", "multistage", "default"]

# Evaluated in order; the first rule with any matching token wins.
_INTENT_RULES: tuple[tuple[Intent, tuple[str, ...]], ...] = (
    ("greeting", ("hello", "hi", "hey")),
    ("farewell", ("bye", "goodbye", "see you")),
    ("thanks", ("thank", "thanks")),
    ("docker", ("docker", "container")),
    ("multistage", ("multistage", "multi-stage")),
)


def classify_intent(text: str) -> Intent:
    normalized = text.lower()
    for intent, tokens in _INTENT_RULES:
        if any(token in normalized for token in tokens):
            return intent
    return "default"

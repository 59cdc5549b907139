from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

WELCOME_TEXT = "Hello! I'm your AI assistant. How can I help you today?"

DOCKER_REPLY = (
    "Docker is amazing! It helps create consistent environments across different machines. "
    "Are you working on containerization?"
)
MULTISTAGE_REPLY = (
    "Multistage Docker builds are great for optimizing image size! "
    "They allow you to use multiple FROM statements in a single Dockerfile."
)

RESPONSE_CATALOG: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "greeting": (
            "Hello! How can I help you today?",
            "Hi there! What can I assist you with?",
            "Greetings! How may I be of service?",
            "Hey! What's on your mind?",
        ),
        "farewell": (
            "Goodbye! Have a great day!",
            "See you later! Take care!",
            "Farewell! Come back anytime!",
            "Bye! It was nice chatting with you!",
        ),
        "thanks": (
            "You're welcome!",
            "My pleasure!",
            "Glad I could help!",
            "Anytime!",
        ),
        "default": (
            "That's interesting! Tell me more.",
            "I see. Can you elaborate on that?",
            "Interesting point! What else would you like to discuss?",
            "I'm here to listen. What's on your mind?",
        ),
    }
)

FIXED_REPLIES: Mapping[str, str] = MappingProxyType(
    {
        "docker": DOCKER_REPLY,
        "multistage": MULTISTAGE_REPLY,
    }
)

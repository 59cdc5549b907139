from chatbot.intelligence.intent import classify_intent


def test_intent_greeting_keywords() -> None:
    assert classify_intent("Hello there") == "greeting"
    assert classify_intent("HEY") == "greeting"
    assert classify_intent("hi") == "greeting"


def test_intent_farewell_keywords() -> None:
    assert classify_intent("Goodbye for now") == "farewell"
    assert classify_intent("see you tomorrow") == "farewell"


def test_intent_thanks_keywords() -> None:
    assert classify_intent("Thanks a lot") == "thanks"
    assert classify_intent("thank u") == "thanks"


def test_intent_docker_and_container() -> None:
    assert classify_intent("tell me about docker") == "docker"
    assert classify_intent("what is a CONTAINER") == "docker"


def test_intent_multistage_spellings() -> None:
    assert classify_intent("multistage builds") == "multistage"
    assert classify_intent("multi-stage builds") == "multistage"


def test_intent_greeting_has_priority_over_farewell() -> None:
    assert classify_intent("hi, bye") == "greeting"


def test_intent_farewell_has_priority_over_docker() -> None:
    assert classify_intent("bye docker") == "farewell"


def test_intent_matches_plain_substrings() -> None:
    # "hi" inside "this" still counts as a greeting.
    assert classify_intent("is this a multistage build") == "greeting"
    assert classify_intent("abyes") == "farewell"


def test_intent_empty_and_unmatched_fall_back_to_default() -> None:
    assert classify_intent("") == "default"
    assert classify_intent("what about kubernetes") == "default"

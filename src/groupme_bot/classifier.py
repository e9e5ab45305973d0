"""
Question detection for inbound group messages.
"""

from __future__ import annotations

from .text import contains_ci

QUESTION_WORDS = ("what", "when", "where", "who", "why", "how")


def is_question(text: str | None) -> bool:
    # Substring match: "howl" counts as "how".
    if not text:
        return False
    if text.endswith("?"):
        return True
    return any(contains_ci(text, w) for w in QUESTION_WORDS)

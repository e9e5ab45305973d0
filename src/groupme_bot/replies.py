"""
Canned reply selection.

Keyword rules first, then a deterministic code-point-sum fallback so the
same question always gets the same answer.
"""

from __future__ import annotations

from .text import contains_ci

REGISTER_URL = "https://www.register2park.com/register"

HELP_TEXT = (
    "Sure! You can ask me about our services, opening hours, "
    "or any other questions you have."
)

GUEST_PARKING_TEXT = (
    f"Guest parking vehicles can be {REGISTER_URL}. "
    "Use code GOODWIN123 for free parking. GwPark01"
)

PARKING_CODE_TEXT = (
    "The guest parking code for Goodwin ATX is: GwPark01. "
    f"Visit {REGISTER_URL} to register your license plate for free parking."
)

GENERIC_RESPONSES = (
    "That's a great question! Let me think about that...",
    "Interesting question! Here's what I know...",
    "Good question! Based on what I know...",
    "Let me help you with that!",
)

WEEKLY_SUGGESTIONS = (
    "🎉 Weekly Suggestion: Check out the new events happening at Goodwin this week!",
    "🌟 Weekly Tip: Don't forget to RSVP for upcoming events!",
    "📅 Weekly Reminder: Great things happening this week - stay connected!",
    "💡 Weekly Suggestion: Explore new opportunities at Goodwin this week!",
)


def greeting(sender_name: str) -> str:
    return f"Hello, {sender_name}! How can I assist you today?"


def fallback_reply(text: str) -> str:
    """Pick a generic response by summing code points modulo the pool size."""
    total = sum(ord(ch) for ch in text)
    return GENERIC_RESPONSES[total % len(GENERIC_RESPONSES)]


def select_weekly_suggestion() -> str:
    return WEEKLY_SUGGESTIONS[0]


def parking_reply(text: str) -> str:
    # Exact phrase is case-sensitive; the looser parking rule below is not.
    if "guest parking code" in text:
        return GUEST_PARKING_TEXT
    if contains_ci(text, "parking") and contains_ci(text, "code"):
        return PARKING_CODE_TEXT
    return ""


def keyword_reply(text: str, sender_name: str = "") -> str:
    """Reply for greetings, help and parking requests; empty if none apply."""
    if text in ("Hello", "Hi"):
        return greeting(sender_name)
    if text == "Help":
        return HELP_TEXT
    return parking_reply(text)


def select_question_reply(text: str, sender_name: str = "") -> str:
    """Return the reply for a message already classified as a question.

    An empty string means "do not reply".
    """
    reply = keyword_reply(text, sender_name)
    if reply:
        return reply
    if contains_ci(text, "week") or contains_ci(text, "happening"):
        return select_weekly_suggestion()
    return fallback_reply(text)

import pytest

from groupme_bot.classifier import is_question


@pytest.mark.parametrize(
    "text,expect",
    [
        ("What time is it?", True),
        ("what is happening", True),
        ("when do we meet", True),
        ("where is the location", True),
        ("who is coming", True),
        ("why did this happen", True),
        ("how do I register", True),
        ("WHAT is the answer", True),
        ("Is the pool open?", True),
        ("This is a statement.", False),
        ("This is a statement", False),
        ("", False),
        (None, False),
    ],
)
def test_is_question(text, expect):
    assert is_question(text) is expect


def test_substring_false_positive_is_accepted():
    assert is_question("the wolves howl at night") is True


def test_long_and_unicode_questions():
    assert is_question("What " * 100 + "is this?") is True
    assert is_question("¿Qué está pasando?") is True

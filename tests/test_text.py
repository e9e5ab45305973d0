import pytest

from groupme_bot.text import contains_ci, to_lower_ascii


@pytest.mark.parametrize(
    "text,expect",
    [
        ("HELLO", "hello"),
        ("HeLLo WoRLd", "hello world"),
        ("hello", "hello"),
        ("Hello123!@#", "hello123!@#"),
        ("", ""),
    ],
)
def test_to_lower_ascii(text, expect):
    assert to_lower_ascii(text) == expect


def test_to_lower_ascii_leaves_non_ascii_alone():
    assert to_lower_ascii("ÀÉÎ Ok") == "ÀÉÎ ok"


def test_to_lower_ascii_preserves_length_and_folds_all_letters():
    s = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcXYZ"
    out = to_lower_ascii(s)
    assert len(out) == len(s)
    assert not any("A" <= c <= "Z" for c in out)


@pytest.mark.parametrize(
    "haystack,needle,expect",
    [
        ("Hello World", "World", True),
        ("Hello World", "world", True),
        ("Hello World", "WORLD", True),
        ("Hello World", "Goodbye", False),
        ("Hello World", "", True),
        ("", "test", False),
        ("", "", True),
        ("ab", "abc", False),
    ],
)
def test_contains_ci(haystack, needle, expect):
    assert contains_ci(haystack, needle) is expect

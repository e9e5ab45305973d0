"""
Case-insensitive matching primitives.

Only ASCII letters are folded; other characters (including non-ASCII
letters) compare as-is.
"""

from __future__ import annotations


def to_lower_ascii(s: str) -> str:
    out: list[str] = []
    for ch in s:
        if "A" <= ch <= "Z":
            out.append(chr(ord(ch) + 32))
        else:
            out.append(ch)
    return "".join(out)


def contains_ci(haystack: str, needle: str) -> bool:
    """Return True if `needle` occurs in `haystack`, ignoring ASCII case.

    An empty needle always matches.
    """
    h = to_lower_ascii(haystack)
    n = to_lower_ascii(needle)
    width = len(n)
    for i in range(len(h) - width + 1):
        if h[i : i + width] == n:
            return True
    return False

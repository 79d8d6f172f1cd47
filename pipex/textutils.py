"""Small text helpers: word splitting, integer parsing, trimming and searching."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def split_words(text: str, sep: str) -> list[str]:
    """Split *text* on the single character *sep*, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def parse_int(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and one optional sign is accepted. Parsing
    stops at the first character that is not an ASCII digit; no digits at all
    gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if ch not in _DIGITS:
            break
        digits.append(ch)
    if not digits:
        return 0
    return sign * int("".join(digits))


def int_to_str(n: int) -> str:
    """Return the decimal representation of *n*."""
    return str(int(n))


def trim(text: str, charset: str) -> str:
    """Remove every character found in *charset* from both ends of *text*."""
    if not charset:
        return text
    return text.strip(charset)


def substring(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at *start*.

    A start at or past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def find_within(haystack: str, needle: str, limit: int) -> int | None:
    """Find *needle* lying wholly inside the first *limit* characters.

    Returns the index of the first match, or None. An empty needle matches at
    index 0; a negative limit searches the whole haystack.
    """
    if not needle:
        return 0
    if not haystack:
        return None
    if limit < 0:
        limit = len(haystack)
    index = haystack.find(needle, 0, min(limit, len(haystack)))
    return None if index < 0 else index


def compare_prefix(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters of two strings.

    Returns 0 when they agree on that span, otherwise the difference of the
    code points at the first place they differ; the end of a string counts
    as code point 0.
    """
    if n <= 0:
        return 0
    a, b = s1[:n], s2[:n]
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    common = min(len(a), len(b))
    if common == n:
        return 0
    left = ord(a[common]) if common < len(a) else 0
    right = ord(b[common]) if common < len(b) else 0
    return left - right


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError("expected a character or an integer code")


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for a code in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for a printable ASCII character, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def _shift_case(c: int | str, low: str, high: str, delta: int) -> int | str:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    return _shift_case(c, "a", "z", -32)


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    return _shift_case(c, "A", "Z", 32)
"""Character classification and small string helpers with C-string semantics."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _code(c: int | str) -> int:
    """Return the integer code of a character given as an int or a one-char string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _as_char(c: int | str) -> str:
    """Return the character that a C ``(char)c`` conversion would search for."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _cstr(s: str) -> str:
    """Cut a string at its first NUL, as a C string would end there."""
    return s.split("\0", 1)[0]


def _wrap_int32(value: int) -> int:
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one optional sign.

    Parsing stops at the first non-digit; a string without digits yields 0.
    The result wraps like a 32-bit signed integer.
    """
    text = _cstr(text)
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] == "-":
        sign = -1
        stripped = stripped[1:]
    elif stripped[:1] == "+":
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    result = int("".join(digits)) if digits else 0
    return _wrap_int32(result * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII letter; anything else comes back unchanged, in the same type."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII letter; anything else comes back unchanged, in the same type."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def find_char(s: str, c: int | str) -> int | None:
    """Index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``len(s)``.
    """
    s = _cstr(s)
    ch = _as_char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return index if index >= 0 else None


def rfind_char(s: str, c: int | str) -> int | None:
    """Index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``len(s)``.
    """
    s = _cstr(s)
    ch = _as_char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference at the first mismatch, else 0."""
    s1 = _cstr(s1)
    s2 = _cstr(s2)
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a == 0 and b == 0:
            break
        if a != b:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters, or None.

    An empty needle is found at index 0.
    """
    needle = _cstr(needle)
    if not needle:
        return 0
    haystack = _cstr(haystack)
    limit = min(len(haystack), length)
    for i in range(limit):
        if i + len(needle) > length:
            break
        if haystack.startswith(needle, i):
            return i
    return None


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to every character."""
    return "".join(f(i, ch) for i, ch in enumerate(_cstr(s)))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], str | None]) -> None:
    """Call ``f(index, char)`` on each character in place.

    When ``f`` returns a character it replaces the one at that index.
    """
    for i, ch in enumerate(list(chars)):
        replacement = f(i, ch)
        if replacement is not None:
            chars[i] = replacement
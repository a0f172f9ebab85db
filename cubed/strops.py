"""String splitting, joining, trimming and bounded copying."""

from __future__ import annotations


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def join(s1: str | None, s2: str | None) -> str | None:
    """Concatenate two strings; a missing one is treated as absent.

    Returns None only when both are missing.
    """
    if s1 is None and s2 is None:
        return None
    if s1 is None:
        return s2
    if s2 is None:
        return s1
    return s1 + s2


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots (one kept for the terminator).

    Returns the copied text and the full length of ``src``, which exceeds
    the copied length exactly when the copy was truncated.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have had.
    When ``size`` does not exceed ``len(dest)`` nothing is appended and the
    reported length is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0 or size <= len(dest):
        return dest, size + len(src)
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character found in ``charset``."""
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end, or a zero length, gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s) or length == 0:
        return ""
    return s[start : start + length]
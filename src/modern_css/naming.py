"""Class name minting: kebab-cased style keys with a short hash suffix."""

from __future__ import annotations

import re

__all__ = ["generate_class_name", "kebab_case", "short_hash", "to_base36"]

_CAMEL_BOUNDARY_RE = re.compile(r"([a-z0-9])([A-Z])")
_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_HASH_LENGTH = 6


def kebab_case(name: str) -> str:
    """Convert a camelCase name to kebab-case.

    Custom properties (``--brand-color``) are returned unchanged, and a
    leading ``ms-`` vendor prefix becomes ``-ms-``.
    """
    if name.startswith("--"):
        return name
    converted = _CAMEL_BOUNDARY_RE.sub(r"\1-\2", name)
    if converted.startswith("ms-"):
        converted = "-" + converted
    return converted.lower()


def to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36_DIGITS[rem])
    return "".join(reversed(digits))


def _utf16_units(text: str) -> list[int]:
    raw = text.encode("utf-16-le")
    return [int.from_bytes(raw[i : i + 2], "little") for i in range(0, len(raw), 2)]


def short_hash(text: str) -> str:
    """Return a short base-36 checksum of *text*.

    Rolling ``h * 31 + unit`` over UTF-16 code units, wrapped to a signed
    32-bit integer; the absolute value is rendered in base 36 and cut to
    six characters.
    """
    h = 0
    for unit in _utf16_units(text):
        h = (h * 31 + unit) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return to_base36(abs(h))[:_HASH_LENGTH]


def generate_class_name(key: str, counter: int) -> str:
    """Mint a class name for *key* using the per-compile *counter*.

    Deterministic for a given ``(key, counter)`` pair. Collisions are not
    detected.
    """
    return f"{kebab_case(key)}-{short_hash(f'{key}{counter}')}"

"""Canonical form of a raw order code: no hyphens, trimmed, upper-case."""

from __future__ import annotations

SEPARATOR = "-"


def normalize_code(raw: str) -> str:
    return raw.replace(SEPARATOR, "").strip().upper()


def leading_int(raw: str) -> int | None:
    """Parse the leading run of digits, ``None`` when the value starts otherwise."""
    digits = ""
    for ch in raw.strip():
        if ch not in "0123456789":
            break
        digits += ch
    return int(digits) if digits else None

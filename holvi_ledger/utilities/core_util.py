#!/usr/bin/env python3
"""
Core Utilities

Features:
- Type guards for raw cell values
- Display-name string helpers
"""

from __future__ import annotations

from typing import Any, TypeGuard


def is_string(value: Any) -> TypeGuard[str]:
    return isinstance(value, str)


def capitalize(s: str) -> str:
    """Uppercase the first character of ``s``; the rest is left untouched."""
    if not s:
        return ""
    return s[0].upper() + s[1:]


def capitalize_all(s: str) -> str:
    """
    Capitalize every space-separated token of ``s``.

    Only the first character of each token changes; other characters keep
    their case, so ``"jOHN doe"`` becomes ``"JOHN Doe"``. Splitting is on a
    single space, so runs of spaces are preserved on rejoin.

    Used for display names only, never for comparison keys.
    """
    if not s:
        return ""
    return " ".join(capitalize(token) for token in s.split(" "))

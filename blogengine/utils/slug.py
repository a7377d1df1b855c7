"""Slug generation utilities."""
from __future__ import annotations

import re

# Anything outside lowercase ASCII letters, digits, space and hyphen is dropped
_DISALLOWED = re.compile(r"[^a-z0-9 \-]")


def slugify(text: str) -> str:
    """
    Convert a post title to a URL-friendly slug candidate.

    The title is lowercased and trimmed, every character outside
    ``a-z``, ``0-9``, space and hyphen is removed, whitespace runs collapse to
    a single space and the remaining spaces become hyphens. Existing hyphens
    are kept as they are, so ``"a - b"`` becomes ``"a---b"``.

    Args:
        text: The title to convert

    Returns:
        The slug candidate, possibly empty
    """
    if not text:
        return ""

    text = text.lower().strip()
    text = _DISALLOWED.sub("", text)
    return "-".join(part for part in text.split(" ") if part)

"""String helpers."""

from __future__ import annotations

from typing import List


def split(text: str, delimiter: str) -> List[str]:
    """Split ``text`` on a single-character delimiter, keeping empty fields."""
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    return text.split(delimiter)
"""Tag utility helpers.

Where: src/lrcphile/features/lyrics/usecases/extraction/_tag_utils.py
What: Pure routines that turn raw mutagen tag values into clean strings.
Why: Every container type wraps text differently (lists, ID3 frames, ASF
     attributes, APE values); extractors share one normaliser.
"""

from __future__ import annotations

from typing import cast

__all__ = ["first_text", "clean_text"]


def clean_text(value: str) -> str | None:
    """Keep the first NUL-separated value, stripped; ``None`` when empty."""
    cleaned = value.split("\x00", 1)[0].strip()
    return cleaned or None


def first_text(value: object) -> str | None:
    """Return the first non-empty text carried by a tag value.

    Handles plain strings, lists/tuples of values and objects exposing a
    ``text`` attribute (ID3 frames). Anything else is rendered with ``str``.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return clean_text(value)
    if isinstance(value, bytes):
        try:
            return clean_text(value.decode("utf-8"))
        except UnicodeDecodeError:
            return None
    if isinstance(value, (list, tuple)):
        for item in cast(list[object] | tuple[object, ...], value):
            text = first_text(item)
            if text is not None:
                return text
        return None
    if hasattr(value, "text"):
        return first_text(cast(object, getattr(value, "text")))
    return clean_text(str(value))

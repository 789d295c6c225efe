"""Text offsets into cleaned query strings."""

from booleanquery.text.text import TextRange, TextSize, slice_text_range

__all__ = [
    "TextRange",
    "TextSize",
    "slice_text_range",
]

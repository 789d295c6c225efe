from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Opaque measure of text length / index into a cleaned query."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    @staticmethod
    def of(text: str) -> "TextSize":
        """Create a TextSize from a string's length."""
        return TextSize(len(text))

    @staticmethod
    def from_int(value: int) -> "TextSize":
        """Create a TextSize from an integer."""
        return TextSize(value)

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in text, represented by TextSize offsets.

    Invariant:
    - 0 <= start <= end
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def new(start: TextSize, end: TextSize) -> "TextRange":
        """Create a TextRange from start and end TextSizes."""
        return TextRange(start.value, end.value)

    @staticmethod
    def at(offset: TextSize, length: TextSize) -> "TextRange":
        """Create a TextRange at offset with given length."""
        return TextRange(offset.value, offset.value + length.value)

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def len(self) -> TextSize:
        return TextSize(self._end - self._start)

    def as_tuple(self) -> tuple[int, int]:
        """Get the range as a tuple of (start, end) integers."""
        return (self._start, self._end)

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange.

    Coord system matches python string indices so we can just do this.
    """
    return source[range.start.value : range.end.value]

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) of source offsets.

    Invariant:
    - 0 <= start <= end

    Ranges are produced by the parser and copied into the expression tree
    unchanged, so every method returns a new range.
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self.start > self.end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def at(offset: int, length: int) -> "TextRange":
        """Create a TextRange at offset with given length."""
        return TextRange(offset, offset + length)

    @staticmethod
    def empty(offset: int) -> "TextRange":
        """Create an empty TextRange at the given offset."""
        return TextRange(offset, offset)

    def len(self) -> int:
        """Get the length of the range."""
        return self.end - self.start

    def is_empty(self) -> bool:
        """Check if the range is empty."""
        return self.start == self.end

    def as_tuple(self) -> tuple[int, int]:
        """Get the range as a tuple of (start, end) integers."""
        return (self.start, self.end)

    def contains_range(self, other: "TextRange") -> bool:
        """Check if the range fully contains another range."""
        return self.start <= other.start and other.end <= self.end

    def cover(self, other: "TextRange") -> "TextRange":
        """Get the minimal range that covers both this range and another range."""
        return TextRange(min(self.start, other.start), max(self.end, other.end))

    def split_at(self, length: int) -> tuple["TextRange", "TextRange"]:
        """Split into a prefix of `length` characters and the remaining suffix.

        Used to separate `10px` into `10` and `px`; the split point is clamped to
        the range so malformed parser spans never produce an invalid range.
        """
        pivot = min(self.start + max(length, 0), self.end)
        return TextRange(self.start, pivot), TextRange(pivot, self.end)

    def __repr__(self) -> str:
        return f"TextRange({self.start}, {self.end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange.

    Coord system matches python string indices so we can just do this.
    """
    return source[range.start : range.end]

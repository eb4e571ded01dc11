"""
Segment splitter: cuts the integer part into scale-indexed digit groups.

    Western   1234567    → [1 | 234 | 567]        groups of 3
    Myriad    123456789  → [1 | 2345 | 6789]      groups of 4
    Indian    123456789  → [12 | 34 | 56 | 789]   3, then groups of 2

Zero groups are kept so that every scale slot is occupied; the composer
needs them to see skipped magnitudes.
"""

from __future__ import annotations

from enum import Enum

from .models import Segment


class Grouping(str, Enum):
    """How a language chunks digits into scale groups."""

    WESTERN = "western"
    MYRIAD = "myriad"
    INDIAN = "indian"

    def width(self, scale_index: int) -> int:
        """Number of digits in the group at ``scale_index``."""
        if self is Grouping.MYRIAD:
            return 4
        if self is Grouping.INDIAN and scale_index > 0:
            return 2
        return 3

    def bound(self, scale_index: int) -> int:
        """Exclusive upper bound of a group value at ``scale_index``."""
        return 10 ** self.width(scale_index)

    def offset(self, scale_index: int) -> int:
        """Absolute position (0 = units digit) of the group's lowest digit."""
        return sum(self.width(i) for i in range(scale_index))


def split_segments(integer_part: int, grouping: Grouping) -> list[Segment]:
    """Split ``integer_part`` into segments, most significant first.

    Zero yields a single zero segment at scale index 0.
    """
    digits = str(integer_part)
    segments: list[Segment] = []
    end = len(digits)
    scale_index = 0

    while end > 0:
        start = max(0, end - grouping.width(scale_index))
        segments.append(Segment(value=int(digits[start:end]), scale_index=scale_index))
        end = start
        scale_index += 1

    segments.reverse()
    return segments


# ─── Digit Positions ─────────────────────────────────────────────────
#
# Gap detection works on absolute digit positions so that a run of zeros
# spanning several empty segments counts as a single gap.


def highest_digit_position(segment: Segment, grouping: Grouping) -> int:
    """Absolute position of the most significant non-zero digit of a non-zero segment."""
    return grouping.offset(segment.scale_index) + len(str(segment.value)) - 1


def lowest_digit_position(segment: Segment, grouping: Grouping) -> int:
    """Absolute position of the least significant non-zero digit of a non-zero segment."""
    value = segment.value
    trailing_zeros = 0
    while value % 10 == 0:
        value //= 10
        trailing_zeros += 1
    return grouping.offset(segment.scale_index) + trailing_zeros


def skipped_positions(higher: Segment, lower: Segment, grouping: Grouping) -> int:
    """How many zero digit positions separate two non-zero segments."""
    return lowest_digit_position(higher, grouping) - highest_digit_position(lower, grouping) - 1

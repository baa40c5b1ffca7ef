from theseed.genomes.util.object_validation import ObjectValidation
from theseed.genomes.util.ordering import RelativeOrder


class Region:
    """A single contiguous closed interval on a contig.

    Positions are 1-based and inclusive, on the forward axis of the contig regardless of the strand of the
    Location that owns this Region. Regions order by left position only, so two regions sharing a left
    position are neither less nor greater than each other even when they are not equal.
    """

    __slots__ = ("_left", "_right")

    def __init__(self, left: int, right: int):
        """
        Parameters
        ----------
        left
            1-based leftmost position
        right
            1-based rightmost position; must be >= left
        """
        ObjectValidation.require_left_not_past_right(left, right)
        self._left = left
        self._right = right

    @property
    def left(self) -> int:
        return self._left

    @property
    def right(self) -> int:
        return self._right

    def set_left(self, left: int):
        """Moves the left edge. The containing Location is responsible for keeping its regions consistent."""
        self._left = left

    def set_right(self, right: int):
        """Moves the right edge. The containing Location is responsible for keeping its regions consistent."""
        self._right = right

    def __len__(self):
        return self._right - self._left + 1

    def __str__(self):
        return f"[{self._left}-{self._right}]"

    def __repr__(self):
        return f"<Region {self._left}-{self._right}>"

    def __eq__(self, other):
        if type(other) is not Region:
            return False
        return self._left == other._left and self._right == other._right

    # mutable, so not hashable
    __hash__ = None

    def __lt__(self, other: "Region"):
        if type(other) is not Region:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: "Region"):
        if type(other) is not Region:
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: "Region"):
        if type(other) is not Region:
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: "Region"):
        if type(other) is not Region:
            return NotImplemented
        return self.compare(other) >= 0

    def compare(self, other: "Region") -> RelativeOrder:
        """Compares two regions by left position."""
        return RelativeOrder.of(self._left, other._left)

    def copy(self) -> "Region":
        return Region(self._left, self._right)

from enum import IntEnum


class RelativeOrder(IntEnum):
    """Result of a three-way comparison. Members are ints, so they can be returned from ``cmp``-style functions."""

    LESS = -1
    NEITHER = 0
    GREATER = 1

    @staticmethod
    def of(first, second) -> "RelativeOrder":
        """Compares two naturally ordered values"""
        if first < second:
            return RelativeOrder.LESS
        if first > second:
            return RelativeOrder.GREATER
        return RelativeOrder.NEITHER

from enum import Enum


class Frame(Enum):
    """
    Classification of a k-mer relative to the coding frame of a Location.

    ``P0``, ``P1`` and ``P2`` are the plus-strand frames and ``M0``, ``M1`` and ``M2`` the minus-strand frames; the
    digit is the distance, modulo 3, from the start of the containing region (measured on the strand of the location)
    to the start of the k-mer. ``F0`` means the k-mer does not touch the location at all. ``XX`` means the k-mer
    overlaps the location without lying wholly inside one region, or the location has been invalidated.

    The values are stable indexes, so a ``Frame`` can address a counter array of length ``len(Frame)``.
    """

    M0 = 0
    M1 = 1
    M2 = 2
    F0 = 3
    P0 = 4
    P1 = 5
    P2 = 6
    XX = 7

    def __str__(self):
        return self.name

    @property
    def idx(self) -> int:
        return self.value

    @property
    def is_coding(self) -> bool:
        """True for the six in-frame codes"""
        return self not in (Frame.F0, Frame.XX)

    @staticmethod
    def plus(offset: int) -> "Frame":
        """Plus-strand frame for an offset from the region start"""
        return _PLUS_FRAMES[offset % 3]

    @staticmethod
    def minus(offset: int) -> "Frame":
        """Minus-strand frame for an offset from the region start"""
        return _MINUS_FRAMES[offset % 3]

    @staticmethod
    def from_symbol(value: str) -> "Frame":
        if value not in Frame.__members__:
            raise ValueError("{} is not a valid frame".format(value))
        return Frame[value]


_PLUS_FRAMES = (Frame.P0, Frame.P1, Frame.P2)
_MINUS_FRAMES = (Frame.M0, Frame.M1, Frame.M2)

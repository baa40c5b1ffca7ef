from enum import Enum
from functools import total_ordering

from theseed.genomes.exc import InvalidStrandException


@total_ordering
class Strand(Enum):
    PLUS = 1
    MINUS = -1

    def __str__(self):
        return self.to_symbol()

    @staticmethod
    def from_symbol(value: str):
        """Converts string representation of a strand to a Strand"""
        if value == "+":
            return Strand.PLUS
        if value == "-":
            return Strand.MINUS
        raise ValueError("{} is not a valid string representation of a strand".format(value))

    def to_symbol(self) -> str:
        if self == Strand.PLUS:
            return "+"
        return "-"

    @staticmethod
    def coerce(value) -> "Strand":
        """Accepts a Strand or its string symbol. Raises InvalidStrandException for anything else."""
        if isinstance(value, Strand):
            return value
        if isinstance(value, str):
            try:
                return Strand.from_symbol(value)
            except ValueError as e:
                raise InvalidStrandException("Cannot interpret {!r} as a strand".format(value)) from e
        raise InvalidStrandException("Cannot interpret {!r} as a strand".format(value))

    def __lt__(self, other):
        if not type(other) is Strand:
            return NotImplemented
        # plus sorts before minus
        return self == Strand.PLUS and other == Strand.MINUS

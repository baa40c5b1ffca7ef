class GenomesException(Exception):
    """
    Base exception class for theseed.genomes.
    """

    pass


class InvalidStrandException(GenomesException):
    """
    Raised when a strand cannot be used to select a location variant.
    """

    pass


class InvalidPositionException(GenomesException):
    """
    Raised when a position is outside of a valid range for the operation being performed, such as a Region
    whose left position is greater than its right position.
    """

    pass


class LocationException(GenomesException):
    """
    Raised when a Location constructor or mutator is given invalid inputs, such as an odd number of segment
    positions or a new left position past the current right position.
    """

    pass


class EmptyLocationException(LocationException):
    """
    Raised when a Location operation that requires at least one region is performed on a location that has none.
    """

    pass

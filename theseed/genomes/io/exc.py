"""
I/O exceptions.
"""
from theseed.genomes.exc import GenomesException


class GenomesIOException(GenomesException):
    pass


class InvalidInputError(GenomesIOException):
    """
    Raised when a genome document is well-formed JSON but describes something that cannot be modeled, such as a
    feature whose regions lie on more than one contig.
    """

    pass


class GenomeLoadError(GenomesIOException):
    """
    Raised when a genome cannot be loaded. The underlying cause (I/O, JSON or validation error) is chained.
    """

    pass

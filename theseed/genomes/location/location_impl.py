from theseed.genomes.location.frame import Frame
from theseed.genomes.location.location import Location
from theseed.genomes.location.region import Region
from theseed.genomes.location.strand import Strand
from theseed.genomes.util.object_validation import ObjectValidation


class ForwardLocation(Location):
    """A location on the plus strand. It begins at its left position and ends at its right position."""

    @property
    def strand(self) -> Strand:
        return Strand.PLUS

    @property
    def begin(self) -> int:
        return self.left

    @property
    def end(self) -> int:
        return self.right

    def add_region(self, begin: int, length: int):
        """
        Parameters
        ----------
        begin
            1-based leftmost position of the new region
        length
            number of positions in the new region
        """
        ObjectValidation.require_positive_length(length)
        self.put_region(begin, begin + length - 1)

    def _calc_frame(self, pos: int, end: int, region: Region) -> Frame:
        return Frame.plus(pos - region.left)

    def _create_empty(self) -> "ForwardLocation":
        return ForwardLocation(self.contig_id)


class ReverseLocation(Location):
    """A location on the minus strand. It begins at its right position and ends at its left position."""

    @property
    def strand(self) -> Strand:
        return Strand.MINUS

    @property
    def begin(self) -> int:
        return self.right

    @property
    def end(self) -> int:
        return self.left

    def add_region(self, begin: int, length: int):
        """
        Parameters
        ----------
        begin
            1-based rightmost position of the new region, which is where it starts on the minus strand
        length
            number of positions in the new region
        """
        ObjectValidation.require_positive_length(length)
        self.put_region(begin - length + 1, begin)

    def _calc_frame(self, pos: int, end: int, region: Region) -> Frame:
        # on the minus strand the kmer starts at its right end, and the region starts at its right edge
        return Frame.minus(region.right - end)

    def _create_empty(self) -> "ReverseLocation":
        return ReverseLocation(self.contig_id)

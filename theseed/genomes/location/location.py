from abc import ABC, abstractmethod
from typing import List, Tuple, Union

from Bio.SeqFeature import CompoundLocation, SimpleLocation

from theseed.genomes.exc import LocationException
from theseed.genomes.location.frame import Frame
from theseed.genomes.location.region import Region
from theseed.genomes.location.strand import Strand
from theseed.genomes.util.object_validation import ObjectValidation
from theseed.genomes.util.ordering import RelativeOrder


class Location(ABC):
    """Abstract location: one or more regions on a single strand of a single contig.

    Bacterial features live on one strand of one contig, but may be split into several regions (segments).
    Regions are kept sorted by left position at all times. Overlapping regions are accepted as given and are
    never merged.

    Concrete subclasses exist for each strand (see :mod:`~theseed.genomes.location.location_impl`); they supply
    the strand-dependent notions of begin and end, the conversion of strand-relative regions, and the frame
    arithmetic used by :meth:`kmer_frame`.
    """

    def __init__(self, contig_id: str):
        """
        Parameters
        ----------
        contig_id
            ID of the contig containing this location. The location starts with no regions; use
            :meth:`put_region` or :meth:`add_region` to populate it.
        """
        self._contig_id = contig_id
        self._regions: List[Region] = []
        self._valid = True

    @staticmethod
    def create(contig_id: str, strand: Union[str, Strand], *segments: int) -> "Location":
        """Creates a location for a strand on a contig from alternating left and right positions.

        See :func:`~theseed.genomes.location.factory.create_location`.
        """
        # avoid circular imports
        from theseed.genomes.location.factory import create_location

        return create_location(contig_id, strand, *segments)

    @property
    @abstractmethod
    def strand(self) -> Strand:
        """Strand of this location"""

    @property
    @abstractmethod
    def begin(self) -> int:
        """1-based start position, in the direction of the strand"""

    @property
    @abstractmethod
    def end(self) -> int:
        """1-based end position, in the direction of the strand"""

    @abstractmethod
    def add_region(self, begin: int, length: int):
        """Adds a region given as a strand-relative start position and a length"""

    @abstractmethod
    def _calc_frame(self, pos: int, end: int, region: Region) -> Frame:
        """Frame of a kmer wholly inside the given region of this location"""

    @abstractmethod
    def _create_empty(self) -> "Location":
        """Returns a location with no regions on the same contig and strand as this one"""

    @property
    def dir(self) -> str:
        """Strand symbol, ``+`` or ``-``"""
        return self.strand.to_symbol()

    @property
    def contig_id(self) -> str:
        return self._contig_id

    @contig_id.setter
    def contig_id(self, contig_id: str):
        self._contig_id = contig_id

    @property
    def regions(self) -> Tuple[Region, ...]:
        """Read-only view of the regions, sorted by left position"""
        return tuple(self._regions)

    @property
    def num_regions(self) -> int:
        return len(self._regions)

    @property
    def left(self) -> int:
        """1-based leftmost position"""
        ObjectValidation.require_location_has_regions(self)
        return self._regions[0].left

    @property
    def right(self) -> int:
        """1-based rightmost position over all regions"""
        ObjectValidation.require_location_has_regions(self)
        # regions are sorted by left only, so with overlaps the last one need not reach furthest right
        return max(region.right for region in self._regions)

    @property
    def length(self) -> int:
        """Overall length from left to right, including any gaps between regions"""
        return self.right + 1 - self.left

    def __len__(self):
        return self.length

    @property
    def is_segmented(self) -> bool:
        """True if this location has more than one region"""
        return len(self._regions) > 1

    @property
    def is_valid(self) -> bool:
        return self._valid

    def invalidate(self):
        """Marks this location invalid. There is no way back."""
        self._valid = False

    def put_region(self, left: int, right: int):
        """Inserts a new region given as left and right positions, keeping the regions sorted.

        The new region goes before the first existing region whose left position is not less than ``left``.
        """
        new_region = Region(left, right)
        i = 0
        n = len(self._regions)
        while i < n and self._regions[i].left < left:
            i += 1
        self._regions.insert(i, new_region)

    def region_of(self) -> "Location":
        """Returns a new single-region location spanning this one from left to right"""
        location = self._create_empty()
        location.put_region(self.left, self.right)
        return location

    def set_left(self, new_left: int):
        """Moves the left position of this location.

        Regions that end before ``new_left`` are dropped and the rest are trimmed so none starts before it. The first
        remaining region is then extended, if need be, to start exactly at ``new_left``.
        """
        if new_left > self.right:
            raise LocationException(f"New location left of {new_left} is greater than right position.")
        self._regions = [region for region in self._regions if region.right >= new_left]
        for region in self._regions:
            if region.left < new_left:
                region.set_left(new_left)
        self._regions[0].set_left(new_left)

    def set_right(self, new_right: int):
        """Moves the right position of this location.

        Regions that start after ``new_right`` are dropped and the rest are trimmed so none ends after it. If no
        remaining region then reaches ``new_right``, the one reaching furthest right is extended to end there.
        """
        if new_right < self.left:
            raise LocationException(f"New location right of {new_right} is less than left position.")
        self._regions = [region for region in self._regions if region.left <= new_right]
        for region in self._regions:
            if region.right > new_right:
                region.set_right(new_right)
        furthest = max(self._regions, key=lambda region: region.right)
        if furthest.right < new_right:
            furthest.set_right(new_right)

    def set_region(self, left: int, right: int):
        """Collapses this location to a single region with the given limits."""
        ObjectValidation.require_location_has_regions(self)
        del self._regions[1:]
        first = self._regions[0]
        first.set_left(left)
        first.set_right(right)

    def clone(self) -> "Location":
        """Returns an independent copy of this location on the same contig and strand"""
        location = self._create_empty()
        location._valid = self._valid
        for region in self._regions:
            location.put_region(region.left, region.right)
        return location

    def __copy__(self):
        return self.clone()

    def __deepcopy__(self, memo):
        return self.clone()

    def contains(self, other: "Location") -> bool:
        """Returns True iff the other location lies within the left-right envelope of this one on the same contig"""
        return self.contig_id == other.contig_id and self.left <= other.left and self.right >= other.right

    def distance(self, other: "Location") -> int:
        """Number of positions between the envelopes of two locations on the same contig; 0 if they overlap"""
        ObjectValidation.require_same_contig(self, other)
        if other.left > self.right:
            return other.left - self.right - 1
        if self.left > other.right:
            return self.left - other.right - 1
        return 0

    def kmer_frame(self, pos: int, k_size: int) -> Frame:
        """Computes the frame of a kmer relative to this location. The kmer is assumed to be on the plus strand.

        Parameters
        ----------
        pos
            1-based position on the contig of the start of the kmer
        k_size
            length of the kmer

        Returns
        -------
        ``Frame.F0`` if the kmer is outside the location, ``Frame.XX`` if the location is invalid or the kmer is
        not wholly inside a single region, else the frame of the kmer in the last region that contains it.
        """
        end = pos + k_size - 1
        if end < self.left or pos > self.right:
            return Frame.F0
        if not self._valid:
            return Frame.XX
        found = None
        for region in self._regions:
            if pos >= region.left and end <= region.right:
                found = region
        if found is None:
            return Frame.XX
        return self._calc_frame(pos, end, found)

    def compare(self, other: "Location") -> RelativeOrder:
        """Compares two locations.

        Locations sort by contig, then left position, then right position, then strand (plus first), then number of
        regions (fewest first), and finally by the left positions of corresponding regions.
        """
        for mine, theirs in (
            (self.contig_id, other.contig_id),
            (self.left, other.left),
            (self.right, other.right),
            (self.strand, other.strand),
            (self.num_regions, other.num_regions),
        ):
            if mine != theirs:
                return RelativeOrder.of(mine, theirs)
        for mine, theirs in zip(self._regions, other._regions):
            order = mine.compare(theirs)
            if order:
                return order
        return RelativeOrder.NEITHER

    def __eq__(self, other):
        if not isinstance(other, Location):
            return False
        return self.compare(other) == RelativeOrder.NEITHER

    # mutable, so not hashable
    __hash__ = None

    def __lt__(self, other: "Location"):
        if not isinstance(other, Location):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: "Location"):
        if not isinstance(other, Location):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: "Location"):
        if not isinstance(other, Location):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: "Location"):
        if not isinstance(other, Location):
            return NotImplemented
        return self.compare(other) >= 0

    def __str__(self):
        return self._contig_id + self.dir + "".join(str(region) for region in self._regions)

    def __repr__(self):
        return f"<{type(self).__name__} {str(self)}>"

    def to_biopython(self) -> Union[SimpleLocation, CompoundLocation]:
        """Converts to a Biopython location: 0-based, half-open, with parts listed in the order of the strand."""
        ObjectValidation.require_location_has_regions(self)
        strand = self.strand.value
        parts = [SimpleLocation(region.left - 1, region.right, strand=strand) for region in self._regions]
        if len(parts) == 1:
            return parts[0]
        if self.strand == Strand.MINUS:
            parts.reverse()
        return CompoundLocation(parts)

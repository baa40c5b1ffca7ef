"""
Construction of :class:`~theseed.genomes.location.location.Location` objects from raw segment lists, and a comparator
for sorts that care only about left positions.
"""
from functools import cmp_to_key
from typing import Union

from theseed.genomes.location.location import Location
from theseed.genomes.location.location_impl import ForwardLocation, ReverseLocation
from theseed.genomes.location.strand import Strand
from theseed.genomes.util.object_validation import ObjectValidation
from theseed.genomes.util.ordering import RelativeOrder


def empty_location(contig_id: str, strand: Union[str, Strand]) -> Location:
    """Returns a location with no regions on the given contig and strand.

    Args:
        contig_id: ID of the contig containing the location.
        strand: A :class:`Strand` or its symbol, ``+`` or ``-``.
    """
    if Strand.coerce(strand) == Strand.PLUS:
        return ForwardLocation(contig_id)
    return ReverseLocation(contig_id)


def create_location(contig_id: str, strand: Union[str, Strand], *segments: int) -> Location:
    """Creates a location for a strand on a contig.

    Args:
        contig_id: ID of the contig containing the location.
        strand: A :class:`Strand` or its symbol, ``+`` or ``-``.
        segments: Positions of the regions, alternating in the form left, right, left, right ... The pairs need not
            be sorted.

    Returns:
        A :class:`ForwardLocation` or :class:`ReverseLocation` holding one region per pair.

    Raises:
        ``LocationException`` if there are an odd number of positions. Nothing is built in that case.
    """
    ObjectValidation.require_paired_segments(segments)
    location = empty_location(contig_id, strand)
    for i in range(0, len(segments), 2):
        location.put_region(segments[i], segments[i + 1])
    return location


def compare_left(location1: Location, location2: Location) -> RelativeOrder:
    """Compares two locations solely by left position, ignoring contig, strand and segmentation."""
    return RelativeOrder.of(location1.left, location2.left)


left_sort_key = cmp_to_key(compare_left)

"""
:class:`Location` objects represent bacterial feature coordinates: one or more :class:`Region` objects on a single
strand of a single contig. Locations can be trimmed, extended, cloned and totally ordered, and can classify the
position of a k-mer against their coding :class:`Frame`.
"""

from theseed.genomes.location.strand import Strand  # noqa F401
from theseed.genomes.location.region import Region  # noqa F401
from theseed.genomes.location.frame import Frame  # noqa F401
from theseed.genomes.location.location import Location  # noqa F401
from theseed.genomes.location.location_impl import ForwardLocation, ReverseLocation  # noqa F401
from theseed.genomes.location.factory import (  # noqa F401
    create_location,
    empty_location,
    compare_left,
    left_sort_key,
)

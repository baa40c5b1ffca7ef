"""
Data models for the subset of the GTO (genome typed object) JSON document that is needed to build a
:class:`~theseed.genomes.genome.Genome`. These models act as a JSON schema for validating GTO input; keys that are not
modeled here are ignored.

A feature location in a GTO is a list of ``[contig_id, begin, strand, length]`` tuples, where ``begin`` is the 1-based
position at which the region starts on its strand. This is the strand-relative form that
:meth:`~theseed.genomes.location.Location.add_region` consumes.
"""
import logging
from typing import ClassVar, List, Optional, Tuple, Type

from marshmallow import EXCLUDE, Schema
from marshmallow_dataclass import dataclass

from theseed.genomes.genome import DEFAULT_GENETIC_CODE, Feature, Genome
from theseed.genomes.io.exc import InvalidInputError
from theseed.genomes.location import Location

logger = logging.getLogger(__name__)


@dataclass
class BaseModel:
    """Base for all of the models."""

    Schema: ClassVar[Type[Schema]] = Schema  # noqa: F811

    class Meta:
        unknown = EXCLUDE


@dataclass
class ContigModel(BaseModel):
    """A contig. The DNA is only used to determine the contig length."""

    id: str
    dna: Optional[str] = None
    length: Optional[int] = None

    def contig_length(self) -> Optional[int]:
        if self.length is not None:
            return self.length
        if self.dna is not None:
            return len(self.dna)
        return None


@dataclass
class FeatureModel(BaseModel):
    """Data model that allows construction of a :class:`~theseed.genomes.genome.Feature` object."""

    id: str
    type: str
    location: List[Tuple[str, int, str, int]]
    function: Optional[str] = None

    def to_location(self) -> Location:
        """Builds the feature location one region at a time. All regions must share a contig and strand."""
        contig_ids = {contig_id for contig_id, _, _, _ in self.location}
        strands = {strand for _, _, strand, _ in self.location}
        if len(contig_ids) != 1 or len(strands) != 1:
            raise InvalidInputError(
                f"Feature {self.id} must lie on exactly one contig and strand: contigs {sorted(contig_ids)}, "
                f"strands {sorted(strands)}"
            )
        location = Location.create(contig_ids.pop(), strands.pop())
        for _, begin, _, length in self.location:
            location.add_region(begin, length)
        return location

    def to_feature(self) -> Feature:
        return Feature(self.id, self.type, self.to_location(), function=self.function)


@dataclass
class GenomeModel(BaseModel):
    """Data model that allows construction of a :class:`~theseed.genomes.genome.Genome` object."""

    id: str
    scientific_name: str
    domain: Optional[str] = None
    genetic_code: Optional[int] = None
    contigs: Optional[List[ContigModel]] = None
    features: Optional[List[FeatureModel]] = None

    def to_genome(self) -> Genome:
        features = []
        for feature in self.features or []:
            if not feature.location:
                logger.warning(f"Feature {feature.id} in genome {self.id} has no location; skipping")
                continue
            features.append(feature.to_feature())
        return Genome(
            self.id,
            self.scientific_name,
            domain=self.domain,
            genetic_code=self.genetic_code if self.genetic_code is not None else DEFAULT_GENETIC_CODE,
            contigs={contig.id: contig.contig_length() for contig in self.contigs or []},
            features=features,
        )

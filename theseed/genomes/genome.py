"""
In-memory genome objects. A :class:`Genome` is a bag of :class:`Feature` objects, each with a
:class:`~theseed.genomes.location.Location`, plus the identifiers and lengths of its contigs.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from theseed.genomes.location import Location

DEFAULT_GENETIC_CODE = 11


@dataclass
class Feature:
    """A named, typed feature of a genome."""

    id: str
    type: str
    location: Location
    function: Optional[str] = None

    def __str__(self):
        return f"{self.id} ({self.type}) {self.location}"


class Genome:
    """A genome loaded from a GTO. Only coordinate information is retained; sequence data is not."""

    def __init__(
        self,
        genome_id: str,
        name: str,
        domain: Optional[str] = None,
        genetic_code: int = DEFAULT_GENETIC_CODE,
        contigs: Optional[Dict[str, Optional[int]]] = None,
        features: Optional[Iterable[Feature]] = None,
    ):
        """
        Parameters
        ----------
        genome_id
            Genome ID, such as ``83333.1``
        name
            Scientific name
        domain
            Taxonomic domain, such as ``Bacteria``
        genetic_code
            Translation table number
        contigs
            Map of contig ID to contig length. Lengths may be None if unknown.
        features
            Features of the genome. Feature IDs must be unique.
        """
        self.id = genome_id
        self.name = name
        self.domain = domain
        self.genetic_code = genetic_code
        self.contigs = dict(contigs) if contigs else {}
        self._features: Dict[str, Feature] = {}
        for feature in features or []:
            if feature.id in self._features:
                raise ValueError(f"Duplicate feature ID {feature.id} in genome {genome_id}")
            self._features[feature.id] = feature

    def __str__(self):
        return f"{self.id} ({self.name})"

    def __repr__(self):
        return f"<Genome {self.id} features={self.feature_count}>"

    @property
    def feature_count(self) -> int:
        return len(self._features)

    @property
    def features(self) -> List[Feature]:
        """Features in the order they were loaded"""
        return list(self._features.values())

    def get_feature(self, feature_id: str) -> Feature:
        """Raises KeyError if there is no such feature"""
        return self._features[feature_id]

    def contig_ids(self) -> List[str]:
        return sorted(self.contigs)

    def sorted_features(self) -> List[Feature]:
        """Features sorted by location, with ties broken by feature ID"""
        return sorted(self._features.values(), key=lambda feature: (feature.location, feature.id))

    def features_in(self, location: Location) -> List[Feature]:
        """Features whose locations lie within the envelope of the given location, sorted by location"""
        return [feature for feature in self.sorted_features() if location.contains(feature.location)]

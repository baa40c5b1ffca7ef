"""
A directory of GTO files. The name of each GTO file is the genome ID followed by a suffix (``.gto`` by default), so
the directory can be iterated as a sequence of genomes sorted by ID.
"""
import logging
from pathlib import Path
from typing import Iterator, Tuple, Union

from methodtools import lru_cache

from theseed.genomes.genome import Genome
from theseed.genomes.io.gto.models import GenomeModel
from theseed.genomes.io.gto.parser import build_genome, load_gto_model, parse_gto

logger = logging.getLogger(__name__)

GTO_SUFFIX = ".gto"


class GenomeDirectory:
    """Iterates through the genomes in a directory of GTO files, in genome ID order.

    Genomes are parsed on demand; iterating twice parses every file twice.
    """

    def __init__(self, dir_name: Union[str, Path], suffix: str = GTO_SUFFIX):
        """
        Args:
            dir_name: Directory containing the GTO files.
            suffix: File name suffix identifying GTO files. It is stripped from the file name to get the genome ID.

        Raises:
            ``FileNotFoundError`` if ``dir_name`` is not a directory.
        """
        if not suffix:
            raise ValueError("GTO file suffix must not be empty")
        self.dir_name = Path(dir_name)
        if not self.dir_name.is_dir():
            raise FileNotFoundError(f"{dir_name} is not found or not a directory.")
        self.suffix = suffix
        genome_ids = {entry.name[: -len(suffix)] for entry in self.dir_name.iterdir() if entry.name.endswith(suffix)}
        self._genome_ids = tuple(sorted(genome_ids))
        logger.info(f"Found {len(self._genome_ids)} genomes in {self.dir_name}")

    @property
    def genome_ids(self) -> Tuple[str, ...]:
        """Sorted genome IDs"""
        return self._genome_ids

    def __len__(self):
        return len(self._genome_ids)

    def __contains__(self, genome_id: str):
        return genome_id in self._genome_ids

    def __str__(self):
        return f"{self.dir_name} ({len(self)} genomes)"

    def __iter__(self) -> Iterator[Genome]:
        for genome_id in self._genome_ids:
            yield self._load(genome_id)

    def genome_file(self, genome_id: str) -> Path:
        return self.dir_name / f"{genome_id}{self.suffix}"

    def get_genome(self, genome_id: str) -> Genome:
        """Loads a single genome by ID.

        The validated document of the most recently requested genome is cached, so asking for the same ID again skips
        reading the file. Every call still returns a new, independent Genome.

        Raises:
            ``KeyError`` if the genome is not in this directory, ``GenomeLoadError`` if it cannot be parsed.
        """
        if genome_id not in self:
            raise KeyError(genome_id)
        return build_genome(self._model(genome_id), str(self.genome_file(genome_id)))

    @lru_cache(maxsize=1)
    def _model(self, genome_id: str) -> GenomeModel:
        logger.debug(f"Reading genome {genome_id} from {self.dir_name}")
        return load_gto_model(self.genome_file(genome_id))

    def _load(self, genome_id: str) -> Genome:
        logger.debug(f"Loading genome {genome_id} from {self.dir_name}")
        return parse_gto(self.genome_file(genome_id))

"""
Parse GTO files into :class:`~theseed.genomes.genome.Genome` objects.

Parsing happens in two steps. The JSON document is first validated into a
:class:`~theseed.genomes.io.gto.models.GenomeModel`, and the model is then converted to a new ``Genome``. Callers
that need several independent genomes from one file can keep the model and build from it repeatedly.

Every failure, whether the file is missing, is not JSON, or does not validate, is raised as a single
:class:`~theseed.genomes.io.exc.GenomeLoadError` chained to its cause.
"""
import json
import logging
from pathlib import Path
from typing import TextIO, Union

from marshmallow import ValidationError

from theseed.genomes.exc import GenomesException
from theseed.genomes.genome import Genome
from theseed.genomes.io.exc import GenomeLoadError
from theseed.genomes.io.gto.models import GenomeModel

logger = logging.getLogger(__name__)


def load_gto_model_handle(handle: TextIO) -> GenomeModel:
    """Reads and validates a GTO document from an open handle.

    Raises:
        ``GenomeLoadError`` if the document is not valid JSON or is not a valid GTO.
    """
    source = getattr(handle, "name", "stream")
    try:
        data = json.load(handle)
        return GenomeModel.Schema().load(data)
    except (ValueError, ValidationError) as e:
        raise GenomeLoadError(f"Error processing genome from {source}.") from e


def load_gto_model(gto: Union[str, Path]) -> GenomeModel:
    """Reads and validates a GTO file on disk.

    Raises:
        ``GenomeLoadError`` if the file cannot be read or is not a valid GTO.
    """
    try:
        with open(gto, "r") as handle:
            return load_gto_model_handle(handle)
    except OSError as e:
        raise GenomeLoadError(f"Error processing genome from {gto}.") from e


def build_genome(model: GenomeModel, source: str = "model") -> Genome:
    """Builds a new :class:`Genome` from a validated model. Each call returns independent objects.

    Raises:
        ``GenomeLoadError`` if a feature location is inconsistent or feature IDs are duplicated.
    """
    try:
        genome = model.to_genome()
    except (ValueError, GenomesException) as e:
        raise GenomeLoadError(f"Error processing genome from {source}.") from e
    logger.debug(f"Parsed genome {genome.id} with {genome.feature_count} features from {source}")
    return genome


def parse_gto_handle(handle: TextIO) -> Genome:
    """Parses an open GTO file handle.

    Args:
        handle: Open text handle positioned at the start of a GTO JSON document.

    Returns:
        A :class:`Genome`.

    Raises:
        ``GenomeLoadError`` if the document is not valid JSON or is not a valid GTO.
    """
    return build_genome(load_gto_model_handle(handle), getattr(handle, "name", "stream"))


def parse_gto(gto: Union[str, Path]) -> Genome:
    """Parses a GTO file on disk.

    Raises:
        ``GenomeLoadError`` if the file cannot be read or parsed.
    """
    return build_genome(load_gto_model(gto), str(gto))

"""
Converter Base Class

Abstract super-class for all CSV to RDF converters. A converter is bound to one
input CSV file and one output N-Triples file. Usually it is used as follows::

    converter = RatingConverter.from_output_directory("path/to/file.csv", "path/to/output_folder", context)
    converter.convert()
    converter.serialize()

Subclasses implement ``convert`` and add their triples to ``self.graph``; the
base class takes care of validating paths, reading CSV rows and writing the
graph out.
"""

import csv
import logging
import sys
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

from rdflib import Graph

from csv2rdf.converters.errors import InvalidInputError, InvalidOutputError
from csv2rdf.converters.normalization import german_to_english_float, name_to_uri, parse_yes_no
from csv2rdf.vocabulary.vocabularies import Vocabularies

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

OUTPUT_SUFFIX = ".nt"
OUTPUT_FORMAT = "nt"


def _default_logger() -> logging.Logger:
    """Module logger, writing to stdout when logging has not been configured."""
    if not logger.hasHandlers():
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


class Converter:
    """Template for converting one CSV file into an N-Triples file.

    Attributes:
        csv_in: absolute path of the CSV file being converted.
        rdf_out: absolute path of the N-Triples file ``serialize`` writes.
        context: read-only mapping of caller supplied settings.
        vocabularies: vocabulary namespaces bound to the graph.
        graph: the triples built by ``convert``.
        log: logger for progress messages; defaults to this module's logger,
            which prints to stdout unless logging is already configured.
    """

    # Helpers available to subclasses as e.g. ``self.name2uri(...)``
    name2uri = staticmethod(name_to_uri)
    german_to_english_float = staticmethod(german_to_english_float)
    parse_yes_no = staticmethod(parse_yes_no)

    def __init__(self, csv_in: PathLike, rdf_out: PathLike,
                 context: Optional[Mapping[str, Any]] = None,
                 vocabularies: Optional[Vocabularies] = None,
                 log: Optional[logging.Logger] = None):
        """Bind the converter to an input CSV file and an exact output file path.

        Raises ``InvalidInputError`` if ``csv_in`` is missing or not a regular
        file, and ``InvalidOutputError`` if the directory that would contain
        ``rdf_out`` does not exist.
        """
        self._check_input(csv_in)
        self._check_output_file(rdf_out)

        self.csv_in = Path(csv_in).resolve()
        self.rdf_out = Path(rdf_out).resolve()
        self.context = MappingProxyType(dict(context or {}))
        self.vocabularies = vocabularies or Vocabularies()
        self.log = log or _default_logger()

        self.graph = Graph()
        self.vocabularies.bind(self.graph)

        self.log.info(f"Converting '{self.csv_in}' to '{self.rdf_out}'")

    @classmethod
    def from_output_path(cls, csv_in: PathLike, rdf_out: PathLike, context: Optional[Mapping[str, Any]] = None,
                         **kwargs) -> "Converter":
        """Create a converter that writes to exactly ``rdf_out``."""
        return cls(csv_in, rdf_out, context, **kwargs)

    @classmethod
    def from_output_directory(cls, csv_in: PathLike, out_folder: PathLike,
                              context: Optional[Mapping[str, Any]] = None, **kwargs) -> "Converter":
        """Create a converter that writes ``<basename of csv_in>.nt`` into ``out_folder``."""
        cls._check_input(csv_in)

        folder = Path(out_folder)
        if not folder.exists():
            raise InvalidOutputError(f"directory '{out_folder}' does not exist")
        if not folder.is_dir():
            raise InvalidOutputError(f"'{out_folder}' is not a directory")

        rdf_out = folder / f"{Path(csv_in).name}{OUTPUT_SUFFIX}"
        return cls(csv_in, rdf_out, context, **kwargs)

    @staticmethod
    def _check_input(csv_in: PathLike) -> None:
        path = Path(csv_in)
        if not path.exists():
            raise InvalidInputError(f"file '{csv_in}' does not exist")
        if not path.is_file():
            raise InvalidInputError(f"'{csv_in}' is not a regular file")

    @staticmethod
    def _check_output_file(rdf_out: PathLike) -> None:
        path = Path(rdf_out)
        folder = path.resolve().parent
        if not folder.exists():
            raise InvalidOutputError(f"directory '{folder}' does not exist")
        if not folder.is_dir():
            raise InvalidOutputError(f"'{folder}' is not a directory")
        if path.is_dir():
            raise InvalidOutputError(f"'{rdf_out}' is a directory, not an output file")

    def rows(self, delimiter: Optional[str] = None, encoding: Optional[str] = None,
             header: bool = True) -> Iterator[Union[Dict[str, str], List[str]]]:
        """Lazily read the input CSV.

        With ``header`` each row is a dict keyed by column name, otherwise a
        list of values. Delimiter and encoding fall back to the context keys
        ``csv_delimiter`` and ``csv_encoding``, then to "," and UTF-8.
        """
        delimiter = delimiter or self.context.get('csv_delimiter', ',')
        encoding = encoding or self.context.get('csv_encoding', 'utf-8')

        with open(self.csv_in, 'r', encoding=encoding, newline='') as file:
            reader = csv.DictReader(file, delimiter=delimiter) if header else csv.reader(file, delimiter=delimiter)
            for row in reader:
                yield row

    def convert(self) -> None:
        """The actual conversion takes place in this method.

        Implementations in sub-classes need to build the output graph on
        ``self.graph``.
        """
        raise NotImplementedError(f"method {type(self).__name__}#convert() is not implemented!")

    def serialize(self) -> Path:
        """Write ``self.graph`` to ``rdf_out`` as N-Triples (http://www.w3.org/TR/n-triples/).

        An existing file is overwritten. Calling this before ``convert`` writes
        an empty file.
        """
        try:
            with open(self.rdf_out, 'wb') as file:
                self.graph.serialize(destination=file, format=OUTPUT_FORMAT, encoding='utf-8')
        except Exception as e:
            self.log.error(f"Failed to serialize graph to {self.rdf_out}: {e}")
            raise

        self.log.info(f"Wrote {len(self.graph)} triples to {self.rdf_out}")
        return self.rdf_out

    def run(self) -> Path:
        """Convert the input and serialize the result in one go."""
        self.convert()
        return self.serialize()

    def get_conversion_statistics(self) -> Dict[str, Any]:
        """Get statistics about the graph built so far."""
        return {
            'input': str(self.csv_in),
            'output': str(self.rdf_out),
            'triples': len(self.graph),
            'subjects': len(set(self.graph.subjects())),
            'predicates': len(set(self.graph.predicates())),
        }

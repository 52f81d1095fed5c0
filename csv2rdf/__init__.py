"""
csv2rdf - CSV to RDF Conversion Framework

Base classes and helpers for converting spreadsheet data into N-Triples files.
"""

__version__ = "1.0.0"
__author__ = "csv2rdf contributors"

from csv2rdf.converters.converter import Converter
from csv2rdf.converters.errors import (
    ConfigurationError,
    ConverterError,
    InvalidInputError,
    InvalidNumberError,
    InvalidOutputError,
)
from csv2rdf.converters.normalization import german_to_english_float, name_to_uri, parse_yes_no
from csv2rdf.vocabulary.vocabularies import GEO, GR, SCHEMA, Vocabularies
from csv2rdf.config import RunConfig, load_config

__all__ = [
    "Converter",
    "ConverterError",
    "InvalidInputError",
    "InvalidOutputError",
    "InvalidNumberError",
    "ConfigurationError",
    "name_to_uri",
    "german_to_english_float",
    "parse_yes_no",
    "Vocabularies",
    "SCHEMA",
    "GEO",
    "GR",
    "RunConfig",
    "load_config",
]

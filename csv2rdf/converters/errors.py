"""
Converter Errors

Exceptions raised while setting up and running CSV to RDF conversions.
"""


class ConverterError(Exception):
    """Base class for all csv2rdf errors."""


class InvalidInputError(ConverterError, IOError):
    """The input CSV path is missing or not a regular file."""


class InvalidOutputError(ConverterError, IOError):
    """The output location cannot be written to."""


class InvalidNumberError(ConverterError, ValueError):
    """A value could not be parsed as a number."""


class ConfigurationError(ConverterError):
    """A run configuration file is missing or malformed."""

"""
Run Configuration

Loads the optional YAML file that parameterizes a conversion run. The file may
carry a ``context`` mapping, handed unchanged to the converter, and a
``vocabularies`` mapping of extra prefixes to base URIs.

Example::

    context:
      base_uri: http://example.org/ratings/
      csv_delimiter: ";"
    vocabularies:
      foaf: http://xmlns.com/foaf/0.1/
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from csv2rdf.converters.errors import ConfigurationError
from csv2rdf.vocabulary.vocabularies import Vocabularies

logger = logging.getLogger(__name__)


@dataclass
class RunConfig:
    """Settings for a single conversion run."""
    context: Dict[str, Any] = field(default_factory=dict)
    vocabularies: Vocabularies = field(default_factory=Vocabularies)


def _section(config: Dict[str, Any], name: str, config_path: str) -> Dict[str, Any]:
    value = config.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"'{name}' in '{config_path}' must be a mapping")
    return value


def load_config(config_path: Optional[str] = None) -> RunConfig:
    """Load a run configuration, or the defaults when no path is given."""
    if config_path is None:
        return RunConfig()

    path = Path(config_path)
    if not path.is_file():
        raise ConfigurationError(f"config file '{config_path}' does not exist")

    try:
        with open(path, 'r', encoding='utf-8') as file:
            config = yaml.safe_load(file) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"failed to parse '{config_path}': {e}") from e

    if not isinstance(config, dict):
        raise ConfigurationError(f"'{config_path}' must contain a mapping")

    run_config = RunConfig(
        context=_section(config, 'context', config_path),
        vocabularies=Vocabularies(_section(config, 'vocabularies', config_path)),
    )
    logger.info(f"Configuration loaded from {config_path}")
    return run_config

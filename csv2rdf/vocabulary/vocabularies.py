"""
RDF Vocabulary Lookup

This module provides the small, read-only set of vocabulary namespaces that
converters mint their predicate and class URIs from. The defaults cover
schema.org, the W3C WGS84 geo vocabulary and GoodRelations; further
vocabularies can be layered on from a YAML configuration file.
"""

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from rdflib import Graph, Namespace, URIRef

DEFAULT_VOCABULARIES = MappingProxyType({
    'schema': "http://schema.org/",
    'geo': "http://www.w3.org/2003/01/geo/wgs84_pos#",
    'gr': "http://purl.org/goodrelations/v1#",
})

SCHEMA = Namespace(DEFAULT_VOCABULARIES['schema'])
GEO = Namespace(DEFAULT_VOCABULARIES['geo'])
GR = Namespace(DEFAULT_VOCABULARIES['gr'])


class Vocabularies(Mapping):
    """Read-only mapping from vocabulary prefix to ``rdflib.Namespace``."""

    def __init__(self, mapping: Optional[Mapping[str, str]] = None):
        namespaces = dict(DEFAULT_VOCABULARIES)
        if mapping:
            namespaces.update(mapping)

        self._namespaces = MappingProxyType({
            prefix: Namespace(str(base_uri)) for prefix, base_uri in namespaces.items()
        })

    @classmethod
    def from_yaml(cls, config_path: str) -> "Vocabularies":
        """Load the vocabularies of a run configuration file (see ``csv2rdf.config``)."""
        from csv2rdf.config import load_config

        return load_config(config_path).vocabularies

    def __getitem__(self, prefix: str) -> Namespace:
        return self._namespaces[prefix]

    def __iter__(self) -> Iterator[str]:
        return iter(self._namespaces)

    def __len__(self) -> int:
        return len(self._namespaces)

    def term(self, prefix: str, name: str) -> URIRef:
        """Mint a term URI by suffixing ``name`` to the vocabulary's base URI."""
        return self[prefix][name]

    def bind(self, graph: Graph) -> None:
        """Bind every vocabulary prefix to ``graph``."""
        for prefix, namespace in self._namespaces.items():
            graph.bind(prefix, namespace, override=True, replace=True)

    def namespaces(self) -> Dict[str, str]:
        return {prefix: str(namespace) for prefix, namespace in self._namespaces.items()}

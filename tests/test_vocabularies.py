"""
Tests for vocabulary lookup and run configuration
"""

import pytest
from rdflib import Graph, Namespace, URIRef

from csv2rdf.config import RunConfig, load_config
from csv2rdf.converters.errors import ConfigurationError
from csv2rdf.vocabulary.vocabularies import GEO, GR, SCHEMA, Vocabularies

CONFIG_YAML = """
context:
  base_uri: http://example.org/resource/
  csv_delimiter: ";"
vocabularies:
  foaf: http://xmlns.com/foaf/0.1/
"""


class TestVocabularies:

    @pytest.fixture
    def vocabularies(self):
        return Vocabularies()

    def test_default_namespaces(self, vocabularies):
        assert vocabularies.namespaces() == {
            'schema': "http://schema.org/",
            'geo': "http://www.w3.org/2003/01/geo/wgs84_pos#",
            'gr': "http://purl.org/goodrelations/v1#",
        }

    def test_lookup_returns_namespace(self, vocabularies):
        assert isinstance(vocabularies['schema'], Namespace)
        assert vocabularies['geo'].lat == URIRef("http://www.w3.org/2003/01/geo/wgs84_pos#lat")

    def test_term(self, vocabularies):
        assert vocabularies.term('gr', 'hasCurrency') == URIRef("http://purl.org/goodrelations/v1#hasCurrency")

    def test_unknown_prefix(self, vocabularies):
        with pytest.raises(KeyError):
            vocabularies['dbpedia']

    def test_read_only(self, vocabularies):
        with pytest.raises(TypeError):
            vocabularies['schema'] = Namespace("http://evil.example/")

    def test_mapping_protocol(self, vocabularies):
        assert len(vocabularies) == 3
        assert 'schema' in vocabularies
        assert sorted(vocabularies) == ['geo', 'gr', 'schema']

    def test_extra_vocabularies_layered_over_defaults(self):
        vocabularies = Vocabularies({'foaf': "http://xmlns.com/foaf/0.1/"})
        assert len(vocabularies) == 4
        assert vocabularies.term('foaf', 'name') == URIRef("http://xmlns.com/foaf/0.1/name")
        assert str(vocabularies['schema']) == "http://schema.org/"

    def test_instances_are_independent(self):
        extended = Vocabularies({'foaf': "http://xmlns.com/foaf/0.1/"})
        assert 'foaf' in extended
        assert 'foaf' not in Vocabularies()

    def test_bind(self, vocabularies):
        graph = Graph()
        vocabularies.bind(graph)
        prefixes = {prefix: str(uri) for prefix, uri in graph.namespaces()}
        assert prefixes['gr'] == "http://purl.org/goodrelations/v1#"

    def test_module_constants(self):
        assert SCHEMA.Product == URIRef("http://schema.org/Product")
        assert GEO.long == URIRef("http://www.w3.org/2003/01/geo/wgs84_pos#long")
        assert GR.Offering == URIRef("http://purl.org/goodrelations/v1#Offering")

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "vocabs.yaml"
        path.write_text(CONFIG_YAML, encoding="utf-8")

        vocabularies = Vocabularies.from_yaml(str(path))
        assert vocabularies.namespaces()['foaf'] == "http://xmlns.com/foaf/0.1/"
        assert 'schema' in vocabularies

    def test_from_yaml_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            Vocabularies.from_yaml(str(tmp_path / "missing.yaml"))

    def test_from_yaml_bad_section(self, tmp_path):
        path = tmp_path / "vocabs.yaml"
        path.write_text("vocabularies:\n  - http://schema.org/\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="must be a mapping"):
            Vocabularies.from_yaml(str(path))

    def test_from_yaml_matches_run_config(self, tmp_path):
        path = tmp_path / "vocabs.yaml"
        path.write_text(CONFIG_YAML, encoding="utf-8")

        assert Vocabularies.from_yaml(str(path)).namespaces() == load_config(str(path)).vocabularies.namespaces()

    def test_from_yaml_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("vocabularies: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="failed to parse"):
            Vocabularies.from_yaml(str(path))


class TestRunConfig:

    def test_defaults_without_file(self):
        config = load_config()
        assert isinstance(config, RunConfig)
        assert config.context == {}
        assert len(config.vocabularies) == 3

    def test_load_config(self, tmp_path):
        path = tmp_path / "csv2rdf.yaml"
        path.write_text(CONFIG_YAML, encoding="utf-8")

        config = load_config(str(path))
        assert config.context == {'base_uri': "http://example.org/resource/", 'csv_delimiter': ";"}
        assert 'foaf' in config.vocabularies

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        config = load_config(str(path))
        assert config.context == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="does not exist"):
            load_config(str(tmp_path / "missing.yaml"))

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_config(str(path))

    def test_context_not_a_mapping(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("context: just a string\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="'context'"):
            load_config(str(path))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("context: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="failed to parse"):
            load_config(str(path))

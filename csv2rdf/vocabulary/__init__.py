"""RDF vocabulary namespaces."""

"""
Shared fixtures for csv2rdf tests.
"""

import pytest

RATINGS_CSV = (
    "produkt;preis;bewertung;bio\n"
    "Knud Möller Kaffee;1,59;4,5;ja\n"
    "Grüner Tee;2,99;3;Nein\n"
    "Apfelsaft;0,89;4;hurtz\n"
)


@pytest.fixture
def ratings_csv(tmp_path):
    """German-style ratings spreadsheet with ';' as delimiter."""
    path = tmp_path / "ratings.csv"
    path.write_text(RATINGS_CSV, encoding="utf-8")
    return path


@pytest.fixture
def output_dir(tmp_path):
    path = tmp_path / "out"
    path.mkdir()
    return path

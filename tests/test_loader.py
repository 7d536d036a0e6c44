"""Tests for catalog file loading."""

import json
from decimal import Decimal

import pytest

from bookstore.exceptions import CatalogFileError
from bookstore.loader import dump_catalog, load_catalog
from bookstore.model import AudioBook, EBook, PaperBook, ShowcaseBook

RECORDS = [
    {
        "kind": "paper",
        "identifier": "978-0134685991",
        "title": "Effective Java",
        "author": "Joshua Bloch",
        "year": 2017,
        "unit_price": "45.99",
        "stock": 10,
    },
    {
        "kind": "ebook",
        "identifier": "978-0321356680",
        "title": "Effective Java Digital",
        "author": "Joshua Bloch",
        "year": 2017,
        "unit_price": 35.99,
        "file_type": "PDF",
    },
    {
        "kind": "showcase",
        "identifier": "978-0134494166",
        "title": "Clean Code Demo",
        "author": "Robert Martin",
        "year": 2008,
        "unit_price": "0.00",
    },
    {
        "kind": "audio",
        "identifier": "978-1234567890",
        "title": "The Art of Programming",
        "author": "Donald Knuth",
        "year": 2020,
        "unit_price": "29.99",
        "audio_format": "MP3",
        "duration_minutes": 480,
    },
]


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(RECORDS))
    return path


class TestLoadCatalog:
    """Test cases for load_catalog."""

    def test_load_all_variants(self, catalog_file):
        items = load_catalog(catalog_file)

        assert [type(item) for item in items] == [PaperBook, EBook, ShowcaseBook, AudioBook]
        assert items[0].stock == 10
        assert items[0].unit_price == Decimal("45.99")
        assert items[1].unit_price == Decimal("35.99")
        assert items[3].duration_minutes == 480

    def test_explicit_variants(self, catalog_file):
        """Test that only the given variants are accepted."""
        with pytest.raises(CatalogFileError, match="unknown kind 'ebook'"):
            load_catalog(catalog_file, variants={"paper": PaperBook})

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogFileError, match="Could not read"):
            load_catalog(tmp_path / "missing.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[{")

        with pytest.raises(CatalogFileError, match="Malformed JSON"):
            load_catalog(path)

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "obj.json"
        path.write_text("{}")

        with pytest.raises(CatalogFileError, match="Expected a list"):
            load_catalog(path)

    def test_record_not_object(self, tmp_path):
        path = tmp_path / "items.json"
        path.write_text("[1]")

        with pytest.raises(CatalogFileError, match="Record 0 is not an object"):
            load_catalog(path)

    def test_missing_kind(self, tmp_path):
        path = tmp_path / "items.json"
        path.write_text(json.dumps([{"identifier": "x"}]))

        with pytest.raises(CatalogFileError) as exc_info:
            load_catalog(path)

        assert exc_info.value.code == "INVALID_CATALOG_FILE"
        assert exc_info.value.data["index"] == 0

    def test_invalid_record(self, tmp_path):
        record = dict(RECORDS[0], stock=-3)
        path = tmp_path / "items.json"
        path.write_text(json.dumps([record]))

        with pytest.raises(CatalogFileError, match="Record 0 is invalid"):
            load_catalog(path)


class TestDumpCatalog:
    """Test cases for dump_catalog."""

    def test_dump_is_json_compatible(self, catalog_file):
        records = dump_catalog(load_catalog(catalog_file))

        assert records[0]["kind"] == "paper"
        assert records[0]["unit_price"] == "45.99"
        assert records[0]["stock"] == 10
        json.dumps(records)

    def test_dump_reloads(self, catalog_file, tmp_path):
        items = load_catalog(catalog_file)
        path = tmp_path / "copy.json"
        path.write_text(json.dumps(dump_catalog(items)))

        assert load_catalog(path) == items

"""Tests for loading the JSON resource file into typed records."""
import json

import pytest

from core.exceptions import DataLoadError, ValidationError
from models.lego_set import LegoSet
from repositories.json_repository import JSONRepository
from repositories.lego_set_repository import LegoSetRepository


class TestLegoSetParsing:
    """Tests for LegoSet.from_dict."""

    def test_parses_full_record(self, record):
        lego_set = LegoSet.from_dict(record("75192-1", "Millennium Falcon", 7541, "Star Wars", "UCS", ["UCS"]))

        assert lego_set == LegoSet("75192-1", "Millennium Falcon", 7541, "Star Wars", "UCS", ("UCS",))

    def test_optional_fields_default(self):
        lego_set = LegoSet.from_dict({"number": "1-1", "name": "Brick", "pieces": 1})

        assert lego_set.theme is None
        assert lego_set.subtheme is None
        assert lego_set.tags == ()

    def test_null_tags_become_empty(self, record):
        raw = record("1-1", "Brick")
        raw["tags"] = None

        assert LegoSet.from_dict(raw).tags == ()

    def test_unknown_keys_ignored(self, record):
        raw = record("1-1", "Brick")
        raw["year"] = 1999

        assert LegoSet.from_dict(raw).number == "1-1"

    @pytest.mark.parametrize("field, value", [
        ("number", 42),
        ("name", None),
        ("pieces", "12"),
        ("pieces", True),
        ("theme", 7),
        ("tags", "Star Wars"),
        ("tags", ["ok", 3]),
    ])
    def test_rejects_wrong_types(self, record, field, value):
        raw = record("1-1", "Brick")
        raw[field] = value

        with pytest.raises(ValidationError) as exc_info:
            LegoSet.from_dict(raw)
        assert exc_info.value.field == field

    def test_rejects_missing_name(self):
        with pytest.raises(ValidationError):
            LegoSet.from_dict({"number": "1-1", "pieces": 1})

    def test_rejects_non_object(self):
        with pytest.raises(ValidationError):
            LegoSet.from_dict(["1-1", "Brick", 1])

    def test_to_dict_matches_input(self, record):
        raw = record("1-1", "Brick", 2, "City", "Police", ["a", "b"])

        assert LegoSet.from_dict(raw).to_dict() == raw


class TestJSONRepository:
    """Tests for the generic loader."""

    def test_loads_records_in_file_order(self, write_json, sample_sets):
        repo = JSONRepository(LegoSet, write_json(sample_sets))

        assert repo.count() == len(sample_sets)
        assert [s.number for s in repo.get_all()] == [r["number"] for r in sample_sets]
        assert repo.entity_name == "LegoSet"

    def test_get_all_returns_copy(self, repository):
        records = repository.get_all()
        records.clear()

        assert repository.count() > 0
        assert repository.get_all()

    def test_loading_twice_gives_equal_collections(self, write_json, sample_sets):
        path = write_json(sample_sets)

        assert LegoSetRepository(path).get_all() == LegoSetRepository(path).get_all()

    def test_empty_array(self, make_repository):
        repo = make_repository([])

        assert repo.get_all() == []
        assert repo.count() == 0

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataLoadError) as exc_info:
            LegoSetRepository(tmp_path / "missing.json")
        assert exc_info.value.error_code == "DATA_LOAD_ERROR"
        assert exc_info.value.file_path.endswith("missing.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text('[{"number": "1-1",', encoding="utf-8")

        with pytest.raises(DataLoadError, match="Malformed JSON"):
            LegoSetRepository(path)

    def test_top_level_must_be_array(self, write_json, record):
        path = write_json({"sets": [record("1-1", "Brick")]})

        with pytest.raises(DataLoadError, match="JSON array"):
            LegoSetRepository(path)

    def test_invalid_record_fails_whole_load(self, write_json, record):
        path = write_json([record("1-1", "Brick"), {"number": "2-1", "name": "Plate", "pieces": "many"}])

        with pytest.raises(DataLoadError, match="index 1") as exc_info:
            LegoSetRepository(path)
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_bare_name_resolves_in_data_dir(self, tmp_path, record):
        (tmp_path / "custom.json").write_text(json.dumps([record("1-1", "Brick")]), encoding="utf-8")

        repo = LegoSetRepository("custom.json", data_dir=tmp_path)

        assert repo.file_path == tmp_path / "custom.json"
        assert repo.count() == 1

    def test_bundled_catalog_loads(self):
        repo = LegoSetRepository()

        assert repo.file_path.name == "brickset.json"
        assert repo.count() > 0

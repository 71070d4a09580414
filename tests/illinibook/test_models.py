"""Tests for value types and configuration."""

import pytest
from pathlib import Path

from illinibook.config import BookConfig
from illinibook.models import Neighbor, Relation


class TestDataclasses:
    def test_relation_roundtrip(self):
        rel = Relation(1, 2, "friend")
        restored = Relation.from_dict(rel.to_dict())
        assert restored == rel

    def test_relation_from_dict_coerces(self):
        rel = Relation.from_dict(
            {"person_a": "3", "person_b": "4", "relationship": "sibling"}
        )
        assert rel == Relation(3, 4, "sibling")

    def test_relation_mirrored(self):
        rel = Relation(1, 2, "friend")
        assert rel.mirrored() == Relation(2, 1, "friend")
        assert rel.endpoints() == (1, 2)

    def test_relation_hashable(self):
        assert len({Relation(1, 2, "friend"), Relation(1, 2, "friend")}) == 1

    def test_neighbor_roundtrip(self):
        n = Neighbor(person_id=7, relationship="coworker")
        assert Neighbor.from_dict(n.to_dict()) == n


class TestBookConfig:
    def test_from_dir(self, tmp_path):
        config = BookConfig.from_dir(tmp_path)
        assert config.people_path == tmp_path / "people.txt"
        assert config.relations_path == tmp_path / "relations.txt"
        assert config.delimiter == ","

    def test_roundtrip(self, tmp_path):
        config = BookConfig(tmp_path / "p.txt", tmp_path / "r.txt", delimiter=";")
        d = config.to_dict()
        assert d["people_path"] == str(tmp_path / "p.txt")
        assert BookConfig.from_dict(d) == config

    def test_string_paths_converted(self):
        config = BookConfig("a.txt", "b.txt")
        assert isinstance(config.people_path, Path)

    def test_empty_delimiter_rejected(self):
        with pytest.raises(ValueError):
            BookConfig("a.txt", "b.txt", delimiter="")

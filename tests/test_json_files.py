"""Tests for JSON input and output."""

import json

import pytest

from brand_extractor.errors import ConfigurationError
from brand_extractor.storage import load_brand_config, load_json, load_known_brands, write_json


class TestLoad:
    """Tests for loading JSON inputs."""

    def test_missing_file(self, tmp_path):
        """Test a missing file is a ConfigurationError."""
        with pytest.raises(ConfigurationError):
            load_json(str(tmp_path / "missing.json"))

    def test_unparsable_file(self, tmp_path):
        """Test invalid JSON is a ConfigurationError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError):
            load_json(str(path))

    def test_known_brands_must_be_list(self, tmp_path):
        """Test the known brands file must hold a list."""
        path = tmp_path / "known.json"
        path.write_text(json.dumps({"uuid": "a"}))
        with pytest.raises(ConfigurationError):
            load_known_brands(str(path))

    def test_brand_config(self, tmp_path):
        """Test loading endpoints and rule sets."""
        path = tmp_path / "brands.json"
        path.write_text(json.dumps({
            "endpoints": [{"uuid": "a", "url": "http://a", "ruleSet": "blog"}],
            "ruleSets": {"blog": {"rules": {"prefLabel": {"select": "h1", "extract": "style"}}}},
        }))
        config = load_brand_config(str(path))
        assert config.endpoints[0].rule_set_name == "blog"

    def test_strict_brand_config_rejects_unknown_kind(self, tmp_path):
        """Test strict loading rejects an unknown extract kind."""
        path = tmp_path / "brands.json"
        path.write_text(json.dumps({
            "endpoints": [],
            "ruleSets": {"blog": {"rules": {"prefLabel": {"select": "h1", "extract": "outer_html"}}}},
        }))
        assert load_brand_config(str(path)).rule_sets["blog"].rules["prefLabel"].extract is None
        with pytest.raises(ConfigurationError):
            load_brand_config(str(path), strict=True)


class TestWrite:
    """Tests for writing JSON outputs."""

    def test_round_trip_keeps_nulls_and_unicode(self, tmp_path):
        """Test nulls and non-ASCII text survive a write and reload."""
        processed = [
            {"name": "Café ♥", "strapline": None, "uuid": "a"},
            {"name": "", "uuid": "b"},
        ]
        failures = {"c": "Unable to find a ruleset to process brand c at http://c"}

        write_json(str(tmp_path / "out" / "processed.json"), processed)
        write_json(str(tmp_path / "out" / "failures.json"), failures)

        assert load_json(str(tmp_path / "out" / "processed.json")) == processed
        assert load_json(str(tmp_path / "out" / "failures.json")) == failures

    def test_strict_brand_config_rejects_broken_selector(self, tmp_path):
        """Test strict loading rejects a selector that does not parse."""
        path = tmp_path / "brands.json"
        path.write_text(json.dumps({
            "endpoints": [],
            "ruleSets": {"blog": {"rules": {"prefLabel": {"select": "h1[", "extract": "text"}}}},
        }))
        load_brand_config(str(path))
        with pytest.raises(ConfigurationError) as exc:
            load_brand_config(str(path), strict=True)
        assert "blog.prefLabel" in str(exc.value)

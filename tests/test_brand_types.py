"""Tests for the brand configuration data model."""

import pytest

from brand_extractor.errors import ConfigurationError
from brand_extractor.types.brand import (
    BrandConfig,
    Endpoint,
    ExtractKind,
    RuleSet,
    SelectorRule,
)


class TestExtractKind:
    """Tests for ExtractKind parsing."""

    @pytest.mark.parametrize("raw,expected", [
        ("inner_html", ExtractKind.INNER_HTML),
        ("InnerHtml", ExtractKind.INNER_HTML),
        ("text", ExtractKind.TEXT),
        ("Text", ExtractKind.TEXT),
        ("style", ExtractKind.STYLE),
        ("StyleAttribute", ExtractKind.STYLE),
    ])
    def test_known_kinds(self, raw, expected):
        """Test legacy and descriptive kind names resolve to the same kind."""
        assert ExtractKind.parse(raw) is expected

    def test_unknown_kind_is_none(self):
        """Test unrecognised or missing kinds resolve to None."""
        assert ExtractKind.parse("attribute") is None
        assert ExtractKind.parse(None) is None


class TestSelectorRule:
    """Tests for SelectorRule parsing."""

    def test_from_dict(self):
        """Test all rule parts are read."""
        rule = SelectorRule.from_dict({
            "select": ".brand h1",
            "extract": "text",
            "filter": "Brand: (.*)",
            "transformer": "bodyTransformer",
        })
        assert rule.select == ".brand h1"
        assert rule.extract is ExtractKind.TEXT
        assert rule.extract_name == "text"
        assert rule.filter == "Brand: (.*)"
        assert rule.transformer == "bodyTransformer"

    def test_optional_parts_absent(self):
        """Test filter and transformer default to None."""
        rule = SelectorRule.from_dict({"select": "p", "extract": "inner_html"})
        assert rule.filter is None
        assert rule.transformer is None

    def test_unknown_kind_kept_by_name(self):
        """Test an unknown kind keeps its configured name for logging."""
        rule = SelectorRule.from_dict({"select": "p", "extract": "href"})
        assert rule.extract is None
        assert rule.extract_name == "href"
        assert "href" in str(rule)

    def test_non_object_rejected(self):
        """Test a rule that is not an object is a configuration error."""
        with pytest.raises(ConfigurationError):
            SelectorRule.from_dict("p")


class TestRuleSet:
    """Tests for RuleSet parsing."""

    def test_from_dict(self):
        """Test rules are read in configuration order."""
        rule_set = RuleSet.from_dict("lex", {"rules": {
            "prefLabel": {"select": "h1", "extract": "text"},
            "descriptionXML": {"select": ".intro", "extract": "inner_html"},
        }})
        assert rule_set.name == "lex"
        assert list(rule_set.rules) == ["prefLabel", "descriptionXML"]
        assert rule_set.unknown_extract_kinds() == {}

    def test_missing_rules_rejected(self):
        """Test a rule set without a rules mapping is rejected."""
        with pytest.raises(ConfigurationError):
            RuleSet.from_dict("broken", {"select": "h1"})

    def test_unknown_extract_kinds_listed(self):
        """Test attributes with unknown kinds are reported."""
        rule_set = RuleSet.from_dict("odd", {"rules": {
            "a": {"select": "h1", "extract": "text"},
            "b": {"select": "h2", "extract": "outer_html"},
        }})
        assert rule_set.unknown_extract_kinds() == {"b": "outer_html"}


class TestEndpoint:
    """Tests for Endpoint parsing."""

    def test_current_keys(self):
        """Test ruleSetName and imageUrl keys."""
        endpoint = Endpoint.from_dict({
            "uuid": "u-1",
            "url": "http://blogs.example.com/lex",
            "ruleSetName": "blog",
            "imageUrl": "http://img.example.com/lex.png",
            "strapline": "Legal matters",
        })
        assert endpoint.rule_set_name == "blog"
        assert endpoint.imageUrl == "http://img.example.com/lex.png"
        assert endpoint.strapline == "Legal matters"
        assert endpoint.prefLabel is None

    def test_legacy_keys(self):
        """Test ruleSet and _imageUrl keys written by older configurations."""
        endpoint = Endpoint.from_dict({
            "uuid": "u-2",
            "url": "http://example.com",
            "ruleSet": "blog",
            "_imageUrl": "http://img.example.com/x.png",
        })
        assert endpoint.rule_set_name == "blog"
        assert endpoint.imageUrl == "http://img.example.com/x.png"

    def test_uuid_required(self):
        """Test an endpoint without uuid is rejected."""
        with pytest.raises(ConfigurationError):
            Endpoint.from_dict({"url": "http://example.com"})

    def test_to_dict_drops_absent_fields(self):
        """Test serialisation leaves out unset fields."""
        endpoint = Endpoint(uuid="u-3", url="http://example.com", rule_set_name="blog")
        assert endpoint.to_dict() == {
            "uuid": "u-3",
            "url": "http://example.com",
            "ruleSetName": "blog",
        }


class TestBrandConfig:
    """Tests for BrandConfig parsing and validation."""

    def test_from_dict(self):
        """Test endpoints and rule sets are parsed."""
        config = BrandConfig.from_dict({
            "endpoints": [
                {"uuid": "a", "url": "http://a", "ruleSet": "blog"},
                {"uuid": "b", "url": "http://b"},
            ],
            "ruleSets": {
                "blog": {"rules": {"prefLabel": {"select": "h1", "extract": "text"}}},
            },
        })
        assert config.uuids == ["a", "b"]
        assert set(config.rule_sets) == {"blog"}

    def test_absent_sections_default_to_empty(self):
        """Test missing or null sections load as empty."""
        assert BrandConfig.from_dict({}).endpoints == []
        config = BrandConfig.from_dict({"endpoints": None, "ruleSets": None})
        assert config.endpoints == []
        assert config.rule_sets == {}

    def test_malformed_shapes_rejected(self):
        """Test sections of the wrong type are rejected, even when empty."""
        with pytest.raises(ConfigurationError):
            BrandConfig.from_dict([])
        with pytest.raises(ConfigurationError):
            BrandConfig.from_dict({"endpoints": {"uuid": "a"}})
        with pytest.raises(ConfigurationError):
            BrandConfig.from_dict({"endpoints": {}})
        with pytest.raises(ConfigurationError):
            BrandConfig.from_dict({"ruleSets": []})
        with pytest.raises(ConfigurationError):
            BrandConfig.from_dict({"ruleSets": ""})

    def test_validate_rules_unknown_kind(self):
        """Test strict validation names the rule with an unknown kind."""
        config = BrandConfig.from_dict({
            "ruleSets": {"blog": {"rules": {"x": {"select": "h1", "extract": "href"}}}},
        })
        with pytest.raises(ConfigurationError) as exc:
            config.validate_rules()
        assert "blog.x" in str(exc.value)

    def test_validate_rules_broken_selectors(self):
        """Test strict validation rejects empty and unparsable selectors."""
        config = BrandConfig.from_dict({
            "ruleSets": {"blog": {"rules": {
                "ok": {"select": "h1", "extract": "text"},
                "empty": {"extract": "text"},
                "bad": {"select": "div[", "extract": "text"},
            }}},
        })
        with pytest.raises(ConfigurationError) as exc:
            config.validate_rules()
        assert "blog.empty" in str(exc.value)
        assert "blog.bad" in str(exc.value)
        assert "blog.ok" not in str(exc.value)

    def test_validate_rules_passes(self):
        """Test a well-formed configuration validates."""
        config = BrandConfig.from_dict({
            "ruleSets": {"blog": {"rules": {"x": {"select": ".intro > p", "extract": "inner_html"}}}},
        })
        config.validate_rules()

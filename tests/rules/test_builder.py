"""Tests for paramguard.rules.builder module."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from paramguard.rules import ParamType, RuleSetBuilder


class TestRuleSetBuilder:
    """Test building rule sets with the DSL."""

    def test_required_and_optional(self):
        builder = RuleSetBuilder()
        builder.required("id", type="integer")
        builder.optional("q")
        rule_set = builder.build()

        assert [r.name for r in rule_set.required_rules] == ["id"]
        assert [r.name for r in rule_set.optional_rules] == ["q"]
        assert rule_set.required_rules[0].options.type is ParamType.INTEGER

    def test_typed_shortcuts(self):
        builder = RuleSetBuilder()
        builder.integer("age", required=True, minvalue=18)
        builder.float("ratio")
        builder.decimal("price")
        builder.string("sort", options=["asc", "desc"], default="asc")
        builder.boolean("verbose")
        builder.datetime("since")
        builder.array("tags")
        builder.binary("blob")
        builder.file("upload")
        rule_set = builder.build()

        assert [r.name for r in rule_set.required_rules] == ["age"]
        types = [r.options.type for r in rule_set.optional_rules]
        assert types == [
            ParamType.FLOAT,
            ParamType.DECIMAL,
            ParamType.STRING,
            ParamType.BOOLEAN,
            ParamType.DATETIME,
            ParamType.ARRAY,
            ParamType.BINARY,
            ParamType.FILE,
        ]
        sort = rule_set.optional_rules[2].options
        assert sort.allowed_values == ("asc", "desc")
        assert sort.has_default and sort.default == "asc"

    def test_in_keyword(self):
        builder = RuleSetBuilder()
        builder.integer("level", in_=[1, 2, 3])
        rule = builder.build().optional_rules[0]
        assert rule.options.allowed_values == (1, 2, 3)

    def test_namespace(self):
        builder = RuleSetBuilder()
        with builder.namespace("user") as user:
            user.string("name", required=True)
            user.boolean("admin", default=False)
        rule_set = builder.build()

        namespaced = rule_set.get_namespace("user")
        assert namespaced is not None
        assert [r.name for r in namespaced.required_rules] == ["name"]
        assert [r.name for r in namespaced.optional_rules] == ["admin"]
        assert rule_set.param_names() == frozenset({"user"})

    def test_nested_namespace_rejected(self):
        builder = RuleSetBuilder()
        with builder.namespace("user") as user:
            with pytest.raises(ValueError, match="Cannot nest namespace 'address'"):
                with user.namespace("address"):
                    pass

    def test_duplicate_rejected_on_build(self):
        builder = RuleSetBuilder()
        builder.string("name", required=True)
        builder.string("name")
        with pytest.raises(PydanticValidationError, match="Duplicate"):
            builder.build()

    def test_empty_builder(self):
        assert RuleSetBuilder().build().is_empty()

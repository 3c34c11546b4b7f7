"""Rule set construction DSL.

``RuleSetBuilder`` collects rule declarations and freezes them into a
``RuleSetModel``. It mirrors the way request parameters are usually
described next to a service definition:

    >>> builder = RuleSetBuilder()
    >>> builder.integer("age", required=True, minvalue=18)
    >>> builder.string("sort", options=["asc", "desc"], default="asc")
    >>> with builder.namespace("user") as user:
    ...     user.string("name", required=True)
    >>> rule_set = builder.build()
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from ._types import ParamType
from .models import NamespacedRuleSetModel, RuleModel, RuleOptionsModel, RuleSetModel


class RuleSetBuilder:
    """Accumulates required, optional and namespaced rules."""

    def __init__(self, space_name: str | None = None):
        self.space_name = space_name
        self._required: list[RuleModel] = []
        self._optional: list[RuleModel] = []
        self._namespaces: list[RuleSetBuilder] = []

    def required(self, name: str, **options: Any) -> RuleModel:
        """Declare a required parameter."""
        rule = self._make_rule(name, options)
        self._required.append(rule)
        return rule

    def optional(self, name: str, **options: Any) -> RuleModel:
        """Declare an optional parameter."""
        rule = self._make_rule(name, options)
        self._optional.append(rule)
        return rule

    def param(self, name: str, type: ParamType | str, required: bool = False, **options: Any) -> RuleModel:
        """Declare a typed parameter, required or optional."""
        options["type"] = type
        if required:
            return self.required(name, **options)
        return self.optional(name, **options)

    def integer(self, name: str, required: bool = False, **options: Any) -> RuleModel:
        return self.param(name, ParamType.INTEGER, required, **options)

    def float(self, name: str, required: bool = False, **options: Any) -> RuleModel:
        return self.param(name, ParamType.FLOAT, required, **options)

    def decimal(self, name: str, required: bool = False, **options: Any) -> RuleModel:
        return self.param(name, ParamType.DECIMAL, required, **options)

    def string(self, name: str, required: bool = False, **options: Any) -> RuleModel:
        return self.param(name, ParamType.STRING, required, **options)

    def boolean(self, name: str, required: bool = False, **options: Any) -> RuleModel:
        return self.param(name, ParamType.BOOLEAN, required, **options)

    def datetime(self, name: str, required: bool = False, **options: Any) -> RuleModel:
        return self.param(name, ParamType.DATETIME, required, **options)

    def array(self, name: str, required: bool = False, **options: Any) -> RuleModel:
        return self.param(name, ParamType.ARRAY, required, **options)

    def binary(self, name: str, required: bool = False, **options: Any) -> RuleModel:
        return self.param(name, ParamType.BINARY, required, **options)

    def file(self, name: str, required: bool = False, **options: Any) -> RuleModel:
        return self.param(name, ParamType.FILE, required, **options)

    @contextmanager
    def namespace(self, space_name: str) -> Iterator[RuleSetBuilder]:
        """Declare rules for the nested dictionary stored under ``space_name``.

        Raises:
            ValueError: If called on a namespace builder (namespaces are one level deep)
        """
        if self.space_name is not None:
            raise ValueError(
                f"Cannot nest namespace '{space_name}' inside namespace '{self.space_name}'"
            )
        nested = RuleSetBuilder(space_name)
        yield nested
        self._namespaces.append(nested)

    def build(self) -> RuleSetModel:
        """Freeze the declarations into a ``RuleSetModel``.

        Raises:
            pydantic.ValidationError: If two rules share a name at one level
        """
        return RuleSetModel(
            required_rules=tuple(self._required),
            optional_rules=tuple(self._optional),
            namespaced_sets=tuple(ns._build_namespace() for ns in self._namespaces),
        )

    def _build_namespace(self) -> NamespacedRuleSetModel:
        return NamespacedRuleSetModel(
            space_name=self.space_name,
            required_rules=tuple(self._required),
            optional_rules=tuple(self._optional),
        )

    @staticmethod
    def _make_rule(name: str, options: dict[str, Any]) -> RuleModel:
        return RuleModel(name=name, options=RuleOptionsModel.model_validate(options))

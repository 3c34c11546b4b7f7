"""Pydantic models for paramguard rule sets.

This module contains the model definitions for rules, their options and the
rule sets grouping them. Rule sets are read-only once built: the validator
only ever reads their final shape.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, model_validator

from paramguard.models import ParamguardBaseModel

from ._types import ParamType


class RuleOptionsModel(ParamguardBaseModel):
    """Options attached to a single rule.

    Attributes:
        type: The declared parameter type, used for format checks and coercion.
        null: Whether an explicit null value is accepted for a required rule.
        default: Value injected when an optional parameter is absent.
        has_default: Whether a default was explicitly provided (even ``None``).
        options: Allowed set of coerced values.
        in_: Synonym of ``options`` (alias ``in``). Consulted only when
            ``options`` is not set.
        minvalue: Numeric lower bound. Ignored when a value set is declared.
        doc: Free-form description of the parameter.

    Example:
        >>> opts = RuleOptionsModel(type="integer", minvalue=18)
        >>> opts.type
        <ParamType.INTEGER: 'integer'>
    """

    type: ParamType | None = None
    null: bool = False
    default: Any | None = None
    has_default: bool = False
    options: tuple[Any, ...] | None = None
    in_: tuple[Any, ...] | None = Field(default=None, alias="in")
    minvalue: int | float | None = None
    doc: str | None = None

    @model_validator(mode="before")
    @classmethod
    def set_has_default(cls, values: Any) -> Any:
        """Set has_default based on whether default is present in input."""
        if isinstance(values, dict) and "default" in values:
            values = {**values, "has_default": True}
        return values

    @property
    def allowed_values(self) -> tuple[Any, ...] | None:
        """The value-set constraint, ``options`` taking precedence over ``in``."""
        if self.options is not None:
            return self.options
        return self.in_


class RuleModel(ParamguardBaseModel):
    """A named constraint describing one expected parameter.

    Rules can be given with a nested options mapping or in flat form, in
    which case every key but ``name`` belongs to the options:

        >>> RuleModel(name="age", options={"type": "integer"})
        >>> RuleModel.model_validate({"name": "age", "type": "integer"})
    """

    name: str
    options: RuleOptionsModel = Field(default_factory=RuleOptionsModel)

    @model_validator(mode="before")
    @classmethod
    def fold_flat_options(cls, values: Any) -> Any:
        """Move flat option keys into the options mapping."""
        if not isinstance(values, dict):
            return values
        if isinstance(values.get("options"), (dict, RuleOptionsModel)):
            return values
        options = {k: v for k, v in values.items() if k != "name"}
        if not options:
            return values
        folded: dict[str, Any] = {"options": options}
        if "name" in values:
            folded["name"] = values["name"]
        return folded


class BaseRuleSetModel(ParamguardBaseModel):
    """Required and optional rules declared at one nesting level.

    Attributes:
        required_rules: Rules whose parameter must be present (alias ``required``).
        optional_rules: Rules whose parameter may be omitted (alias ``optional``).
    """

    required_rules: tuple[RuleModel, ...] = Field(default=(), alias="required")
    optional_rules: tuple[RuleModel, ...] = Field(default=(), alias="optional")

    def _declared_names(self) -> list[str]:
        return [r.name for r in self.required_rules] + [r.name for r in self.optional_rules]

    def param_names(self) -> frozenset[str]:
        """All top-level parameter names covered by this rule set."""
        return frozenset(self._declared_names())

    def is_empty(self) -> bool:
        return not self._declared_names()

    @model_validator(mode="after")
    def check_unique_names(self) -> BaseRuleSetModel:
        """Reject rule sets where two rules share a name at the same level."""
        seen: set[str] = set()
        duplicates: list[str] = []
        for name in self._declared_names():
            if name in seen and name not in duplicates:
                duplicates.append(name)
            seen.add(name)
        if duplicates:
            raise ValueError(f"Duplicate parameter name(s): {', '.join(duplicates)}")
        return self


class NamespacedRuleSetModel(BaseRuleSetModel):
    """Rules governing the keys of one nested dictionary.

    The ``space_name`` (alias ``name``) is the top-level key holding the
    nested dictionary. Namespaces are exactly one level deep, so a
    namespaced set cannot declare namespaces of its own.

    Example:
        >>> user = NamespacedRuleSetModel(
        ...     name="user",
        ...     required=[RuleModel(name="name")],
        ... )
    """

    space_name: str = Field(alias="name")


class RuleSetModel(BaseRuleSetModel):
    """The full collection of rules for one request shape.

    Attributes:
        namespaced_sets: Nested rule sets, one per dictionary-valued
            parameter (alias ``namespaces``).

    Example:
        >>> rule_set = RuleSetModel.model_validate({
        ...     "required": [{"name": "age", "type": "integer", "minvalue": 18}],
        ...     "optional": [{"name": "limit", "type": "integer", "default": 10}],
        ...     "namespaces": [{"name": "user", "required": [{"name": "name"}]}],
        ... })
        >>> sorted(rule_set.param_names())
        ['age', 'limit', 'user']
    """

    namespaced_sets: tuple[NamespacedRuleSetModel, ...] = Field(default=(), alias="namespaces")

    def _declared_names(self) -> list[str]:
        return super()._declared_names() + [ns.space_name for ns in self.namespaced_sets]

    def get_namespace(self, space_name: str) -> NamespacedRuleSetModel | None:
        """Return the namespaced set governing ``space_name``, if declared."""
        for namespaced in self.namespaced_sets:
            if namespaced.space_name == space_name:
                return namespaced
        return None

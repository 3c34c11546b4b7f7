"""Core validation logic for paramguard.

``ParamsValidator`` walks a rule set against a request's parameter
dictionary. It enforces presence, nullability, type format and value
constraints, applies defaults and coerces values, and rejects keys the rule
set does not declare. Validation is fail-fast: the first violation raises.
"""

import copy
from collections.abc import Collection, Mapping
from pathlib import Path
from typing import Any

from paramguard.rules import RuleModel, RuleSetModel, load_rule_set_from_file

from .converters import TypeConverter, to_float
from .errors import (
    InvalidParamValue,
    MissingParam,
    NoParamsDefined,
    UnexpectedParam,
    ValidationError,
)


def extract_param_value(
    params: Mapping[str, Any], name: str, namespace: str | None = None
) -> tuple[Any, Mapping[str, Any] | None]:
    """Extract a parameter value and its namespaced container.

    Args:
        params: The request params.
        name: The parameter name.
        namespace: Optional namespace holding the parameter.

    Returns:
        ``(value, None)`` without a namespace, ``(value, container)`` with
        one. A namespace that is absent (or not a dictionary) yields
        ``(None, None)``.
    """
    if not namespace:
        return params.get(name), None
    namespaced = params.get(namespace)
    if not isinstance(namespaced, Mapping):
        return None, None
    return namespaced.get(name), namespaced


def check_unexpected_params(params: Mapping[str, Any], param_names: Collection[str]) -> None:
    """Raise ``UnexpectedParam`` naming every key not in ``param_names``."""
    unexpected = [key for key in params if key not in param_names]
    if unexpected:
        raise UnexpectedParam(
            f"Request included unexpected parameter(s): {', '.join(unexpected)}", unexpected
        )


def in_value_set(value: Any, allowed: Collection[Any]) -> bool:
    """Membership test that keeps booleans apart from numbers.

    ``True == 1`` holds in Python, but a value set of ``[1]`` must not
    accept ``True`` (nor ``[True]`` accept ``1``).
    """
    return any(
        candidate == value and isinstance(candidate, bool) == isinstance(value, bool)
        for candidate in allowed
    )


def assert_params_defined(rule_set: RuleSetModel) -> None:
    """Raise ``NoParamsDefined`` if the rule set declares nothing at all."""
    if rule_set.is_empty():
        raise NoParamsDefined("No parameters are defined for this request")


class ParamsValidator:
    """Validates request parameters against a rule set.

    The validator holds no state besides the rule set, which it never
    modifies, so one instance can serve concurrent requests.

    Example:
        >>> validator = ParamsValidator.from_dict({
        ...     "required": [{"name": "age", "type": "integer", "minvalue": 18}],
        ... })
        >>> validator.validate({"age": "21"})
        {'age': 21}
    """

    def __init__(self, rule_set: RuleSetModel):
        self.rule_set = rule_set

    @classmethod
    def from_dict(cls, rule_set_dict: dict[str, Any]) -> "ParamsValidator":
        """Create a validator from a rule set dictionary."""
        return cls(RuleSetModel.model_validate(rule_set_dict))

    @classmethod
    def from_file(cls, path: str | Path) -> "ParamsValidator":
        """Create a validator from a YAML or JSON rule file."""
        return cls(load_rule_set_from_file(path))

    def validate(
        self, params: Mapping[str, Any] | None, ignore_unexpected: bool = False
    ) -> dict[str, Any]:
        """Validate params and return a normalized copy.

        Args:
            params: The incoming request params. ``None`` is treated as empty.
            ignore_unexpected: Whether top-level keys missing from the rule
                set are tolerated.

        Returns:
            A copy of ``params`` with values coerced and defaults applied.
            The caller's dictionary, and the nested dictionaries in it, are
            left untouched.

        Raises:
            ValidationError: On the first violation found
        """
        if params is None:
            params = {}
        rule_set = self.rule_set

        # Only the first level is checked here
        if not ignore_unexpected:
            check_unexpected_params(params, rule_set.param_names())

        working = dict(params)
        for namespaced in rule_set.namespaced_sets:
            nested = working.get(namespaced.space_name)
            if isinstance(nested, Mapping):
                working[namespaced.space_name] = dict(nested)

        for rule in rule_set.required_rules:
            self._check_required_rule(rule, working)
        for rule in rule_set.optional_rules:
            self._run_optional_rule(rule, working)

        for namespaced in rule_set.namespaced_sets:
            for rule in namespaced.required_rules:
                self._check_required_rule(rule, working, namespaced.space_name)
            for rule in namespaced.optional_rules:
                self._run_optional_rule(rule, working, namespaced.space_name)

        # Nested params, one level deep only
        for key, value in params.items():
            if not isinstance(value, Mapping):
                continue
            namespaced = rule_set.get_namespace(key)
            if namespaced is None:
                raise UnexpectedParam(f"Request included unexpected parameter: {key}", [key])
            if not ignore_unexpected:
                check_unexpected_params(value, namespaced.param_names())

        return working

    def _check_required_rule(
        self, rule: RuleModel, params: dict[str, Any], namespace: str | None = None
    ) -> dict[str, Any]:
        name = rule.name
        options = rule.options
        value, namespaced = extract_param_value(params, name, namespace)
        container = namespaced if namespace else params

        if container is None or name not in container:
            where = f" from '{namespace}'" if namespace else ""
            raise MissingParam(f"'{name}' is missing{where} - passed params: {params!r}.", param=name)
        if value is None and not options.null:
            raise InvalidParamValue(
                f"Value for parameter '{name}' is missing - passed params: {params!r}.",
                param=name,
            )
        # An accepted null still goes through the type and value checks
        if options.type is not None:
            TypeConverter.verify_format(name, value, options.type)

        allowed = options.allowed_values
        if allowed is not None:
            if options.type is not None:
                # Cast first so the comparison is made on the declared type
                value = container[name] = self._coerce(rule, value)
            if not in_value_set(value, allowed):
                raise InvalidParamValue(
                    f"Value for parameter '{name}' ({value}) is not in the allowed set of values.",
                    param=name,
                    value=value,
                )
        elif options.minvalue is not None:
            if to_float(value) < options.minvalue:
                raise InvalidParamValue(
                    f"Value for parameter '{name}' is lower than the min accepted value "
                    f"({options.minvalue}).",
                    param=name,
                    value=value,
                )

        if options.type is not None and allowed is None:
            container[name] = self._coerce(rule, value)
        return params

    def _run_optional_rule(
        self, rule: RuleModel, params: dict[str, Any], namespace: str | None = None
    ) -> dict[str, Any]:
        name = rule.name
        options = rule.options
        value, namespaced = extract_param_value(params, name, namespace)
        container = namespaced if namespace else params
        if container is None:
            # Absent namespace: nothing to default or cast
            return params

        if value is None and options.has_default:
            value = container[name] = copy.deepcopy(options.default)
        if options.type is not None and value is not None:
            value = container[name] = self._coerce(rule, value)

        allowed = options.allowed_values
        if allowed is not None and value is not None and not in_value_set(value, allowed):
            raise InvalidParamValue(
                f"Value for parameter '{name}' ({value}) is not in the allowed set of values.",
                param=name,
                value=value,
            )
        return params

    @staticmethod
    def _coerce(rule: RuleModel, value: Any) -> Any:
        try:
            return TypeConverter.coerce(rule.options.type, value)
        except ValidationError as e:
            raise InvalidParamValue(
                f"Value for parameter '{rule.name}': {e}", param=rule.name, value=value
            ) from e


def validate(
    raw_params: Mapping[str, Any] | None,
    rule_set: RuleSetModel,
    ignore_unexpected: bool = False,
) -> dict[str, Any]:
    """Validate request params against a rule set.

    Args:
        raw_params: The incoming request params
        rule_set: The rule set describing the expected params
        ignore_unexpected: Whether undeclared top-level keys are tolerated

    Returns:
        The normalized copy of the params

    Raises:
        ValidationError: On the first violation found

    Example:
        >>> validate(request_params, service.rule_set)
    """
    return ParamsValidator(rule_set).validate(raw_params, ignore_unexpected)

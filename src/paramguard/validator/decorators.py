"""Validation decorator for request handlers.

Example:
    >>> from paramguard.validator import validate_params
    >>>
    >>> @validate_params({"required": [{"name": "id", "type": "integer"}]})
    ... def show_item(params: dict) -> dict:
    ...     return {"id": params["id"]}
    >>>
    >>> show_item({"id": "42"})
    {'id': 42}
    >>>
    >>> # Or from a rule file
    >>> @validate_params.from_file("rules/show_item.yaml")
    ... async def show_item(params: dict) -> dict:
    ...     ...
"""

import inspect
from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import Any, TypeVar

from paramguard.rules import RuleSetModel, load_rule_set_from_file

from .core import ParamsValidator

T = TypeVar("T", bound=Callable[..., Any])


class validate_params:
    """Validate a handler's raw params before the handler runs.

    The handler receives the normalized copy in place of the raw mapping;
    validation errors propagate to the caller untouched.
    """

    def __init__(
        self,
        rule_set: RuleSetModel | dict[str, Any],
        ignore_unexpected: bool = False,
        param_arg: str = "params",
    ):
        """Initialize the validation decorator.

        Args:
            rule_set: The rule set, or a rule set dictionary
            ignore_unexpected: Whether undeclared top-level keys are tolerated
            param_arg: Name of the handler argument holding the raw params
        """
        if isinstance(rule_set, dict):
            rule_set = RuleSetModel.model_validate(rule_set)
        self.validator = ParamsValidator(rule_set)
        self.ignore_unexpected = ignore_unexpected
        self.param_arg = param_arg

    @classmethod
    def from_file(
        cls, path: str | Path, ignore_unexpected: bool = False, param_arg: str = "params"
    ) -> "validate_params":
        """Create the decorator from a YAML or JSON rule file."""
        return cls(load_rule_set_from_file(path), ignore_unexpected, param_arg)

    def __call__(self, func: T) -> T:
        sig = inspect.signature(func)
        if self.param_arg not in sig.parameters:
            raise TypeError(f"{func.__qualname__} has no '{self.param_arg}' argument")

        def bind(args: tuple[Any, ...], kwargs: dict[str, Any]) -> inspect.BoundArguments:
            bound = sig.bind(*args, **kwargs)
            bound.arguments[self.param_arg] = self.validator.validate(
                bound.arguments.get(self.param_arg), self.ignore_unexpected
            )
            return bound

        if inspect.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                bound = bind(args, kwargs)
                return await func(*bound.args, **bound.kwargs)

            return async_wrapper  # type: ignore[return-value]

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            bound = bind(args, kwargs)
            return func(*bound.args, **bound.kwargs)

        return sync_wrapper  # type: ignore[return-value]

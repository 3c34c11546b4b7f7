"""paramguard validator - request parameter validation and type coercion.

The validator checks a parameter dictionary against a rule set and returns a
normalized copy:

- required parameters must be present and non-null (unless ``null`` is allowed)
- values must match the format of their declared type, then get coerced
- optional parameters receive their defaults when absent
- value sets (``options``/``in``) and ``minvalue`` bounds are enforced
- undeclared keys are rejected, unless told to ignore them
- namespaced dictionaries are validated the same way, one level deep

## Errors

All failures derive from ``ValidationError``:

- ``UnexpectedParam``: a key was present but not declared
- ``MissingParam``: a required key is absent
- ``InvalidParamType``: a value does not match its type's format
- ``InvalidParamValue``: a disallowed null, a value outside its set or below
  its minimum, or an impossible boolean cast
- ``NoParamsDefined``: a rule set declares nothing (see ``assert_params_defined``)

## Quick Example

```python
from paramguard.rules import RuleSetBuilder
from paramguard.validator import validate

builder = RuleSetBuilder()
builder.integer("age", required=True, minvalue=18)
rule_set = builder.build()

validate({"age": "21"}, rule_set)
# Returns: {"age": 21}
```
"""

from .converters import TypeConverter, TypeHandler, type_handlers
from .core import (
    ParamsValidator,
    assert_params_defined,
    check_unexpected_params,
    extract_param_value,
    in_value_set,
    validate,
)
from .decorators import validate_params
from .errors import (
    InvalidParamType,
    InvalidParamValue,
    MissingParam,
    NoParamsDefined,
    UnexpectedParam,
    ValidationError,
)

__all__ = [
    # Errors
    "ValidationError",
    "NoParamsDefined",
    "MissingParam",
    "UnexpectedParam",
    "InvalidParamType",
    "InvalidParamValue",
    # Converters
    "TypeConverter",
    "TypeHandler",
    "type_handlers",
    # Core validator
    "ParamsValidator",
    "validate",
    "extract_param_value",
    "check_unexpected_params",
    "in_value_set",
    "assert_params_defined",
    # Decorator
    "validate_params",
]

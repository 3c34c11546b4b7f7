"""paramguard - request parameter validation against declarative rule sets.

## Modules

### Rule sets (`paramguard.rules`)
Immutable descriptions of the params a request accepts, built with
`RuleSetBuilder` or loaded from YAML/JSON rule files.

### Validation (`paramguard.validator`)
The validation and type-coercion engine, its error taxonomy and a handler
decorator.

### Services (`paramguard.services`)
Named endpoints bound to their rule sets, and a registry to look them up.

## Quick Start

```python
from paramguard import RuleSetBuilder, ValidationError, validate

builder = RuleSetBuilder()
builder.integer("age", required=True, minvalue=18)
builder.boolean("verbose", default="N")
rule_set = builder.build()

try:
    params = validate(request.params, rule_set)
except ValidationError as e:
    return bad_request(str(e))
```
"""

from .rules import RuleSetBuilder, RuleSetModel, load_rule_set_from_file
from .validator import ValidationError, validate

__all__ = [
    "RuleSetBuilder",
    "RuleSetModel",
    "load_rule_set_from_file",
    "ValidationError",
    "validate",
]

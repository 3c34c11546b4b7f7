"""paramguard rule sets - declarative descriptions of request parameters.

A rule set lists the parameters one request shape expects:

- required rules, whose key must be present
- optional rules, with defaults and value constraints
- namespaced rule sets, validating a nested dictionary one level deep

Rule sets are immutable once built. Build them with ``RuleSetBuilder``,
from a YAML/JSON rule file with ``load_rule_set_from_file``, or directly
from the models:

```python
from paramguard.rules import RuleSetBuilder

builder = RuleSetBuilder()
builder.integer("age", required=True, minvalue=18)
with builder.namespace("user") as user:
    user.string("name", required=True)
rule_set = builder.build()
```
"""

from ._types import ParamType
from .builder import RuleSetBuilder
from .loaders import (
    load_rule_set,
    load_rule_set_from_file,
    parse_rule_data,
    validate_rule_set_structure,
)
from .models import (
    BaseRuleSetModel,
    NamespacedRuleSetModel,
    RuleModel,
    RuleOptionsModel,
    RuleSetModel,
)

__all__ = [
    # Types
    "ParamType",
    # Models
    "RuleOptionsModel",
    "RuleModel",
    "BaseRuleSetModel",
    "NamespacedRuleSetModel",
    "RuleSetModel",
    # Builder
    "RuleSetBuilder",
    # Loaders
    "load_rule_set",
    "load_rule_set_from_file",
    "parse_rule_data",
    "validate_rule_set_structure",
]

"""
Global pytest configuration and fixtures.
"""

import pytest

from paramguard.rules import RuleSetModel


@pytest.fixture
def user_rule_set() -> RuleSetModel:
    """Rule set with required, optional and namespaced rules."""
    return RuleSetModel.model_validate(
        {
            "required": [
                {"name": "age", "type": "integer", "minvalue": 18},
            ],
            "optional": [
                {"name": "limit", "type": "integer", "default": 10},
                {"name": "sort", "type": "string", "options": ["asc", "desc"]},
            ],
            "namespaces": [
                {
                    "name": "user",
                    "required": [{"name": "name"}],
                    "optional": [{"name": "admin", "type": "boolean", "default": False}],
                }
            ],
        }
    )


@pytest.fixture
def rules_file(tmp_path):
    """Write a YAML rule file and return its path."""
    path = tmp_path / "rules.yaml"
    path.write_text(
        """
required:
  - name: age
    type: integer
    minvalue: 18
    doc: Age in years
optional:
  - name: limit
    type: integer
    default: 10
  - name: sort
    in: [asc, desc]
namespaces:
  - name: user
    required:
      - name: name
""",
        encoding="utf-8",
    )
    return path

"""Rule set loading utilities for paramguard.

Rule files are YAML or JSON documents with three optional top-level keys:

    required:
      - name: age
        type: integer
        minvalue: 18
    optional:
      - name: limit
        type: integer
        default: 10
    namespaces:
      - name: user
        required:
          - name: name

In YAML the ``null`` option must be quoted (``"null": true``), otherwise the
key itself parses as null.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema
import yaml

from .models import RuleSetModel

logger = logging.getLogger(__name__)

RULE_SET_SCHEMA_PATH = Path(__file__).parent / "schemas" / "rule-set-1.json"


@lru_cache(maxsize=1)
def _rule_set_json_schema() -> dict[str, Any]:
    with open(RULE_SET_SCHEMA_PATH, encoding="utf-8") as f:
        schema: dict[str, Any] = json.load(f)
    return schema


def parse_rule_data(content: str, format: str = "yaml") -> dict[str, Any]:
    """Parse rule file content into a plain dictionary.

    Args:
        content: Rule file content as string
        format: Format of the content ('yaml' or 'json')

    Returns:
        Rule set dictionary (empty for an empty document)

    Raises:
        ValueError: If format is not supported or parsing fails
    """
    if format == "yaml":
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML: {e}") from e
    elif format == "json":
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ValueError(f"Failed to parse JSON: {e}") from e
    else:
        raise ValueError(f"Unsupported format: {format}. Use 'yaml' or 'json'")

    return data if data is not None else {}


def validate_rule_set_structure(data: Any) -> None:
    """Validate that raw rule data has the expected structure using JSON Schema.

    Args:
        data: Parsed rule file content

    Raises:
        ValueError: If the structure is invalid
    """
    try:
        jsonschema.validate(instance=data, schema=_rule_set_json_schema())
    except jsonschema.ValidationError as e:
        if e.absolute_path:
            path = ".".join(str(p) for p in e.absolute_path)
            raise ValueError(f"Rule set validation error at '{path}': {e.message}") from e
        raise ValueError(f"Rule set validation error: {e.message}") from e


def load_rule_set(content: str, format: str = "yaml") -> RuleSetModel:
    """Load a rule set from string content.

    Args:
        content: Rule file content as string
        format: Format of the content ('yaml' or 'json')

    Returns:
        The frozen rule set

    Raises:
        ValueError: If parsing or structure validation fails
        pydantic.ValidationError: If the rules break a model invariant
            (e.g. duplicate names)
    """
    data = parse_rule_data(content, format=format)
    validate_rule_set_structure(data)
    return RuleSetModel.model_validate(data)


def load_rule_set_from_file(path: str | Path) -> RuleSetModel:
    """Load a rule set from a YAML or JSON file.

    Args:
        path: Path to the rule file

    Returns:
        The frozen rule set

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file format is not supported or parsing fails
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Rule file not found: {path}")

    if path.suffix.lower() in [".yaml", ".yml"]:
        format = "yaml"
    elif path.suffix.lower() == ".json":
        format = "json"
    else:
        raise ValueError(f"Unsupported file extension: {path.suffix}. Use .yaml, .yml, or .json")

    logger.debug(f"Loading rule set from {path}")
    content = path.read_text(encoding="utf-8")
    return load_rule_set(content, format=format)

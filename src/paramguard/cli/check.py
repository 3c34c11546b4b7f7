import json
import logging
from pathlib import Path
from typing import Any

import click

from paramguard.cli.utils import configure_logging, get_env_flag, output_error, output_result
from paramguard.rules import load_rule_set_from_file
from paramguard.validator import ValidationError, assert_params_defined, validate

logger = logging.getLogger(__name__)


def _read_params(params: str | None, params_file: Path | None) -> dict[str, Any]:
    if params is not None and params_file is not None:
        raise click.UsageError("Use either --params or --params-file, not both")
    if params_file is not None:
        params = params_file.read_text(encoding="utf-8")
    if params is None:
        return {}
    try:
        data = json.loads(params)
    except json.JSONDecodeError as e:
        raise ValueError(f"Params are not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("Params must be a JSON object")
    return data


def _format_check_result(result: dict[str, Any]) -> str:
    output = [click.style("✅ Params are valid", fg="green", bold=True)]
    if result:
        output.append("")
        output.append(json.dumps(result, indent=2, default=str))
    return "\n".join(output)


@click.command(name="check")
@click.argument("rules_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--params", help="Request params as a JSON object")
@click.option(
    "--params-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="File holding the request params as a JSON object",
)
@click.option("--ignore-unexpected", is_flag=True, help="Tolerate undeclared top-level params")
@click.option("--require-rules", is_flag=True, help="Fail if the rule file declares nothing")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def check(
    rules_file: Path,
    params: str | None,
    params_file: Path | None,
    ignore_unexpected: bool,
    require_rules: bool,
    json_output: bool,
    debug: bool,
) -> None:
    """Validate request params against a rule file.

    Prints the normalized params on success, or the validation error.

    Examples:
        paramguard check rules.yaml --params '{"age": "21"}'
        paramguard check rules.yaml --params-file request.json --json-output
        paramguard check rules.yaml --params '{"x": 1}' --ignore-unexpected
    """
    if not ignore_unexpected:
        ignore_unexpected = get_env_flag("PARAMGUARD_IGNORE_UNEXPECTED")

    configure_logging(debug)

    try:
        rule_set = load_rule_set_from_file(rules_file)
        if require_rules:
            assert_params_defined(rule_set)
        raw_params = _read_params(params, params_file)
        result = validate(raw_params, rule_set, ignore_unexpected)
    except click.UsageError:
        raise
    except ValidationError as e:
        logger.debug(f"Validation against {rules_file} failed: {e}")
        output_error(e, json_output, debug)
    except Exception as e:
        output_error(e, json_output, debug)
    else:
        if json_output:
            output_result(result, json_output)
        else:
            click.echo(_format_check_result(result))

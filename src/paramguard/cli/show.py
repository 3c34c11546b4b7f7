from pathlib import Path
from typing import Any

import click

from paramguard.cli.utils import configure_logging, output_error, output_result
from paramguard.rules import BaseRuleSetModel, RuleModel, RuleSetModel, load_rule_set_from_file


def _describe_rule(rule: RuleModel) -> str:
    options = rule.options
    parts = [options.type.value if options.type is not None else "any"]
    if options.null:
        parts.append("nullable")
    if options.has_default:
        parts.append(f"default={options.default!r}")
    if options.allowed_values is not None:
        parts.append(f"in={list(options.allowed_values)!r}")
    elif options.minvalue is not None:
        parts.append(f"min={options.minvalue}")
    line = f"{rule.name} ({', '.join(parts)})"
    if options.doc:
        line += f" - {options.doc}"
    return line


def _format_rules(rules: BaseRuleSetModel, indent: str) -> list[str]:
    output = []
    for label, group in (("Required", rules.required_rules), ("Optional", rules.optional_rules)):
        if group:
            output.append(f"{indent}{click.style(label + ':', fg='cyan')}")
            output.extend(f"{indent}  • {_describe_rule(rule)}" for rule in group)
    return output


def _format_rule_set(rule_set: RuleSetModel) -> str:
    if rule_set.is_empty():
        return click.style("ℹ️  No parameters defined", fg="blue")

    output = _format_rules(rule_set, "")
    for namespaced in rule_set.namespaced_sets:
        output.append(click.style(f"Namespace '{namespaced.space_name}':", fg="yellow"))
        output.extend(_format_rules(namespaced, "  "))
    return "\n".join(output)


@click.command(name="show")
@click.argument("rules_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def show(rules_file: Path, json_output: bool, debug: bool) -> None:
    """List the parameters declared by a rule file.

    Examples:
        paramguard show rules.yaml
        paramguard show rules.yaml --json-output
    """
    configure_logging(debug)

    try:
        rule_set = load_rule_set_from_file(rules_file)
    except Exception as e:
        output_error(e, json_output, debug)
        return

    if json_output:
        result: dict[str, Any] = rule_set.model_dump(mode="json", by_alias=True, exclude_defaults=True)
        output_result(result, json_output)
    else:
        click.echo(_format_rule_set(rule_set))

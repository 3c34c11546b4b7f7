"""Shared helpers for the paramguard commands."""

import json
import logging
import os
import traceback
from typing import Any

import click

LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def get_env_flag(env_var: str, default: bool = False) -> bool:
    """Read an on/off switch such as ``PARAMGUARD_DEBUG=1`` from the environment.

    An unset or empty variable yields ``default``.
    """
    raw = os.environ.get(env_var)
    if not raw:
        return default
    return raw.strip().lower() in _TRUTHY


def configure_logging(debug: bool = False) -> None:
    """Route paramguard's loggers to stderr.

    Debug output is enabled by ``--debug`` or by ``PARAMGUARD_DEBUG``;
    otherwise only warnings and errors are shown.
    """
    level = logging.DEBUG if debug or get_env_flag("PARAMGUARD_DEBUG") else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)


def format_error(error: Exception, debug: bool = False) -> dict[str, Any]:
    """Describe an error as a dictionary: message, class name and offending param.

    With ``debug`` the current traceback is included as well.
    """
    error_info: dict[str, Any] = {"error": str(error), "type": type(error).__name__}

    param = getattr(error, "param", None)
    if param is not None:
        error_info["param"] = param

    if debug:
        error_info["traceback"] = traceback.format_exc()

    return error_info


def output_result(result: Any, json_output: bool = False) -> None:
    """Echo a command result, wrapped in a status envelope for ``--json-output``."""
    if json_output:
        click.echo(json.dumps({"status": "ok", "result": result}, indent=2, default=str))
    else:
        click.echo(result)


def output_error(error: Exception, json_output: bool = False, debug: bool = False) -> None:
    """Report a failed command and abort with a non-zero exit code."""
    error_info = format_error(error, debug)

    if json_output:
        click.echo(json.dumps({"status": "error", **error_info}, indent=2))
    else:
        click.secho(f"Error: {error_info['error']}", fg="red", err=True)
        if "traceback" in error_info:
            click.echo(error_info["traceback"], err=True)

    raise click.Abort()

"""Core types for paramguard rule sets.

This module defines the closed set of parameter types a rule can declare,
without any dependency on the Pydantic models built on top of it.
"""

from enum import Enum


class ParamType(Enum):
    """Parameter types a rule can declare.

    - INTEGER, FLOAT, DECIMAL: numeric values, usually sent as strings
    - STRING: any value, converted with ``str()``
    - BOOLEAN: one of the literals 1/true/TRUE/T/Y or 0/false/FALSE/F/N
    - DATETIME: an ISO-8601-like string (digits, dashes, colons, ``T``, spaces)
    - ARRAY: a comma-delimited string, split into a list
    - BINARY, FILE: opaque payloads, passed through untouched
    """

    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    STRING = "string"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    ARRAY = "array"
    BINARY = "binary"
    FILE = "file"


__all__ = ["ParamType"]

"""Map endpoint arguments to OpenAPI query parameters."""

import logging
import re
from typing import Any

from rpc_api_docs.catalogue.base import Argument
from rpc_api_docs.errors import Diagnostic, report
from rpc_api_docs.openapi.annotations import classify_annotations
from rpc_api_docs.openapi.models import Parameter, Schema, SchemaType

logger = logging.getLogger(__name__)

# Parameter name used for positional arguments.
POSITIONAL_ALIAS = "arg"

ARGUMENT_TYPES: dict[str, SchemaType] = {
    "bool": SchemaType.BOOLEAN,
    "int": SchemaType.INTEGER,
    "uint": SchemaType.INTEGER,
    "int64": SchemaType.INTEGER,
    "string": SchemaType.STRING,
    "array": SchemaType.ARRAY,
}

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}
_INT = re.compile(r"[+-]?[0-9]+")
_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1


def parse_default(raw: str, schema_type: SchemaType) -> Any:
    """Parse a default value for the given schema type.

    Raises ValueError if ``raw`` is not a valid value of that type.
    Non-boolean, non-integer types keep the raw text.
    """
    if schema_type == SchemaType.BOOLEAN:
        if raw in _TRUE:
            return True
        if raw in _FALSE:
            return False
        raise ValueError(f"invalid boolean {raw!r}")
    if schema_type == SchemaType.INTEGER:
        if not _INT.fullmatch(raw):
            raise ValueError(f"invalid integer {raw!r}")
        value = int(raw)
        if not _INT32_MIN <= value <= _INT32_MAX:
            raise ValueError(f"integer {raw!r} out of 32-bit range")
        return value
    return raw


def _schema_type_for(arg: Argument) -> SchemaType:
    try:
        return ARGUMENT_TYPES[arg.type]
    except KeyError:
        report(
            logger,
            Diagnostic.UNSUPPORTED_ARGUMENT_TYPE,
            "Unsupported type for argument %s: %s",
            arg.name,
            arg.type,
        )
        return SchemaType.STRING


def _default_for(arg: Argument, schema_type: SchemaType) -> Any:
    if not arg.default:
        return None
    try:
        return parse_default(arg.default, schema_type)
    except ValueError:
        report(
            logger,
            Diagnostic.UNPARSEABLE_DEFAULT,
            "Couldn't parse default value for %s: %r",
            arg.name,
            arg.default,
        )
        return arg.default


def parameter_for_argument(arg: Argument, alias_to_arg: bool = False) -> Parameter | None:
    """Build the query parameter for a single argument or option.

    Returns None for file arguments, which travel in the request body.
    """
    if arg.is_file:
        return None

    schema_type = _schema_type_for(arg)
    schema = Schema(
        type=schema_type,
        items=Schema(type=SchemaType.STRING) if schema_type == SchemaType.ARRAY else None,
        default=_default_for(arg, schema_type),
    )

    # The schema carries the default, so drop it from the prose.
    suffix = f" Default: {arg.default or ''}."
    description = arg.description.removesuffix(suffix)
    flags = classify_annotations(arg.description)

    return Parameter(
        name=POSITIONAL_ALIAS if alias_to_arg else arg.name,
        description=description,
        schema=schema,
        required=True if arg.required else None,
        deprecated=True if flags.deprecated else None,
        x_experimental=True if flags.experimental else None,
    )


def parameter_for_multi_argument(args: list[Argument]) -> Parameter:
    """Merge several positional arguments into one exploded array parameter.

    Each slot of the array is one argument, in order. The merged
    ``required`` flag mirrors the last argument only.
    """
    descriptions = []
    defaults = []
    any_default = False
    deprecated = False
    required = False
    for i, arg in enumerate(args):
        p = parameter_for_argument(arg)
        if p is None:
            raise ValueError(f"file argument {arg.name!r} cannot be a query parameter")
        descriptions.append(f"arg{i} ({p.name}): {(p.description or '').strip()}")
        defaults.append(p.schema_.default)
        any_default = any_default or p.schema_.default is not None
        deprecated = deprecated or bool(p.deprecated)
        required = bool(p.required)

    # TODO: use each argument's own type for its slot once tuple-style
    # array schemas (OpenAPI 3.1 prefixItems) are targeted.
    schema = Schema(
        type=SchemaType.ARRAY,
        items=Schema(type=SchemaType.STRING),
        min_items=len(args),
        max_items=len(args),
        default=defaults if any_default else None,
    )
    return Parameter(
        name=POSITIONAL_ALIAS,
        description="\n".join(descriptions),
        schema=schema,
        explode=True,
        required=True if required else None,
        deprecated=True if deprecated else None,
    )

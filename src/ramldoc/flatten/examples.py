"""Request example synthesis.

A method either declares example bodies per content type, or only a list of
parameters. In the second case we build a single JSON object from the
parameter examples, filling in placeholder values where none are given.
"""

import json
from enum import Enum
from typing import Any

from ramldoc.exceptions import UnsupportedParameterType

JSON_INDENT_SIZE = 2
NUMBER_PLACEHOLDER = 1234567890
STRING_PLACEHOLDER_PREFIX = "EXAMPLE: "


class ParamType(str, Enum):
    STRING = "string"
    NUMBER = "number"

    @classmethod
    def parse(cls, value: str, display_name: str | None = None) -> "ParamType":
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedParameterType(value, display_name) from None


def pretty_json(data: Any) -> str:
    return json.dumps(data, indent=JSON_INDENT_SIZE, ensure_ascii=False)


def _parse_float(value: str) -> int | float:
    # 1.0 prints as 1, the way JavaScript serializes it
    number = float(value)
    return int(number) if number.is_integer() else number


def try_pretty_json(text: Any) -> Any:
    """Pretty print a JSON string, or return it unchanged if it isn't JSON.

    YAML scalars such as ``example: 5`` or ``example: true`` are treated as
    their JSON text, so they come back as ``"5"`` and ``"true"``.
    """
    if isinstance(text, (bool, int, float)):
        text = json.dumps(text)
    try:
        return pretty_json(json.loads(text, parse_float=_parse_float))
    except (TypeError, ValueError):
        return text


def make_example_from_type(param_type: str, name: str) -> Any:
    kind = ParamType.parse(param_type, name)
    if kind is ParamType.STRING:
        return STRING_PLACEHOLDER_PREFIX + name
    return NUMBER_PLACEHOLDER


def set_dotted(target: dict, path: str, value: Any) -> None:
    """Assign ``value`` at ``a.b.c`` inside ``target``, creating dicts on the way."""
    *parents, leaf = path.split(".")
    node = target
    for key in parents:
        child = node.get(key)
        if not isinstance(child, dict):
            child = {}
            node[key] = child
        node = child
    node[leaf] = value


def make_request_examples(method: dict) -> list[Any] | None:
    """Return the request examples to show for one method, or None."""
    body = method.get("body")
    if body is not None:
        return [try_pretty_json((schema or {}).get("example")) for schema in body.values()]

    composite: dict[str, Any] = {}
    for param in method.get("params") or []:
        name = param["displayName"]
        if "example" in param:
            example = param["example"]
        else:
            example = make_example_from_type(param.get("type"), name)
        set_dotted(composite, name, example)
    return [composite] if composite else None

"""RAML 0.8 document loader.

Reads a ``.raml`` file with PyYAML and reshapes it into the tree the
flattener works on: nested ``resources`` lists keyed by ``relativeUri`` and
per-resource ``methods`` lists keyed by ``method``.
"""

import logging
from pathlib import Path

import yaml

from ramldoc.exceptions import RamlParseError

logger = logging.getLogger(__name__)

HTTP_METHODS = ("get", "post", "put", "delete", "patch", "head", "options", "trace", "connect")

NAMED_PARAMETER_KEYS = ("baseUriParameters", "uriParameters", "queryParameters", "formParameters", "headers")

YAML_SUFFIXES = (".raml", ".yaml", ".yml")


class RamlLoader(yaml.SafeLoader):
    """SafeLoader that resolves ``!include`` relative to the including file."""

    base_dir: Path = Path(".")


def _include(loader: RamlLoader, node: yaml.Node):
    target = loader.base_dir / loader.construct_scalar(node)
    logger.debug("Including %s", target)
    text = target.read_text(encoding="utf-8")
    if target.suffix.lower() in YAML_SUFFIXES:
        return _parse_yaml(text, target.parent)
    return text


RamlLoader.add_constructor("!include", _include)


def _parse_yaml(text: str, base_dir: Path):
    loader = RamlLoader(text)
    loader.base_dir = base_dir
    try:
        return loader.get_single_data()
    finally:
        loader.dispose()


def load_raml(file_path: Path) -> dict:
    """Parse a RAML file into a normalized document tree."""
    try:
        text = file_path.read_text(encoding="utf-8")
        data = _parse_yaml(text, file_path.parent)
    except UnicodeDecodeError as e:
        raise RamlParseError(f"{file_path}: not valid UTF-8 ({e})") from e
    except yaml.YAMLError as e:
        raise RamlParseError(f"{file_path}: {e}") from e
    return normalize_document(data)


def normalize_document(data) -> dict:
    """Reshape raw RAML data into the document tree."""
    if not isinstance(data, dict):
        raise RamlParseError("RAML document must be a mapping at the top level")
    return _normalize_node(data)


def _normalize_node(node: dict) -> dict:
    result = {}
    methods = []
    resources = []
    for key, value in node.items():
        if isinstance(key, str) and key.startswith("/"):
            child = _normalize_node(value or {})
            child["relativeUri"] = key
            resources.append(child)
        elif isinstance(key, str) and key.lower() in HTTP_METHODS:
            methods.append(_normalize_method(key, value or {}))
        elif key in NAMED_PARAMETER_KEYS:
            result[key] = _named_parameters(value)
        else:
            result[key] = value

    if methods:
        result["methods"] = methods
    if resources:
        result["resources"] = resources
    return result


def _normalize_method(verb: str, body: dict) -> dict:
    method = {"method": verb.lower()}
    for key, value in body.items():
        if key in NAMED_PARAMETER_KEYS:
            method[key] = _named_parameters(value)
        else:
            method[key] = value
    return method


def _named_parameters(params: dict | None) -> dict:
    """Default each parameter's ``displayName`` to its key."""
    result = {}
    for name, spec in (params or {}).items():
        if isinstance(spec, dict):
            result[name] = {"displayName": name, **spec}
        else:
            result[name] = spec
    return result

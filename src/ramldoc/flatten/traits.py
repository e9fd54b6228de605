"""Trait list -> trait lookup."""

from typing import Any


def traits_to_mapping(traits: list[dict] | None) -> dict[str, Any]:
    """Convert RAML's list of single-key trait maps into one dict.

    A later trait with the same name replaces the earlier one.
    """
    result: dict[str, Any] = {}
    for entry in traits or []:
        name = next(iter(entry))
        result[name] = entry[name]
    return result

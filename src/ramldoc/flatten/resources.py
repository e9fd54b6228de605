"""Flatten RAML's nested resources into a list of resources."""

import logging

from ramldoc.flatten.methods import flatten_methods
from ramldoc.flatten.models import ResourceRecord

logger = logging.getLogger(__name__)


def flatten_resources(root: dict | None, traits=None) -> list[ResourceRecord]:
    """Walk the resource tree in pre-order and return one record per node.

    ``basePath`` of each record is the concatenation of its ancestors'
    ``relativeUri`` values, so ``basePath + path`` is the absolute URI.
    ``traits`` is accepted for symmetry with the hierarchy flattener and is
    not applied to the resources.
    """
    records: list[ResourceRecord] = []
    _walk(root, [], records)
    return records


def _walk(node: dict | None, parents: list[dict], records: list[ResourceRecord]) -> None:
    if node is None:
        return

    data = {key: value for key, value in node.items() if key != "resources"}
    data["basePath"] = "".join(p.get("relativeUri") or "" for p in parents)
    data["path"] = node.get("relativeUri")
    data["methods"] = flatten_methods(node.get("methods"))
    record = ResourceRecord.model_validate(data)
    logger.debug("Flattened %s (%d methods)", record.full_path or "/", len(record.methods))
    records.append(record)

    chain = parents + [node]
    for child in node.get("resources") or []:
        _walk(child, chain, records)

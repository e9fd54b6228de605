"""Entry point of the flattener: RAML document tree -> FlatModel."""

import logging

from ramldoc import __version__
from ramldoc.flatten.models import FlatModel
from ramldoc.flatten.resources import flatten_resources
from ramldoc.flatten.traits import traits_to_mapping

logger = logging.getLogger(__name__)


def flatten_hierarchy(root: dict) -> FlatModel:
    """Flatten RAML's nested hierarchy of traits and resources.

    The document root is walked as the first resource node, so the returned
    resource list starts with a record for the document itself.
    """
    traits = traits_to_mapping(root.get("traits"))
    resources = flatten_resources(root, root.get("traits"))
    logger.debug("Flattened %r into %d resources", root.get("title"), len(resources))
    return FlatModel(
        title=root.get("title"),
        traits=traits,
        resources=resources,
        config={"version": __version__},
    )

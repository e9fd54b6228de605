from ramldoc.flatten.hierarchy import flatten_hierarchy
from ramldoc.flatten.models import FlatModel, MethodRecord, ResourceRecord, ResponseSummary

__all__ = [
    "FlatModel",
    "MethodRecord",
    "ResourceRecord",
    "ResponseSummary",
    "flatten_hierarchy",
]

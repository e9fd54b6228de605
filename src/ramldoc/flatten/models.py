"""Render-ready models produced by the flattener.

Every record allows extra fields so that descriptive keys from the RAML
document (``description``, ``displayName``, ``body`` ...) reach the renderer
untouched. Field aliases follow the camelCase names the templates expect.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_RECORD_CONFIG = ConfigDict(extra="allow", frozen=True, populate_by_name=True)


class ResponseSummary(BaseModel):
    """One status code of a method, reduced to a single example."""

    model_config = _RECORD_CONFIG

    code: Any
    method: str | None = None
    example: Any = None


class MethodRecord(BaseModel):
    """A method with synthesized request examples and flattened responses."""

    model_config = _RECORD_CONFIG

    method: str | None = None
    request_examples: list[Any] | None = Field(default=None, alias="requestExamples")
    responses: list[ResponseSummary] = []


class ResourceRecord(BaseModel):
    """A resource node lifted out of the tree with its full path attached."""

    model_config = _RECORD_CONFIG

    base_path: str = Field(alias="basePath")
    path: str | None = None
    methods: list[MethodRecord] = []

    @property
    def full_path(self) -> str:
        return self.base_path + (self.path or "")


class FlatModel(BaseModel):
    """Everything the renderer needs for one document."""

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    traits: dict[str, Any] = {}
    resources: list[ResourceRecord] = []
    config: dict[str, Any] = {}

    def to_dict(self) -> dict:
        """Plain structure with the camelCase keys used by templates."""
        return self.model_dump(by_alias=True)

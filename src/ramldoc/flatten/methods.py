"""Flatten the methods of one resource into template-friendly records."""

from ramldoc.flatten.examples import make_request_examples
from ramldoc.flatten.models import MethodRecord, ResponseSummary


def flatten_methods(methods: list[dict] | None) -> list[MethodRecord]:
    return [_flatten_method(m) for m in methods or []]


def _flatten_method(method: dict) -> MethodRecord:
    data = dict(method)
    data["requestExamples"] = make_request_examples(method)
    data["responses"] = _flatten_responses(method.get("responses"), method.get("method"))
    return MethodRecord.model_validate(data)


def _flatten_responses(responses: dict | None, method_name: str | None) -> list[ResponseSummary]:
    """One summary per status code.

    Every body variant and content type under a code is visited; the last one
    visited provides the example, so earlier ones are dropped.
    """
    result = []
    for code, variants in (responses or {}).items():
        summary = {"code": code, "method": method_name, "example": None}
        for variant in (variants or {}).values():
            if not isinstance(variant, dict):
                continue
            for schema in variant.values():
                summary["example"] = schema.get("example") if isinstance(schema, dict) else None
        result.append(ResponseSummary(**summary))
    return result

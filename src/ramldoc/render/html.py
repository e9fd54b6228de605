"""HTML renderer for a flattened RAML document."""

import html
import json
from typing import Any, Protocol

import markdown
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import JsonLexer

from ramldoc.flatten.examples import pretty_json
from ramldoc.flatten.models import FlatModel, MethodRecord, ResourceRecord

INVALID_JSON_NOTICE = '<p class="invalid-json">This example is not valid JSON.</p>'

STYLE = """
body { font-family: sans-serif; max-width: 60em; margin: 0 auto; padding: 1em; }
.method { border-top: 1px solid #ddd; padding-top: 1em; }
.verb { font-weight: bold; text-transform: uppercase; }
.response-code { font-family: monospace; padding: 0 .3em; }
.response-code-2xx { background: #dfd; }
.response-code-3xx { background: #ddf; }
.response-code-4xx { background: #ffd; }
.response-code-5xx { background: #fdd; }
.response-code-other { background: #eee; }
.invalid-json { color: #a00; }
"""


class Renderer(Protocol):
    def render(self, model: FlatModel) -> str: ...


def _highlight(text: str) -> str:
    code = highlight(text, JsonLexer(), HtmlFormatter(nowrap=True))
    return f'<pre class="hljs lang-json"><code>{code}</code></pre>'


def highlight_json(data: Any) -> str:
    return _highlight(pretty_json(data))


def json_from_string(text: str | None) -> str:
    """Highlight a JSON string; non-JSON text is shown raw after a notice."""
    if text is None:
        return ""
    if not isinstance(text, str):
        return highlight_json(text)
    try:
        return _highlight(pretty_json(json.loads(text)))
    except ValueError:
        return INVALID_JSON_NOTICE + _highlight(text)


def response_code(code: Any) -> str:
    """Status code badge; codes that aren't numbers (e.g. ``default``) get ``response-code-other``."""
    text = str(code)
    group = f"{int(text) // 100}xx" if text.isdecimal() else "other"
    return f'<span class="response-code response-code-{group}">{html.escape(text)}</span>'


def _slug(resource: ResourceRecord, method: MethodRecord) -> str:
    path = resource.full_path.strip("/").replace("{", "").replace("}", "")
    return f"{method.method}-{path.replace('/', '-') or 'root'}"


def assign_anchors(model: FlatModel) -> dict[int, str]:
    """Map ``id(method)`` to an element id, adding ``-2``, ``-3`` ... on clashes."""
    anchors = {}
    used = set()
    for resource in model.resources:
        for method in resource.methods:
            slug = _slug(resource, method)
            anchor, n = slug, 1
            while anchor in used:
                n += 1
                anchor = f"{slug}-{n}"
            used.add(anchor)
            anchors[id(method)] = anchor
    return anchors


def _description(obj) -> str:
    text = (obj.model_extra or {}).get("description")
    if not text:
        return ""
    return markdown.markdown(str(text))


class HtmlRenderer:
    """Renders a FlatModel into a single self-contained HTML page."""

    def render(self, model: FlatModel) -> str:
        title = html.escape(model.title or "API")
        anchors = assign_anchors(model)
        parts = [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '<meta charset="utf-8">',
            f"<title>{title}</title>",
            f"<style>{STYLE}{HtmlFormatter().get_style_defs('.hljs')}</style>",
            "</head>",
            "<body>",
            f"<h1>{title}</h1>",
            self._render_table_of_contents(model, anchors),
        ]
        for resource in model.resources:
            if resource.methods:
                parts.append(self._render_resource(resource, anchors))
        version = model.config.get("version")
        if version:
            parts.append(f'<footer>Generated by ramldoc {html.escape(str(version))}</footer>')
        parts.extend(["</body>", "</html>"])
        return "\n".join(parts) + "\n"

    def _render_table_of_contents(self, model: FlatModel, anchors: dict[int, str]) -> str:
        items = []
        for resource in model.resources:
            for method in resource.methods:
                items.append(
                    f'<li><a href="#{anchors[id(method)]}">'
                    f'<span class="verb">{html.escape(str(method.method).upper())}</span> '
                    f"{html.escape(resource.full_path)}</a></li>"
                )
        return '<ul class="table-of-contents">' + "".join(items) + "</ul>"

    def _render_resource(self, resource: ResourceRecord, anchors: dict[int, str]) -> str:
        parts = [f'<section class="resource"><h2>{html.escape(resource.full_path)}</h2>']
        parts.append(_description(resource))
        for method in resource.methods:
            parts.append(self._render_method(resource, method, anchors[id(method)]))
        parts.append("</section>")
        return "\n".join(parts)

    def _render_method(self, resource: ResourceRecord, method: MethodRecord, anchor: str) -> str:
        parts = [
            f'<div class="method" id="{anchor}">',
            f'<h3><span class="verb">{html.escape(str(method.method).upper())}</span> '
            f"{html.escape(resource.full_path)}</h3>",
            _description(method),
        ]
        if method.request_examples:
            parts.append("<h4>Request</h4>")
            for example in method.request_examples:
                parts.append(json_from_string(example))
        if method.responses:
            parts.append("<h4>Responses</h4>")
            for response in method.responses:
                parts.append(f"<div class=\"response\">{response_code(response.code)}")
                parts.append(json_from_string(response.example))
                parts.append("</div>")
        parts.append("</div>")
        return "\n".join(parts)

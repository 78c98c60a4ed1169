"""Strict query templates.

SLI queries reference the evaluation window through ``{{.window}}`` actions::

    sum(rate(http_requests_total{code=~"5.."}[{{.window}}]))

A template is parsed once and rendered with a mapping of field values.
Rendering fails on any field missing from the mapping instead of leaving
the action in place or substituting an empty string.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping, Union

from slirules.core.errors import TemplateParseError, TemplateRenderError

ACTION_OPEN = "{{"
ACTION_CLOSE = "}}"

_FIELD_RE = re.compile(r"^\.([A-Za-z_][A-Za-z0-9_]*)$")


@dataclass(frozen=True)
class _Field:
    name: str


_Node = Union[str, _Field]


class QueryTemplate:
    """A parsed query template."""

    def __init__(self, name: str, nodes: list[_Node]):
        self.name = name
        self._nodes = nodes

    @classmethod
    def parse(cls, name: str, text: str) -> QueryTemplate:
        """Parse template text.

        Raises:
            TemplateParseError: On an unterminated action or an action that
                is not a single field reference
        """
        nodes: list[_Node] = []
        pos = 0
        while True:
            start = text.find(ACTION_OPEN, pos)
            if start < 0:
                if pos < len(text):
                    nodes.append(text[pos:])
                break

            if start > pos:
                nodes.append(text[pos:start])

            end = text.find(ACTION_CLOSE, start + len(ACTION_OPEN))
            if end < 0:
                raise TemplateParseError(
                    f"template {name!r}: unclosed action",
                    details={"template": name, "offset": start},
                )

            body = text[start + len(ACTION_OPEN) : end].strip()
            match = _FIELD_RE.match(body)
            if not match:
                raise TemplateParseError(
                    f"template {name!r}: unsupported action {{{{{body}}}}}",
                    details={"template": name, "offset": start},
                )

            nodes.append(_Field(match.group(1)))
            pos = end + len(ACTION_CLOSE)

        return cls(name, nodes)

    @property
    def fields(self) -> set[str]:
        """Names of every field the template references."""
        return {node.name for node in self._nodes if isinstance(node, _Field)}

    def render(self, data: Mapping[str, str]) -> str:
        """Render the template.

        Raises:
            TemplateRenderError: If a referenced field has no value in ``data``
        """
        parts = []
        for node in self._nodes:
            if isinstance(node, _Field):
                if node.name not in data:
                    raise TemplateRenderError(
                        f"template {self.name!r}: map has no entry for key {node.name!r}",
                        details={"template": self.name, "key": node.name},
                    )
                parts.append(data[node.name])
            else:
                parts.append(node)
        return "".join(parts)


def render_template(name: str, text: str, data: Mapping[str, str]) -> str:
    """Parse and render in one step."""
    return QueryTemplate.parse(name, text).render(data)

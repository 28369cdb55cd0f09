"""Reverse routing — build a concrete URL from a template and parameters."""

from collections.abc import Mapping
from typing import Any

from wren.routing.compiler import parse_template


def generate(base_path: str, template: str, params: Mapping[str, Any] | None = None) -> str:
    """Substitute *params* into *template* and prefix *base_path*.

    Blocks are rewritten by their position in the parsed template, so two
    blocks with identical source text never interfere:

    - a block whose name has a (non-``None``) value becomes ``pre + str(value)``
    - an optional block without a value is dropped with its punctuation
    - a required block without a value is left verbatim

    Examples::

        generate("", "/[:controller]/[:action].[:type]?", {"controller": "a", "action": "b"})
        # "/a/b"
        generate("/app", "/users/[i:id]", {"id": 5})
        # "/app/users/5"

    Raises ``TemplateSyntaxError`` for malformed templates.
    """
    if template == "*" or template.startswith("@"):
        return base_path + template

    params = params or {}
    parts: list[str] = [base_path]
    last = 0
    for block in parse_template(template):
        parts.append(template[last:block.start])
        value = params.get(block.name) if block.name else None
        if value is not None:
            parts.append(block.pre + str(value))
        elif not block.optional:
            parts.append(block.text)
        last = block.end
    parts.append(template[last:])
    return "".join(parts)

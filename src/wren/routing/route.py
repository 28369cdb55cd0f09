"""TemplateBlock, Route and RouteMatch frozen dataclasses."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class TemplateBlock:
    """A parsed bracket block of a route template.

    Plain:     ``/[:action]``      (pre="/", type="", name="action")
    Typed:     ``/[i:id]``         (pre="/", type="i", name="id")
    Optional:  ``.[:format]?``     (pre=".", name="format", optional=True)
    Unnamed:   ``[h]``             (name="")

    ``start`` and ``end`` delimit the block's source text in the template,
    leading punctuation and trailing ``?`` included.
    """

    pre: str
    type: str
    name: str
    optional: bool
    start: int
    end: int
    text: str

    @property
    def bracket(self) -> str:
        """The block text without its leading punctuation."""
        return self.text[len(self.pre):]


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    ``methods`` is the ``|``-joined method set exactly as registered
    (e.g. ``"GET|POST"``); ``target`` is opaque to the router.
    """

    methods: str
    template: str
    target: Any
    name: str | None = None

    @property
    def method_set(self) -> frozenset[str]:
        return frozenset(m.upper() for m in self.methods.split("|") if m)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    params: dict[str, str]

    @property
    def target(self) -> Any:
        return self.route.target

    @property
    def name(self) -> str | None:
        return self.route.name

    def as_dict(self) -> dict[str, Any]:
        """The ``{target, params, name}`` mapping handed to dispatchers."""
        return {"target": self.route.target, "params": dict(self.params), "name": self.route.name}

"""Ordered route table with first-match-wins lookup.

Routes are tried in registration order; there is no specificity
ranking, so a ``*`` route registered early shadows everything after it.
"""

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from wren.config import RouterConfig
from wren.errors import ConfigurationError, DuplicateRouteName, UnknownRouteName
from wren.routing.compiler import PatternCompiler
from wren.routing.matcher import RequestMatcher
from wren.routing.params import MatchTypeTable
from wren.routing.route import Route, RouteMatch
from wren.routing.urls import generate

logger = logging.getLogger("wren.routing")


class Router:
    """Route table: registration, matching and reverse routing.

    Usage::

        router = Router(base_path="/app")
        router.get("/users/[i:id]", "users#show", "users_show")
        router.post("/users/[i:id]/[delete|update:action]", "users#do", "users_do")

        match = router.match("/app/users/5", "GET")
        match.params  # {"id": "5"}
        router.generate("users_show", {"id": 5})  # "/app/users/5"
    """

    __slots__ = ("_base_path", "_named", "_routes", "compiler", "config", "matcher")

    def __init__(
        self,
        routes: Iterable[Iterable[Any]] = (),
        base_path: str | None = None,
        match_types: Mapping[str, str] | None = None,
        *,
        config: RouterConfig | None = None,
    ) -> None:
        self.config = config if config is not None else RouterConfig()
        self._base_path = base_path if base_path is not None else self.config.base_path
        self._routes: list[Route] = []
        self._named: dict[str, str] = {}

        table = MatchTypeTable(self.config.match_type_items())
        if match_types:
            table.register(match_types)
        self.compiler = PatternCompiler(table, cache=self.config.cache_patterns)
        self.matcher = RequestMatcher(self.compiler)

        self.add_routes(routes)

    # -- Configuration --

    @property
    def base_path(self) -> str:
        return self._base_path

    @base_path.setter
    def base_path(self, value: str) -> None:
        self._base_path = value

    @property
    def match_types(self) -> MatchTypeTable:
        return self.compiler.match_types

    def add_match_types(self, match_types: Mapping[str, str]) -> None:
        """Add or override aliases. Later registrations win."""
        self.compiler.match_types.register(match_types)

    # -- Registration --

    def map(self, methods: str, template: str, target: Any, name: str | None = None) -> Route:
        """Register a route.

        Args:
            methods: One method or a ``|``-joined set (``"GET|POST"``).
            template: Route template, e.g. ``"/users/[i:id]"``.
            target: Anything; handed back on match.
            name: Optional unique name for reverse routing.

        Raises ``DuplicateRouteName`` if *name* is taken, and
        ``UnknownMatchType`` / ``TemplateSyntaxError`` if the template
        does not compile.
        """
        if name is not None and name in self._named:
            raise DuplicateRouteName(name)

        # Surface bad templates now rather than on the first request
        self.compiler.compile(template)

        route = Route(methods=methods, template=template, target=target, name=name)
        if name is not None:
            self._named[name] = template
        self._routes.append(route)
        logger.debug("Mapped %s %s -> %r (name=%s)", methods, template, target, name)
        return route

    def add_routes(self, routes: Iterable[Iterable[Any]]) -> None:
        """Register many routes given as ``(methods, template, target[, name])``."""
        if isinstance(routes, (str, bytes)) or not isinstance(routes, Iterable):
            msg = f"Routes should be an iterable of route tuples, got {type(routes).__name__}"
            raise ConfigurationError(msg)
        for entry in routes:
            self.map(*entry)

    def get(self, template: str, target: Any, name: str | None = None) -> Route:
        return self.map("GET", template, target, name)

    def post(self, template: str, target: Any, name: str | None = None) -> Route:
        return self.map("POST", template, target, name)

    def put(self, template: str, target: Any, name: str | None = None) -> Route:
        return self.map("PUT", template, target, name)

    def patch(self, template: str, target: Any, name: str | None = None) -> Route:
        return self.map("PATCH", template, target, name)

    def delete(self, template: str, target: Any, name: str | None = None) -> Route:
        return self.map("DELETE", template, target, name)

    def all(self, template: str, target: Any, name: str | None = None) -> Route:
        """Register for every method in ``config.all_methods``."""
        return self.map("|".join(self.config.all_methods), template, target, name)

    # -- Introspection --

    @property
    def routes(self) -> tuple[Route, ...]:
        """All routes, in registration order."""
        return tuple(self._routes)

    @property
    def named_routes(self) -> Mapping[str, str]:
        """Read-only view of route name -> template."""
        return MappingProxyType(self._named)

    # -- Lookup --

    def match(self, path: str, method: str) -> RouteMatch | None:
        """Find the first route matching *path* and *method*.

        The query string is dropped and the base path stripped before
        comparison. Returns ``None`` when nothing matches.
        """
        path = self._request_path(path)
        for route in self._routes:
            params = self.matcher.match(route.methods, route.template, path, method)
            if params is not None:
                logger.debug("%s %s matched %s", method, path, route.template)
                return RouteMatch(route=route, params=params)

        logger.debug("%s %s matched no route", method, path)
        return None

    def generate(self, name: str, params: Mapping[str, Any] | None = None, /, **kwargs: Any) -> str:
        """Build the URL of the route called *name*.

        Raises ``UnknownRouteName`` if no route carries *name*.
        """
        try:
            template = self._named[name]
        except KeyError:
            raise UnknownRouteName(name) from None
        values = {**(params or {}), **kwargs}
        return generate(self._base_path, template, values)

    def _request_path(self, path: str) -> str:
        if self.config.strip_query:
            path = path.partition("?")[0]
        if self._base_path and path.startswith(self._base_path):
            path = path[len(self._base_path):]
        return path

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"<Router {len(self._routes)} routes base_path={self._base_path!r}>"

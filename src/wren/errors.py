"""Wren exception hierarchy.

Shared across the compiler, matcher, and router so every module
raises and catches the same types. A request that matches no route is
not an error: ``Router.match`` returns ``None``.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when router configuration is invalid.

    Raised at registration time so misconfiguration surfaces before the
    first request is matched.
    """


class UnknownMatchType(ConfigurationError):
    """A bracket block references an alias missing from the match type table."""

    def __init__(self, alias: str, template: str | None = None) -> None:
        self.alias = alias
        self.template = template
        msg = f"Unknown match type {alias!r}"
        if template is not None:
            msg += f" in route template {template!r}"
        super().__init__(msg)


class TemplateSyntaxError(ConfigurationError):
    """A route template has malformed bracket syntax.

    ``position`` is the offset in ``template`` where the problem was
    detected, or ``None`` when it applies to the template as a whole.
    """

    def __init__(self, template: str, reason: str, position: int | None = None) -> None:
        self.template = template
        self.reason = reason
        self.position = position
        where = f" at offset {position}" if position is not None else ""
        super().__init__(f"Invalid route template {template!r}{where}: {reason}")


class DuplicateRouteName(ConfigurationError):
    """Two routes were registered under the same name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Can not redeclare route {name!r}")


class UnknownRouteName(WrenError, LookupError):
    """URL generation was requested for a name no route carries."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Route {name!r} does not exist.")

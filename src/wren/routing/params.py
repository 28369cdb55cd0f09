"""Match types — the alias table behind ``[alias:name]`` blocks.

Built-in aliases for route template blocks like ``[i:id]``.
"""

import logging
import re
from collections.abc import Iterable, Iterator, Mapping

from wren.errors import UnknownMatchType

logger = logging.getLogger("wren.routing")

# alias -> regex fragment (Python ``re`` syntax)
BUILTIN_MATCH_TYPES: dict[str, str] = {
    "i": r"[0-9]++",
    "a": r"[0-9A-Za-z]++",
    "h": r"[0-9A-Fa-f]++",
    "*": r".+?",
    "**": r".++",
    "": r"[^/\.]++",
}


def choice_pattern(alias: str) -> str:
    """Build the fragment for an inline choice alias such as ``delete|update``.

    Each option is matched literally.
    """
    options = alias.split("|")
    return "(?:" + "|".join(re.escape(option) for option in options) + ")"


class MatchTypeTable:
    """Mutable mapping from alias to regex fragment.

    The built-ins are always present unless overridden; the last
    registration for an alias wins. ``version`` increases on every
    registration so compiled-pattern caches know when to drop entries.

    Usage::

        table = MatchTypeTable()
        table.register({"cId": r"[a-zA-Z]{2}[0-9](?:_[0-9]+)?"})
        table.resolve("cId")
    """

    __slots__ = ("_types", "_version")

    def __init__(self, match_types: Mapping[str, str] | Iterable[tuple[str, str]] = ()) -> None:
        self._types: dict[str, str] = dict(BUILTIN_MATCH_TYPES)
        self._version = 0
        if match_types:
            self.register(match_types)

    @property
    def version(self) -> int:
        return self._version

    def register(
        self,
        match_types: Mapping[str, str] | Iterable[tuple[str, str]] = (),
        /,
        **aliases: str,
    ) -> None:
        """Add or override aliases. Later entries win."""
        items = match_types.items() if isinstance(match_types, Mapping) else match_types
        # Copy-on-write: readers holding the old dict never see a partial update
        updated = dict(self._types)
        for alias, fragment in (*items, *aliases.items()):
            if not isinstance(fragment, str):
                msg = f"Match type {alias!r} must map to a regex string, got {type(fragment).__name__}"
                raise TypeError(msg)
            updated[alias] = fragment
            logger.debug("Registered match type %r -> %r", alias, fragment)
        self._types = updated
        self._version += 1

    def resolve(self, alias: str, template: str | None = None) -> str:
        """Return the regex fragment for *alias*.

        An unregistered alias containing ``|`` is a choice alias and
        resolves to a literal alternation.

        Raises ``UnknownMatchType`` for any other unregistered alias.
        """
        types = self._types
        if alias in types:
            return types[alias]
        if "|" in alias:
            return choice_pattern(alias)
        raise UnknownMatchType(alias, template)

    def as_dict(self) -> dict[str, str]:
        return dict(self._types)

    def __contains__(self, alias: object) -> bool:
        return alias in self._types

    def __getitem__(self, alias: str) -> str:
        return self._types[alias]

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        custom = sorted(set(self._types) - set(BUILTIN_MATCH_TYPES))
        return f"<MatchTypeTable builtins+{custom!r} v{self._version}>"

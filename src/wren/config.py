"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(base_path="/blog", match_types={"slug": r"[a-z0-9-]+"})
    """

    # Prepended to every template on generation, stripped from every path on match
    base_path: str = ""

    # Extra aliases registered on top of the built-ins (later entries win)
    match_types: Mapping[str, str] | tuple[tuple[str, str], ...] = ()

    # Methods bound by Router.all()
    all_methods: tuple[str, ...] = ("GET", "POST")

    # Drop "?query" from incoming paths before matching
    strip_query: bool = True

    # Reuse compiled patterns across calls (keyed by template)
    cache_patterns: bool = True

    def match_type_items(self) -> tuple[tuple[str, str], ...]:
        """Return ``match_types`` as ordered ``(alias, fragment)`` pairs."""
        if isinstance(self.match_types, Mapping):
            return tuple(self.match_types.items())
        return tuple(self.match_types)

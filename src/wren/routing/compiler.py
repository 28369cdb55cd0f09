"""Pattern compiler — turns route templates into anchored regexes.

Template grammar::

    /users/[i:id]/[delete|update:action]
    /[:controller]/[:action].[:format]?
    @^/raw/(?P<slug>[a-z-]+)$
    *

Literal text between blocks is regex text and is kept verbatim; each
``[type:name]`` block becomes a (named) capture group around the
fragment its alias resolves to.
"""

import logging
import re
from dataclasses import dataclass

from wren.errors import TemplateSyntaxError
from wren.routing.params import MatchTypeTable
from wren.routing.route import TemplateBlock

logger = logging.getLogger("wren.routing")

# (pre)[type(:name)](?)
BLOCK_RE = re.compile(r"(/|\.|)\[([^:\[\]]*)(?::([^:\[\]]*))?\](\?|)")

_ZONE_START = frozenset("[(.")
_ZONE_NEXT = frozenset("?+*{")
# Regex syntax the zone scan passes over
_PREFIX_STOP = frozenset("\\|^$")


def parse_template(template: str) -> tuple[TemplateBlock, ...]:
    """Parse the bracket blocks of a template, in template order.

    Examples::

        "/users"                -> ()
        "/users/[i:id]"         -> (TemplateBlock(pre="/", type="i", name="id", ...),)
        "/[:a]/[:b].[:c]?"      -> three blocks, the last optional with pre="."

    Raises ``TemplateSyntaxError`` for a stray ``[`` or ``]``, an invalid
    capture name, or a capture name used twice.
    """
    blocks: list[TemplateBlock] = []
    names: set[str] = set()
    last = 0

    for m in BLOCK_RE.finditer(template):
        _check_literal(template, last, m.start())
        name = m.group(3) or ""
        if name:
            if not name.isidentifier():
                raise TemplateSyntaxError(
                    template, f"capture name {name!r} is not a valid identifier", m.start(3)
                )
            if name in names:
                raise TemplateSyntaxError(template, f"duplicate capture name {name!r}", m.start(3))
            names.add(name)
        blocks.append(
            TemplateBlock(
                pre=m.group(1),
                type=m.group(2),
                name=name,
                optional=m.group(4) == "?",
                start=m.start(),
                end=m.end(),
                text=m.group(0),
            )
        )
        last = m.end()

    _check_literal(template, last, len(template))
    return tuple(blocks)


def _check_literal(template: str, start: int, end: int) -> None:
    """Reject bracket characters left over between blocks."""
    for pos in range(start, end):
        char = template[pos]
        if char == "[":
            raise TemplateSyntaxError(template, "unbalanced '['", pos)
        if char == "]":
            raise TemplateSyntaxError(template, "unbalanced ']'", pos)


def literal_prefix(template: str) -> str:
    """The head of *template* every matching path must start with.

    Ends before the first block, including its ``/`` or ``.`` delimiter
    (an optional block may be absent from the path), and before any
    regex syntax in the literal text::

        "/users/[i:id]"     -> "/users"
        "/feed.[:format]?"  -> "/feed"
        "/a+/[:x]"          -> "/"
    """
    end = scan_literal_prefix(template) or 0
    first = BLOCK_RE.search(template)
    if first is not None and first.start() < end:
        end = first.start()
    for i in range(end):
        if template[i] in _PREFIX_STOP:
            return template[:i]
    return template[:end]


def scan_literal_prefix(template: str, path: str | None = None) -> int | None:
    """Find where the template's pattern zone starts.

    The zone starts at the first character that is ``[``, ``(`` or ``.``,
    or that is followed by ``?``, ``+``, ``*`` or ``{``. When *path* is
    given, every template character before the zone must equal the path
    character at the same offset, except ``/`` which is accepted
    positionally.

    Returns the zone start offset (``len(template)`` when the template is
    all literal), or ``None`` when a literal character disagrees with
    *path*.
    """
    size = len(template)
    for i, char in enumerate(template):
        if char in _ZONE_START or (i + 1 < size and template[i + 1] in _ZONE_NEXT):
            return i
        if path is None or char == "/":
            continue
        if i >= len(path) or path[i] != char:
            return None
    return size


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """A compiled route template.

    ``prefix`` is the literal head of the template (see
    ``literal_prefix``); ``regex`` must match the whole path.
    """

    template: str
    prefix: str
    blocks: tuple[TemplateBlock, ...]
    regex: re.Pattern[str]

    def match(self, path: str) -> dict[str, str] | None:
        """Match *path* against the whole pattern.

        Returns named captures that participated in the match, or
        ``None``.
        """
        if self.prefix and scan_literal_prefix(self.prefix, path) is None:
            return None
        m = self.regex.fullmatch(path)
        if m is None:
            return None
        return {k: v for k, v in m.groupdict().items() if v is not None}


def block_pattern(block: TemplateBlock, fragment: str) -> str:
    """The regex replacing one bracket block."""
    pre = r"\." if block.pre == "." else block.pre
    group = f"(?P<{block.name}>{fragment})" if block.name else f"({fragment})"
    return f"(?:{pre}{group})" + ("?" if block.optional else "")


class PatternCompiler:
    """Compiles route templates against a match type table.

    Compiled patterns are cached by template string. The cache is
    dropped whenever the table's version changes, so overriding an alias
    affects routes compiled before the override.

    Usage::

        compiler = PatternCompiler()
        pattern = compiler.compile("/users/[i:id]")
        pattern.match("/users/42")  # {"id": "42"}
    """

    __slots__ = ("_cache", "cache_enabled", "match_types")

    def __init__(self, match_types: MatchTypeTable | None = None, *, cache: bool = True) -> None:
        self.match_types = match_types if match_types is not None else MatchTypeTable()
        self.cache_enabled = cache
        # (table version, template -> pattern); swapped as one object
        self._cache: tuple[int, dict[str, CompiledPattern]] = (self.match_types.version, {})

    def compile(self, template: str) -> CompiledPattern:
        """Compile *template*.

        Raises ``UnknownMatchType`` if a block references an alias the
        table cannot resolve, and ``TemplateSyntaxError`` for malformed
        templates.
        """
        if not self.cache_enabled:
            return self._compile(template)

        version, cache = self._cache
        if version != self.match_types.version:
            logger.debug("Match types changed; dropping %d compiled patterns", len(cache))
            version, cache = self.match_types.version, {}
            self._cache = (version, cache)

        compiled = cache.get(template)
        if compiled is None:
            compiled = self._compile(template)
            cache[template] = compiled
        return compiled

    def clear(self) -> None:
        self._cache = (self.match_types.version, {})

    def _compile(self, template: str) -> CompiledPattern:
        if template == "*":
            return CompiledPattern(template, "", (), re.compile(r".*", re.DOTALL))

        if template.startswith("@"):
            return CompiledPattern(template, "", (), _compile_regex(template, template[1:]))

        blocks = parse_template(template)
        parts: list[str] = []
        last = 0
        for block in blocks:
            parts.append(template[last:block.start])
            fragment = self.match_types.resolve(block.type, template)
            parts.append(block_pattern(block, fragment))
            last = block.end
        parts.append(template[last:])

        if not blocks:
            # Plain paths compare literally
            regex = re.compile(re.escape(template))
        else:
            regex = _compile_regex(template, "".join(parts))

        return CompiledPattern(template, literal_prefix(template), blocks, regex)


def _compile_regex(template: str, source: str) -> re.Pattern[str]:
    try:
        return re.compile(source)
    except re.error as exc:
        raise TemplateSyntaxError(template, f"invalid pattern: {exc.msg}") from exc

"""Request matcher — decides whether one route matches a (path, method) pair."""

from wren.routing.compiler import PatternCompiler, literal_prefix


def method_allowed(methods: str, request_method: str) -> bool:
    """Case-insensitive membership test against a ``|``-joined method set."""
    wanted = request_method.lower()
    return any(m.lower() == wanted for m in methods.split("|"))


class RequestMatcher:
    """Matches one route at a time.

    Holds no per-request state: ``match`` returns its captures directly,
    so a single instance can serve any number of threads.

    Usage::

        matcher = RequestMatcher()
        matcher.match("GET|POST", "/users/[i:id]", "/users/5", "get")  # {"id": "5"}
    """

    __slots__ = ("compiler",)

    def __init__(self, compiler: PatternCompiler | None = None) -> None:
        self.compiler = compiler if compiler is not None else PatternCompiler()

    def match(
        self, methods: str, template: str, path: str, request_method: str
    ) -> dict[str, str] | None:
        """Match *path* and *request_method* against one route.

        Returns the named parameters on success (possibly empty), or
        ``None`` when the route does not apply.
        """
        if not method_allowed(methods, request_method):
            return None

        # 1. Catch-all
        if template == "*":
            return {}

        # 2. Raw regex
        if template.startswith("@"):
            return self.compiler.compile(template).match(path)

        # 3. Plain path
        if "[" not in template:
            return {} if path == template else None

        # 4. Cheap rejection on the literal head before compiling
        if not path.startswith(literal_prefix(template)):
            return None

        return self.compiler.compile(template).match(path)

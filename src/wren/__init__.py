"""Wren — URL routing with compact bracket templates.

Match incoming paths against ``/users/[i:id]``-style templates, extract
named parameters, and generate URLs back from route names.
Safe to share across threads, including free-threaded builds.

Basic usage::

    from wren import Router

    router = Router()
    router.get("/users/[i:id]", "users#show", "users_show")

    match = router.match("/users/42", "GET")
    match.target   # "users#show"
    match.params   # {"id": "42"}

    router.generate("users_show", {"id": 7})  # "/users/7"
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0"
__all__ = [
    "CompiledPattern",
    "ConfigurationError",
    "DuplicateRouteName",
    "MatchTypeTable",
    "PatternCompiler",
    "RequestMatcher",
    "Route",
    "RouteMatch",
    "Router",
    "RouterConfig",
    "TemplateSyntaxError",
    "UnknownMatchType",
    "UnknownRouteName",
    "WrenError",
    "generate",
]

# name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "CompiledPattern": "wren.routing.compiler",
    "PatternCompiler": "wren.routing.compiler",
    "MatchTypeTable": "wren.routing.params",
    "RequestMatcher": "wren.routing.matcher",
    "Route": "wren.routing.route",
    "RouteMatch": "wren.routing.route",
    "Router": "wren.routing.router",
    "RouterConfig": "wren.config",
    "generate": "wren.routing.urls",
    "WrenError": "wren.errors",
    "ConfigurationError": "wren.errors",
    "DuplicateRouteName": "wren.errors",
    "TemplateSyntaxError": "wren.errors",
    "UnknownMatchType": "wren.errors",
    "UnknownRouteName": "wren.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)

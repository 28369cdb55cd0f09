"""Tests for wren.routing.router — ordered route table."""

import pytest

from wren.config import RouterConfig
from wren.errors import (
    ConfigurationError,
    DuplicateRouteName,
    TemplateSyntaxError,
    UnknownMatchType,
    UnknownRouteName,
)
from wren.routing.route import Route
from wren.routing.router import Router


def _target() -> str:
    return "ok"


class TestRegistration:
    def test_map_returns_route(self) -> None:
        r = Router()
        route = r.map("POST", "/[:controller]/[:action]", _target)
        assert route == Route("POST", "/[:controller]/[:action]", _target, None)
        assert r.routes == (route,)

    def test_routes_in_registration_order(self) -> None:
        r = Router()
        r.map("POST", "/[:controller]/[:action]", _target)
        r.map("POST", "/[:controller]/[:action]", _target, "second_route")
        assert [route.name for route in r.routes] == [None, "second_route"]

    def test_add_routes_from_tuples(self) -> None:
        r = Router(
            [
                ("GET|POST", "/", "home#index", "home"),
                ("GET", "/users/", {"c": "UserController", "a": "ListAction"}),
            ]
        )
        assert len(r) == 2
        assert r.routes[1].target == {"c": "UserController", "a": "ListAction"}

    def test_add_routes_from_generator(self) -> None:
        r = Router()
        r.add_routes(("GET", f"/page/{n}", n) for n in range(3))
        assert [route.template for route in r.routes] == ["/page/0", "/page/1", "/page/2"]

    @pytest.mark.parametrize("routes", [42, "GET /", None])
    def test_add_routes_rejects_non_iterable(self, routes: object) -> None:
        with pytest.raises(ConfigurationError, match="Routes should be an iterable"):
            Router().add_routes(routes)  # type: ignore[arg-type]

    def test_named_routes(self) -> None:
        r = Router()
        r.map("POST", "/[:controller]/[:action]", _target, "my_route")
        assert r.named_routes == {"my_route": "/[:controller]/[:action]"}

    def test_named_routes_read_only(self) -> None:
        r = Router()
        with pytest.raises(TypeError):
            r.named_routes["x"] = "/x"  # type: ignore[index]

    def test_duplicate_name(self) -> None:
        r = Router()
        r.map("POST", "/[:controller]/[:action]", _target, "my_route")
        with pytest.raises(DuplicateRouteName, match="Can not redeclare route 'my_route'"):
            r.map("GET", "/other", _target, "my_route")
        assert len(r) == 1

    def test_unknown_alias_fails_at_registration(self) -> None:
        r = Router()
        with pytest.raises(UnknownMatchType):
            r.get("/items/[uuid:id]", _target)
        assert len(r) == 0

    def test_malformed_template_fails_at_registration(self) -> None:
        with pytest.raises(TemplateSyntaxError):
            Router().get("/items/[i:id", _target)

    def test_failed_registration_does_not_reserve_name(self) -> None:
        r = Router()
        with pytest.raises(UnknownMatchType):
            r.get("/items/[uuid:id]", _target, "item")
        r.get("/items/[i:id]", _target, "item")
        assert r.named_routes["item"] == "/items/[i:id]"


class TestVerbHelpers:
    @pytest.mark.parametrize(
        ("verb", "methods"),
        [
            ("get", "GET"),
            ("post", "POST"),
            ("put", "PUT"),
            ("patch", "PATCH"),
            ("delete", "DELETE"),
            ("all", "GET|POST"),
        ],
    )
    def test_verb_binds_methods(self, verb: str, methods: str) -> None:
        r = Router()
        route = getattr(r, verb)("/x", _target, "x")
        assert route.methods == methods
        assert route.name == "x"

    def test_all_uses_config(self) -> None:
        r = Router(config=RouterConfig(all_methods=("GET", "HEAD")))
        assert r.all("/x", _target).methods == "GET|HEAD"


class TestMatch:
    def test_match(self) -> None:
        r = Router()
        r.map("GET", "/foo/[:controller]/[:action]", "foo_action", "foo_route")

        match = r.match("/foo/test/do", "GET")
        assert match is not None
        assert match.as_dict() == {
            "target": "foo_action",
            "params": {"controller": "test", "action": "do"},
            "name": "foo_route",
        }
        assert r.match("/foo/test/do", "POST") is None

    def test_query_string_discarded(self) -> None:
        r = Router()
        r.map("GET", "/foo/[:controller]/[:action]", "foo_action", "foo_route")
        match = r.match("/foo/test/do?param=value", "GET")
        assert match is not None
        assert match.params == {"controller": "test", "action": "do"}

    def test_query_string_kept_when_disabled(self) -> None:
        r = Router(config=RouterConfig(strip_query=False))
        r.get("/x", _target)
        assert r.match("/x?y=1", "GET") is None

    def test_method_is_required(self) -> None:
        r = Router()
        r.get("/x", _target)
        with pytest.raises(TypeError):
            r.match("/x")  # type: ignore[call-arg]

    @pytest.mark.parametrize("method", ["get", "GET", "post", "POST"])
    def test_method_set(self, method: str) -> None:
        r = Router()
        r.map("GET|POST", "/form", _target)
        assert r.match("/form", method) is not None

    def test_method_set_rejects_other(self) -> None:
        r = Router()
        r.map("GET|POST", "/form", _target)
        assert r.match("/form", "DELETE") is None

    def test_no_match_returns_none(self) -> None:
        r = Router()
        r.get("/users", _target)
        assert r.match("/nonexistent", "GET") is None

    def test_empty_router(self) -> None:
        assert Router().match("/", "GET") is None

    def test_plain_template_exact(self) -> None:
        r = Router()
        r.get("/users", _target)
        assert r.match("/users", "GET") is not None
        assert r.match("/users/", "GET") is None


class TestPrecedence:
    def test_wildcard_after_specific(self) -> None:
        r = Router()
        r.map("GET", "/a", "foo_action", "foo_route")
        r.map("GET", "*", "bar_action", "bar_route")

        match = r.match("/everything", "GET")
        assert match is not None
        assert match.as_dict() == {"target": "bar_action", "params": {}, "name": "bar_route"}
        assert r.match("/a", "GET").target == "foo_action"  # type: ignore[union-attr]

    def test_registration_order_beats_specificity(self) -> None:
        r = Router()
        r.get("*", "catch_all")
        r.get("/a", "specific")
        assert r.match("/a", "GET").target == "catch_all"  # type: ignore[union-attr]

    def test_first_match_wins_among_patterns(self) -> None:
        r = Router()
        r.get("/users/[:name]", "by_name")
        r.get("/users/[i:id]", "by_id")
        assert r.match("/users/42", "GET").target == "by_name"  # type: ignore[union-attr]

    def test_method_mismatch_falls_through(self) -> None:
        r = Router()
        r.post("/users/[i:id]", "update")
        r.get("/users/[i:id]", "show")
        assert r.match("/users/1", "GET").target == "show"  # type: ignore[union-attr]


class TestBasePath:
    def test_stripped_on_match(self) -> None:
        r = Router(base_path="/app")
        r.get("/users/[i:id]", _target)
        assert r.match("/app/users/5", "GET").params == {"id": "5"}  # type: ignore[union-attr]

    def test_prepended_on_generate(self) -> None:
        r = Router(base_path="/app")
        r.get("/users/[i:id]", _target, "users_show")
        assert r.generate("users_show", {"id": 5}) == "/app/users/5"

    def test_only_leading_occurrence_stripped(self) -> None:
        r = Router(base_path="/app")
        r.get("/files/[*:path]", _target)
        assert r.match("/app/files/app/readme", "GET").params == {"path": "app/readme"}  # type: ignore[union-attr]

    def test_setter(self) -> None:
        r = Router()
        r.base_path = "/some/path"
        assert r.base_path == "/some/path"

    def test_config_base_path(self) -> None:
        r = Router(config=RouterConfig(base_path="/cfg"))
        assert r.base_path == "/cfg"

    def test_argument_overrides_config(self) -> None:
        r = Router(base_path="/arg", config=RouterConfig(base_path="/cfg"))
        assert r.base_path == "/arg"


class TestMatchTypes:
    def test_custom_named_regex(self) -> None:
        r = Router()
        r.add_match_types({"cId": r"[a-zA-Z]{2}[0-9](?:_[0-9]++)?"})
        r.map("GET", "/bar/[cId:customId]", "bar_action", "bar_route")

        assert r.match("/bar/AB1", "GET").params == {"customId": "AB1"}  # type: ignore[union-attr]
        assert r.match("/bar/AB1_0123456789", "GET").params == {  # type: ignore[union-attr]
            "customId": "AB1_0123456789"
        }
        assert r.match("/some-other-thing", "GET") is None

    def test_constructor_match_types(self) -> None:
        r = Router(match_types={"slug": r"[a-z0-9-]+"})
        r.get("/posts/[slug:slug]", _target)
        assert r.match("/posts/hello-world", "GET").params == {"slug": "hello-world"}  # type: ignore[union-attr]

    def test_config_match_types(self) -> None:
        r = Router(config=RouterConfig(match_types=(("year", r"[0-9]{4}"),)))
        r.get("/archive/[year:y]", _target)
        assert r.match("/archive/2024", "GET").params == {"y": "2024"}  # type: ignore[union-attr]
        assert r.match("/archive/24", "GET") is None

    def test_override_applies_to_existing_routes(self) -> None:
        r = Router()
        r.get("/n/[i:n]", _target)
        assert r.match("/n/123", "GET") is not None
        r.add_match_types({"i": r"[0-9]{2}"})
        assert r.match("/n/123", "GET") is None
        assert r.match("/n/12", "GET") is not None


class TestGenerate:
    def test_generate(self) -> None:
        r = Router()
        r.map("GET", "/[:controller]/[:action]", _target, "foo_route")
        params = {"controller": "test", "action": "someaction"}
        assert r.generate("foo_route", params) == "/test/someaction"
        assert r.generate("foo_route", {**params, "type": "json"}) == "/test/someaction"

    def test_optional_parts(self) -> None:
        r = Router()
        r.map("GET", "/[:controller]/[:action].[:type]?", _target, "bar_route")
        params = {"controller": "test", "action": "someaction"}
        assert r.generate("bar_route", params) == "/test/someaction"
        assert r.generate("bar_route", {**params, "type": "json"}) == "/test/someaction.json"

    def test_keyword_params(self) -> None:
        r = Router()
        r.get("/users/[i:id]/[:name]", _target, "user")
        assert r.generate("user", {"id": 1}, name="ann") == "/users/1/ann"

    def test_keyword_param_called_name(self) -> None:
        r = Router()
        r.get("/tags/[:name]", _target, "tag")
        assert r.generate("tag", name="python") == "/tags/python"

    @pytest.mark.parametrize(
        ("template", "url"),
        [
            ("/users/[i:id]?", "/users"),
            ("/feed.[:format]?", "/feed"),
        ],
    )
    def test_optional_first_block_omitted_round_trip(self, template: str, url: str) -> None:
        r = Router()
        r.get(template, _target, "page")
        assert r.generate("page") == url
        assert r.match(url, "GET").params == {}  # type: ignore[union-attr]

    def test_optional_block_before_required_round_trip(self) -> None:
        r = Router(base_path="/app")
        r.get("/x/[:cat]?[:req]", _target, "x")
        url = r.generate("x", req="v")
        assert url == "/app/xv"
        assert r.match(url, "GET").params == {"req": "v"}  # type: ignore[union-attr]

    def test_unknown_name(self) -> None:
        with pytest.raises(UnknownRouteName, match="Route 'non_existing_route' does not exist."):
            Router().generate("non_existing_route")

    def test_unknown_name_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            Router().generate("missing")


class TestIntrospection:
    def test_repr(self) -> None:
        r = Router(base_path="/app")
        r.get("/", _target)
        assert repr(r) == "<Router 1 routes base_path='/app'>"

    def test_routes_is_snapshot(self) -> None:
        r = Router()
        snapshot = r.routes
        r.get("/", _target)
        assert snapshot == ()

"""Tests for the route table — merging, key canonicalization, fallback chain."""

import pytest

from wren.errors import ConfigurationError
from wren.routing.route import FileRef, FunctionRoute, TemplateRef
from wren.routing.table import DEFAULT_ROUTES, RouteTable, route_key


class TestDefaults:
    def test_defaults_cover_root_and_status_pages(self) -> None:
        assert set(DEFAULT_ROUTES) == {"/", 403, 404, 500}
        assert all(isinstance(v, FunctionRoute) for v in DEFAULT_ROUTES.values())

    def test_empty_build_is_defaults(self) -> None:
        table = RouteTable.build()
        assert dict(table) == dict(DEFAULT_ROUTES)

    def test_default_pages_return_bodies(self) -> None:
        assert DEFAULT_ROUTES[404].handler(None, None) == "Not Found"
        assert DEFAULT_ROUTES[403].handler(None, None) == "Forbidden"
        assert DEFAULT_ROUTES[500].handler(None, None) == "Internal Server Error"
        assert "It works!" in DEFAULT_ROUTES["/"].handler(None, None)


class TestBuild:
    def test_override_replaces_default(self) -> None:
        table = RouteTable.build({"/": "index.html"})
        assert table["/"] == FileRef("index.html")
        assert isinstance(table[404], FunctionRoute)

    def test_keys_are_normalized(self) -> None:
        table = RouteTable.build({"/about": "about.html"})
        assert table.lookup("/about/") == FileRef("about.html")
        assert "/about" not in table

    def test_later_duplicate_wins(self) -> None:
        table = RouteTable.build({"/about": "a.html", "/about/": "b.html"})
        assert table["/about/"] == FileRef("b.html")

    def test_digit_string_status_keys(self) -> None:
        table = RouteTable.build({"404": "missing.html"})
        assert table[404] == FileRef("missing.html")

    def test_template_extension_forwarded(self) -> None:
        table = RouteTable.build({"/": "index.kida"}, template_extension=".kida")
        assert table["/"] == TemplateRef("index.kida")

    def test_bad_value_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            RouteTable.build({"/": 12})

    def test_table_is_read_only(self) -> None:
        table = RouteTable.build()
        with pytest.raises(TypeError):
            table["/x/"] = FileRef("x")  # type: ignore[index]

    def test_root_required(self) -> None:
        with pytest.raises(ConfigurationError, match="root route"):
            RouteTable({404: FileRef("404.html")})


class TestRouteKey:
    def test_reserved_status(self) -> None:
        assert route_key(500) == 500

    def test_non_reserved_status_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="reserved status"):
            route_key(418)

    def test_bool_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            route_key(True)

    def test_relative_path_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            route_key("about")

    def test_file_key_kept(self) -> None:
        assert route_key("/feed.xml") == "/feed.xml"


class TestResolveWithFallback:
    def test_exact_match(self) -> None:
        table = RouteTable.build({403: "forbidden.html"})
        assert table.resolve_with_fallback(403) == FileRef("forbidden.html")

    def test_missing_status_falls_back_to_404(self) -> None:
        table = RouteTable({"/": FileRef("index.html"), 404: FileRef("404.html")})
        assert table.resolve_with_fallback(403) == FileRef("404.html")
        assert table.resolve_with_fallback(500) == FileRef("404.html")

    def test_missing_404_falls_back_to_root(self) -> None:
        table = RouteTable({"/": FileRef("index.html")})
        assert table.resolve_with_fallback(404) == FileRef("index.html")
        assert table.resolve_with_fallback(403) == FileRef("index.html")

    def test_lookup_miss_is_none(self) -> None:
        assert RouteTable.build().lookup("/nope/") is None

"""Tests for wren.config — AppConfig and mapping-based configuration."""

import pytest

from wren.config import AppConfig, deep_merge
from wren.errors import ConfigurationError


class TestAppConfig:
    def test_defaults(self) -> None:
        config = AppConfig()
        assert config.host == "127.0.0.1"
        assert config.port == 8000
        assert config.debug is False
        assert dict(config.routes) == {}
        assert config.safe_directories is None
        assert config.template_extension == ".tpl"
        assert config.autoescape is True
        assert config.log_level == "info"

    def test_frozen(self) -> None:
        config = AppConfig()
        with pytest.raises(AttributeError):
            config.port = 9000  # type: ignore[misc]

    def test_routes_are_read_only(self) -> None:
        config = AppConfig(routes={"/": "index.html"})
        with pytest.raises(TypeError):
            config.routes["/x"] = "x.html"  # type: ignore[index]

    def test_routes_copied(self) -> None:
        routes = {"/": "index.html"}
        config = AppConfig(routes=routes)
        routes["/other"] = "other.html"
        assert "/other" not in config.routes

    def test_safe_directories_from_mapping(self) -> None:
        config = AppConfig(safe_directories={"/public": True, "/private": False})
        assert config.safe_directories == frozenset({"/public"})

    def test_safe_directories_from_list(self) -> None:
        config = AppConfig(safe_directories=["/a", "/b"])
        assert config.safe_directories == frozenset({"/a", "/b"})

    def test_safe_directories_string_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            AppConfig(safe_directories="/public")  # type: ignore[arg-type]

    def test_template_extension_needs_dot(self) -> None:
        with pytest.raises(ConfigurationError, match="template_extension"):
            AppConfig(template_extension="tpl")


class TestDeepMerge:
    def test_nested_mappings_merge(self) -> None:
        base = {"routes": {"/": "a.html", 404: "404.html"}, "port": 8000}
        merged = deep_merge(base, {"routes": {"/": "b.html"}})
        assert merged == {"routes": {"/": "b.html", 404: "404.html"}, "port": 8000}

    def test_scalars_replace(self) -> None:
        assert deep_merge({"port": 8000}, {"port": 3000}) == {"port": 3000}

    def test_inputs_untouched(self) -> None:
        base = {"a": {"b": 1}}
        override = {"a": {"c": 2}}
        deep_merge(base, override)
        assert base == {"a": {"b": 1}}
        assert override == {"a": {"c": 2}}


class TestFromMapping:
    def test_camel_case_keys(self) -> None:
        config = AppConfig.from_mapping(
            {
                "contentType": {".md": "text/markdown"},
                "safeDirectories": {"/assets": True},
                "templateExtension": ".kida",
            }
        )
        assert config.content_types[".md"] == "text/markdown"
        assert config.safe_directories == frozenset({"/assets"})
        assert config.template_extension == ".kida"

    def test_routes_merge_over_base(self) -> None:
        base = AppConfig(routes={"/": "index.html", "/about": "about.html"})
        config = AppConfig.from_mapping({"routes": {"/": "home.html"}}, base)
        assert dict(config.routes) == {"/": "home.html", "/about": "about.html"}

    def test_base_untouched(self) -> None:
        base = AppConfig(port=8000)
        AppConfig.from_mapping({"port": 3000}, base)
        assert base.port == 8000

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown configuration key"):
            AppConfig.from_mapping({"colour": "blue"})

"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, passed into
the App once and read by every request without locks.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any

from wren.errors import ConfigurationError

# Keys used by JSON-style configuration objects, mapped to field names.
_ALIASES: dict[str, str] = {
    "contentType": "content_types",
    "safeDirectories": "safe_directories",
    "staticRoot": "static_root",
    "templateExtension": "template_extension",
    "logLevel": "log_level",
}


def deep_merge(base: Mapping[Any, Any], override: Mapping[Any, Any]) -> dict[Any, Any]:
    """Merge *override* into a copy of *base*.

    Nested mappings merge key by key; every other value in *override*
    replaces the one in *base*. Neither argument is modified.
    """
    merged: dict[Any, Any] = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def _freeze_mapping(value: Mapping[Any, Any] | None) -> Mapping[Any, Any]:
    return MappingProxyType(dict(value or {}))


def _safe_directory_set(value: Any) -> frozenset[str] | None:
    """Normalize ``{"/public": True}`` or ``["/public"]`` to a frozenset."""
    if value is None:
        return None
    if isinstance(value, str):
        msg = f"safe_directories must be a mapping or a collection of paths, not {value!r}"
        raise ConfigurationError(msg)
    if isinstance(value, Mapping):
        return frozenset(str(key) for key, allowed in value.items() if allowed)
    if isinstance(value, Iterable):
        return frozenset(str(item) for item in value)
    msg = f"safe_directories must be a mapping or a collection of paths, not {type(value).__name__}"
    raise ConfigurationError(msg)


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(
            port=3000,
            routes={"/": "index.html", 404: "404.html"},
            content_types={".svg": "image/svg+xml"},
            safe_directories={"/assets": True},
        )

    ``safe_directories`` accepts a mapping (keys with truthy values are
    allowed) or any collection of directory paths. ``None`` leaves
    fallback file serving open to every directory.
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # Routing
    routes: Mapping[Any, Any] = field(default_factory=dict)
    safe_directories: frozenset[str] | None = None
    static_root: str | Path = "."

    # Content types (extension -> MIME type), merged over the defaults
    content_types: Mapping[str, str] = field(default_factory=dict)

    # Templates
    template_extension: str = ".tpl"
    autoescape: bool = True

    # Logging
    log_level: str = "info"

    def __post_init__(self) -> None:
        object.__setattr__(self, "routes", _freeze_mapping(self.routes))
        object.__setattr__(self, "content_types", _freeze_mapping(self.content_types))
        object.__setattr__(
            self, "safe_directories", _safe_directory_set(self.safe_directories)
        )
        if not self.template_extension.startswith("."):
            msg = f"template_extension must start with '.', got {self.template_extension!r}"
            raise ConfigurationError(msg)

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Any],
        base: "AppConfig | None" = None,
    ) -> "AppConfig":
        """Build a config from a plain mapping (e.g. parsed JSON).

        Accepts field names as well as the camelCase keys of JSON-style
        configuration (``contentType``, ``safeDirectories``). Values are
        deep-merged over *base* (or the defaults), so a partial ``routes``
        mapping only overrides the routes it names.

        Raises:
            ConfigurationError: If *mapping* contains an unknown key.
        """
        base = base or cls()
        known = {f.name for f in fields(cls)}
        current: dict[str, Any] = {}
        for f in fields(cls):
            value = getattr(base, f.name)
            current[f.name] = dict(value) if isinstance(value, Mapping) else value

        incoming: dict[str, Any] = {}
        for key, value in mapping.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                msg = f"Unknown configuration key {key!r}"
                raise ConfigurationError(msg)
            incoming[name] = value

        merged = deep_merge(current, incoming)
        return replace(base, **{name: merged[name] for name in known})

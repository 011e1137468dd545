"""Kida environment setup and template rendering.

Template routes load their source from disk themselves (through the
same loader as file routes), so the environment needs no loader: it only
compiles source strings. It is created once during ``App._freeze()``
and shared read-only by every request.
"""

from collections.abc import Mapping
from typing import Any

from kida import Environment

from wren.config import AppConfig


def create_environment(config: AppConfig) -> Environment:
    """Create the kida Environment used for template routes."""
    return Environment(autoescape=config.autoescape)


def render_source(
    env: Environment,
    source: str,
    data: Mapping[str, Any] | None = None,
) -> str:
    """Render template *source* with *data* as its context."""
    template = env.from_string(source)
    return template.render(dict(data or {}))

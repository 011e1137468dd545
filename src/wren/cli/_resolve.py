"""Turn ``"module:attribute"`` into the App it names.

Used by ``wren run`` and ``wren routes``.
"""

import importlib

from wren.app import App


def resolve_app(import_string: str) -> App:
    """Import *import_string* and return the wren App it points at.

    ``"site"`` means ``"site:app"``. If the attribute is a callable other
    than an App it is treated as a factory and called with no arguments.

    Raises:
        ModuleNotFoundError: The module does not import.
        AttributeError: The module has no such attribute.
        TypeError: The factory failed, or the result is not an App.
    """
    module_name, _, attr = import_string.partition(":")
    target = getattr(importlib.import_module(module_name), attr or "app")

    if not isinstance(target, App) and callable(target):
        try:
            target = target()
        except Exception as exc:
            msg = f"App factory {import_string!r} failed: {exc}"
            raise TypeError(msg) from exc

    if isinstance(target, App):
        return target
    msg = f"{import_string!r} is a {type(target).__name__}, not a wren.App instance"
    raise TypeError(msg)

"""Call route handlers and lifecycle hooks, sync or async alike.

Usage::

    from wren._internal.invoke import invoke

    result = await invoke(handler, request, response)
"""

import inspect
from collections.abc import Callable, Iterable
from typing import Any


async def invoke(handler: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Call *handler*; if it returned an awaitable, await it."""
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        return await result
    return result


async def run_hooks(hooks: Iterable[Callable[[], Any]]) -> None:
    """Call lifecycle hooks in order, awaiting the async ones."""
    for hook in hooks:
        await invoke(hook)

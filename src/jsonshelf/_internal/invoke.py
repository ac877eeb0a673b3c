"""Calls a route handler whether it is ``def`` or ``async def``."""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        return await result
    return result

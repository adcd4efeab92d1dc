"""Count values as seen by the metrics display.

A count is either already known (``Immediate``) or produced on demand by a
zero-argument coroutine function (``Deferred``). Both resolve the same way,
so the display never has to inspect what it was handed.
"""
import json
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Union


CountValue = Union[int, float, str]


@dataclass(frozen=True)
class Immediate:
    value: Any

    async def resolve(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Deferred:
    producer: Callable[[], Awaitable[Any]]

    async def resolve(self) -> Any:
        return await self.producer()


Count = Union[Immediate, Deferred]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def format_count(value: Any) -> str:
    """Text of a count cell, spelled the way the value reads in JSON.

    ``None`` is ``null``, booleans are lower-case and integral floats drop
    their fraction (``5.0`` -> ``5``). Lists are comma-joined.
    """
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple)):
        return ','.join('' if item is None else format_count(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value)
    return str(value)


async def resolve_count(count: Count) -> CountValue:
    """Resolve a count; numbers are kept, anything else becomes its display text."""
    result = await count.resolve()
    if _is_number(result):
        return result
    return format_count(result)


__all__ = ['Count', 'CountValue', 'Deferred', 'Immediate', 'format_count', 'resolve_count']

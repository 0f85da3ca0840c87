"""Ordered fallback evaluation: try candidates in turn, stop at the first hit."""
from __future__ import annotations

from typing import Awaitable, Callable, Iterable, Optional, TypeVar

C = TypeVar("C")
R = TypeVar("R")


async def first_result(
    candidates: Iterable[C],
    attempt: Callable[[C], Awaitable[Optional[R]]],
) -> Optional[R]:
    """Await ``attempt(candidate)`` for each candidate in order.

    Returns the first result that is not None; later candidates are never
    attempted. Exceptions raised by an attempt propagate unchanged.
    """
    for candidate in candidates:
        result = await attempt(candidate)
        if result is not None:
            return result
    return None

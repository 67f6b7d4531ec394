"""Small value helpers shared across the package.

These are plain functions; built-in types are never extended.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator, Sized
from contextlib import contextmanager
from typing import TypeVar

from teapath.shared.errors import ErrorKind, PathError

T = TypeVar("T")
S = TypeVar("S")


def compact(
    items: Iterable[T],
    body: Callable[[T], S | None] | None = None,
    *,
    rescue: bool = False,
) -> list[S]:
    """Map ``items`` through ``body`` and drop falsy results.

    Args:
        items: Values to process.
        body: Optional transform; identity when omitted.
        rescue: Skip items whose transform raises instead of propagating.

    Returns:
        list: Truthy results in input order.
    """
    results: list[S] = []
    for item in items:
        try:
            value = body(item) if body is not None else item
        except Exception:
            if not rescue:
                raise
            continue
        if value:
            results.append(value)  # type: ignore[arg-type]
    return results


def uniq(items: Iterable[T]) -> list[T]:
    """Drop items whose ``str()`` was already seen, keeping first occurrences."""

    seen: set[str] = set()
    results: list[T] = []
    for item in items:
        key = str(item)
        if key in seen:
            continue
        seen.add(key)
        results.append(item)
    return results


def chuzzle(value: T) -> T | None:
    """Return ``None`` for blank strings, empty collections and NaN."""

    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None  # type: ignore[return-value]
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, Sized) and len(value) == 0:
        return None
    return value


def flatmap(
    value: T | None,
    body: Callable[[T], S | None],
    *,
    rescue: bool = False,
) -> S | None:
    """Apply ``body`` to ``value`` when it is truthy."""

    if not value:
        return None
    try:
        return body(value)
    except Exception:
        if not rescue:
            raise
        return None


@contextmanager
def swallow(*kinds: ErrorKind) -> Iterator[None]:
    """Suppress ``PathError``s of the given kinds (any kind when none given)."""

    try:
        yield
    except PathError as exc:
        if kinds and exc.kind not in kinds:
            raise


__all__ = ["chuzzle", "compact", "flatmap", "swallow", "uniq"]

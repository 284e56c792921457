"""Search result — Lazy document sequence plus a total count."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

Document = dict[str, Any]


class Result:
    """Documents returned by a search.

    The raw hits are held by the result and converted on iteration, one
    document at a time. Iterating again replays the conversion from the
    start.

    ``total`` is the engine's exact hit count when available, otherwise its
    estimate, otherwise ``None``. Treat it as approximate.
    """

    def __init__(
        self,
        hits: Iterable[dict[str, Any]],
        total: int | None,
        transform: Callable[[dict[str, Any]], Document] | None = None,
    ) -> None:
        self._hits = list(hits)
        self._total = total
        self._transform = transform

    @classmethod
    def empty(cls) -> Result:
        return cls([], 0)

    @property
    def total(self) -> int | None:
        return self._total

    def __iter__(self) -> Iterator[Document]:
        for hit in self._hits:
            yield self._transform(hit) if self._transform else hit

    def __repr__(self) -> str:
        return f"Result(hits={len(self._hits)}, total={self._total})"

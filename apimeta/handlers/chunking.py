"""Generic batching helper for metadata sources.

Providers cap the number of ids per request (Spotify: 50 tracks, 20 albums),
so sources page their identifier lists through :func:`split_into_chunks`.
"""
from __future__ import annotations
from itertools import islice
from typing import Iterable, Iterator, List, TypeVar

T = TypeVar("T")


def split_into_chunks(source: Iterable[T], chunk_size: int) -> Iterator[List[T]]:
    """Split an iterable into consecutive chunks of at most ``chunk_size`` items.

    The source is consumed lazily, one chunk at a time, so generators and
    other single-pass iterables work. The last chunk may be smaller; an empty
    source yields nothing.

    Args:
        source: Items to split
        chunk_size: Maximum number of items per chunk (must be >= 1)

    Yields:
        Lists of items in source order

    Raises:
        ValueError: If chunk_size is smaller than 1
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be a positive integer, got {chunk_size}")
    it = iter(source)
    while True:
        chunk = list(islice(it, chunk_size))
        if not chunk:
            return
        yield chunk


__all__ = ["split_into_chunks"]

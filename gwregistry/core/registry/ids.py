# gwregistry/core/registry/ids.py
"""
Identifier generation.

Gateway serials are UUID-v4 strings. Device uids are positive ints,
unique for the life of the process.
"""

from __future__ import annotations

import uuid
from typing import Container


def new_serial() -> str:
    return str(uuid.uuid4())


class UidGenerator:
    """
    Monotonic positive int source.

    Values already taken by caller-supplied uids are skipped, so a
    generated uid never collides with a stored one.
    """

    def __init__(self, start: int = 1) -> None:
        if isinstance(start, bool) or not isinstance(start, int) or start < 1:
            raise ValueError("start must be a positive int")
        self._next = start

    def next(self, taken: Container[int] = ()) -> int:
        uid = self._next
        while uid in taken:
            uid += 1
        self._next = uid + 1
        return uid

    def peek(self) -> int:
        return self._next

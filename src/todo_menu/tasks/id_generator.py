# src/todo_menu/tasks/id_generator.py

from __future__ import annotations

import threading


class IdentifierGenerator:
    """
    Strictly increasing task identifiers for the lifetime of the generator.

    Thread-safety:
    - allocation is guarded by a lock, concurrent callers never share a value
    """

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            raise ValueError("start must be positive")
        self._lock = threading.Lock()
        self._next = start

    def next_id(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def peek(self) -> int:
        """Value the next call to next_id() will return (does not consume it)."""
        with self._lock:
            return self._next

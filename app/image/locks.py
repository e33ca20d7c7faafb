# app/image/locks.py
import threading
from collections.abc import Iterator
from contextlib import contextmanager


class TicketLocks:
    """One mutex per ticket id, dropped once nobody holds or waits for it."""

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[int, tuple[threading.Lock, list[int]]] = {}

    @contextmanager
    def hold(self, ticket_id: int) -> Iterator[None]:
        with self._guard:
            lock, users = self._locks.setdefault(ticket_id, (threading.Lock(), [0]))
            users[0] += 1
        lock.acquire()
        try:
            yield
        finally:
            lock.release()
            with self._guard:
                users[0] -= 1
                if users[0] == 0:
                    del self._locks[ticket_id]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

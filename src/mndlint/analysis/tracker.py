"""Run-scoped index of source lines that hold a constant declaration."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from mndlint.syntax.nodes import Position


class ReadWriteLock:
    """Many concurrent readers or one exclusive writer.

    Writers are preferred: once a writer is waiting, new readers block
    until it has finished, so declaration recording is not starved by
    a stream of lookups.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class ConstantTracker:
    """Lines (per file) known to start a ``const`` declaration.

    One instance is shared by every check of a run. Entries are never
    removed. Only literals on the same line as the ``const`` keyword
    are protected; nothing orders a declaration before uses on other
    lines or in other worker threads.
    """

    def __init__(self) -> None:
        self._lines: set[tuple[str, int]] = set()
        self._lock = ReadWriteLock()

    def record_declaration(self, position: Position) -> None:
        with self._lock.write():
            self._lines.add((position.file, position.line))

    def is_declaration_line(self, position: Position) -> bool:
        with self._lock.read():
            return (position.file, position.line) in self._lines

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._lines)

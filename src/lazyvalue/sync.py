"""Synchronization strategies for lazy values.

A strategy is a context manager that ``LazyValue`` enters around every
operation. The uncoordinated strategy is a shared no-op; the coordinated one
is a fresh reentrant lock per instance. Reentrancy lets a supplier call back
into the lazy value that is computing it from the same thread.
"""

from contextlib import AbstractContextManager, nullcontext
from threading import RLock
from typing import Any

#: A context manager guarding a lazy value's state for one operation.
Lock = AbstractContextManager[Any]

_NO_LOCK: Lock = nullcontext()


def uncoordinated() -> Lock:
    """Return the no-op strategy. Safe only under external synchronization."""
    return _NO_LOCK


def coordinated() -> Lock:
    """Return a new per-instance reentrant lock."""
    return RLock()


def is_coordinated(lock: Lock) -> bool:
    return lock is not _NO_LOCK

"""Construction helpers for the two lazy value variants."""

from collections.abc import Callable
from typing import TypeVar

from lazyvalue.sync import coordinated, uncoordinated
from lazyvalue.value import LazyValue

_T = TypeVar("_T")


def unsafe(supplier: Callable[[], _T], caching_enabled: bool = True) -> LazyValue[_T]:
    """Create a lazy value with no synchronization.

    Use from a single thread, or where the caller already guarantees
    exclusive access. Concurrent use may run the supplier more than once.

    Raises:
        MissingSupplierError: If ``supplier`` is None.
    """
    return LazyValue(supplier, caching_enabled, lock=uncoordinated())


def safe(supplier: Callable[[], _T], caching_enabled: bool = True) -> LazyValue[_T]:
    """Create a lazy value whose operations are serialized by a reentrant lock.

    Concurrent ``get()`` calls on an empty cache run the supplier once; the
    other callers wait and receive the cached result.

    Raises:
        MissingSupplierError: If ``supplier`` is None.
    """
    return LazyValue(supplier, caching_enabled, lock=coordinated())

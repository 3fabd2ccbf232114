"""The lazy value state machine.

``LazyValue`` holds a supplier, a caching flag, a cached flag and the last
computed value. Its state is one of ``{uncached, cached} x {caching on,
caching off}``:

    - ``get()`` with caching on and nothing cached calls the supplier and
      stores the result; with a cached value it returns that value.
    - ``get()`` with caching off always calls the supplier and leaves the
      cached state untouched.
    - ``clear_cache()`` moves to uncached, keeping the caching mode.
    - ``set_caching_enabled()`` changes the mode, keeping the cached state.
      A value cached before caching was turned off is returned again once it
      is turned back on.

How concurrent callers are coordinated is decided by the injected lock, see
``lazyvalue.sync``.
"""

from collections.abc import Callable
from logging import getLogger
from typing import Generic, TypeVar, cast

from lazyvalue.exceptions import InvalidArgumentError, MissingSupplierError
from lazyvalue.sync import Lock, is_coordinated, uncoordinated

_T = TypeVar("_T")

logger = getLogger(__name__)


class LazyValue(Generic[_T]):
    """A value computed on first access and optionally cached.

    Every public operation runs inside ``lock``. With the default no-op lock
    the instance must not be shared between threads without external
    synchronization: concurrent ``get()`` calls may both run the supplier.
    With a real lock, operations on one instance are linearizable and at
    most one supplier call fills an empty cache, even under contention. The
    lock is held for the whole supplier call, so a slow supplier blocks every
    other operation on the instance, including flag reads.

    Exceptions raised by the supplier propagate unchanged and leave the
    instance as it was.

    Attributes:
        _supplier: Zero-argument callable producing the value.
        _lock: Context manager entered around every operation.
        _caching_enabled: Whether ``get()`` consults and fills the cache.
        _cached: Whether ``_value`` holds a computed value.
        _value: The last computed value, None while uncached.
    """

    def __init__(
        self,
        supplier: Callable[[], _T],
        caching_enabled: bool = True,
        *,
        lock: Lock | None = None,
    ) -> None:
        """Wrap ``supplier`` without calling it.

        Args:
            supplier: Zero-argument callable producing the value.
            caching_enabled: Initial caching mode.
            lock: Synchronization strategy. None means uncoordinated.

        Raises:
            MissingSupplierError: If ``supplier`` is None.
            InvalidArgumentError: If ``supplier`` is not callable.
        """
        if supplier is None:
            raise MissingSupplierError()
        if not callable(supplier):
            raise InvalidArgumentError(
                f"Supplier must be callable, got {type(supplier).__name__}"
            )
        self._supplier = supplier
        self._lock = uncoordinated() if lock is None else lock
        self._caching_enabled = caching_enabled
        self._cached = False
        self._value: _T | None = None

    @property
    def supplier(self) -> Callable[[], _T]:
        return self._supplier

    @property
    def coordinated(self) -> bool:
        """Whether operations on this instance are serialized by a lock."""
        return is_coordinated(self._lock)

    def get(self) -> _T:
        with self._lock:
            if not self._caching_enabled:
                logger.debug("Caching disabled, computing value of %r", self)
                return self._compute()
            if not self._cached:
                logger.debug("Filling cache of %r", self)
                self._value = self._compute()
                self._cached = True
            return cast(_T, self._value)

    def __call__(self) -> _T:
        return self.get()

    def set_caching_enabled(self, enabled: bool) -> None:
        with self._lock:
            self._caching_enabled = enabled

    def is_caching_enabled(self) -> bool:
        with self._lock:
            return self._caching_enabled

    def is_cached(self) -> bool:
        with self._lock:
            return self._cached

    def clear_cache(self) -> None:
        with self._lock:
            if self._cached:
                logger.debug("Clearing cache of %r", self)
            self._value = None
            self._cached = False

    def _compute(self) -> _T:
        try:
            return self._supplier()
        except Exception:
            logger.debug("Supplier of %r raised, nothing cached", self)
            raise

    def __repr__(self) -> str:
        # Reads flags without the lock so repr never blocks on a running supplier.
        return (
            f"{type(self).__name__}({self._supplier!r}, "
            f"caching_enabled={self._caching_enabled}, cached={self._cached}, "
            f"coordinated={self.coordinated})"
        )

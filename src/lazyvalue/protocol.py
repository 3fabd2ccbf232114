"""The lazy value protocol and its validation helper.

``Lazy`` describes anything that defers a zero-argument computation until it
is asked for, optionally caching the result. Both variants produced by
``lazyvalue.factories`` satisfy it, as can third-party implementations.

A ``Lazy`` is callable with no arguments, so it can itself be used wherever a
supplier is expected.
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

from lazyvalue.exceptions import REQUIRED_LAZY_MESSAGE, MissingLazyError

_T_co = TypeVar("_T_co", covariant=True)


@runtime_checkable
class Lazy(Protocol[_T_co]):
    def get(self) -> _T_co:
        """Return the value, computing it if it is not cached.

        Returns:
            The cached value when caching is enabled and a value is present,
            otherwise the result of a fresh supplier call.
        """
        ...

    def __call__(self) -> _T_co:
        """Alias of ``get`` so a lazy value can act as a supplier."""
        ...

    def set_caching_enabled(self, enabled: bool) -> None:
        """Turn caching on or off without touching any cached value.

        Args:
            enabled: Whether ``get`` should consult and fill the cache.
        """
        ...

    def is_caching_enabled(self) -> bool:
        """Return whether ``get`` consults the cache."""
        ...

    def is_cached(self) -> bool:
        """Return whether a computed value is currently held."""
        ...

    def clear_cache(self) -> None:
        """Drop any cached value so the next cached ``get`` recomputes it."""
        ...


_L = TypeVar("_L", bound=Lazy[Any])


def require_lazy(lazy: _L | None, message: str | None = REQUIRED_LAZY_MESSAGE) -> _L:
    """Return ``lazy`` unchanged, or raise if it is None.

    Args:
        lazy: The lazy value to check.
        message: Message for the raised error. An explicit None is carried
            through as-is rather than replaced by the default.

    Returns:
        The same ``lazy`` object that was passed in.

    Raises:
        MissingLazyError: If ``lazy`` is None.

    Example::

        class Report:
            def __init__(self, rows: Lazy[list[Row]]) -> None:
                self._rows = require_lazy(rows, "Report needs its rows")
    """
    if lazy is None:
        raise MissingLazyError(message)
    return lazy

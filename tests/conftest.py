from collections.abc import Callable
from typing import Any

import pytest

from lazyvalue import LazyValue, safe, unsafe

LazyFactory = Callable[..., LazyValue[Any]]


class CountingSupplier:
    """Supplier that returns how many times it has been called."""

    def __init__(self) -> None:
        self.call_count = 0

    def __call__(self) -> int:
        self.call_count += 1
        return self.call_count


class ObjectSupplier:
    """Supplier that returns a new object on every call."""

    def __init__(self) -> None:
        self.call_count = 0

    def __call__(self) -> object:
        self.call_count += 1
        return object()


@pytest.fixture(params=[unsafe, safe], ids=["unsafe", "safe"])
def make_lazy(request: pytest.FixtureRequest) -> LazyFactory:
    """Construct a lazy value with each variant in turn."""
    return request.param


@pytest.fixture
def counter() -> CountingSupplier:
    return CountingSupplier()


@pytest.fixture
def objects() -> ObjectSupplier:
    return ObjectSupplier()

"""Concurrency tests for the coordinated (safe) variant."""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from lazyvalue import LazyValue, safe, unsafe
from lazyvalue.sync import coordinated, is_coordinated, uncoordinated

THREADS = 16


def test_strategies() -> None:
    assert uncoordinated() is uncoordinated()
    assert coordinated() is not coordinated()
    assert not is_coordinated(uncoordinated())
    assert is_coordinated(coordinated())


def test_factories_pick_strategy() -> None:
    assert safe(object).coordinated
    assert not unsafe(object).coordinated
    assert not LazyValue(object).coordinated


def test_concurrent_gets_compute_once() -> None:
    calls: list[object] = []
    lock = threading.Lock()
    start = threading.Barrier(THREADS)

    def slow_supplier() -> object:
        with lock:
            calls.append(object())
        # Give the other threads time to pile up on the instance lock.
        threading.Event().wait(0.05)
        return calls[-1]

    lazy = safe(slow_supplier)

    def worker() -> object:
        start.wait()
        return lazy.get()

    with ThreadPoolExecutor(max_workers=THREADS) as pool:
        results = list(pool.map(lambda _: worker(), range(THREADS)))

    assert len(calls) == 1
    assert all(result is calls[0] for result in results)
    assert lazy.is_cached()


def test_operations_block_while_supplier_runs() -> None:
    entered = threading.Event()
    release = threading.Event()

    def blocking_supplier() -> int:
        entered.set()
        release.wait()
        return 7

    lazy = safe(blocking_supplier)
    getter = threading.Thread(target=lazy.get)
    getter.start()
    assert entered.wait(5)

    observed: list[bool] = []
    reader = threading.Thread(target=lambda: observed.append(lazy.is_cached()))
    reader.start()
    reader.join(0.1)
    assert reader.is_alive()

    release.set()
    getter.join(5)
    reader.join(5)
    assert observed == [True]


def test_lock_released_after_supplier_raises() -> None:
    attempts: list[int] = []

    def flaky() -> str:
        attempts.append(1)
        if len(attempts) == 1:
            raise RuntimeError("first call fails")
        return "ok"

    lazy = safe(flaky)
    with pytest.raises(RuntimeError):
        lazy.get()

    result: list[str] = []
    other = threading.Thread(target=lambda: result.append(lazy.get()))
    other.start()
    other.join(5)

    assert not other.is_alive()
    assert result == ["ok"]


def test_reentrant_supplier_does_not_deadlock() -> None:
    seen: list[bool] = []

    def supplier() -> int:
        seen.append(lazy.is_cached())
        return 1

    lazy = safe(supplier)

    assert lazy.get() == 1
    assert seen == [False]

import threading
import time

import pytest

from fragsynth.threadpool import ThreadPool


def _wait_for(pool, count, timeout=5.0):
    deadline = time.monotonic() + timeout
    while pool.out_queue_size() < count and time.monotonic() < deadline:
        time.sleep(0.01)
    return pool.out_queue_size()


def _drain(pool):
    results = []
    while pool.out_queue_size():
        results.append(pool.front())
        pool.pop()
    return results


def test_all_items_are_processed():
    items = list(range(20))
    with ThreadPool(lambda x: x * x, 4) as pool:
        for item in items:
            pool.push(item)
        assert _wait_for(pool, len(items)) == len(items)
        results = _drain(pool)
    assert sorted(results) == sorted(x * x for x in items)
    assert pool.out_queue_size() == 0


def test_single_worker_preserves_order():
    items = ["a", "bb", "ccc", "dddd"]
    with ThreadPool(str.upper, 1) as pool:
        for item in items:
            pool.push(item)
        _wait_for(pool, len(items))
        assert _drain(pool) == [s.upper() for s in items]


def test_front_does_not_remove():
    with ThreadPool(lambda x: x + 1, 2) as pool:
        pool.push(41)
        _wait_for(pool, 1)
        assert pool.front() == 42
        assert pool.front() == 42
        assert pool.out_queue_size() == 1
        pool.pop()
        assert pool.out_queue_size() == 0


def test_front_and_pop_on_empty_raise():
    with ThreadPool(lambda x: x, 1) as pool:
        with pytest.raises(IndexError):
            pool.front()
        with pytest.raises(IndexError):
            pool.pop()


def test_items_pushed_after_close_stay_queued():
    pool = ThreadPool(lambda x: x, 2)
    pool.close()
    pool.push(1)
    pool.push(2)
    time.sleep(0.1)
    assert pool.in_queue_size() == 2
    assert pool.out_queue_size() == 0


def test_in_queue_counts_waiting_items():
    gate = threading.Event()

    def blocked(x):
        gate.wait()
        return x

    pool = ThreadPool(blocked, 1)
    pool.push(1)
    deadline = time.monotonic() + 5
    while pool.in_queue_size() and time.monotonic() < deadline:
        time.sleep(0.01)
    pool.push(2)
    pool.push(3)
    assert pool.in_queue_size() == 2
    gate.set()
    _wait_for(pool, 3)
    pool.close()
    assert sorted(_drain(pool)) == [1, 2, 3]


def test_processing_error_is_raised_on_close():
    def fail(x):
        raise KeyError(x)

    pool = ThreadPool(fail, 1)
    pool.push("k")
    deadline = time.monotonic() + 5
    while pool.in_queue_size() and time.monotonic() < deadline:
        time.sleep(0.01)
    time.sleep(0.1)
    with pytest.raises(KeyError):
        pool.close()


def test_zero_threads_rejected():
    with pytest.raises(ValueError):
        ThreadPool(lambda x: x, 0)


def test_num_threads_reported():
    with ThreadPool(lambda x: x, 3) as pool:
        assert pool.num_threads == 3
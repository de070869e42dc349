"""Read/Write Lock — shared readers, exclusive writers, writer preference.

Tests cover:
    - two readers hold the lock at the same time
    - a writer excludes readers and other writers
    - a waiting writer blocks newly arriving readers
    - releasing an unheld side raises RuntimeError
"""

import threading
import time

import pytest

from todo_api.core.rw_lock import ReadWriteLock

TIMEOUT = 5.0


def _wait_until(predicate, timeout=TIMEOUT):
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            raise AssertionError("condition not reached in time")
        time.sleep(0.005)


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    barrier = threading.Barrier(2, timeout=TIMEOUT)
    passed = []

    def reader():
        with lock.read_locked():
            barrier.wait()  # both must be inside at once to get past this
            passed.append(True)

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(TIMEOUT)
    assert passed == [True, True]
    assert lock.readers == 0


def test_writer_excludes_reader():
    lock = ReadWriteLock()
    entered = threading.Event()

    def reader():
        with lock.read_locked():
            entered.set()

    lock.acquire_write()
    t = threading.Thread(target=reader)
    t.start()
    assert not entered.wait(0.1)
    lock.release_write()
    assert entered.wait(TIMEOUT)
    t.join(TIMEOUT)


def test_writer_excludes_writer():
    lock = ReadWriteLock()
    entered = threading.Event()

    def writer():
        with lock.write_locked():
            entered.set()

    lock.acquire_write()
    t = threading.Thread(target=writer)
    t.start()
    assert not entered.wait(0.1)
    lock.release_write()
    assert entered.wait(TIMEOUT)
    t.join(TIMEOUT)
    assert not lock.write_held


def test_reader_blocks_writer_until_released():
    lock = ReadWriteLock()
    entered = threading.Event()

    def writer():
        with lock.write_locked():
            entered.set()

    lock.acquire_read()
    t = threading.Thread(target=writer)
    t.start()
    assert not entered.wait(0.1)
    lock.release_read()
    assert entered.wait(TIMEOUT)
    t.join(TIMEOUT)


def test_waiting_writer_goes_before_new_readers():
    lock = ReadWriteLock()
    order = []

    def writer():
        with lock.write_locked():
            order.append("writer")

    def late_reader():
        with lock.read_locked():
            order.append("reader")

    lock.acquire_read()
    w = threading.Thread(target=writer)
    w.start()
    _wait_until(lambda: lock._writers_waiting == 1)

    r = threading.Thread(target=late_reader)
    r.start()
    time.sleep(0.05)
    assert order == []

    lock.release_read()
    w.join(TIMEOUT)
    r.join(TIMEOUT)
    assert order == ["writer", "reader"]


def test_release_without_acquire_raises():
    lock = ReadWriteLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()


def test_context_manager_releases_on_exception():
    lock = ReadWriteLock()
    with pytest.raises(ValueError):
        with lock.write_locked():
            raise ValueError("boom")
    assert not lock.write_held
    with lock.read_locked():
        assert lock.readers == 1

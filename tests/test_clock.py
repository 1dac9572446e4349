"""
Tests for the microsecond clock and id generator
"""
import threading

from paintmap.core.clock import IdGenerator, MicroClock


def test_clock_uses_wall_time():
    """Ticks are microseconds of the source time"""
    clock = MicroClock(source=lambda: 1.5)
    assert clock.now() == 1_500_000


def test_clock_strictly_increasing_within_one_tick(frozen_clock):
    """Same wall-clock reading still yields increasing values"""
    values = [frozen_clock.now() for _ in range(100)]
    assert values == sorted(values)
    assert len(set(values)) == 100


def test_clock_never_goes_backwards():
    """A source stepping back does not rewind the clock"""
    readings = iter([10.0, 5.0, 5.0])
    clock = MicroClock(source=lambda: next(readings))
    first = clock.now()
    assert clock.now() == first + 1
    assert clock.now() == first + 2


def test_ids_are_numeric_strings(frozen_clock):
    """Ids parse as integers so they can be used in share links"""
    generate = IdGenerator(frozen_clock)
    account_id = generate()
    assert isinstance(account_id, str)
    assert str(int(account_id)) == account_id


def test_ids_unique_across_threads(frozen_clock):
    """Concurrent callers never receive the same id"""
    generate = IdGenerator(frozen_clock)
    ids = []
    lock = threading.Lock()

    def worker():
        for _ in range(200):
            value = generate()
            with lock:
                ids.append(value)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(ids) == 1600
    assert len(set(ids)) == 1600

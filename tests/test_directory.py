from __future__ import annotations

import threading
import time

import pytest

from conftest import make_schedule
from whereto.adapters.io.providers import InMemoryScheduleProvider
from whereto.core.errors import ProviderError
from whereto.modules.directory.catalog import DirectoryCache


class FailingProvider:
    def __init__(self):
        self.calls = 0

    def fetch_all_schedules(self):
        self.calls += 1
        raise ProviderError("boom")


def _provider() -> InMemoryScheduleProvider:
    return InMemoryScheduleProvider(
        [
            make_schedule("P4", origin="LOS", destination="ABV"),
            make_schedule("W3", origin="ABV", destination="ACC"),
            make_schedule("P4", origin="ACC", destination="LOS"),
        ]
    )


def test_directory_lists_unique_codes():
    directory = DirectoryCache(_provider())

    assert directory.list_airports() == {"LOS", "ABV", "ACC"}
    assert directory.list_carriers() == {"P4", "W3"}


def test_directory_scans_provider_once():
    provider = _provider()
    directory = DirectoryCache(provider)

    airports = directory.list_airports()
    carriers = directory.list_carriers()

    assert directory.list_airports() == airports
    assert directory.list_carriers() == carriers
    assert provider.calls == 1


def test_empty_dataset_gives_empty_sets():
    provider = InMemoryScheduleProvider([])
    directory = DirectoryCache(provider)

    assert directory.list_airports() == frozenset()
    assert directory.list_carriers() == frozenset()
    assert provider.calls == 1


def test_provider_failure_propagates_and_is_not_cached():
    provider = FailingProvider()
    directory = DirectoryCache(provider)

    with pytest.raises(ProviderError):
        directory.list_airports()
    with pytest.raises(ProviderError):
        directory.list_carriers()
    assert provider.calls == 2


class SlowProvider:
    def __init__(self, schedules):
        self.schedules = schedules
        self.calls = 0
        self._lock = threading.Lock()

    def fetch_all_schedules(self):
        with self._lock:
            self.calls += 1
            call = self.calls
        time.sleep(0.01)
        # each scan returns a distinct carrier so the stored snapshot is identifiable
        return self.schedules + [make_schedule(f"C{call}")]


def test_concurrent_first_scan_returns_one_snapshot():
    provider = SlowProvider([make_schedule("P4")])
    directory = DirectoryCache(provider)
    workers = 8
    barrier = threading.Barrier(workers)
    results = []
    lock = threading.Lock()

    def worker() -> None:
        barrier.wait()
        carriers = directory.list_carriers()
        with lock:
            results.append(carriers)

    threads = [threading.Thread(target=worker) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(set(results)) == 1
    assert directory.list_carriers() == results[0]
    assert 1 <= provider.calls <= workers
    calls_after_population = provider.calls
    directory.list_airports()
    assert provider.calls == calls_after_population

from lotto_picker.analysis.cache import AnalysisCache


class Counter:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return {"calls": self.calls}


def test_same_version_is_computed_once():
    cache, compute = AnalysisCache(), Counter()
    first = cache.get_or_compute("lotto", "frequency", 1, compute)
    second = cache.get_or_compute("lotto", "frequency", 1, compute)
    assert first is second
    assert compute.calls == 1


def test_new_version_recomputes():
    cache, compute = AnalysisCache(), Counter()
    cache.get_or_compute("lotto", "patterns", 1, compute)
    assert cache.get_or_compute("lotto", "patterns", 2, compute) == {"calls": 2}


def test_older_version_does_not_replace_newer():
    cache, compute = AnalysisCache(), Counter()
    cache.get_or_compute("lotto", "patterns", 2, compute)
    cache.get_or_compute("lotto", "patterns", 1, compute)
    assert cache.get_or_compute("lotto", "patterns", 2, compute) == {"calls": 1}


def test_keys_are_per_game_and_partition():
    cache, compute = AnalysisCache(), Counter()
    cache.get_or_compute("lotto", "frequency", 1, compute)
    cache.get_or_compute("powerball", "frequency", 1, compute)
    cache.get_or_compute("lotto", "patterns", 1, compute)
    assert compute.calls == 3
    assert len(cache) == 3


def test_invalidate():
    cache, compute = AnalysisCache(), Counter()
    for game in ("lotto", "powerball"):
        for partition in ("frequency", "patterns"):
            cache.get_or_compute(game, partition, 1, compute)

    cache.invalidate("lotto", "frequency")
    assert ("lotto", "frequency") not in cache
    assert ("lotto", "patterns") in cache

    cache.invalidate("lotto")
    assert ("lotto", "patterns") not in cache
    assert len(cache) == 2

    cache.invalidate()
    assert len(cache) == 0

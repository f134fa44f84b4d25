from spammy.registry import SuppressionRegistry


def test_missing_key_reads_as_zero():
    registry = SuppressionRegistry()
    assert registry.get("never") == 0
    assert "never" not in registry


def test_put_and_get():
    registry = SuppressionRegistry()
    registry.put("k", 1234)
    assert registry.get("k") == 1234
    assert "k" in registry


def test_try_acquire_threshold_is_inclusive():
    registry = SuppressionRegistry()
    registry.put("k", 10_000)
    assert not registry.try_acquire("k", 5, 14_999)
    assert registry.try_acquire("k", 5, 15_000)
    # Checking never records.
    assert registry.get("k") == 10_000


def test_zero_and_negative_interval_always_allowed():
    registry = SuppressionRegistry()
    registry.put("k", 10_000)
    assert registry.try_acquire("k", 0, 10_000)
    assert registry.try_acquire("k", -3, 9_000)


def test_none_and_tuple_keys_are_distinct_entries():
    registry = SuppressionRegistry()
    registry.put(None, 1)
    registry.put(("a", 1), 2)
    registry.put(("a", 2), 3)
    assert registry.get(None) == 1
    assert registry.get(("a", 1)) == 2
    assert len(registry) == 3


def test_entries_accumulate_without_eviction():
    registry = SuppressionRegistry()
    for i in range(500):
        registry.put(f"key-{i}", i)
    assert len(registry) == 500
    assert registry.get("key-0") == 0
    assert registry.get("key-499") == 499

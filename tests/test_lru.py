import pytest

from katamachine.dsa.lru import LRU


def test_lru_scenario():
    lru = LRU(3)

    assert lru.get("foo") is None

    lru.update("foo", 69)
    assert lru.get("foo") == 69

    lru.update("bar", 420)
    assert lru.get("bar") == 420

    lru.update("baz", 1337)
    assert lru.get("baz") == 1337

    lru.update("ball", 69420)
    assert lru.get("ball") == 69420

    assert lru.get("foo") is None
    assert lru.get("bar") == 420

    lru.update("foo", 69)
    assert lru.get("bar") == 420
    assert lru.get("foo") == 69
    assert lru.get("baz") is None


def test_update_existing_key_keeps_size():
    lru = LRU(2)
    lru.update("foo", 1)
    lru.update("foo", 2)
    lru.update("bar", 3)
    assert len(lru) == 2
    assert lru.get("foo") == 2


def test_update_refreshes_recency():
    lru = LRU(2)
    lru.update("foo", 1)
    lru.update("bar", 2)
    lru.update("foo", 3)
    lru.update("baz", 4)
    assert lru.get("bar") is None
    assert lru.get("foo") == 3


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        LRU(0)
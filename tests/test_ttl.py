import time
from datetime import timedelta

import pytest

from memstore.data_type.item import Kind, StringItem
from memstore.data_type.ttl import NO_EXPIRY, expires_at_for, parse_ttl
from memstore.errors import InvalidArgumentError
from memstore.store import Store


def test_expired_predicate_boundary():
    item = StringItem(expires_at=10.0, value="v")
    assert item.is_expired(9.999) is False
    assert item.is_expired(10.0) is True
    assert StringItem(value="v").is_expired(1e12) is False


def test_expires_at_for():
    assert expires_at_for(None, 100.0) is None
    assert expires_at_for(0, 100.0) is None
    assert expires_at_for(-1, 100.0) is None
    assert expires_at_for(2.5, 100.0) == 102.5
    assert expires_at_for(timedelta(minutes=1), 100.0) == 160.0


def test_expires_at_for_rejects_non_finite():
    with pytest.raises(ValueError):
        expires_at_for(float("nan"), 0.0)
    with pytest.raises(ValueError):
        expires_at_for(float("inf"), 0.0)


def test_expires_at_for_rejects_non_numeric():
    with pytest.raises(TypeError):
        expires_at_for("10", 0.0)


def test_get_ttl_without_expiry_is_sentinel(store):
    store.set("k", "v")
    assert store.get_ttl("k") == NO_EXPIRY


def test_get_ttl_counts_down(store, clock):
    store.set("k", "v", ttl=30)
    clock.advance(12)
    assert store.get_ttl("k") == pytest.approx(18)

    clock.advance(18)
    assert store.get_ttl("k") is None


def test_set_ttl_zero_clears_expiry(store, clock):
    store.set("k", "v", ttl=5)

    assert store.set_ttl("k", 0) is True
    assert store.get_ttl("k") == NO_EXPIRY

    clock.advance(60)
    assert store.get("k") == ("v", Kind.STRING)


def test_set_ttl_replaces_previous(store, clock):
    store.set("k", "v", ttl=100)
    clock.advance(50)

    assert store.set_ttl("k", 10) is True
    assert store.get_ttl("k") == pytest.approx(10)

    clock.advance(10)
    assert store.get("k") is None


def test_set_ttl_on_list(store, clock):
    store.push("l", "a")
    assert store.set_ttl("l", timedelta(seconds=3)) is True

    clock.advance(3)
    assert store.get("l") is None


def test_set_ttl_missing_or_expired(store, clock):
    assert store.set_ttl("missing", 10) is False

    store.set("k", "v", ttl=1)
    clock.advance(1)
    assert store.set_ttl("k", 10) is False
    assert store.get("k") is None


def test_lazy_expiry_deletes_on_access(store, clock):
    store.set("k", "v", ttl=1)
    clock.advance(1)

    assert len(store) == 1
    assert "k" not in store
    assert len(store) == 0


def test_lazy_expiry_with_real_clock():
    s = Store(sweep_interval=None)
    s.set("k", "v", ttl=0.05)
    assert s.get("k") == ("v", Kind.STRING)

    time.sleep(0.1)
    assert s.get("k") is None


@pytest.mark.parametrize(
    "raw, expected",
    [(None, None), ("", None), ("  ", None), ("0", 0), ("30", 30), (" 7 ", 7)],
)
def test_parse_ttl_valid(raw, expected):
    assert parse_ttl(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "-1", "1.5", "10s"])
def test_parse_ttl_invalid(raw):
    with pytest.raises(InvalidArgumentError):
        parse_ttl(raw)


@pytest.mark.parametrize("ttl", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_ttl_rejected(store, clock, ttl):
    with pytest.raises(ValueError):
        store.set("k", "v", ttl=ttl)
    assert store.get("k") is None

    store.set("k", "v", ttl=10)
    with pytest.raises(ValueError):
        store.set_ttl("k", ttl)
    assert store.get_ttl("k") == pytest.approx(10)
    with pytest.raises(ValueError):
        store.create_list("l", ttl=ttl)
    assert "l" not in store

    clock.advance(10)
    assert store.get_ttl("k") is None
    assert store.get("k") is None

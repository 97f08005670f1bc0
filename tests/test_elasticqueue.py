from corekit.elasticqueue import ElasticQueue

import pytest


def test_fifo_order():
    q = ElasticQueue()
    for item in ("a", "b", "c"):
        q.add(item)
    assert len(q) == 3
    assert q.get(0) == "a"
    q.delete()
    assert q.get(0) == "b"
    assert q.get(1) == "c"
    assert len(q) == 2


def test_out_of_range_get_returns_none():
    q = ElasticQueue()
    q.add(1)
    assert q.get(1) is None
    assert q.get(-1) is None


def test_delete_on_empty_is_noop():
    q = ElasticQueue()
    q.delete()
    assert len(q) == 0
    q.add("x")
    assert q.get(0) == "x"


def test_many_adds_and_deletes_preserve_order():
    q = ElasticQueue()
    expected = []
    for i in range(100):
        q.add(i)
        expected.append(i)
        if i % 3 == 0:
            q.delete()
            expected.pop(0)
        assert len(q) == len(expected)
        assert [q.get(p) for p in range(len(q))] == expected


def test_drain_completely():
    q = ElasticQueue()
    for i in range(10):
        q.add(i)
    for _ in range(10):
        q.delete()
    assert len(q) == 0
    assert q.get(0) is None


def test_set_replaces_record():
    q = ElasticQueue()
    q.add("a")
    q.add("b")
    q.delete()
    q.set(0, "z")
    assert q.get(0) == "z"


def test_set_out_of_range():
    q = ElasticQueue()
    q.add("a")
    with pytest.raises(IndexError):
        q.set(1, "b")
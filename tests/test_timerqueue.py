import pytest

from corekit.timerqueue import TimerQueue


def test_empty_queue():
    q = TimerQueue()
    assert len(q) == 0
    assert q.getmin() is None
    assert q.getptr((100, 0)) is None


def test_getmin_is_earliest():
    q = TimerQueue()
    q.add((5, 0), "e")
    q.add((1, 500), "b")
    q.add((1, 200), "a")
    q.add((3, 0), "c")
    assert q.getmin() == (1, 200)
    assert len(q) == 4


def test_getptr_pops_in_order():
    q = TimerQueue()
    times = [(4, 0), (2, 10), (2, 5), (9, 0), (0, 1)]
    for tv in times:
        q.add(tv, tv)
    out = []
    while (p := q.getptr((100, 0))) is not None:
        out.append(p)
    assert out == sorted(times)
    assert len(q) == 0


def test_getptr_respects_deadline():
    q = TimerQueue()
    q.add((5, 0), "later")
    q.add((2, 0), "sooner")
    assert q.getptr((1, 999999)) is None
    assert q.getptr((2, 0)) == "sooner"
    assert q.getptr((4, 0)) is None
    assert len(q) == 1
    assert q.getmin() == (5, 0)


def test_delete_by_cookie():
    q = TimerQueue()
    q.add(1.0, "a")
    cb = q.add(2.0, "b")
    q.add(3.0, "c")
    q.delete(cb)
    assert len(q) == 2
    assert [q.getptr(10.0), q.getptr(10.0)] == ["a", "c"]


def test_delete_minimum_cookie():
    q = TimerQueue()
    ca = q.add(1.0, "a")
    q.add(2.0, "b")
    q.delete(ca)
    assert q.getmin() == 2.0


def test_delete_twice_raises():
    q = TimerQueue()
    c = q.add(1.0, "a")
    q.delete(c)
    with pytest.raises(ValueError):
        q.delete(c)


def test_popped_cookie_cannot_be_deleted():
    q = TimerQueue()
    c = q.add(1.0, "a")
    assert q.getptr(1.0) == "a"
    with pytest.raises(ValueError):
        q.delete(c)


def test_increase_moves_entry_later():
    q = TimerQueue()
    ca = q.add(1.0, "a")
    q.add(2.0, "b")
    q.add(3.0, "c")
    q.increase(ca, 2.5)
    assert q.getmin() == 2.0
    assert [q.getptr(10.0) for _ in range(3)] == ["b", "a", "c"]


def test_many_random_operations_keep_order():
    import random

    rng = random.Random(7)
    q = TimerQueue()
    live = {}
    for i in range(200):
        tv = rng.randrange(1000)
        live[i] = (tv, q.add(tv, i))
    for i in range(0, 200, 3):
        q.delete(live.pop(i)[1])
    for i in list(live)[::4]:
        tv, c = live[i]
        live[i] = (tv + 500, c)
        q.increase(c, tv + 500)
    popped = []
    while (p := q.getptr(10**6)) is not None:
        popped.append(live[p][0])
    assert popped == sorted(tv for tv, _ in live.values())
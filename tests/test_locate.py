import itertools

from not_found_error import NotFoundError, Result, locate


def test_locate_match():
    assert locate([1, 2, 3], lambda n: n == 2) == Result.success(2)


def test_locate_no_match():
    assert locate([1, 2, 3], lambda n: n == 0) == Result.failure(NotFoundError())
    assert locate([1, 2, 3], lambda n: n == 0, int) == Result.failure(NotFoundError[int]())


def test_locate_empty():
    assert locate([], lambda n: True) == Result.failure(NotFoundError())


def test_locate_returns_first_match():
    first, second = [2], [2]
    res = locate([[1], first, second], lambda xs: xs == [2])
    assert res.value is first


def test_locate_stops_at_match():
    seen = []

    def is_even(n):
        seen.append(n)
        return n % 2 == 0

    it = iter([1, 3, 4, 5, 6])
    assert locate(it, is_even) == Result.success(4)
    assert seen == [1, 3, 4]
    assert next(it) == 5


def test_locate_unbounded():
    assert locate(itertools.count(), lambda n: n > 10) == Result.success(11)


def test_locate_none_element():
    res = locate([1, None], lambda x: x is None)
    assert res.ok and res.value is None

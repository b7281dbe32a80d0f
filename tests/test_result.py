import pytest

from not_found_error import NotFoundError, Result


def test_success_and_failure():
    assert Result.success(10).ok
    assert Result.success(10).unwrap() == 10
    res = Result.failure(NotFoundError[int]())
    assert not res.ok
    assert res.unwrap_err() == NotFoundError[int]()


def test_unwrap_raises_error():
    with pytest.raises(NotFoundError):
        Result.failure(NotFoundError[int]()).unwrap()


def test_unwrap_or():
    assert Result.success(1).unwrap_or(5) == 1
    assert Result.failure(NotFoundError()).unwrap_or(5) == 5


def test_unwrap_err_on_success():
    with pytest.raises(ValueError):
        Result.success(1).unwrap_err()


def test_combinators():
    assert Result.success(2).map(lambda n: n * 3) == Result.success(6)
    err = Result.failure(NotFoundError[int]())
    assert err.map(lambda n: n * 3) == err
    assert Result.success(2).and_then(lambda n: Result.success(str(n))) == Result.success("2")
    assert err.and_then(lambda n: Result.success(n)) == err
    assert err.or_else(lambda e: Result.success(0)) == Result.success(0)
    assert Result.success(1).or_else(lambda e: Result.success(0)) == Result.success(1)

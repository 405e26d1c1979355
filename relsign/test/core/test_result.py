"""Tests for relsign.core.result module."""

import pytest

from relsign.core.result import Err, Ok, Result, is_err, is_ok


class TestOk:
    def test_unwrap(self) -> None:
        assert Ok(42).unwrap() == 42

    def test_flags(self) -> None:
        assert Ok(1).is_ok() is True
        assert Ok(1).is_err() is False

    def test_unwrap_or_ignores_default(self) -> None:
        assert Ok(42).unwrap_or(0) == 42

    def test_map(self) -> None:
        assert Ok(21).map(lambda x: x * 2) == Ok(42)

    def test_map_err_is_identity(self) -> None:
        assert Ok(42).map_err(lambda e: f"error: {e}") == Ok(42)

    def test_flat_map(self) -> None:
        result: Result[int, str] = Ok(0)
        assert result.flat_map(lambda x: Err("zero") if x == 0 else Ok(x)) == Err("zero")

    def test_frozen(self) -> None:
        result = Ok(42)
        with pytest.raises(AttributeError):
            result.value = 0  # type: ignore[misc]

    def test_repr(self) -> None:
        assert repr(Ok("a")) == "Ok('a')"


class TestErr:
    def test_unwrap_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap on Err"):
            Err("boom").unwrap()

    def test_unwrap_or_returns_default(self) -> None:
        assert Err("boom").unwrap_or(7) == 7

    def test_map_is_identity(self) -> None:
        assert Err("boom").map(lambda x: x * 2) == Err("boom")

    def test_map_err(self) -> None:
        assert Err("boom").map_err(str.upper) == Err("BOOM")

    def test_flat_map_is_identity(self) -> None:
        assert Err("boom").flat_map(lambda x: Ok(x)) == Err("boom")


class TestTypeGuards:
    def test_is_ok(self) -> None:
        assert is_ok(Ok(1))
        assert not is_ok(Err(1))

    def test_is_err(self) -> None:
        assert is_err(Err(1))
        assert not is_err(Ok(1))

    def test_pattern_matching(self) -> None:
        result: Result[int, str] = Err("nope")
        match result:
            case Ok(value):
                pytest.fail(f"unexpected Ok({value})")
            case Err(error):
                assert error == "nope"

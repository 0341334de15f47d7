"""Tests for gsoc2_cli.core.result module."""

from __future__ import annotations

import pytest

from gsoc2_cli.core.result import Err, Ok, Result, is_err, is_ok


class TestOk:
    def test_unwrap(self) -> None:
        assert Ok("/usr/bin/gsoc2-cli").unwrap() == "/usr/bin/gsoc2-cli"

    def test_unwrap_or_ignores_default(self) -> None:
        assert Ok(1).unwrap_or(2) == 1

    def test_map(self) -> None:
        assert Ok("  1.0.0\n").map(str.strip) == Ok("1.0.0")

    def test_flags(self) -> None:
        assert Ok(None).is_ok() is True
        assert Ok(None).is_err() is False

    def test_frozen(self) -> None:
        ok = Ok(1)
        with pytest.raises(AttributeError):
            ok.value = 2  # type: ignore[misc]


class TestErr:
    def test_unwrap_raises(self) -> None:
        with pytest.raises(ValueError, match="boom"):
            Err("boom").unwrap()

    def test_unwrap_or_returns_default(self) -> None:
        assert Err("boom").unwrap_or("fallback") == "fallback"

    def test_map_is_noop(self) -> None:
        err = Err("boom")
        assert err.map(str.upper) is err

    def test_flags(self) -> None:
        assert Err("x").is_ok() is False
        assert Err("x").is_err() is True


class TestTypeGuards:
    def test_is_ok(self) -> None:
        result: Result[int, str] = Ok(42)
        assert is_ok(result)
        assert not is_err(result)

    def test_is_err(self) -> None:
        result: Result[int, str] = Err("nope")
        assert is_err(result)
        assert not is_ok(result)

    def test_pattern_matching(self) -> None:
        match Ok("out"):
            case Ok(value):
                assert value == "out"
            case Err():
                pytest.fail("expected Ok")

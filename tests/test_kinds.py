"""Tests for value shape classification."""

from __future__ import annotations

from collections import OrderedDict
from types import MappingProxyType

import pytest

from datapath.kinds import MISSING, Kind, classify, is_writable


class TestClassify:
    @pytest.mark.parametrize("value", [{}, {"a": 1}, OrderedDict(), MappingProxyType({})])
    def test_maps(self, value: object) -> None:
        assert classify(value) is Kind.MAP

    @pytest.mark.parametrize("value", [[], [1], (), (1, 2)])
    def test_lists(self, value: object) -> None:
        assert classify(value) is Kind.LIST

    @pytest.mark.parametrize("value", [None, 0, 1.5, "abc", b"abc", True, {1, 2}])
    def test_scalars(self, value: object) -> None:
        assert classify(value) is Kind.SCALAR

    def test_missing(self) -> None:
        assert classify(MISSING) is Kind.MISSING


class TestMissing:
    def test_singleton(self) -> None:
        assert type(MISSING)() is MISSING

    def test_falsy_and_distinct_from_none(self) -> None:
        assert not MISSING
        assert MISSING is not None
        assert repr(MISSING) == "MISSING"


class TestIsWritable:
    def test_writable(self) -> None:
        assert is_writable({}) is True
        assert is_writable([]) is True

    def test_read_only(self) -> None:
        assert is_writable(()) is False
        assert is_writable(MappingProxyType({})) is False
        assert is_writable("abc") is False

# -*- coding: utf-8 -*-
"""Unit tests for amount and address helpers."""

from __future__ import annotations

from typing import Any

import pytest

from dust_burner.utils import format_satoshi, is_address, mask_address, parse_amount


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (150, 150),
        ("150", 150),
        (" 42 ", 42),
        ("1e3", 1000),
        (None, 0),
        (True, 0),
        (-1, 0),
        ("-1", 0),
        ("1.5", 0),
        ("abc", 0),
        ("NaN", 0),
        ([], 0),
    ],
)
def test_parse_amount(value: Any, expected: int) -> None:
    assert parse_amount(value) == expected


def test_format_satoshi() -> None:
    assert format_satoshi(150_000_000) == "1.5"
    assert format_satoshi(100_000_000, "SXP") == "1 SXP"
    assert format_satoshi(1) == "0.00000001"
    assert format_satoshi(0) == "0"


def test_is_address_rejects_garbage() -> None:
    assert not is_address(None)
    assert not is_address("")
    assert not is_address("not-base58-0OIl")


def test_mask_address() -> None:
    assert mask_address("D1234567890abcdef") == "D1234...cdef"
    assert mask_address("short") == "***"
    assert mask_address(None) == "***"

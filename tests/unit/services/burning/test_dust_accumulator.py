# -*- coding: utf-8 -*-
"""Unit tests for DustAccumulator and decide_without_dust."""

from __future__ import annotations

import pytest

from dust_burner.services.burning.dust_accumulator import (
    BurnDecision,
    BurnKind,
    DustAccumulator,
    decide_without_dust,
)


def test_amount_at_threshold_is_direct_and_leaves_dust_untouched() -> None:
    acc = DustAccumulator(initial_balance=30)

    decision = acc.fold(100, threshold=100)

    assert decision == BurnDecision(kind=BurnKind.DIRECT, amount=100)
    assert decision.burn_now is True
    assert acc.balance == 30


def test_sub_threshold_amounts_accumulate_until_crossing() -> None:
    acc = DustAccumulator()

    first = acc.fold(40, threshold=100)
    assert first.kind is BurnKind.NONE
    assert first.burn_now is False
    assert acc.balance == 40

    second = acc.fold(70, threshold=100)
    assert second == BurnDecision(kind=BurnKind.DUST, amount=110)
    # the caller resets after reserving the nonce
    assert acc.balance == 110

    acc.reset()
    assert acc.balance == 0


def test_seeded_balance_counts_towards_threshold() -> None:
    acc = DustAccumulator()
    acc.seed(95)

    decision = acc.fold(5, threshold=100)

    assert decision == BurnDecision(kind=BurnKind.DUST, amount=100)


def test_threshold_may_change_between_folds() -> None:
    acc = DustAccumulator()

    assert acc.fold(60, threshold=100).kind is BurnKind.NONE
    assert acc.fold(10, threshold=50) == BurnDecision(kind=BurnKind.DUST, amount=70)


def test_negative_values_are_rejected() -> None:
    with pytest.raises(ValueError):
        DustAccumulator(initial_balance=-1)
    acc = DustAccumulator()
    with pytest.raises(ValueError):
        acc.fold(-5, threshold=100)
    with pytest.raises(ValueError):
        acc.seed(-5)


@pytest.mark.parametrize(
    ("amount", "expected"),
    [(99, BurnKind.NONE), (100, BurnKind.DIRECT), (150, BurnKind.DIRECT)],
)
def test_decide_without_dust(amount: int, expected: BurnKind) -> None:
    decision = decide_without_dust(amount, threshold=100)

    assert decision.kind is expected
    assert decision.amount == amount

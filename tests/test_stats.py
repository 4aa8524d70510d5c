"""Tests for heuristic statistics derivation (stats.derive_stats)."""

from __future__ import annotations

import math

import pytest

from reward_estimator.heuristics import ACTIVE_DAYS_MODEL, MAX_PROTOCOLS
from reward_estimator.stats import (
    derive_stats,
    estimate_active_days,
    estimate_protocols,
    estimate_recency_days,
    meaningful_tx_count,
)


def test_meaningful_tx_count_floors():
    assert meaningful_tx_count(0) == 0
    assert meaningful_tx_count(1) == 0
    assert meaningful_tx_count(1000) == 800
    assert meaningful_tx_count(1201) == 960


def test_active_days_non_decreasing_and_bounded():
    counts = [0, 1, 50, 1000, 1_000_000]
    days = [derive_stats(c, 0).active_days for c in counts]
    assert days == sorted(days)
    assert all(0 <= d <= ACTIVE_DAYS_MODEL.max_value for d in days)
    assert days[0] == 0
    assert days[-1] == 560


def test_active_days_saturation_formula():
    """1200 txs -> round(560 * (1 - e^-1.44))."""
    assert estimate_active_days(1200) == round(560 * (1 - math.exp(-1.44)))
    assert estimate_active_days(1200) == 427
    assert estimate_active_days(5000) == 559
    assert estimate_active_days(1) == 1


def test_volume_zero_without_transactions():
    assert derive_stats(0, 0).volume_usd == 0
    assert derive_stats(0, 6.0).volume_usd == 0


def test_volume_casual_tier():
    stats = derive_stats(10, 0)
    assert stats.volume_usd == 150
    assert stats.volume_method == "Casual (~$15/op)"


def test_volume_regular_tier():
    stats = derive_stats(1000, 0)
    assert stats.volume_usd == 41500
    assert stats.volume_method == "Regular (~$42/tx)"


def test_volume_active_tier_overrides_label():
    stats = derive_stats(1000, 0.6)
    assert stats.volume_usd == 103750
    assert stats.volume_method == "Active (~$100/tx)"


def test_volume_whale_tier_wins_over_active():
    stats = derive_stats(1000, 6.0)
    assert stats.volume_usd == 498000
    assert stats.volume_method == "Whale (~$500/tx)"


def test_volume_balance_threshold_is_strict():
    """Exactly 0.5 ETH is not above the Active threshold."""
    stats = derive_stats(10, 0.5)
    assert stats.volume_method == "Casual (~$15/op)"
    assert stats.volume_usd == 150


def test_volume_rounds_half_up():
    """51 * 41.5 = 2116.5 rounds up, not to even."""
    assert derive_stats(51, 0).volume_usd == 2117


def test_protocols_and_recency_for_dormant_wallet():
    stats = derive_stats(1, 0)
    assert stats.protocols == 0
    assert stats.recency_days == 90


def test_protocols_and_recency_use_meaningful_count():
    stats = derive_stats(1000, 0)
    assert stats.protocols == math.ceil(math.log(801) * 2.1) == 15
    assert stats.recency_days == math.floor(30 / (math.log(801) + 0.1)) == 4

    stats = derive_stats(50, 0)
    assert stats.protocols == 8
    assert stats.recency_days == 7


def test_protocols_capped():
    assert estimate_protocols(10_000_000) == MAX_PROTOCOLS


def test_recency_at_least_one_day():
    assert estimate_recency_days(10**12) == 1


@pytest.mark.parametrize("tx_count,balance", [(-5, 1.0), (0, -3.0)])
def test_negative_inputs_clamped(tx_count, balance):
    stats = derive_stats(tx_count, balance)
    assert stats.active_days >= 0
    assert stats.volume_usd >= 0


def test_end_to_end_scenario():
    stats = derive_stats(1200, 0.2)
    assert stats.active_days == 427
    assert stats.volume_usd == 49800
    assert stats.volume_method == "Regular (~$42/tx)"
    assert stats.protocols == 15
    assert stats.recency_days == 4

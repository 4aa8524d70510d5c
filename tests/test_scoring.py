"""Tests for activity scoring (scoring.ActivityScorer)."""

from __future__ import annotations

import pytest

from reward_estimator.heuristics import SCORE_WEIGHTS
from reward_estimator.scoring import ActivityScorer, ScoreBreakdown
from reward_estimator.utils.rounding import round_half_up


@pytest.fixture
def scorer():
    return ActivityScorer()


def test_weights_sum_to_one():
    w = SCORE_WEIGHTS
    assert w.tx + w.active_days + w.protocols + w.volume + w.recency == pytest.approx(1.0)


def test_zero_activity_scores_zero(scorer):
    scores = scorer.compute_scores(0, 0, 0, 0, 90)
    assert scores == ScoreBreakdown(
        tx_score=0.0,
        active_days_score=0.0,
        protocol_score=0.0,
        volume_score=0.0,
        recency_score=0.0,
        final_score=0.0,
    )


def test_saturated_activity_scores_one(scorer):
    scores = scorer.compute_scores(1000, 365, 8, 10**5.8 - 1, 7)
    assert scores.tx_score == 1.0
    assert scores.active_days_score == 1.0
    assert scores.protocol_score == 1.0
    assert scores.volume_score == pytest.approx(1.0, abs=0.01)
    assert scores.recency_score == 1.0
    assert scores.final_score == pytest.approx(1.0, abs=0.001)


def test_sub_scores_clamped_to_one(scorer):
    scores = scorer.compute_scores(10**9, 10_000, 30, 10**12, 1)
    assert scores.final_score == 1.0


def test_default_recency_is_optimistic(scorer):
    scores = scorer.compute_scores(10, 10, 1, 100)
    assert scores.recency_score == 1.0


def test_recency_decay(scorer):
    assert scorer.calculate_recency_score(7) == 1
    assert scorer.calculate_recency_score(48) == pytest.approx(1 - 41 / 83)
    assert scorer.calculate_recency_score(90) == 0
    assert scorer.calculate_recency_score(365) == 0


def test_tx_score_log_scale(scorer):
    assert scorer.calculate_tx_score(9) == pytest.approx(1 / 3)
    assert scorer.calculate_tx_score(999) == pytest.approx(1.0)


def test_final_score_summed_before_rounding(scorer):
    args = (100, 100, 5, 5000, 20)
    scores = scorer.compute_scores(*args)

    expected = (
        0.35 * scorer.calculate_tx_score(100)
        + 0.25 * scorer.calculate_active_days_score(100)
        + 0.20 * scorer.calculate_protocol_score(5)
        + 0.15 * scorer.calculate_volume_score(5000)
        + 0.05 * scorer.calculate_recency_score(20)
    )
    assert scores.final_score == round_half_up(expected, 3)
    assert scores.tx_score == round_half_up(scorer.calculate_tx_score(100), 2)
    assert 0.0 <= scores.final_score <= 1.0


def test_compute_scores_is_pure(scorer):
    first = scorer.compute_scores(321, 120, 6, 12345, 12)
    second = scorer.compute_scores(321, 120, 6, 12345, 12)
    assert first == second
    assert repr(first) == repr(second)

"""Tests for the estimate form state machine (session.EstimationSession)."""

from __future__ import annotations

import pytest

from reward_estimator.estimator import RewardEstimator
from reward_estimator.session import EstimationSession, EstimationState


class ExplodingEstimator:
    async def estimate(self, wallet_address: str):
        raise RuntimeError("unexpected")


@pytest.fixture
def session(fake_wallet_data, fake_narrative):
    return EstimationSession(RewardEstimator(fake_wallet_data, fake_narrative))


def test_starts_idle(session):
    assert session.state == EstimationState.IDLE
    assert session.result is None


@pytest.mark.asyncio
async def test_blank_input_stays_idle(session, fake_wallet_data):
    assert await session.submit("   ") == EstimationState.IDLE
    assert fake_wallet_data.addresses == []


@pytest.mark.asyncio
async def test_submit_moves_to_result(session):
    state = await session.submit("0xabc")
    assert state == EstimationState.RESULT
    assert session.result is not None
    assert session.result.estimated_rewards == 11130
    assert session.error is None


@pytest.mark.asyncio
async def test_estimator_error_moves_to_error():
    session = EstimationSession(ExplodingEstimator())
    assert await session.submit("0xabc") == EstimationState.ERROR
    assert session.error == "unexpected"
    assert session.result is None


@pytest.mark.asyncio
async def test_reset_returns_to_idle(session):
    await session.submit("0xabc")
    session.reset()
    assert session.state == EstimationState.IDLE
    assert session.wallet_input == ""
    assert session.result is None

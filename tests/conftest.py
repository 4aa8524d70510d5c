"""
Pytest fixtures for reward estimator tests. Collaborators are replaced
with in-memory fakes so no network is touched.
"""

from __future__ import annotations

import pytest

from reward_estimator.models.activity import RawActivity
from reward_estimator.models.estimate import Narrative


class FakeWalletData:
    """Returns a fixed RawActivity, or raises the given error."""

    def __init__(self, activity: RawActivity | None = None, error: Exception | None = None):
        self.activity = activity or RawActivity(balance=0.0, tx_count=0)
        self.error = error
        self.addresses: list[str] = []

    async def fetch_activity(self, address: str) -> RawActivity:
        self.addresses.append(address)
        if self.error is not None:
            raise self.error
        return self.activity


class FakeNarrative:
    """Records prompts and returns a fixed Narrative, or raises the given error."""

    def __init__(self, narrative: Narrative | None = None, error: Exception | None = None):
        self.narrative = narrative or Narrative(
            explanation="Solid longevity on Base.",
            suggestions=["Bridge more often", "Try a new DEX", "Keep weekly activity"],
        )
        self.error = error
        self.prompts: list[str] = []

    async def generate_narrative(self, prompt: str) -> Narrative:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.narrative


@pytest.fixture
def fake_wallet_data():
    return FakeWalletData(activity=RawActivity(balance=0.2, tx_count=1200))


@pytest.fixture
def fake_narrative():
    return FakeNarrative()

"""EstimationResult model definition"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from reward_estimator.scoring import ScoreBreakdown

SUGGESTION_COUNT = 3


class Narrative(BaseModel):
    """Natural-language explanation of a score with improvement suggestions"""
    model_config = ConfigDict(frozen=True)

    explanation: str
    suggestions: List[str]

    @field_validator('explanation')
    @classmethod
    def explanation_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("explanation must not be blank")
        return value

    @field_validator('suggestions')
    @classmethod
    def exactly_three_suggestions(cls, value: List[str]) -> List[str]:
        suggestions = [s.strip() for s in value if s and s.strip()]
        if len(suggestions) < SUGGESTION_COUNT:
            raise ValueError(f"expected {SUGGESTION_COUNT} suggestions, got {len(suggestions)}")
        return suggestions[:SUGGESTION_COUNT]


class WalletStats(BaseModel):
    """Raw and derived wallet statistics shown alongside the estimate"""
    model_config = ConfigDict(frozen=True)

    balance: str
    tx_count: int
    active_days: int
    volume_usd: int
    volume_method: str
    protocols: int
    recency_days: int


class EstimationResult(BaseModel):
    """
    Represents a simulated reward estimate for a wallet.
    Built once per request and never mutated.

    Attributes:
        wallet_address: The address that was estimated
        activity_score: Final weighted score between 0 and 1
        estimated_rewards: Simulated token quantity for the score
        stats: Wallet statistics the score was computed from
        score_breakdown: Per-dimension scores
        explanation: Friendly one-sentence analysis
        suggestions: Three ways to improve the score
        data_error: Set when on-chain data could not be read and zero
            activity was assumed
    """
    model_config = ConfigDict(frozen=True)

    wallet_address: str
    activity_score: float
    estimated_rewards: int
    stats: WalletStats
    score_breakdown: ScoreBreakdown
    explanation: str
    suggestions: List[str]
    data_error: Optional[str] = None

"""Reward estimation pipeline"""
import logging
from typing import Optional, Tuple

from reward_estimator.config import Settings
from reward_estimator.models.activity import RawActivity
from reward_estimator.models.estimate import EstimationResult, Narrative, WalletStats
from reward_estimator.rewards import RewardMapper
from reward_estimator.scoring import ActivityScorer
from reward_estimator.services.chain_rpc import ChainRPC, WalletDataSource
from reward_estimator.services.narrative import (
    FALLBACK_NARRATIVE,
    FallbackNarrativeGenerator,
    GeminiNarrativeGenerator,
    NarrativeGenerator,
    build_prompt,
)
from reward_estimator.stats import derive_stats

logger = logging.getLogger(__name__)

DATA_FETCH_ERROR = "Could not fetch on-chain data"

class InvalidWalletAddressError(ValueError):
    """Raised when no wallet address is given"""
    pass

class RewardEstimator:
    """Fetches wallet activity, scores it and maps the score to a simulated reward"""

    def __init__(
            self,
            wallet_data: WalletDataSource,
            narrative: NarrativeGenerator,
            scorer: Optional[ActivityScorer] = None,
            reward_mapper: Optional[RewardMapper] = None
    ):
        self.wallet_data = wallet_data
        self.narrative = narrative
        self.scorer = scorer or ActivityScorer()
        self.reward_mapper = reward_mapper or RewardMapper()

    async def _fetch_activity(self, address: str) -> Tuple[RawActivity, Optional[str]]:
        """Fetch raw activity, assuming zero activity when the chain can't be read"""
        try:
            return await self.wallet_data.fetch_activity(address), None
        except Exception as e:
            logger.error(f"Error fetching on-chain data for {address}: {e}")
            return RawActivity(balance=0.0, tx_count=0), DATA_FETCH_ERROR

    async def _generate_narrative(self, prompt: str) -> Narrative:
        try:
            return await self.narrative.generate_narrative(prompt)
        except Exception as e:
            logger.error(f"Error generating narrative: {e}")
            return FALLBACK_NARRATIVE

    async def estimate(self, wallet_address: str) -> EstimationResult:
        """Estimate the simulated reward for a wallet address"""
        address = (wallet_address or "").strip()
        if not address:
            raise InvalidWalletAddressError("Wallet address is required")

        activity, data_error = await self._fetch_activity(address)

        stats = derive_stats(activity.tx_count, activity.balance)
        scores = self.scorer.compute_scores(
            activity.tx_count,
            stats.active_days,
            stats.protocols,
            stats.volume_usd,
            stats.recency_days
        )
        estimated_rewards = self.reward_mapper.map_score_to_rewards(scores.final_score)
        logger.info(f"Scored {address}: {scores.final_score} -> {estimated_rewards} tokens ({stats.volume_method})")

        narrative = await self._generate_narrative(build_prompt(activity.tx_count, stats, scores))

        return EstimationResult(
            wallet_address=address,
            activity_score=scores.final_score,
            estimated_rewards=estimated_rewards,
            stats=WalletStats(
                balance=f"{activity.balance:.4f}",
                tx_count=activity.tx_count,
                active_days=stats.active_days,
                volume_usd=stats.volume_usd,
                volume_method=stats.volume_method,
                protocols=stats.protocols,
                recency_days=stats.recency_days
            ),
            score_breakdown=scores,
            explanation=narrative.explanation,
            suggestions=list(narrative.suggestions),
            data_error=data_error
        )

def build_estimator(settings: Settings) -> RewardEstimator:
    """Construct collaborators once from settings"""
    wallet_data = ChainRPC(
        settings.RPC_URL,
        timeout=settings.RPC_TIMEOUT,
        max_retries=settings.RPC_MAX_RETRIES
    )

    # Initialize narrative provider based on provided credentials
    if settings.GEMINI_API_KEY:
        narrative = GeminiNarrativeGenerator(
            settings.GEMINI_API_KEY,
            model=settings.GEMINI_MODEL,
            base_url=settings.GEMINI_BASE_URL,
            temperature=settings.NARRATIVE_TEMPERATURE,
            timeout=settings.NARRATIVE_TIMEOUT
        )
    else:
        logger.info("GEMINI_API_KEY not set, using fallback narrative")
        narrative = FallbackNarrativeGenerator()

    return RewardEstimator(wallet_data, narrative)

"""Headless state machine for a single-wallet estimate form"""
import logging
from enum import Enum
from typing import Optional

from reward_estimator.estimator import RewardEstimator
from reward_estimator.models.estimate import EstimationResult

logger = logging.getLogger(__name__)

class EstimationState(Enum):
    """Form states"""
    IDLE = "IDLE"
    LOADING = "LOADING"
    RESULT = "RESULT"
    ERROR = "ERROR"

class EstimationSession:
    """
    Tracks the input, state and result of one estimate form.

    IDLE -> LOADING on submit, then RESULT or ERROR. reset() returns to
    IDLE from any state.
    """

    def __init__(self, estimator: RewardEstimator):
        self.estimator = estimator
        self.state = EstimationState.IDLE
        self.wallet_input = ""
        self.result: Optional[EstimationResult] = None
        self.error: Optional[str] = None

    async def submit(self, wallet_input: str) -> EstimationState:
        """Run an estimate for the given input; blank input is ignored"""
        self.wallet_input = wallet_input or ""
        if not self.wallet_input.strip():
            return self.state

        self.state = EstimationState.LOADING
        self.result = None
        self.error = None

        try:
            self.result = await self.estimator.estimate(self.wallet_input)
            self.state = EstimationState.RESULT
        except Exception as e:
            logger.error(f"Error fetching estimate: {e}")
            self.error = str(e) or e.__class__.__name__
            self.state = EstimationState.ERROR

        return self.state

    def reset(self) -> None:
        self.wallet_input = ""
        self.result = None
        self.error = None
        self.state = EstimationState.IDLE

"""Entry point for reward estimation"""
import argparse
import asyncio
import json
import logging
import os
import sys
import traceback

from reward_estimator.config import settings
from reward_estimator.estimator import build_estimator
from reward_estimator.session import EstimationSession, EstimationState

logger = logging.getLogger(__name__)

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Estimate simulated Base rewards for a wallet")
    parser.add_argument("address", nargs="?", default=settings.WALLET_ADDRESS,
                        help="Wallet address (defaults to WALLET_ADDRESS)")
    return parser.parse_args(argv)

def run(argv=None) -> None:
    """Estimate rewards for one wallet and save the result."""
    args = parse_args(argv)
    try:
        logging.basicConfig(level=settings.LOG_LEVEL, format='%(message)s')

        # Log config (excluding sensitive data)
        safe_config = settings.model_dump(exclude={'GEMINI_API_KEY'})
        logger.info("Using configuration:")
        logger.info(json.dumps(safe_config, indent=2))

        # Collaborators are built once and injected
        session = EstimationSession(build_estimator(settings))
        state = asyncio.run(session.submit(args.address or ""))

        if state == EstimationState.IDLE:
            logger.error("No wallet address given")
            sys.exit(2)
        if state == EstimationState.ERROR:
            logger.error(f"Could not complete estimate: {session.error}")
            sys.exit(1)

        result = session.result
        os.makedirs(settings.OUTPUT_DIR, exist_ok=True)
        output_path = os.path.join(settings.OUTPUT_DIR, "results.json")
        with open(output_path, 'w') as f:
            json.dump(result.model_dump(), f, indent=2)

        if result.data_error:
            logger.warning(f"{result.data_error}, zero activity assumed")
        logger.info(f"Activity score: {result.activity_score:.3f}")
        logger.info(f"Estimated rewards: {result.estimated_rewards:,} tokens (simulation)")
        logger.info(result.explanation)
        for suggestion in result.suggestions:
            logger.info(f"- {suggestion}")
        logger.info(f"Saved estimate to {output_path}")

    except Exception as e:
        logger.error(f"Error during estimation: {e}")
        traceback.print_exc()
        sys.exit(1)

if __name__ == "__main__":
    run()

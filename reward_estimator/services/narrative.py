"""Natural-language explanation of activity scores"""
import asyncio
import json
import logging
from typing import Any, Dict, Protocol

import requests
from pydantic import ValidationError

from reward_estimator.models.activity import DerivedStats
from reward_estimator.models.estimate import Narrative
from reward_estimator.scoring import ScoreBreakdown

logger = logging.getLogger(__name__)

# Used when the provider answers with an empty body
EMPTY_RESPONSE_NARRATIVE = Narrative(
    explanation="Analysis complete based on your on-chain activity pattern.",
    suggestions=["Maintain weekly activity", "Try Aerodrome or Moonwell", "Increase transaction volume"]
)

# Used when no provider is configured or the provider fails
FALLBACK_NARRATIVE = Narrative(
    explanation="We calculated your score based on your wallet activity pattern.",
    suggestions=["Interact with more protocols", "Increase transaction volume", "Maintain monthly activity"]
)

RESPONSE_SCHEMA = {
    'type': 'OBJECT',
    'properties': {
        'explanation': {
            'type': 'STRING',
            'description': "A friendly, short analysis of the user's score."
        },
        'suggestions': {
            'type': 'ARRAY',
            'items': {'type': 'STRING'},
            'description': "3 specific, actionable suggestions for Base ecosystem."
        }
    },
    'required': ['explanation', 'suggestions']
}

class NarrativeError(Exception):
    """Raised when a narrative cannot be generated or parsed"""
    pass

class NarrativeGenerator(Protocol):
    """Turns a prompt describing a wallet's scores into a Narrative"""

    async def generate_narrative(self, prompt: str) -> Narrative:
        ...

def build_prompt(tx_count: int, stats: DerivedStats, scores: ScoreBreakdown) -> str:
    """Summarize computed stats and scores for the text generation model"""
    return (
        "Context: Base Wallet Analysis (Simulation)\n"
        "\n"
        "User Stats:\n"
        f"- Txs: {tx_count} (Score: {scores.tx_score}/1.0)\n"
        f"- Active Days: ~{stats.active_days} (Life) (Score: {scores.active_days_score}/1.0)\n"
        f"- Est. Volume: ~${stats.volume_usd} (Score: {scores.volume_score}/1.0)\n"
        f"- Protocols: ~{stats.protocols} (Score: {scores.protocol_score}/1.0)\n"
        f"- FINAL SCORE: {scores.final_score:.2f}\n"
        "\n"
        "Task: Write a friendly explanation (1 sentence) and 3 specific, simple suggestions to improve usage.\n"
        "Tone: Helpful, objective.\n"
        '- Mention "longevity" if active days score is high.\n'
        '- Mention "volume" if volume score is low.\n'
    )

class FallbackNarrativeGenerator:
    """Returns the fixed fallback narrative without calling any provider"""

    async def generate_narrative(self, prompt: str) -> Narrative:
        return FALLBACK_NARRATIVE

class GeminiNarrativeGenerator:
    """Generates narratives with the Gemini generateContent API"""

    def __init__(
            self,
            api_key: str,
            model: str = "gemini-2.5-flash",
            base_url: str = "https://generativelanguage.googleapis.com/v1beta",
            temperature: float = 0.7,
            timeout: float = 30.0
    ):
        if not api_key:
            raise ValueError("Gemini API key is required")
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip('/')
        self.temperature = temperature
        self.timeout = timeout

    async def generate_narrative(self, prompt: str) -> Narrative:
        return await asyncio.to_thread(self._generate, prompt)

    def _generate(self, prompt: str) -> Narrative:
        text = self._extract_text(self._make_request(prompt))
        if not text:
            logger.warning("Empty narrative response, using default analysis")
            return EMPTY_RESPONSE_NARRATIVE
        return self.parse_narrative(text)

    def _make_request(self, prompt: str) -> Dict[str, Any]:
        """Call generateContent with a JSON response schema"""
        headers = {
            'x-goog-api-key': self.api_key,
            'Content-Type': 'application/json'
        }
        body = {
            'contents': [{'role': 'user', 'parts': [{'text': prompt}]}],
            'generationConfig': {
                'responseMimeType': 'application/json',
                'responseSchema': RESPONSE_SCHEMA,
                'temperature': self.temperature
            }
        }

        try:
            response = requests.post(
                f'{self.base_url}/models/{self.model}:generateContent',
                headers=headers,
                json=body,
                timeout=self.timeout
            )
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as e:
            raise NarrativeError(f"Narrative request failed: {e}") from e

    @staticmethod
    def _extract_text(payload: Dict[str, Any]) -> str:
        """Concatenate the text parts of the first candidate"""
        candidates = payload.get('candidates') or []
        if not candidates:
            return ""
        parts = (candidates[0].get('content') or {}).get('parts') or []
        return "".join(part.get('text', '') for part in parts).strip()

    @staticmethod
    def parse_narrative(text: str) -> Narrative:
        """Parse the model's JSON answer into a Narrative"""
        try:
            return Narrative.model_validate(json.loads(text))
        except (json.JSONDecodeError, ValidationError) as e:
            raise NarrativeError(f"Malformed narrative response: {e}") from e

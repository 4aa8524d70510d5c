"""EVM JSON-RPC wallet data service"""
import asyncio
import itertools
import logging
import time
from decimal import Decimal
from typing import Any, List, Protocol

import requests

from reward_estimator.models.activity import RawActivity

logger = logging.getLogger(__name__)

WEI_PER_ETHER = Decimal(10) ** 18

class WalletDataError(Exception):
    """Raised when wallet data cannot be read from the chain"""
    pass

class WalletDataSource(Protocol):
    """Anything that can read balance and transaction count for a wallet"""

    async def fetch_activity(self, address: str) -> RawActivity:
        ...

class ChainRPC:
    """Reads wallet balance and transaction count over JSON-RPC"""

    def __init__(self, rpc_url: str, timeout: float = 10.0, max_retries: int = 3):
        self.rpc_url = rpc_url
        self.timeout = timeout
        self.max_retries = max_retries
        self._ids = itertools.count(1)

    def get_balance(self, address: str) -> float:
        """Get native balance in ether"""
        result = self._make_request('eth_getBalance', [address, 'latest'])
        return float(Decimal(self._parse_quantity(result)) / WEI_PER_ETHER)

    def get_transaction_count(self, address: str) -> int:
        """Get number of transactions sent from the address (nonce)"""
        result = self._make_request('eth_getTransactionCount', [address, 'latest'])
        return self._parse_quantity(result)

    async def fetch_activity(self, address: str) -> RawActivity:
        """Read balance and transaction count concurrently"""
        balance, tx_count = await asyncio.gather(
            asyncio.to_thread(self.get_balance, address),
            asyncio.to_thread(self.get_transaction_count, address)
        )
        logger.info(f"Fetched on-chain data for {address}: balance={balance:.4f}, txs={tx_count}")
        return RawActivity(balance=balance, tx_count=tx_count)

    @staticmethod
    def _parse_quantity(result: Any) -> int:
        """Decode a hex-encoded JSON-RPC quantity"""
        if not isinstance(result, str) or not result.startswith('0x'):
            raise WalletDataError(f"Unexpected RPC result: {result!r}")
        try:
            return int(result, 16)
        except ValueError:
            raise WalletDataError(f"Invalid hex quantity: {result!r}")

    def _make_request(self, method: str, params: List[Any]) -> Any:
        """Make JSON-RPC call with retries"""
        payload = {
            'jsonrpc': '2.0',
            'id': next(self._ids),
            'method': method,
            'params': params
        }

        for attempt in range(self.max_retries):
            try:
                response = requests.post(self.rpc_url, json=payload, timeout=self.timeout)
                response.raise_for_status()
                body = response.json()
            except (requests.RequestException, ValueError) as e:
                if attempt == self.max_retries - 1:  # Last attempt
                    raise WalletDataError(f"{method} failed after {self.max_retries} attempts: {e}") from e
                logger.warning(f"Retrying {method} after error: {e}")
                time.sleep(1)  # Wait before retry
                continue

            if not isinstance(body, dict):
                raise WalletDataError(f"{method} returned a non-object body: {body!r}")

            # Provider rejected the call, retrying won't help
            if body.get('error'):
                raise WalletDataError(f"{method} error: {body['error']}")
            return body.get('result')

"""Domain models for wallet activity"""
from dataclasses import dataclass


@dataclass(frozen=True)
class RawActivity:
    """On-chain reads for a single wallet"""
    balance: float   # native units (ETH)
    tx_count: int    # account nonce


@dataclass(frozen=True)
class DerivedStats:
    """Activity statistics estimated from raw activity"""
    active_days: int
    volume_usd: int
    protocols: int
    recency_days: int
    volume_method: str

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PoolRecord:
    id: str
    fee_tier: str | int | None
    token0_symbol: str
    token1_symbol: str
    total_value_locked_usd: str | None
    volume_usd: str | None

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PoolCardOutput:
    id: str
    short_id: str
    pair_label: str
    token0_symbol: str
    token1_symbol: str
    fee_percent: str
    total_value_locked_usd: str
    volume_usd: str


@dataclass(frozen=True)
class DashboardOutput:
    status: str
    status_label: str
    refresh_enabled: bool
    refresh_label: str
    last_updated_at: datetime | None
    last_updated_label: str | None
    error_message: str
    empty_placeholder: str | None
    cards: list[PoolCardOutput]

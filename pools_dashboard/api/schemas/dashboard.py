from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class PoolCardResponse(BaseModel):
    id: str
    short_id: str
    pair_label: str
    token0_symbol: str
    token1_symbol: str
    fee_percent: str
    total_value_locked_usd: str
    volume_usd: str


class DashboardResponse(BaseModel):
    status: str
    status_label: str
    refresh_enabled: bool
    refresh_label: str
    last_updated_at: datetime | None
    last_updated_label: str | None
    error_message: str
    empty_placeholder: str | None
    cards: list[PoolCardResponse]

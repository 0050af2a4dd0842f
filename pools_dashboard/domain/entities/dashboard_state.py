from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from pools_dashboard.domain.entities.pool import PoolRecord


class DashboardStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class ViewState:
    status: DashboardStatus
    records: tuple[PoolRecord, ...] = ()
    error_message: str = ""
    last_updated_at: datetime | None = None

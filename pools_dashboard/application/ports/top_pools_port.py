from __future__ import annotations

from typing import Protocol

from pools_dashboard.domain.entities.pool import PoolRecord


class TopPoolsPort(Protocol):
    def fetch_top_pools(self) -> list[PoolRecord]:
        ...

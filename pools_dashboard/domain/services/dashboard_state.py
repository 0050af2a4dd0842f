from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Iterable

from pools_dashboard.domain.entities.dashboard_state import DashboardStatus, ViewState
from pools_dashboard.domain.entities.pool import PoolRecord


def initial_state() -> ViewState:
    return ViewState(status=DashboardStatus.IDLE)


def can_refresh(state: ViewState) -> bool:
    return state.status != DashboardStatus.LOADING


def begin_fetch(state: ViewState) -> ViewState:
    # Records and the last success timestamp survive until the cycle resolves.
    return replace(state, status=DashboardStatus.LOADING, error_message="")


def complete_fetch(
    state: ViewState,
    records: Iterable[PoolRecord],
    *,
    fetched_at: datetime,
) -> ViewState:
    return replace(
        state,
        status=DashboardStatus.SUCCESS,
        records=tuple(records),
        error_message="",
        last_updated_at=fetched_at,
    )


def fail_fetch(state: ViewState, message: str) -> ViewState:
    return replace(
        state,
        status=DashboardStatus.ERROR,
        records=(),
        error_message=message,
    )

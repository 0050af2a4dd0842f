from __future__ import annotations

from pools_dashboard.application.dto.dashboard import DashboardOutput, PoolCardOutput
from pools_dashboard.application.ports.dashboard_state_port import DashboardStatePort
from pools_dashboard.domain.entities.dashboard_state import DashboardStatus, ViewState
from pools_dashboard.domain.entities.pool import PoolRecord
from pools_dashboard.domain.services.dashboard_state import can_refresh
from pools_dashboard.domain.services.formatters import (
    PLACEHOLDER,
    format_compact_volume,
    format_currency_usd,
    format_fee_percent,
    format_short_id,
    format_time_of_day,
)


STATUS_LABELS = {
    DashboardStatus.IDLE: "Preparing to load data",
    DashboardStatus.LOADING: "Loading data…",
    DashboardStatus.SUCCESS: "Data ready",
    DashboardStatus.ERROR: "Request failed; please retry",
}

REFRESH_LABEL = "Reload data"
REFRESH_IN_FLIGHT_LABEL = "Refreshing…"
EMPTY_PLACEHOLDER = "No data loaded yet."


def _render_card(record: PoolRecord) -> PoolCardOutput:
    token0 = record.token0_symbol or PLACEHOLDER
    token1 = record.token1_symbol or PLACEHOLDER
    return PoolCardOutput(
        id=record.id,
        short_id=format_short_id(record.id),
        pair_label=f"{token0} / {token1}",
        token0_symbol=record.token0_symbol,
        token1_symbol=record.token1_symbol,
        fee_percent=format_fee_percent(record.fee_tier),
        total_value_locked_usd=format_currency_usd(record.total_value_locked_usd),
        volume_usd=f"{format_compact_volume(record.volume_usd)} USD",
    )


def render_dashboard(state: ViewState) -> DashboardOutput:
    refresh_enabled = can_refresh(state)
    show_empty = not state.records and state.status != DashboardStatus.LOADING
    return DashboardOutput(
        status=state.status.value,
        status_label=STATUS_LABELS[state.status],
        refresh_enabled=refresh_enabled,
        refresh_label=REFRESH_LABEL if refresh_enabled else REFRESH_IN_FLIGHT_LABEL,
        last_updated_at=state.last_updated_at,
        last_updated_label=format_time_of_day(state.last_updated_at),
        error_message=state.error_message,
        empty_placeholder=EMPTY_PLACEHOLDER if show_empty else None,
        cards=[_render_card(record) for record in state.records],
    )


class GetDashboardUseCase:
    def __init__(self, *, state_port: DashboardStatePort):
        self._state_port = state_port

    def execute(self) -> DashboardOutput:
        return render_dashboard(self._state_port.load())

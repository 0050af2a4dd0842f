from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from pools_dashboard.api.deps import get_get_dashboard_use_case, get_refresh_dashboard_use_case
from pools_dashboard.api.schemas.dashboard import DashboardResponse, PoolCardResponse
from pools_dashboard.application.dto.dashboard import DashboardOutput
from pools_dashboard.application.use_cases.get_dashboard import GetDashboardUseCase
from pools_dashboard.application.use_cases.refresh_dashboard import RefreshDashboardUseCase

router = APIRouter()


def _to_response(output: DashboardOutput) -> DashboardResponse:
    return DashboardResponse(
        status=output.status,
        status_label=output.status_label,
        refresh_enabled=output.refresh_enabled,
        refresh_label=output.refresh_label,
        last_updated_at=output.last_updated_at,
        last_updated_label=output.last_updated_label,
        error_message=output.error_message,
        empty_placeholder=output.empty_placeholder,
        cards=[
            PoolCardResponse(
                id=card.id,
                short_id=card.short_id,
                pair_label=card.pair_label,
                token0_symbol=card.token0_symbol,
                token1_symbol=card.token1_symbol,
                fee_percent=card.fee_percent,
                total_value_locked_usd=card.total_value_locked_usd,
                volume_usd=card.volume_usd,
            )
            for card in output.cards
        ],
    )


@router.get("/v1/dashboard", response_model=DashboardResponse)
def get_dashboard(
    use_case: GetDashboardUseCase = Depends(get_get_dashboard_use_case),
):
    return _to_response(use_case.execute())


@router.post("/v1/dashboard/refresh", response_model=DashboardResponse)
def refresh_dashboard(
    refresh_use_case: RefreshDashboardUseCase = Depends(get_refresh_dashboard_use_case),
    dashboard_use_case: GetDashboardUseCase = Depends(get_get_dashboard_use_case),
):
    if not refresh_use_case.execute():
        raise HTTPException(status_code=409, detail="A refresh is already in progress.")
    return _to_response(dashboard_use_case.execute())

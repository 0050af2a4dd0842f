from __future__ import annotations

from functools import lru_cache

from pools_dashboard.application.use_cases.get_dashboard import GetDashboardUseCase
from pools_dashboard.application.use_cases.refresh_dashboard import RefreshDashboardUseCase
from pools_dashboard.infrastructure.clients.top_pools_subgraph_client import (
    TopPoolsSubgraphClient,
    TopPoolsSubgraphClientSettings,
)
from pools_dashboard.infrastructure.state.in_memory_dashboard_state import InMemoryDashboardState
from pools_dashboard.shared.config import get_settings


@lru_cache(maxsize=1)
def _get_dashboard_state() -> InMemoryDashboardState:
    return InMemoryDashboardState()


@lru_cache(maxsize=1)
def _get_top_pools_client() -> TopPoolsSubgraphClient:
    settings = get_settings()
    return TopPoolsSubgraphClient(
        TopPoolsSubgraphClientSettings(
            graph_gateway_base=settings.graph_gateway_base,
            graph_api_key=settings.graph_api_key,
            graph_subgraph_id=settings.graph_subgraph_id,
            timeout_seconds=settings.graph_request_timeout_seconds,
        )
    )


def get_refresh_dashboard_use_case() -> RefreshDashboardUseCase:
    return RefreshDashboardUseCase(
        top_pools_port=_get_top_pools_client(),
        state_port=_get_dashboard_state(),
    )


def get_get_dashboard_use_case() -> GetDashboardUseCase:
    return GetDashboardUseCase(state_port=_get_dashboard_state())

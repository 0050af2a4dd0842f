from __future__ import annotations

from datetime import datetime, timezone
import logging
from typing import Callable

from pools_dashboard.application.ports.dashboard_state_port import DashboardStatePort
from pools_dashboard.application.ports.top_pools_port import TopPoolsPort
from pools_dashboard.domain.exceptions import PoolsFetchError
from pools_dashboard.domain.services.dashboard_state import complete_fetch, fail_fetch


logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Request failed."


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RefreshDashboardUseCase:
    """Runs one fetch cycle: loading, then success or error.

    Returns False without touching the network when a cycle is already in
    flight, so at most one request to the subgraph is outstanding.
    """

    def __init__(
        self,
        *,
        top_pools_port: TopPoolsPort,
        state_port: DashboardStatePort,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._top_pools_port = top_pools_port
        self._state_port = state_port
        self._clock = clock

    def execute(self) -> bool:
        loading = self._state_port.try_begin_fetch()
        if loading is None:
            logger.info("refresh_dashboard: skipped reason=fetch_in_flight")
            return False

        try:
            records = self._top_pools_port.fetch_top_pools()
        except PoolsFetchError as exc:
            logger.warning("refresh_dashboard: fetch_failed error=%s", exc)
            self._state_port.save(fail_fetch(loading, str(exc) or GENERIC_FAILURE_MESSAGE))
            return True
        except Exception as exc:  # noqa: BLE001
            logger.exception("refresh_dashboard: fetch_failed_unexpectedly")
            self._state_port.save(fail_fetch(loading, str(exc) or GENERIC_FAILURE_MESSAGE))
            return True

        self._state_port.save(complete_fetch(loading, records, fetched_at=self._clock()))
        logger.info("refresh_dashboard: fetch_succeeded pools=%s", len(records))
        return True

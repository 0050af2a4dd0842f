from __future__ import annotations

from datetime import datetime, timezone
import unittest

from pools_dashboard.application.use_cases.get_dashboard import GetDashboardUseCase
from pools_dashboard.application.use_cases.refresh_dashboard import RefreshDashboardUseCase
from pools_dashboard.domain.entities.dashboard_state import DashboardStatus
from pools_dashboard.domain.entities.pool import PoolRecord
from pools_dashboard.domain.exceptions import HttpError, QueryError, TransportError
from pools_dashboard.infrastructure.state.in_memory_dashboard_state import InMemoryDashboardState


FETCHED_AT = datetime(2026, 10, 19, 9, 30, 15, tzinfo=timezone.utc)


def _pool(pool_id: str, *, tvl: str = "1000") -> PoolRecord:
    return PoolRecord(
        id=pool_id,
        fee_tier="500",
        token0_symbol="USDC",
        token1_symbol="WETH",
        total_value_locked_usd=tvl,
        volume_usd="2500000",
    )


class FakeTopPoolsPort:
    def __init__(self, outcomes: list):
        self._outcomes = list(outcomes)
        self.calls = 0
        self.on_fetch = None

    def fetch_top_pools(self) -> list[PoolRecord]:
        self.calls += 1
        if self.on_fetch is not None:
            self.on_fetch()
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class RefreshDashboardUseCaseTests(unittest.TestCase):
    def _build(self, port: FakeTopPoolsPort):
        state = InMemoryDashboardState()
        refresh = RefreshDashboardUseCase(
            top_pools_port=port,
            state_port=state,
            clock=lambda: FETCHED_AT,
        )
        return refresh, state

    def test_first_cycle_moves_idle_to_success(self):
        port = FakeTopPoolsPort([[_pool("0xa"), _pool("0xb")]])
        refresh, state = self._build(port)

        self.assertEqual(state.load().status, DashboardStatus.IDLE)
        self.assertTrue(refresh.execute())

        current = state.load()
        self.assertEqual(current.status, DashboardStatus.SUCCESS)
        self.assertEqual([row.id for row in current.records], ["0xa", "0xb"])
        self.assertEqual(current.last_updated_at, FETCHED_AT)
        self.assertEqual(current.error_message, "")
        self.assertEqual(port.calls, 1)

    def test_refresh_while_loading_is_ignored(self):
        port = FakeTopPoolsPort([[_pool("0xa")]])
        refresh, state = self._build(port)
        nested_results: list[bool] = []
        observed_status: list[DashboardStatus] = []

        def attempt_refresh_mid_flight():
            observed_status.append(state.load().status)
            nested_results.append(refresh.execute())

        port.on_fetch = attempt_refresh_mid_flight

        self.assertTrue(refresh.execute())
        self.assertEqual(observed_status, [DashboardStatus.LOADING])
        self.assertEqual(nested_results, [False])
        self.assertEqual(port.calls, 1)
        self.assertEqual(state.load().status, DashboardStatus.SUCCESS)

    def test_failure_sets_error_and_clears_records(self):
        port = FakeTopPoolsPort([[_pool("0xa")], HttpError(502, "bad gateway")])
        refresh, state = self._build(port)

        refresh.execute()
        refresh.execute()

        current = state.load()
        self.assertEqual(current.status, DashboardStatus.ERROR)
        self.assertEqual(current.records, ())
        self.assertEqual(current.error_message, "HTTP 502: bad gateway")
        self.assertEqual(current.last_updated_at, FETCHED_AT)

    def test_success_after_failure_clears_error(self):
        port = FakeTopPoolsPort([QueryError(["indexer down", "timeout"]), [_pool("0xc")]])
        refresh, state = self._build(port)

        refresh.execute()
        self.assertEqual(state.load().error_message, "indexer down | timeout")

        refresh.execute()
        current = state.load()
        self.assertEqual(current.status, DashboardStatus.SUCCESS)
        self.assertEqual(current.error_message, "")
        self.assertEqual([row.id for row in current.records], ["0xc"])

    def test_unexpected_error_still_lands_in_error_state(self):
        port = FakeTopPoolsPort([KeyError("token0"), [_pool("0xa")]])
        refresh, state = self._build(port)

        self.assertTrue(refresh.execute())
        self.assertEqual(state.load().status, DashboardStatus.ERROR)
        self.assertNotEqual(state.load().error_message, "")

        self.assertTrue(refresh.execute())
        self.assertEqual(state.load().status, DashboardStatus.SUCCESS)

    def test_error_without_description_uses_generic_message(self):
        port = FakeTopPoolsPort([TransportError("")])
        refresh, state = self._build(port)

        refresh.execute()

        self.assertEqual(state.load().error_message, "Request failed.")

    def test_empty_result_is_success_with_placeholder(self):
        port = FakeTopPoolsPort([[]])
        refresh, state = self._build(port)

        refresh.execute()
        output = GetDashboardUseCase(state_port=state).execute()

        self.assertEqual(output.status, "success")
        self.assertEqual(output.cards, [])
        self.assertEqual(output.error_message, "")
        self.assertEqual(output.empty_placeholder, "No data loaded yet.")


if __name__ == "__main__":
    unittest.main()

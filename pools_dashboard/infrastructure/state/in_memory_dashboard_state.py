from __future__ import annotations

from threading import Lock

from pools_dashboard.domain.entities.dashboard_state import ViewState
from pools_dashboard.domain.services.dashboard_state import begin_fetch, can_refresh, initial_state


class InMemoryDashboardState:
    """Process-local owner of the single dashboard ViewState."""

    def __init__(self, state: ViewState | None = None):
        self._state = state if state is not None else initial_state()
        self._lock = Lock()

    def load(self) -> ViewState:
        with self._lock:
            return self._state

    def try_begin_fetch(self) -> ViewState | None:
        with self._lock:
            if not can_refresh(self._state):
                return None
            self._state = begin_fetch(self._state)
            return self._state

    def save(self, state: ViewState) -> None:
        with self._lock:
            self._state = state

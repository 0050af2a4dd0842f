from __future__ import annotations

from typing import Protocol

from pools_dashboard.domain.entities.dashboard_state import ViewState


class DashboardStatePort(Protocol):
    def load(self) -> ViewState:
        ...

    def try_begin_fetch(self) -> ViewState | None:
        """Move to loading and return the new state, or None if a fetch is in flight."""
        ...

    def save(self, state: ViewState) -> None:
        ...

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, RedirectResponse

from pools_dashboard.api.deps import get_get_dashboard_use_case, get_refresh_dashboard_use_case
from pools_dashboard.api.html_page import render_dashboard_html
from pools_dashboard.application.use_cases.get_dashboard import GetDashboardUseCase
from pools_dashboard.application.use_cases.refresh_dashboard import RefreshDashboardUseCase

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def dashboard_page(
    use_case: GetDashboardUseCase = Depends(get_get_dashboard_use_case),
):
    return HTMLResponse(render_dashboard_html(use_case.execute()))


@router.post("/refresh")
def refresh_from_page(
    use_case: RefreshDashboardUseCase = Depends(get_refresh_dashboard_use_case),
):
    # A rejected refresh still lands back on the page, which shows the in-flight state.
    use_case.execute()
    return RedirectResponse(url="/", status_code=303)

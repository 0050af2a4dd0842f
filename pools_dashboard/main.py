from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool

from pools_dashboard.api.deps import get_refresh_dashboard_use_case
from pools_dashboard.api.routers.dashboard import router as dashboard_router
from pools_dashboard.api.routers.dashboard_page import router as dashboard_page_router
from pools_dashboard.shared.config import get_settings


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    initial_fetch: asyncio.Task | None = None
    if get_settings().fetch_on_startup:
        logger.info("main: initial_dashboard_fetch")
        # Serving starts while the first cycle is loading.
        initial_fetch = asyncio.create_task(
            run_in_threadpool(get_refresh_dashboard_use_case().execute)
        )
    yield
    if initial_fetch is not None:
        # A worker thread cannot be cancelled; wait for the cycle to resolve.
        await initial_fetch


app = FastAPI(title="Top Pools Dashboard", lifespan=lifespan)
app.include_router(dashboard_router)
app.include_router(dashboard_page_router)

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


DEFAULT_UNISWAP_V3_SUBGRAPH_ID = "5zvR82QoaXYFyDEKLZ9t6v9adgnptxYpKpSbxtgVENFV"


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _flag(name: str, default: str) -> bool:
    value = (_env(name, default) or "").strip().lower()
    return value in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    graph_api_key: str
    graph_gateway_base: str
    graph_subgraph_id: str
    graph_request_timeout_seconds: float
    fetch_on_startup: bool


def get_settings() -> Settings:
    return Settings(
        graph_api_key=_env("GRAPH_API_KEY", ""),
        graph_gateway_base=_env("GRAPH_GATEWAY_BASE", "https://gateway.thegraph.com/api"),
        graph_subgraph_id=_env("GRAPH_SUBGRAPH_ID", DEFAULT_UNISWAP_V3_SUBGRAPH_ID),
        graph_request_timeout_seconds=float(_env("GRAPH_REQUEST_TIMEOUT_SECONDS", "10")),
        fetch_on_startup=_flag("DASHBOARD_FETCH_ON_STARTUP", "true"),
    )

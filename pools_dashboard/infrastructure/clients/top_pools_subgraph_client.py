from __future__ import annotations

from dataclasses import dataclass
import logging

import httpx

from pools_dashboard.domain.entities.pool import PoolRecord
from pools_dashboard.domain.exceptions import DecodeError, HttpError, QueryError, TransportError


logger = logging.getLogger(__name__)


TOP_POOLS_QUERY = """
{
  pools(first: 5, orderBy: totalValueLockedUSD, orderDirection: desc) {
    id
    feeTier
    token0 {
      symbol
    }
    token1 {
      symbol
    }
    totalValueLockedUSD
    volumeUSD
  }
}
"""


def _symbol(token) -> str:
    if not isinstance(token, dict):
        return ""
    return str(token.get("symbol") or "")


@dataclass(frozen=True)
class TopPoolsSubgraphClientSettings:
    graph_gateway_base: str
    graph_api_key: str
    graph_subgraph_id: str
    timeout_seconds: float
    transport: httpx.BaseTransport | None = None


class TopPoolsSubgraphClient:
    def __init__(self, settings: TopPoolsSubgraphClientSettings):
        self._settings = settings

    def fetch_top_pools(self) -> list[PoolRecord]:
        url = self._build_gateway_url(self._settings.graph_subgraph_id)
        payload = self._post_graphql(url=url, query=TOP_POOLS_QUERY)

        data = payload.get("data") or {}
        rows = data.get("pools") if isinstance(data, dict) else None
        records: list[PoolRecord] = []
        skipped = 0
        for row in rows or []:
            record = self._to_record(row)
            if record is None:
                skipped += 1
                continue
            records.append(record)

        logger.info(
            "top_pools_subgraph_client: fetched_top_pools fetched=%s skipped=%s",
            len(records),
            skipped,
        )
        return records

    def _post_graphql(self, *, url: str, query: str) -> dict:
        try:
            with httpx.Client(
                timeout=self._settings.timeout_seconds,
                transport=self._settings.transport,
            ) as client:
                response = client.post(
                    url,
                    json={"query": query},
                    headers={"Content-Type": "application/json"},
                )
        except httpx.HTTPError as exc:
            logger.warning("top_pools_subgraph_client: transport_error error=%s", exc)
            raise TransportError(str(exc) or "Request failed.") from exc

        if not response.is_success:
            logger.warning(
                "top_pools_subgraph_client: http_error status=%s",
                response.status_code,
            )
            raise HttpError(response.status_code, response.text)

        try:
            payload = response.json()
        except ValueError as exc:
            raise DecodeError(f"Response body is not valid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise DecodeError("Response body is not a JSON object.")

        errors = payload.get("errors") or []
        if not isinstance(errors, list):
            errors = [errors]
        if errors:
            messages = [
                str(err.get("message", err)) if isinstance(err, dict) else str(err)
                for err in errors
            ]
            logger.warning(
                "top_pools_subgraph_client: graphql_errors count=%s",
                len(messages),
            )
            raise QueryError(messages)

        return payload

    @staticmethod
    def _to_record(row) -> PoolRecord | None:
        if not isinstance(row, dict) or not row.get("id"):
            return None
        return PoolRecord(
            id=str(row["id"]),
            fee_tier=row.get("feeTier"),
            token0_symbol=_symbol(row.get("token0")),
            token1_symbol=_symbol(row.get("token1")),
            total_value_locked_usd=row.get("totalValueLockedUSD"),
            volume_usd=row.get("volumeUSD"),
        )

    def _build_gateway_url(self, subgraph_id: str) -> str:
        if subgraph_id.startswith("http://") or subgraph_id.startswith("https://"):
            return subgraph_id.rstrip("/")
        base = self._settings.graph_gateway_base.rstrip("/")
        api_key = self._settings.graph_api_key.strip()
        if api_key:
            return f"{base}/{api_key}/subgraphs/id/{subgraph_id}"
        return f"{base}/subgraphs/id/{subgraph_id}"

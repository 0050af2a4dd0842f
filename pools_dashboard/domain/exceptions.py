from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class PoolsFetchError(DomainError):
    """The top pools could not be fetched from the subgraph."""


class HttpError(PoolsFetchError):
    """Gateway answered with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"HTTP {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class QueryError(PoolsFetchError):
    """GraphQL reported errors alongside a successful HTTP response."""

    def __init__(self, messages: list[str]):
        super().__init__(" | ".join(messages))
        self.messages = messages


class DecodeError(PoolsFetchError):
    """Response body is not a JSON object."""


class TransportError(PoolsFetchError):
    """Request never produced a response (connection, DNS, timeout)."""

"""
GraphQL transport for the node endpoint.

One POST per document, no retries. Every failure (network, HTTP status,
GraphQL errors, malformed body) surfaces as TransportError.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class TransportError(RuntimeError):
    exit_code: int = 2


class Transport(Protocol):
    def __call__(
        self,
        url: str,
        document: str,
        variables: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        ...


def graphql_fetch(
    url: str,
    document: str,
    variables: Optional[dict[str, Any]] = None,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    client: Optional[httpx.Client] = None,
) -> dict[str, Any]:
    """
    Execute a GraphQL document.

    Args:
        url: GraphQL endpoint URL
        document: Query or mutation text
        variables: Variables referenced by the document
        timeout: Request timeout in seconds (ignored when client is given)
        client: Pre-configured httpx client

    Returns:
        The ``data`` object of the response

    Raises:
        TransportError: If the request fails or the response carries errors
    """
    payload: dict[str, Any] = {"query": document}
    if variables is not None:
        payload["variables"] = variables

    try:
        if client is not None:
            response = client.post(url, json=payload)
        else:
            with httpx.Client(timeout=timeout) as owned:
                response = owned.post(url, json=payload)
        response.raise_for_status()
        body = response.json()
    except httpx.HTTPStatusError as exc:
        raise TransportError(
            f"GraphQL request failed with HTTP {exc.response.status_code}"
        ) from exc
    except httpx.HTTPError as exc:
        raise TransportError(f"GraphQL request failed: {exc}") from exc
    except ValueError as exc:
        raise TransportError(f"GraphQL response is not valid JSON: {exc}") from exc

    if not isinstance(body, dict):
        raise TransportError("GraphQL response was not a JSON object")

    errors = body.get("errors")
    if errors:
        messages = "; ".join(
            str(err.get("message", err)) if isinstance(err, dict) else str(err)
            for err in errors
        )
        raise TransportError(f"GraphQL error: {messages}")

    data = body.get("data")
    if not isinstance(data, dict):
        raise TransportError("GraphQL response has no data")

    logger.debug("GraphQL response data: %s", data)
    return data

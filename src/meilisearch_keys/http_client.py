"""
HTTP client for Meilisearch requests.

The command opens one client per invocation and passes it to every manager,
so all requests share a connection and the same authentication headers.
"""

import httpx
from typing import Any, Dict, List, Optional, Union

from .errors import MeilisearchError
from .logging import CommandLogger

logger = CommandLogger()


def get_headers(api_key: Optional[str] = None) -> Dict[str, str]:
    """
    Get headers for requests, including authentication if provided.

    Args:
        api_key: Optional API key for authentication

    Returns:
        Dictionary of headers
    """
    headers = {"Content-Type": "application/json"}
    if api_key and api_key.strip():
        headers["Authorization"] = f"Bearer {api_key.strip()}"
    return headers


def create_http_client(
    base_url: str,
    api_key: Optional[str] = None,
    timeout: float = 30.0,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """
    Create an HTTP client bound to a Meilisearch instance.

    Args:
        base_url: Meilisearch URL, e.g. http://localhost:7700
        api_key: Optional master key sent as a bearer token
        timeout: Request timeout in seconds
        transport: Optional transport override (used by tests)

    Returns:
        Configured httpx.Client; the caller is responsible for closing it
    """
    timeout_config = httpx.Timeout(timeout, connect=10.0)
    kwargs: Dict[str, Any] = {}
    if transport is not None:
        kwargs["transport"] = transport
    else:
        kwargs["http2"] = True
    return httpx.Client(
        base_url=base_url.rstrip("/"),
        headers=get_headers(api_key),
        timeout=timeout_config,
        **kwargs,
    )


def request_json(
    client: httpx.Client,
    method: str,
    endpoint: str,
    json: Optional[Union[Dict[str, Any], List[Any]]] = None,
    params: Optional[Dict[str, Any]] = None,
) -> Optional[Dict[str, Any]]:
    """Make HTTP request to Meilisearch API, returning the decoded body"""
    has_auth = "Authorization" in client.headers
    logger.debug(
        f"Meilisearch request: {method} {endpoint}",
        url=str(client.base_url),
        method=method,
        has_auth_header=has_auth,
    )
    response = client.request(method=method, url=endpoint, json=json, params=params)
    if response.status_code == 401:
        logger.error(
            "Authentication failed",
            endpoint=endpoint,
            has_auth_header=has_auth,
            response_text=response.text[:200],
        )
    response.raise_for_status()
    # DELETE returns 204 No Content
    if response.status_code == 204 or not response.content:
        return None
    return response.json()


def wrap_http_error(action: str, error: httpx.HTTPError) -> MeilisearchError:
    """Convert an httpx error into a MeilisearchError naming the failed action"""
    if isinstance(error, httpx.HTTPStatusError):
        return MeilisearchError(
            f"Failed to {action}: {error.response.text}",
            status_code=error.response.status_code,
        )
    return MeilisearchError(f"Failed to {action}: {error}")

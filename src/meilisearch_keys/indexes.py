from typing import Dict, Any, Optional
import httpx

from .http_client import request_json, wrap_http_error


class IndexManager:
    """Read Meilisearch indexes"""

    def __init__(self, client: httpx.Client):
        self.client = client

    def list_indexes(
        self, offset: Optional[int] = None, limit: Optional[int] = None
    ) -> Dict[str, Any]:
        """List all indexes using GET /indexes"""
        params = {}
        if offset is not None:
            params["offset"] = offset
        if limit is not None:
            params["limit"] = limit
        try:
            return request_json(self.client, "GET", "/indexes", params=params or None) or {}
        except httpx.HTTPError as e:
            raise wrap_http_error("list indexes", e) from e

from typing import Dict, Any, Optional
import httpx

from .http_client import request_json, wrap_http_error


class KeyManager:
    """Manage Meilisearch API keys"""

    def __init__(self, client: httpx.Client):
        self.client = client

    def get_key(self, key: str) -> Optional[Dict[str, Any]]:
        """Get information about a specific key using GET /keys/{key_or_uid}"""
        try:
            return request_json(self.client, "GET", f"/keys/{key}")
        except httpx.HTTPError as e:
            raise wrap_http_error("get key", e) from e

    def create_key(self, options: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Create a new API key using POST /keys"""
        try:
            # Build body according to API spec
            body = {
                "actions": options["actions"],
                "indexes": options["indexes"],
                "expiresAt": options.get("expiresAt"),
            }
            # Optional fields
            for optional in ("name", "description", "uid"):
                if optional in options:
                    body[optional] = options[optional]

            return request_json(self.client, "POST", "/keys", json=body)
        except httpx.HTTPError as e:
            raise wrap_http_error("create key", e) from e

    def update_key(self, key: str, options: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Update an existing API key using PATCH /keys/{key_or_uid}"""
        try:
            # Only name and description can be updated according to API spec
            body = {k: options[k] for k in ("name", "description") if k in options}
            return request_json(self.client, "PATCH", f"/keys/{key}", json=body)
        except httpx.HTTPError as e:
            raise wrap_http_error("update key", e) from e

    def delete_key(self, key: str) -> None:
        """Delete an API key using DELETE /keys/{key_or_uid}"""
        try:
            request_json(self.client, "DELETE", f"/keys/{key}")
        except httpx.HTTPError as e:
            raise wrap_http_error("delete key", e) from e

import httpx
from typing import Optional, Dict, Any, List

from .config import config
from .http_client import create_http_client
from .indexes import IndexManager
from .keys import KeyManager
from .logging import CommandLogger

logger = CommandLogger()


class MeilisearchClient:
    """Meilisearch operations used by the key command.

    The client owns one httpx.Client; use it as a context manager or call
    close() when done.
    """

    def __init__(
        self,
        url: str = "http://localhost:7700",
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self.url = url.rstrip("/")
        self.api_key = api_key
        self.http = http_client or create_http_client(
            self.url,
            api_key,
            timeout=timeout if timeout is not None else config.HTTP_TIMEOUT,
        )
        self.indexes = IndexManager(self.http)
        self.keys = KeyManager(self.http)
        if api_key and api_key.strip():
            logger.debug(
                "MeilisearchClient initialized with auth",
                url=self.url,
                has_api_key=True,
            )
        else:
            logger.warning(
                "MeilisearchClient initialized without API key - key endpoints will be rejected",
                url=self.url,
            )

    def __enter__(self) -> "MeilisearchClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.http.close()

    def get_key(self, key: str) -> Optional[Dict[str, Any]]:
        return self.keys.get_key(key)

    def create_key(self, options: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return self.keys.create_key(options)

    def update_key(self, key: str, options: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return self.keys.update_key(key, options)

    def delete_key(self, key: str) -> None:
        self.keys.delete_key(key)

    def list_indexes(self) -> List[Dict[str, Any]]:
        """Index objects from GET /indexes"""
        return self.indexes.list_indexes().get("results", [])

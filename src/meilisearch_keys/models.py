from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# https://www.meilisearch.com/docs/reference/api/keys#actions
KEY_ACTIONS: List[str] = [
    "search",
    "documents.add",
    "documents.get",
    "documents.delete",
    "indexes.create",
    "indexes.get",
    "indexes.update",
    "indexes.delete",
    "tasks.get",
    "settings.get",
    "settings.update",
    "stats.get",
    "dumps.create",
    "version",
    "keys.get",
    "keys.create",
    "keys.update",
    "keys.delete",
]


def split_list(value: Optional[str]) -> List[str]:
    """Split a comma separated answer, dropping blank entries"""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class KeyRequest:
    """Key data collected for a single create or update call"""

    actions: List[str] = field(default_factory=list)
    indexes: List[str] = field(default_factory=list)
    expires_at: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    uid: Optional[str] = None

    def to_create_payload(self) -> Dict[str, Any]:
        """Body for POST /keys"""
        body: Dict[str, Any] = {
            "actions": list(self.actions),
            "indexes": list(self.indexes),
            "expiresAt": self.expires_at,
        }
        if self.name is not None:
            body["name"] = self.name
        if self.description is not None:
            body["description"] = self.description
        if self.uid is not None:
            body["uid"] = self.uid
        return body

    def to_update_payload(self) -> Dict[str, Any]:
        """Body for PATCH /keys/{key}; Meilisearch only allows name and description"""
        return {"name": self.name, "description": self.description}


@dataclass(frozen=True)
class RemoteKey:
    """API key as returned by Meilisearch"""

    uid: Optional[str] = None
    key: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    actions: List[str] = field(default_factory=list)
    indexes: List[str] = field(default_factory=list)
    expires_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["RemoteKey"]:
        if not data:
            return None
        return cls(
            uid=data.get("uid"),
            key=data.get("key"),
            name=data.get("name"),
            description=data.get("description"),
            actions=list(data.get("actions") or []),
            indexes=list(data.get("indexes") or []),
            expires_at=data.get("expiresAt"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )

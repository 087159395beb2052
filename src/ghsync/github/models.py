"""
Value types exchanged with the GitHub API.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


def _parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse GitHub's ISO-8601 timestamps ('2024-01-01T00:00:00Z')."""
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    return None


@dataclass(frozen=True)
class Credential:
    """Access token supplied per call; never printed"""
    token: str = field(repr=False)

    def __post_init__(self):
        if not self.token:
            raise ValueError("Credential token must not be empty")

    def __repr__(self) -> str:
        return "Credential(token='***')"

    def auth_header(self) -> Dict[str, str]:
        """Authorization header for this token"""
        return {"Authorization": f"Bearer {self.token}"}


@dataclass(frozen=True)
class RepositoryRef:
    """Repository identified by owner and name"""
    owner: str
    name: str

    def __post_init__(self):
        if not self.owner or not self.name:
            raise ValueError("Repository owner and name must be non-empty")

    @classmethod
    def parse(cls, full_name: str) -> "RepositoryRef":
        """Build from 'owner/name'."""
        owner, sep, name = full_name.strip().partition("/")
        if not sep or "/" in name:
            raise ValueError(f"Expected 'owner/name', got '{full_name}'")
        return cls(owner=owner, name=name)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return self.full_name


class CommitStatusState(str, Enum):
    """Commit status states accepted by GitHub"""
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"
    FAILURE = "failure"


@dataclass(frozen=True)
class CommitStatusRequest:
    """Status to attach to a commit; context identifies the check"""
    state: CommitStatusState
    description: str
    context: str
    target_url: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """Request body for the statuses endpoint"""
        payload: Dict[str, Any] = {
            "state": self.state.value,
            "description": self.description,
            "context": self.context,
        }
        if self.target_url is not None:
            payload["target_url"] = self.target_url
        return payload


@dataclass(frozen=True)
class PullRequestHead:
    """Head commit of a pull request at lookup time"""
    sha: str


@dataclass(frozen=True)
class Comment:
    """Issue or pull request comment"""
    id: int
    body: str
    author: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    html_url: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Comment":
        user = data.get("user") or {}
        return cls(
            id=data["id"],
            body=data.get("body") or "",
            author=user.get("login", ""),
            created_at=_parse_timestamp(data.get("created_at")),
            updated_at=_parse_timestamp(data.get("updated_at")),
            html_url=data.get("html_url"),
        )


@dataclass(frozen=True)
class StatusRecord:
    """Commit status as stored by GitHub"""
    id: int
    state: CommitStatusState
    context: str
    description: Optional[str] = None
    target_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    url: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "StatusRecord":
        return cls(
            id=data["id"],
            state=CommitStatusState(data["state"]),
            context=data.get("context") or "default",
            description=data.get("description"),
            target_url=data.get("target_url"),
            created_at=_parse_timestamp(data.get("created_at")),
            updated_at=_parse_timestamp(data.get("updated_at")),
            url=data.get("url"),
        )

"""Shared pytest fixtures and configuration."""

import json
import re
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest
import pytest_asyncio

from ghsync.config import GitHubConfig
from ghsync.github import CommentStatusClient, Credential, RepositoryRef

VALID_TOKENS = {"test-token", "other-token"}


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")


class FakeGitHub:
    """In-memory stand-in for the GitHub REST endpoints the client uses.

    Every request is recorded in ``requests``. ``overrides`` maps
    (method, path) to a response or exception returned instead of the
    normal behaviour.
    """

    COMMENTS = re.compile(r"^/repos/([^/]+)/([^/]+)/issues/(\d+)/comments$")
    COMMENT = re.compile(r"^/repos/([^/]+)/([^/]+)/issues/comments/(\d+)$")
    PULL = re.compile(r"^/repos/([^/]+)/([^/]+)/pulls/(\d+)$")
    STATUS = re.compile(r"^/repos/([^/]+)/([^/]+)/statuses/([^/]+)$")

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.comments: Dict[Tuple[str, str, int], List[Dict[str, Any]]] = {}
        self.pulls: Dict[int, Dict[str, Any]] = {}
        self.statuses: List[Dict[str, Any]] = []
        self.overrides: Dict[Tuple[str, str], Any] = {}
        self._next_id = 1000

    def add_pull(self, number: int, sha: Optional[str]) -> None:
        head = {"ref": f"branch-{number}", "sha": sha} if sha is not None else None
        self.pulls[number] = {"number": number, "head": head}

    def add_comment(self, owner: str, repo: str, number: int, body: str) -> Dict[str, Any]:
        self._next_id += 1
        comment = {
            "id": self._next_id,
            "body": body,
            "user": {"login": "ghsync-bot"},
            "created_at": "2024-05-01T12:00:00Z",
            "updated_at": "2024-05-01T12:00:00Z",
            "html_url": f"https://github.com/{owner}/{repo}/pull/{number}#issuecomment-{self._next_id}",
        }
        self.comments.setdefault((owner, repo, number), []).append(comment)
        return comment

    def requests_for(self, method: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        override = self.overrides.get((request.method, path))
        if isinstance(override, Exception):
            raise override
        if override is not None:
            return override

        auth = request.headers.get("Authorization", "")
        if auth.removeprefix("Bearer ") not in VALID_TOKENS:
            return httpx.Response(401, json={"message": "Bad credentials"})

        match = self.COMMENTS.match(path)
        if match:
            owner, repo, number = match.group(1), match.group(2), int(match.group(3))
            if request.method == "POST":
                body = json.loads(request.content)["body"]
                return httpx.Response(201, json=self.add_comment(owner, repo, number, body))
            return httpx.Response(200, json=self.comments.get((owner, repo, number), []))

        match = self.COMMENT.match(path)
        if match and request.method == "PATCH":
            comment_id = int(match.group(3))
            for comments in self.comments.values():
                for comment in comments:
                    if comment["id"] == comment_id:
                        comment["body"] = json.loads(request.content)["body"]
                        comment["updated_at"] = "2024-05-02T08:30:00Z"
                        return httpx.Response(200, json=comment)
            return httpx.Response(404, json={"message": "Not Found"})

        match = self.PULL.match(path)
        if match:
            pull = self.pulls.get(int(match.group(3)))
            if pull is None:
                return httpx.Response(404, json={"message": "Not Found"})
            return httpx.Response(200, json=pull)

        match = self.STATUS.match(path)
        if match and request.method == "POST":
            payload = json.loads(request.content)
            self._next_id += 1
            record = {
                "id": self._next_id,
                "url": f"https://api.github.com/repos/{match.group(1)}/{match.group(2)}/statuses/{match.group(3)}",
                "state": payload["state"],
                "description": payload.get("description"),
                "target_url": payload.get("target_url"),
                "context": payload.get("context", "default"),
                "created_at": "2024-05-01T12:00:00Z",
                "updated_at": "2024-05-01T12:00:00Z",
            }
            self.statuses.append(record)
            return httpx.Response(201, json=record)

        return httpx.Response(404, json={"message": "Not Found"})


class RecordingLogger:
    """ApiLogger that keeps every event for assertions."""

    def __init__(self) -> None:
        self.infos: List[str] = []
        self.errors: List[Tuple[Exception, str]] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def error(self, error: Exception, message: str) -> None:
        self.errors.append((error, message))


@pytest.fixture
def fake_github() -> FakeGitHub:
    """Fresh in-memory GitHub."""
    return FakeGitHub()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest_asyncio.fixture
async def make_client(fake_github: FakeGitHub, recording_logger: RecordingLogger):
    """Factory for clients wired to the fake GitHub.

    HTTP clients it creates are kept in ``factory.http_clients`` and closed
    at teardown.
    """
    http_clients: List[httpx.AsyncClient] = []

    def factory(handler: Optional[Callable] = None, config: Optional[GitHubConfig] = None) -> CommentStatusClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler or fake_github.handler))
        http_clients.append(http_client)
        return CommentStatusClient(
            logger=recording_logger,
            config=config,
            http_client=http_client,
        )

    factory.http_clients = http_clients
    yield factory

    for http_client in http_clients:
        await http_client.aclose()


@pytest.fixture
def client(make_client: Callable[..., CommentStatusClient]) -> CommentStatusClient:
    return make_client()


@pytest.fixture
def credential() -> Credential:
    return Credential("test-token")


@pytest.fixture
def repo() -> RepositoryRef:
    return RepositoryRef("org", "repo")

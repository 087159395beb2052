"""
GitHub comment and commit status client.

Provides async access to the pull request comment and commit status
endpoints. Every operation returns a Result; failures are logged once
through the injected ApiLogger and returned, never raised.
"""

from typing import Any, Callable, Dict, List, Optional, Union

import httpx

from ..config import GitHubConfig
from ..errors import (
    ApiError,
    MissingHeadShaError,
    UnexpectedResponseError,
    classify_exception,
    classify_response,
)
from ..logger import ApiLogger, StandardApiLogger
from .models import (
    Comment,
    CommitStatusRequest,
    CommitStatusState,
    Credential,
    PullRequestHead,
    RepositoryRef,
    StatusRecord,
)
from .result import Err, Ok, Result

ERROR_MESSAGE = "Found error while accessing GitHub API."


def _require_positive(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")


def _require_text(name: str, value: Any) -> None:
    if not isinstance(value, str) or not value:
        raise ValueError(f"{name} must be a non-empty string")


class CommentStatusClient:
    """
    Async GitHub client for pull request comments and commit statuses.

    The credential is passed to each call and sent only as a request header,
    so one client can serve concurrent callers with different tokens.
    """

    def __init__(
        self,
        logger: Optional[ApiLogger] = None,
        config: Optional[GitHubConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize the client.

        Args:
            logger: Event sink for success/failure events
            config: Transport configuration (defaults to public GitHub)
            http_client: Externally managed HTTP client; not closed by close()
        """
        self.config = config or GitHubConfig()
        self._logger = logger or StandardApiLogger()
        self._client = http_client
        self._owns_client = http_client is None

    async def __aenter__(self):
        """Context manager entry"""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        await self.close()

    async def connect(self):
        """Initialize HTTP client"""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.config.timeout,
                follow_redirects=True
            )
            self._owns_client = True

    async def close(self):
        """Close HTTP client if this instance created it"""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get HTTP client, raising if not connected"""
        if self._client is None:
            raise RuntimeError("CommentStatusClient not connected. Use async with or call connect()")
        return self._client

    def _build_url(self, repo: RepositoryRef, path: str) -> str:
        """Build full API URL"""
        return f"{self.config.api_url}/repos/{repo.owner}/{repo.name}/{path}"

    async def _request(
        self,
        method: str,
        credential: Credential,
        repo: RepositoryRef,
        path: str,
        operation: str,
        json: Optional[Dict[str, Any]] = None
    ) -> httpx.Response:
        """
        Make an authenticated API request.

        Raises:
            TransportError: Connection failure or timeout
            AuthError: 401/403
            NotFoundError: 404/410
            UnexpectedResponseError: Any other non-2xx status
        """
        client = self._get_client()
        headers = {**self.config.base_headers, **credential.auth_header()}

        try:
            response = await client.request(
                method,
                self._build_url(repo, path),
                headers=headers,
                json=json
            )
        except httpx.RequestError as e:
            raise classify_exception(e, operation) from e

        if not response.is_success:
            raise classify_response(response, operation)
        return response

    @staticmethod
    def _decode(response: httpx.Response, parser: Callable[[Any], Any], operation: str) -> Any:
        """Parse a JSON body, turning malformed payloads into UnexpectedResponseError."""
        try:
            return parser(response.json())
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise UnexpectedResponseError(
                f"Malformed response from GitHub: {e}",
                status_code=response.status_code,
                operation=operation
            ) from e

    def _fail(self, error: ApiError) -> Err:
        self._logger.error(error, ERROR_MESSAGE)
        return Err(error)

    @staticmethod
    def _ok(value: Any, response: httpx.Response) -> Ok:
        return Ok(value, status_code=response.status_code, headers=dict(response.headers))

    # ========================================================================
    # Comment Operations
    # ========================================================================

    async def publish_comment(
        self,
        credential: Credential,
        repo: RepositoryRef,
        pull_request_number: int,
        body: str
    ) -> Result[Comment]:
        """
        Post a new comment on a pull request.

        Args:
            credential: Access token
            repo: Target repository
            pull_request_number: Pull request (issue) number
            body: Comment text (markdown)

        Returns:
            Ok with the created Comment (server-assigned id), or Err
        """
        _require_positive("pull_request_number", pull_request_number)
        _require_text("body", body)
        operation = "publish_comment"

        try:
            response = await self._request(
                "POST",
                credential,
                repo,
                f"issues/{pull_request_number}/comments",
                operation,
                json={"body": body}
            )
            comment = self._decode(response, Comment.from_api, operation)
        except ApiError as e:
            return self._fail(e)

        self._logger.info("Comment sent to GitHub successfully.")
        return self._ok(comment, response)

    async def edit_comment(
        self,
        credential: Credential,
        repo: RepositoryRef,
        comment_id: int,
        body: str
    ) -> Result[Comment]:
        """
        Replace the body of an existing comment.

        Returns:
            Ok with the updated Comment, or Err (NotFoundError for unknown ids)
        """
        _require_positive("comment_id", comment_id)
        _require_text("body", body)
        operation = "edit_comment"

        try:
            response = await self._request(
                "PATCH",
                credential,
                repo,
                f"issues/comments/{comment_id}",
                operation,
                json={"body": body}
            )
            comment = self._decode(response, Comment.from_api, operation)
        except ApiError as e:
            return self._fail(e)

        self._logger.info("Comment edited successfully.")
        return self._ok(comment, response)

    async def list_comments(
        self,
        credential: Credential,
        repo: RepositoryRef,
        pull_request_number: int
    ) -> Result[List[Comment]]:
        """
        List comments on a pull request in the order GitHub returns them.

        Only the first page is fetched. A pull request without comments
        yields Ok([]).
        """
        _require_positive("pull_request_number", pull_request_number)
        operation = "list_comments"

        try:
            response = await self._request(
                "GET",
                credential,
                repo,
                f"issues/{pull_request_number}/comments",
                operation
            )
            comments = self._decode(response, _parse_comment_list, operation)
        except ApiError as e:
            return self._fail(e)

        self._logger.info("Comments listed from GitHub successfully.")
        return self._ok(comments, response)

    # ========================================================================
    # Status Operations
    # ========================================================================

    async def _get_pull_request_head(
        self,
        credential: Credential,
        repo: RepositoryRef,
        pull_request_number: int
    ) -> PullRequestHead:
        """
        Look up the head commit of a pull request.

        Raises:
            MissingHeadShaError: The pull request has no head SHA
        """
        operation = "create_status"
        response = await self._request(
            "GET",
            credential,
            repo,
            f"pulls/{pull_request_number}",
            operation
        )
        data = self._decode(response, lambda payload: payload, operation)
        head = data.get("head") if isinstance(data, dict) else None
        sha = head.get("sha") if isinstance(head, dict) else None

        if not isinstance(sha, str) or not sha:
            raise MissingHeadShaError(
                "Couldn't find a head SHA for the specified pull request.",
                status_code=response.status_code,
                operation=operation
            )
        return PullRequestHead(sha=sha)

    async def create_status(
        self,
        credential: Credential,
        repo: RepositoryRef,
        pull_request_number: int,
        state: Union[CommitStatusState, str],
        target_url: Optional[str],
        description: str,
        context: str
    ) -> Result[StatusRecord]:
        """
        Create a commit status on the head commit of a pull request.

        Looks up the pull request first, then posts the status for its head
        SHA. A later status with the same context replaces this one.

        Args:
            credential: Access token
            repo: Target repository
            pull_request_number: Pull request number
            state: pending, success, error or failure
            target_url: Optional link shown next to the status
            description: Short description
            context: Status check name (e.g. 'ci/build')

        Returns:
            Ok with the StatusRecord, or Err (MissingHeadShaError when the
            pull request has no head commit)
        """
        _require_positive("pull_request_number", pull_request_number)
        _require_text("context", context)
        if not isinstance(description, str):
            raise ValueError("description must be a string")
        request = CommitStatusRequest(
            state=CommitStatusState(state),
            description=description,
            context=context,
            target_url=target_url
        )
        operation = "create_status"

        try:
            head = await self._get_pull_request_head(credential, repo, pull_request_number)
            response = await self._request(
                "POST",
                credential,
                repo,
                f"statuses/{head.sha}",
                operation,
                json=request.to_payload()
            )
            status = self._decode(response, StatusRecord.from_api, operation)
        except ApiError as e:
            return self._fail(e)

        self._logger.info("Status created in GitHub successfully.")
        return self._ok(status, response)


def _parse_comment_list(data: Any) -> List[Comment]:
    if not isinstance(data, list):
        raise TypeError(f"expected a list of comments, got {type(data).__name__}")
    return [Comment.from_api(item) for item in data]

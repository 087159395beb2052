"""
Sticky comment synchronization.

Keeps a single bot comment per pull request up to date: the comment is found
by a marker string and edited in place, or published if none exists yet.
"""

from typing import Optional

from .github import Comment, CommentStatusClient, Credential, Err, RepositoryRef, Result

DEFAULT_MARKER = "<!-- ghsync -->"


def with_marker(body: str, marker: str) -> str:
    """Prefix body with the marker unless it already contains it"""
    if marker in body:
        return body
    return f"{marker}\n{body}"


def find_marked_comment(comments, marker: str) -> Optional[Comment]:
    """First comment (in server order) whose body contains the marker"""
    for comment in comments:
        if marker in comment.body:
            return comment
    return None


async def upsert_comment(
    client: CommentStatusClient,
    credential: Credential,
    repo: RepositoryRef,
    pull_request_number: int,
    body: str,
    marker: str = DEFAULT_MARKER
) -> Result[Comment]:
    """
    Edit the marked comment on a pull request, or publish a new one.

    Args:
        client: Connected CommentStatusClient
        credential: Access token
        repo: Target repository
        pull_request_number: Pull request number
        body: Comment text; the marker is prepended when missing
        marker: String identifying the comment to update

    Returns:
        Result of the edit or publish call; a failed listing is returned as is
    """
    if not marker:
        raise ValueError("marker must be a non-empty string")

    listed = await client.list_comments(credential, repo, pull_request_number)
    if isinstance(listed, Err):
        return listed

    marked_body = with_marker(body, marker)
    existing = find_marked_comment(listed.value, marker)
    if existing is None:
        return await client.publish_comment(credential, repo, pull_request_number, marked_body)
    return await client.edit_comment(credential, repo, existing.id, marked_body)

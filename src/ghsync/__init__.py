"""
ghsync - publish pull request comments and commit statuses on GitHub.
"""

from .github import (
    Comment,
    CommentStatusClient,
    CommitStatusState,
    Credential,
    Err,
    Ok,
    RepositoryRef,
    StatusRecord,
)
from .sync import upsert_comment

__version__ = "0.1.0"

__all__ = [
    "Comment",
    "CommentStatusClient",
    "CommitStatusState",
    "Credential",
    "Err",
    "Ok",
    "RepositoryRef",
    "StatusRecord",
    "upsert_comment",
]

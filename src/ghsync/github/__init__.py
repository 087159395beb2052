"""
GitHub API integration for ghsync.

Provides the comment/status client and the value types it exchanges.
"""

from .client import CommentStatusClient, ERROR_MESSAGE
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

__all__ = [
    "CommentStatusClient",
    "ERROR_MESSAGE",
    "Comment",
    "CommitStatusRequest",
    "CommitStatusState",
    "Credential",
    "PullRequestHead",
    "RepositoryRef",
    "StatusRecord",
    "Err",
    "Ok",
    "Result",
]

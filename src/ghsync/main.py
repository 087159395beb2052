"""
Command line entry point for ghsync.

Publishes, edits and lists pull request comments and sets commit statuses,
e.g. from a CI job:

    ghsync status owner/repo 42 success --context ci/build --description "all checks passed"
    ghsync sync owner/repo 42 --body-file report.md --marker "<!-- bench -->"
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .config import GitHubConfig
from .errors import ErrorFormatter
from .github import CommentStatusClient, CommitStatusState, Credential, Err, RepositoryRef
from .logging_config import configure_logging
from .sync import DEFAULT_MARKER, upsert_comment

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_API_ERROR = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghsync",
        description="Publish pull request comments and commit statuses on GitHub",
    )
    parser.add_argument("--token", help="GitHub token (default: GITHUB_TOKEN env var)")
    parser.add_argument("--log-level", help="Overrides LOG_LEVEL")
    parser.add_argument("--log-format", choices=["simple", "detailed", "json"], help="Overrides LOG_FORMAT")
    parser.add_argument("--details", action="store_true", help="Show error type and status code on failure")

    sub = parser.add_subparsers(dest="command", required=True)

    def add_repo(p: argparse.ArgumentParser) -> None:
        p.add_argument("repo", help="Repository as owner/name")

    def add_body(p: argparse.ArgumentParser) -> None:
        group = p.add_mutually_exclusive_group(required=True)
        group.add_argument("--body", help="Comment text")
        group.add_argument("--body-file", help="Read comment text from file ('-' for stdin)")

    comment = sub.add_parser("comment", help="Publish a new pull request comment")
    add_repo(comment)
    comment.add_argument("pull_request", type=int)
    add_body(comment)

    edit = sub.add_parser("edit", help="Replace the body of a comment")
    add_repo(edit)
    edit.add_argument("comment_id", type=int)
    add_body(edit)

    list_ = sub.add_parser("list", help="List pull request comments")
    add_repo(list_)
    list_.add_argument("pull_request", type=int)

    status = sub.add_parser("status", help="Set a commit status on the pull request head")
    add_repo(status)
    status.add_argument("pull_request", type=int)
    status.add_argument("state", choices=[s.value for s in CommitStatusState])
    status.add_argument("--context", required=True, help="Status check name, e.g. ci/build")
    status.add_argument("--description", default="")
    status.add_argument("--target-url")

    sync = sub.add_parser("sync", help="Edit the marked comment or publish it if missing")
    add_repo(sync)
    sync.add_argument("pull_request", type=int)
    add_body(sync)
    sync.add_argument("--marker", default=DEFAULT_MARKER)

    return parser


def read_body(args: argparse.Namespace) -> Optional[str]:
    """Comment body from --body or --body-file; None for commands without one"""
    if getattr(args, "body", None) is not None:
        return args.body
    if getattr(args, "body_file", None) is None:
        return None
    if args.body_file == "-":
        return sys.stdin.read()
    with open(args.body_file, encoding="utf-8") as f:
        return f.read()


async def run_command(
    args: argparse.Namespace,
    credential: Credential,
    config: GitHubConfig,
    body: Optional[str] = None
) -> int:
    """Execute one subcommand; returns the process exit code"""
    repo = RepositoryRef.parse(args.repo)

    async with CommentStatusClient(config=config) as client:
        if args.command == "comment":
            result = await client.publish_comment(credential, repo, args.pull_request, body)
        elif args.command == "edit":
            result = await client.edit_comment(credential, repo, args.comment_id, body)
        elif args.command == "list":
            result = await client.list_comments(credential, repo, args.pull_request)
        elif args.command == "status":
            result = await client.create_status(
                credential,
                repo,
                args.pull_request,
                CommitStatusState(args.state),
                args.target_url,
                args.description,
                args.context
            )
        else:
            result = await upsert_comment(
                client, credential, repo, args.pull_request, body, args.marker
            )

    if isinstance(result, Err):
        print(ErrorFormatter.format_error(result.error, include_details=args.details), file=sys.stderr)
        return EXIT_API_ERROR

    if args.command == "list":
        for comment in result.value:
            first_line = comment.body.splitlines()[0] if comment.body else ""
            print(f"{comment.id}\t{comment.author}\t{first_line}")
    elif args.command == "status":
        print(f"{result.value.context}: {result.value.state.value}")
    else:
        print(result.value.html_url or result.value.id)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point"""
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, format_style=args.log_format)

    token = args.token or os.getenv("GITHUB_TOKEN")
    if not token:
        print("Error: no token given; pass --token or set GITHUB_TOKEN", file=sys.stderr)
        return EXIT_USAGE

    try:
        config = GitHubConfig.from_env()
        body = read_body(args)
        return asyncio.run(run_command(args, Credential(token), config, body))
    except (ValueError, OSError) as e:
        logger.debug("Invalid invocation", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())

"""
Stale Issue Bankruptcy Notice
=============================
Posts the bulk-triage notice on the tracking issue (#66573) of the
repository the GitHub Actions job runs in, then exits.

The script makes exactly one API call. It is not idempotent: every run
creates a new comment.

Environment variables:
  GITHUB_TOKEN       - Bot token used to create the comment (required)
  GITHUB_REPOSITORY  - ``owner/repo`` of the current job, set by the Actions runner
"""

import logging
import os
import sys
from typing import Callable, Mapping, NamedTuple, Optional

from github_commenter import post_issue_comment

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("bankrupt-issues")

# ---------------------------------------------------------------------------
# Comment content
# ---------------------------------------------------------------------------

ISSUE_NUMBER = 66573

BUG_REPORT_TEMPLATE_URL = (
    "https://github.com/vercel/next.js/issues/new"
    "?assignees=&labels=bug&projects=&template=1.bug_report.yml"
)

COMMENT_BODY = f"""

We are in the process of closing issues dating back to 2020 to improve our focus on the most relevant and actionable problems.

**_Why are we doing this?_**

Stale issues often lack recent updates and clear reproductions, making them difficult to address effectively. Our objective is to prioritize the most upvoted and actionable issues that have up-to-date reproductions, enabling us to resolve bugs more efficiently.

**_Why 2020 issues?_**

Issues from 2020 are likely to be outdated and less relevant to the current state of the codebase. By closing these older stale issues, we can better focus our efforts on more recent and relevant problems, ensuring a more effective and streamlined workflow.

If your issue is still relevant, please reopen it using our [bug report template]({BUG_REPORT_TEMPLATE_URL}). Be sure to include any important context from the original issue in your new report.

Thank you for your understanding and contributions.

Best regards,
The Next.js Team
  """

# ---------------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------------


class ConfigurationError(Exception):
    """Raised when the token or the CI context is missing."""


class RepositoryCoordinates(NamedTuple):
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


class CommentRequest(NamedTuple):
    owner: str
    repo: str
    issue_number: int
    body: str


class RunResult(NamedTuple):
    """Outcome of a single run; ``error`` is the caught exception's message."""

    ok: bool
    error: Optional[str] = None


# ---------------------------------------------------------------------------
# CI context helpers
# ---------------------------------------------------------------------------


def repo_from_environ(environ: Mapping[str, str]) -> RepositoryCoordinates:
    """Read the current repository from ``GITHUB_REPOSITORY``."""
    full_name = environ.get("GITHUB_REPOSITORY", "")
    owner, _, repo = full_name.partition("/")
    if not owner or not repo or "/" in repo:
        raise ConfigurationError(
            "GITHUB_REPOSITORY must be set to 'owner/repo' "
            f"(got {full_name!r})"
        )
    return RepositoryCoordinates(owner, repo)


def _escape_command_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_failed(message: str) -> None:
    """Report *message* as the run's failure through an ``::error::`` annotation."""
    logger.error("Run failed: %s", message)
    print(f"::error::{_escape_command_data(message)}", flush=True)


# ---------------------------------------------------------------------------
# Commenter
# ---------------------------------------------------------------------------


def build_comment_request(coords: RepositoryCoordinates) -> CommentRequest:
    return CommentRequest(coords.owner, coords.repo, ISSUE_NUMBER, COMMENT_BODY)


def run(
    token: Optional[str],
    coords: RepositoryCoordinates,
    post_comment: Callable[[str, int, str, str], dict] = post_issue_comment,
) -> RunResult:
    """
    Post the notice on the tracking issue.

    A missing token raises ``ConfigurationError`` before any network access.
    Every error from the API call is reported through ``set_failed`` and
    returned as a failed ``RunResult``; nothing is retried.
    """
    if not token:
        raise ConfigurationError("GITHUB_TOKEN not set")

    comment = build_comment_request(coords)

    try:
        post_comment(
            f"{comment.owner}/{comment.repo}",
            comment.issue_number,
            comment.body,
            token,
        )
    except Exception as exc:
        set_failed(str(exc))
        return RunResult(ok=False, error=str(exc))

    logger.info("Commented on issue #%s", comment.issue_number)
    return RunResult(ok=True)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(environ: Optional[Mapping[str, str]] = None) -> int:
    if environ is None:
        environ = os.environ

    token = environ.get("GITHUB_TOKEN")
    if not token:
        raise ConfigurationError("GITHUB_TOKEN not set")

    result = run(token, repo_from_environ(environ))
    return 0 if result.ok else 1


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()

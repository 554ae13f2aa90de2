import requests

# ---------------------------------------------------------------------------
# GitHub API configuration
# The token is passed in by the caller; it needs `issues: write` (or the
# classic `repo` scope) to post comments on issues.
# ---------------------------------------------------------------------------

GITHUB_API = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"
USER_AGENT = "bankrupt-issues"


def _github_headers(token: str) -> dict:
    return {
        "Authorization": f"Bearer {token}",
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
        "User-Agent": USER_AGENT,
    }


def post_issue_comment(repo_full_name: str, issue_number: int, message: str, token: str) -> dict:
    """Create a comment on an issue and return the new comment resource.

    Errors are not handled here: HTTP failures surface as
    ``requests.HTTPError`` from ``raise_for_status`` and a non-JSON body as
    ``ValueError``.
    """
    url = f"{GITHUB_API}/repos/{repo_full_name}/issues/{issue_number}/comments"

    payload = {
        "body": message
    }

    response = requests.post(url, json=payload, headers=_github_headers(token))
    response.raise_for_status()
    return response.json()

"""Sets up the authenticated PyGithub client."""

from github import Auth, Github

from release_notes_manager.utils.constants import DEFAULT_GITHUB_API_URL, DEFAULT_PER_PAGE


async def get_github_client(github_token: str, github_api_url: str = DEFAULT_GITHUB_API_URL) -> Github:
    """Returns an authenticated GitHub client using a personal access token.

    Supports custom base URL for GitHub Enterprise Server (GHES).
    Raises RuntimeError if no token is given.
    """
    if not github_token:
        raise RuntimeError("GitHub authentication requires a token.")
    return Github(auth=Auth.Token(github_token), base_url=github_api_url, per_page=DEFAULT_PER_PAGE)

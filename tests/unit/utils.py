"""Fakes and builders shared by the release notes unit tests."""

from typing import Any

from release_notes_manager.github.abc import ReleaseNotesClientBase


def make_issue(
    number: int,
    title: str,
    labels: list[str] | None = None,
    issue_type: str | None = None,
    pull_request: bool = False,
) -> dict[str, Any]:
    """Build a dictionary shaped like an item returned by the GitHub issues API."""
    data: dict[str, Any] = {
        "number": number,
        "title": title,
        "html_url": f"https://github.com/octocat/hello-world/issues/{number}",
        "labels": [{"name": label} for label in labels or []],
        "type": {"name": issue_type} if issue_type else None,
    }
    if pull_request:
        data["html_url"] = f"https://github.com/octocat/hello-world/pull/{number}"
        data["pull_request"] = {"url": f"https://api.github.com/repos/octocat/hello-world/pulls/{number}"}
    return data


class FakeReleaseNotesClient(ReleaseNotesClientBase):
    """In-memory GitHub client recording the calls made against it."""

    def __init__(
        self,
        labels: list[str] | None = None,
        milestones: dict[str, list[dict[str, Any]]] | None = None,
        repository_exists: bool = True,
    ) -> None:
        """Initialize with the existing labels and the items of each milestone."""
        self.labels = set(labels or [])
        self.milestones = milestones or {}
        self.exists = repository_exists
        self.label_checks: list[str] = []
        self.milestone_requests: list[str] = []

    async def repository_exists(self) -> bool:
        """Return whether the fake repository exists."""
        return self.exists

    async def label_exists(self, name: str) -> bool:
        """Record the check and return whether the label is known."""
        self.label_checks.append(name)
        return name in self.labels

    async def get_milestone_by_title(self, title: str) -> Any | None:
        """Return a minimal milestone when the title is known."""
        if title not in self.milestones:
            return None
        return {"title": title}

    async def list_milestone_issues(self, milestone_title: str) -> list[Any]:
        """Return the issues of the milestone, without pull requests."""
        self.milestone_requests.append(milestone_title)
        return [item for item in self.milestones.get(milestone_title, []) if "pull_request" not in item]

    async def list_milestone_pull_requests(self, milestone_title: str) -> list[Any]:
        """Return the pull requests of the milestone."""
        return [item for item in self.milestones.get(milestone_title, []) if "pull_request" in item]

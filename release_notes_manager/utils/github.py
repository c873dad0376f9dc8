"""Contains utility functions for GitHub interactions."""

from typing import Any

from release_notes_manager.utils.helpers import get_field


def extract_label_names(labels: list[Any] | None) -> tuple[str, ...]:
    """Extract label names from GitHub label data.

    The GitHub API returns labels either as plain strings or as label objects
    (or dictionaries) with a `name` field. Labels without a name are skipped.
    """
    names: list[str] = []
    for label in labels or []:
        name = label if isinstance(label, str) else get_field(label, "name")
        if name:
            names.append(name)
    return tuple(names)


def extract_issue_type_name(issue: Any) -> str | None:
    """Extract the name of the issue type assigned to a GitHub issue, if any."""
    issue_type = get_field(issue, "type")
    if not issue_type:
        return None
    if isinstance(issue_type, str):
        return issue_type
    return get_field(issue_type, "name")


def is_pull_request(issue: Any) -> bool:
    """Check if an item returned by the issues API is actually a pull request."""
    return bool(get_field(issue, "pull_request"))

"""Contains unit tests for the utils.github module."""

from types import SimpleNamespace

import pytest

from release_notes_manager.utils.github import extract_issue_type_name, extract_label_names, is_pull_request


@pytest.mark.parametrize(
    "labels,expected",
    [
        pytest.param(None, (), id="no labels"),
        pytest.param(["bug", "docs"], ("bug", "docs"), id="plain strings"),
        pytest.param([{"name": "bug"}, {"name": None}, {"color": "fff"}], ("bug",), id="dicts without names skipped"),
        pytest.param([SimpleNamespace(name="Bug Fixes 🐛")], ("Bug Fixes 🐛",), id="label objects"),
    ],
)
def test_extract_label_names(labels: list | None, expected: tuple[str, ...]) -> None:
    """Test extracting label names from the shapes the GitHub API returns."""
    assert extract_label_names(labels) == expected


@pytest.mark.parametrize(
    "issue,expected",
    [
        pytest.param({"type": None}, None, id="no type"),
        pytest.param({}, None, id="missing field"),
        pytest.param({"type": {"id": 1, "name": "Bug"}}, "Bug", id="type object as dict"),
        pytest.param(SimpleNamespace(type=SimpleNamespace(name="Feature")), "Feature", id="type object"),
        pytest.param({"type": "Task"}, "Task", id="plain string"),
    ],
)
def test_extract_issue_type_name(issue: object, expected: str | None) -> None:
    """Test extracting the issue type name from an issue."""
    assert extract_issue_type_name(issue) == expected


def test_is_pull_request() -> None:
    """Test that items of the issues API are recognized as pull requests by their pull_request field."""
    assert is_pull_request({"pull_request": {"url": "https://api.github.com/repos/o/r/pulls/1"}}) is True
    assert is_pull_request({"pull_request": None}) is False
    assert is_pull_request({"number": 1}) is False
    assert is_pull_request(SimpleNamespace(pull_request=None)) is False

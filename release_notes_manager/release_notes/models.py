"""Data models for release notes generation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from release_notes_manager.utils.github import extract_issue_type_name, extract_label_names
from release_notes_manager.utils.helpers import get_field


class ReleaseNotesStatus(str, Enum):
    """Status of release notes generation."""

    SUCCESS = "success"
    DRY_RUN = "dry_run"
    ERROR = "error"


class ExtraInfo(BaseModel):
    """Extra section rendered between the header and the categories."""

    model_config = ConfigDict(frozen=True)

    title: str
    text: str


class GeneratorSettings(BaseModel):
    """Settings for a single release notes generation run.

    Settings files use camelCase keys (``ownerName``, ``issueCategoryLabelMappings``),
    Python code may use either the field names or the camelCase aliases. Every
    mapping keeps the order in which its entries were declared.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    # Repository identity and credential reference. Required, but checked by the
    # validator so that the error names the missing setting.
    owner_name: str = ""
    repo_name: str = ""
    github_token_env_var_name: str = ""

    # Templates
    milestone_name: str = ""
    header_text: str = ""
    version: str | None = None
    release_type: str | None = None
    extra_info: ExtraInfo | None = None

    # Title sanitizing
    emojis_to_remove_from_title: list[str] | None = None
    word_replacements: dict[str, str] | None = None
    first_word_replacements: dict[str, str] | None = None
    styled_words_list: dict[str, str] | None = None
    bolded_versions: bool = False
    italic_versions: bool = False

    # Categorizing
    issue_category_issue_type_mappings: dict[str, str] | None = None
    issue_category_label_mappings: dict[str, str] | None = None
    pr_category_label_mappings: dict[str, str] | None = None
    ignore_labels: list[str] | None = None
    other_category_name: str | None = None


@dataclass(frozen=True)
class TrackedItem:
    """An issue or pull request as seen by the release notes generator."""

    number: int
    title: str
    url: str
    labels: tuple[str, ...] = ()

    def has_label(self, name: str) -> bool:
        """Check if the item carries a label with exactly this name."""
        return name in self.labels

    def has_any_label(self, names: list[str]) -> bool:
        """Check if the item carries at least one of the given labels."""
        return any(label in self.labels for label in names)


@dataclass(frozen=True)
class IssueItem(TrackedItem):
    """An issue, optionally classified with an issue type."""

    issue_type: str | None = None

    @classmethod
    def from_github(cls, issue: Any) -> "IssueItem":
        """Build an issue item from a GitHub issue model (or an equivalent dict)."""
        return cls(
            number=get_field(issue, "number"),
            title=get_field(issue, "title") or "",
            url=get_field(issue, "html_url") or "",
            labels=extract_label_names(get_field(issue, "labels")),
            issue_type=extract_issue_type_name(issue),
        )


@dataclass(frozen=True)
class PullRequestItem(TrackedItem):
    """A pull request."""

    @classmethod
    def from_github(cls, pull_request: Any) -> "PullRequestItem":
        """Build a pull request item from a GitHub issue or pull request model (or an equivalent dict)."""
        return cls(
            number=get_field(pull_request, "number"),
            title=get_field(pull_request, "title") or "",
            url=get_field(pull_request, "html_url") or "",
            labels=extract_label_names(get_field(pull_request, "labels")),
        )


@dataclass
class FetchedItems:
    """Issues and pull requests of a milestone after filtering and sanitizing."""

    issues: list[IssueItem] = field(default_factory=list)
    pull_requests: list[PullRequestItem] = field(default_factory=list)


@dataclass
class CategorySection:
    """A category of the release notes and the items it lists, in order."""

    key: str
    title: str
    items: list[TrackedItem] = field(default_factory=list)


class ReleaseNotesResult(BaseModel):
    """Result of release notes generation."""

    status: ReleaseNotesStatus
    content: str | None = None
    output_path: str | None = None
    error: str | None = None

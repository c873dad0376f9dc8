"""Sorting of issues and pull requests into release note categories.

Items are sorted in four passes, merged in this order:

1. issues by issue type (``issueCategoryIssueTypeMappings``)
2. issues by label (``issueCategoryLabelMappings``)
3. pull requests by label (``prCategoryLabelMappings``)
4. the catch-all "other" category for issues matched by neither 1 nor 2

Each mapping goes from a matching key (issue type or label name) to the title
shown in the release notes. A pass never yields empty categories. When two passes
yield a category with the same key, the later pass replaces the earlier entry in
place rather than adding to it.
"""

from typing import Iterable

import structlog

from .models import CategorySection, FetchedItems, GeneratorSettings, IssueItem, PullRequestItem

logger = structlog.get_logger(__name__)


def categorize_by_issue_type(issues: list[IssueItem], mappings: dict[str, str] | None) -> list[CategorySection]:
    """Group issues whose issue type equals a mapping key.

    Dashes in the mapping key are replaced with spaces to form the category key.
    """
    sections: list[CategorySection] = []
    for issue_type, title in (mappings or {}).items():
        matched = [issue for issue in issues if issue.issue_type == issue_type]
        if matched:
            sections.append(CategorySection(key=issue_type.replace("-", " "), title=title, items=list(matched)))
    return sections


def categorize_by_label(items: list[IssueItem] | list[PullRequestItem], mappings: dict[str, str] | None) -> list[CategorySection]:
    """Group items carrying a label named after a mapping key."""
    sections: list[CategorySection] = []
    for label, title in (mappings or {}).items():
        matched = [item for item in items if item.has_label(label)]
        if matched:
            sections.append(CategorySection(key=label, title=title, items=list(matched)))
    return sections


def categorize_other(
    issues: list[IssueItem],
    other_category_name: str | None,
    issue_type_mappings: dict[str, str] | None,
    label_mappings: dict[str, str] | None,
) -> list[CategorySection]:
    """Group every issue not matched by the issue type or issue label mappings."""
    if not other_category_name:
        return []
    issue_types = list((issue_type_mappings or {}).keys())
    labels = list((label_mappings or {}).keys())
    matched = [issue for issue in issues if not issue.has_any_label(labels) and issue.issue_type not in issue_types]
    if not matched:
        return []
    return [CategorySection(key=other_category_name, title=other_category_name, items=matched)]


def merge_sections(*passes: Iterable[CategorySection]) -> list[CategorySection]:
    """Merge category passes in order, later sections replacing earlier ones with the same key."""
    merged: dict[str, CategorySection] = {}
    for sections in passes:
        for section in sections:
            if section.key in merged:
                logger.debug("Category replaced by a later pass", category=section.key)
            merged[section.key] = section
    return list(merged.values())


class Categorizer:
    """Sorts fetched items into the categories configured in the generator settings."""

    def __init__(self, settings: GeneratorSettings) -> None:
        """Initialize with the settings of the current generation run."""
        self.settings = settings

    def categorize(self, items: FetchedItems) -> list[CategorySection]:
        """Return the non-empty categories in render order."""
        settings = self.settings
        sections = merge_sections(
            categorize_by_issue_type(items.issues, settings.issue_category_issue_type_mappings),
            categorize_by_label(items.issues, settings.issue_category_label_mappings),
            categorize_by_label(items.pull_requests, settings.pr_category_label_mappings),
            categorize_other(
                items.issues,
                settings.other_category_name,
                settings.issue_category_issue_type_mappings,
                settings.issue_category_label_mappings,
            ),
        )
        logger.info("Categorized items", categories=[section.key for section in sections])
        return sections

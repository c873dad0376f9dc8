"""Release notes generation module."""

from .categorizer import Categorizer
from .exceptions import (
    LabelValidationError,
    ReleaseNotesError,
    RepositoryNotFoundError,
    SettingsValidationError,
    VersionResolutionError,
)
from .fetcher import ItemFetcher, render_template
from .generator import ReleaseNotesGenerator, run_generate_release_notes
from .markdown import MarkdownRenderer
from .models import (
    CategorySection,
    ExtraInfo,
    FetchedItems,
    GeneratorSettings,
    IssueItem,
    PullRequestItem,
    ReleaseNotesResult,
    ReleaseNotesStatus,
    TrackedItem,
)
from .sanitizer import TitleSanitizer
from .validator import SettingsValidator

__all__ = [
    "GeneratorSettings",
    "ExtraInfo",
    "TrackedItem",
    "IssueItem",
    "PullRequestItem",
    "FetchedItems",
    "CategorySection",
    "ReleaseNotesStatus",
    "ReleaseNotesResult",
    "ReleaseNotesError",
    "SettingsValidationError",
    "RepositoryNotFoundError",
    "LabelValidationError",
    "VersionResolutionError",
    "SettingsValidator",
    "ItemFetcher",
    "render_template",
    "TitleSanitizer",
    "Categorizer",
    "MarkdownRenderer",
    "ReleaseNotesGenerator",
    "run_generate_release_notes",
]

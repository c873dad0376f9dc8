"""Shared constants used across the application."""

import re

# Template Placeholders
# ---------------------

VERSION_PLACEHOLDER = "${VERSION}"
"""Replaced with the version of the release."""

ENVIRONMENT_PLACEHOLDER = "${ENVIRONMENT}"
"""Replaced with the release type (used mostly in milestone names)."""

RELEASE_TYPE_PLACEHOLDER = "${RELEASETYPE}"
"""Replaced with the release type (used mostly in header text)."""

REPO_NAME_PLACEHOLDER = "${REPONAME}"
"""Replaced with the name of the repository."""

# Version Detection
# -----------------

VERSION_PATTERN = re.compile(
    r"(?<![\w.*])"
    r"v?(?P<core>\d+(?:\.\d+)*)"
    r"(?P<prerelease>-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
    r"(?P<build>\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
    r"(?![\w*]|\.\w)"
)
"""Pattern to match version-like substrings in titles.

Matches a version with one or more numeric components and an optional 'v' prefix
(3, v1, 1.2, v1.2.3), optionally followed by semantic version pre-release and build
metadata. Versions already wrapped in markdown emphasis markers, glued to a word or
embedded in longer dotted words, are not matched.
"""

VERSION_COMPONENT_COUNT = 3
"""Number of numeric components of a fully qualified version (major.minor.patch)."""

# Title Styling
# -------------

BOLD_STYLE = "bold"
ITALIC_STYLE = "italic"
SUPPORTED_STYLES = (BOLD_STYLE, ITALIC_STYLE)

BOLD_MARKER = "**"
ITALIC_MARKER = "_"

# Markdown Rendering
# ------------------

HEADER_TEMPLATE = '<h1 align="center" style="color: mediumseagreen;font-weight: bold;">{text}</h1>'
"""Template for the top level header of the release notes."""

SECTION_HEADER_TEMPLATE = '<h2 align="center" style="font-weight: bold;">{text}</h2>'
"""Template for category and extra info section headers."""

EXTRA_INFO_TEMPLATE = '<div align="center">{text}</div>'
"""Template for the body of the extra info section."""

SECTION_ITEM_TEMPLATE = "{position}. [#{number}]({url}) - {title}."
"""Template for a single numbered issue or pull request line."""

# GitHub Defaults
# ---------------

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Default GitHub API URL, override for GitHub Enterprise Server."""

DEFAULT_PER_PAGE = 100
"""Page size used when paginating GitHub list endpoints."""

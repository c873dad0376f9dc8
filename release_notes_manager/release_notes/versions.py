"""Version detection, resolution and styling for release note titles."""

import re

import structlog

from release_notes_manager.utils.constants import (
    BOLD_MARKER,
    ITALIC_MARKER,
    VERSION_COMPONENT_COUNT,
    VERSION_PATTERN,
)

from .exceptions import VersionResolutionError

logger = structlog.get_logger(__name__)


def resolve_version(version: str) -> str:
    """Resolve a version to a fully qualified major.minor.patch version.

    Missing minor and patch components are filled in with zeros. Pre-release and
    build metadata are kept as-is. A leading 'v' is not expected.

    Examples:
        >>> resolve_version("1")
        '1.0.0'
        >>> resolve_version("1.2-preview.3")
        '1.2.0-preview.3'

    Raises:
        VersionResolutionError: If the version has more than three numeric components.
    """
    core, separator, suffix = _split_metadata(version)
    components = core.split(".")
    if len(components) > VERSION_COMPONENT_COUNT:
        raise VersionResolutionError(version)
    components += ["0"] * (VERSION_COMPONENT_COUNT - len(components))
    return ".".join(components) + separator + suffix


def _split_metadata(version: str) -> tuple[str, str, str]:
    """Split a version into its numeric core and any pre-release/build suffix."""
    match = re.search(r"[-+]", version)
    if match is None:
        return version, "", ""
    index = match.start()
    return version[:index], version[index], version[index + 1 :]


def format_version(version: str, bold: bool = False, italic: bool = False) -> str:
    """Prefix a resolved version with 'v' and wrap it in markdown emphasis markers."""
    formatted = f"v{version}"
    if italic:
        formatted = f"{ITALIC_MARKER}{formatted}{ITALIC_MARKER}"
    if bold:
        formatted = f"{BOLD_MARKER}{formatted}{BOLD_MARKER}"
    return formatted


def find_versions(title: str) -> list[str]:
    """Find every version-like substring in a title, without any 'v' prefix."""
    return [_version_from_match(match) for match in VERSION_PATTERN.finditer(title)]


def _version_from_match(match: re.Match[str]) -> str:
    core = match.group("core")
    return core + (match.group("prerelease") or "") + (match.group("build") or "")


def style_versions(title: str, bold: bool = False, italic: bool = False) -> str:
    """Normalize every version in a title and apply the configured styling.

    Each version found loses its 'v' prefix, is resolved to three components and is
    written back as ``v{resolved}`` wrapped according to the bold and italic flags.
    Versions that are already wrapped are left alone, so styling a title twice
    yields the same result.

    Raises:
        VersionResolutionError: If a version has more than three numeric components.
    """

    def _replace(match: re.Match[str]) -> str:
        version = _version_from_match(match)
        resolved = resolve_version(version)
        logger.debug("Resolved version in title", found=match.group(0), resolved=resolved)
        return format_version(resolved, bold=bold, italic=italic)

    return VERSION_PATTERN.sub(_replace, title)

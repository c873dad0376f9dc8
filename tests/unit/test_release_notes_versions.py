"""Unit tests for version detection, resolution and styling in titles."""

import pytest

from release_notes_manager.release_notes.exceptions import VersionResolutionError
from release_notes_manager.release_notes.versions import find_versions, format_version, resolve_version, style_versions


@pytest.mark.parametrize(
    "version,expected",
    [
        ("1", "1.0.0"),
        ("1.2", "1.2.0"),
        ("1.2.3", "1.2.3"),
        ("1.2-preview.3", "1.2.0-preview.3"),
        ("1.2+build.5", "1.2.0+build.5"),
        ("2.0.0-rc.1+sha.5114f85", "2.0.0-rc.1+sha.5114f85"),
    ],
)
def test_resolve_version(version: str, expected: str) -> None:
    """Test that versions are filled to major.minor.patch and keep their metadata."""
    assert resolve_version(version) == expected


def test_resolve_version_too_many_components() -> None:
    """Test that a version with more than three numeric components is rejected."""
    with pytest.raises(VersionResolutionError, match="10.0.0.1"):
        resolve_version("10.0.0.1")


@pytest.mark.parametrize(
    "bold,italic,expected",
    [
        (False, False, "v1.0.0"),
        (True, False, "**v1.0.0**"),
        (False, True, "_v1.0.0_"),
        (True, True, "**_v1.0.0_**"),
    ],
)
def test_format_version(bold: bool, italic: bool, expected: str) -> None:
    """Test the 'v' prefix and the emphasis markers."""
    assert format_version("1.0.0", bold=bold, italic=italic) == expected


@pytest.mark.parametrize(
    "title,expected",
    [
        ("Upgrade to v2 and 3.1", ["2", "3.1"]),
        ("Support Python 3.12 and 3.13", ["3.12", "3.13"]),
        ("Release v1.2-beta.1 notes", ["1.2-beta.1"]),
        ("Fix issue 42", ["42"]),
        ("Bump actions/checkout from 3 to 4", ["3", "4"]),
        ("Drop utf8 and 3rd party 10x", []),
        ("Bump devtools1.2 config", []),
        ("Tag is **v1.0.0** already", []),
    ],
)
def test_find_versions(title: str, expected: list[str]) -> None:
    """Test which substrings of a title count as versions."""
    assert find_versions(title) == expected


@pytest.mark.parametrize(
    "title,bold,italic,expected",
    [
        ("Release v1", True, True, "Release **_v1.0.0_**"),
        ("Bump library to 1.2", False, False, "Bump library to v1.2.0"),
        ("Bump library to v1.2+build.5", False, False, "Bump library to v1.2.0+build.5"),
        ("Move from 1.9 to v2.0.1", True, False, "Move from **v1.9.0** to **v2.0.1**"),
        ("Bump actions/checkout from 3 to 4", True, False, "Bump actions/checkout from **v3.0.0** to **v4.0.0**"),
        ("Fix issue 42", True, True, "Fix issue **_v42.0.0_**"),
        ("Support 3.12.", False, True, "Support _v3.12.0_."),
    ],
)
def test_style_versions(title: str, bold: bool, italic: bool, expected: str) -> None:
    """Test that every version in a title is resolved and styled."""
    assert style_versions(title, bold=bold, italic=italic) == expected


@pytest.mark.parametrize("bold,italic", [(False, False), (True, False), (False, True), (True, True)])
def test_style_versions_is_idempotent(bold: bool, italic: bool) -> None:
    """Test that styling an already styled title changes nothing."""
    styled = style_versions("Release v1 after 0.9", bold=bold, italic=italic)
    assert style_versions(styled, bold=bold, italic=italic) == styled


def test_style_versions_too_many_components() -> None:
    """Test that a title with an unresolvable version aborts styling."""
    with pytest.raises(VersionResolutionError):
        style_versions("Update to 10.0.0.1", bold=True)

"""Title sanitizing for issues and pull requests listed in release notes.

Titles go through five stages, always in this order:

1. emoji removal
2. word replacement
3. first word replacement
4. word styling
5. version normalization and styling

Each stage only touches the first occurrence of what it looks for, except the
version stage which handles every version in the title.
"""

import structlog

from release_notes_manager.utils.constants import BOLD_MARKER, BOLD_STYLE, ITALIC_MARKER, ITALIC_STYLE, SUPPORTED_STYLES
from release_notes_manager.utils.helpers import replace_first

from .models import GeneratorSettings
from .versions import style_versions

logger = structlog.get_logger(__name__)


def remove_emojis(title: str, emojis: list[str] | None) -> str:
    """Remove the first occurrence of each emoji from the title."""
    for emoji in emojis or []:
        title = replace_first(title, emoji, "")
    return title


def replace_words(title: str, replacements: dict[str, str] | None) -> str:
    """Replace the first occurrence of each word or phrase, in declaration order."""
    for old, new in (replacements or {}).items():
        title = replace_first(title, old, new)
    return title


def replace_first_word(title: str, replacements: dict[str, str] | None) -> str:
    """Capitalize the first word of the title and swap it for its replacement, if any.

    The first word is capitalized even when there is no replacement for it.
    """
    words = title.split(" ")
    first_word = words[0]
    if not first_word:
        return title
    first_word = first_word[0].upper() + first_word[1:]
    for word, replacement in (replacements or {}).items():
        if first_word == word:
            first_word = replacement
            break
    words[0] = first_word
    return " ".join(words)


def parse_style_spec(style_spec: str) -> set[str]:
    """Parse a comma separated style spec such as 'bold,italic' into known styles."""
    styles = (style.strip() for style in style_spec.lower().split(","))
    return {style for style in styles if style in SUPPORTED_STYLES}


def apply_word_style(word: str, styles: set[str]) -> str:
    """Wrap a word in markdown bold and/or italic markers."""
    if ITALIC_STYLE in styles:
        word = f"{ITALIC_MARKER}{word}{ITALIC_MARKER}"
    if BOLD_STYLE in styles:
        word = f"{BOLD_MARKER}{word}{BOLD_MARKER}"
    return word


def style_words(title: str, styled_words: dict[str, str] | None) -> str:
    """Style the first occurrence of each configured word."""
    for word, style_spec in (styled_words or {}).items():
        if not word or word not in title:
            continue
        title = replace_first(title, word, apply_word_style(word, parse_style_spec(style_spec)))
    return title


class TitleSanitizer:
    """Applies the title sanitizing stages configured in the generator settings."""

    def __init__(self, settings: GeneratorSettings) -> None:
        """Initialize with the settings of the current generation run."""
        self.settings = settings

    def sanitize(self, title: str) -> str:
        """Run every sanitizing stage over a title and return the result."""
        settings = self.settings
        sanitized = remove_emojis(title, settings.emojis_to_remove_from_title)
        sanitized = replace_words(sanitized, settings.word_replacements)
        sanitized = replace_first_word(sanitized, settings.first_word_replacements)
        sanitized = style_words(sanitized, settings.styled_words_list)
        sanitized = style_versions(sanitized, bold=settings.bolded_versions, italic=settings.italic_versions)
        if sanitized != title:
            logger.debug("Sanitized title", original=title, sanitized=sanitized)
        return sanitized

"""Markdown rendering for release notes."""

import structlog

from release_notes_manager.utils.constants import (
    EXTRA_INFO_TEMPLATE,
    HEADER_TEMPLATE,
    SECTION_HEADER_TEMPLATE,
    SECTION_ITEM_TEMPLATE,
)

from .fetcher import render_template
from .models import CategorySection, ExtraInfo, GeneratorSettings

logger = structlog.get_logger(__name__)


def render_section(section: CategorySection) -> list[str]:
    """Render a category as its header, a blank line and one numbered line per item."""
    lines = [SECTION_HEADER_TEMPLATE.format(text=section.title), ""]
    for position, item in enumerate(section.items, start=1):
        lines.append(SECTION_ITEM_TEMPLATE.format(position=position, number=item.number, url=item.url, title=item.title))
    return lines


def render_extra_info(extra_info: ExtraInfo) -> list[str]:
    """Render the extra info section."""
    return [SECTION_HEADER_TEMPLATE.format(text=extra_info.title), EXTRA_INFO_TEMPLATE.format(text=extra_info.text)]


class MarkdownRenderer:
    """Renders the final release notes document."""

    def render(self, settings: GeneratorSettings, sections: list[CategorySection]) -> str:
        """Render the header, the optional extra info and every category section."""
        lines = [HEADER_TEMPLATE.format(text=render_template(settings.header_text, settings)), ""]

        if settings.extra_info is not None:
            lines.extend(render_extra_info(settings.extra_info))
            lines.append("")

        for section in sections:
            if not section.items:
                continue
            lines.extend(render_section(section))
            lines.append("")

        logger.debug("Rendered release notes", sections=len(sections), lines=len(lines))
        return "\n".join(lines)

"""Preview text state and the in-place search filter."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from storagetui.constants.values import TITLE_PREVIEW

logger = logging.getLogger(__name__)


def apply_filter(full_text: str, term: str) -> str:
    """Keep only body lines containing ``term``, case-insensitively.

    The header is every line up to and including the first empty line; it is
    never matched and always kept. Without an empty line there is no header.
    A blank term returns ``full_text`` unchanged.
    """
    if not term.strip():
        return full_text

    lines = full_text.split("\n")
    try:
        header_end = lines.index("")
    except ValueError:
        header_end = -1

    needle = term.lower()
    matches = [line for line in lines[header_end + 1:] if needle in line.lower()]

    parts: list[str] = []
    if header_end != -1:
        parts.append("\n".join(lines[: header_end + 1]) + "\n")
    if matches:
        parts.extend(f"{line}\n" for line in matches)
    else:
        parts.append(f'No matches for "{term}".\n')
    return "".join(parts)


@dataclass
class PreviewState:
    """Full text of the current preview plus the active search term."""

    full_text: str = ""
    term: str = ""
    searchable: bool = False


class PreviewPipeline:
    """Holds the preview and derives the displayed text from it.

    The stored full text is never modified by searching; only
    ``displayed_text`` changes.
    """

    def __init__(self) -> None:
        self.state = PreviewState()

    def set_content(self, text: str, searchable: bool) -> None:
        """Replace the previewed content, keeping the active term."""
        self.state = PreviewState(full_text=text, term=self.state.term, searchable=searchable)

    def apply_search(self, term: str) -> None:
        """Set the search term; a blank term clears the filter."""
        trimmed = term.strip()
        if not trimmed:
            self.clear_search()
            return
        logger.debug("Preview filter set to %r", trimmed)
        self.state.term = trimmed

    def clear_search(self) -> None:
        self.state.term = ""

    @property
    def has_filter(self) -> bool:
        return self.state.searchable and bool(self.state.term)

    @property
    def searchable(self) -> bool:
        return self.state.searchable

    @property
    def term(self) -> str:
        return self.state.term

    @property
    def displayed_text(self) -> str:
        if self.has_filter:
            return apply_filter(self.state.full_text, self.state.term)
        return self.state.full_text

    @property
    def title(self) -> str:
        if self.has_filter:
            return f"{TITLE_PREVIEW} (filter: {self.state.term})"
        return TITLE_PREVIEW


__all__ = ["PreviewPipeline", "PreviewState", "apply_filter"]

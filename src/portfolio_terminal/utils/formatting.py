"""Link detection and escaping for scrollback text."""

from __future__ import annotations

import html
import re
from dataclasses import dataclass

URL_PATTERN = re.compile(r"https?://[^\s\]]+")


@dataclass(frozen=True)
class Segment:
    """A run of output text; ``url`` is set when the run is a link."""

    text: str
    url: str | None = None

    @property
    def is_link(self) -> bool:
        return self.url is not None


def split_links(text: str) -> list[Segment]:
    """Split text into plain and link segments.

    A link is ``http://`` or ``https://`` followed by characters that are
    neither whitespace nor ``]``.
    """
    segments: list[Segment] = []
    pos = 0
    for match in URL_PATTERN.finditer(text):
        if match.start() > pos:
            segments.append(Segment(text[pos : match.start()]))
        segments.append(Segment(match.group(), url=match.group()))
        pos = match.end()
    if pos < len(text):
        segments.append(Segment(text[pos:]))
    return segments


def find_links(text: str) -> list[str]:
    """Return every URL found in text, in order."""
    return URL_PATTERN.findall(text)


def escape_text(text: str) -> str:
    """Escape literal text for HTML, turning newlines into line breaks."""
    return html.escape(text, quote=False).replace("\n", "<br>")


def linkify_html(text: str) -> str:
    """Render output text as HTML with links opening in a new tab."""
    parts: list[str] = []
    for segment in split_links(text):
        if segment.is_link:
            href = html.escape(segment.url or "", quote=True)
            parts.append(
                f'<a href="{href}" target="_blank" rel="noopener noreferrer">'
                f"{html.escape(segment.text, quote=False)}</a>"
            )
        else:
            parts.append(escape_text(segment.text))
    return "".join(parts)


def input_width(text: str) -> int:
    """Width of the input field in character cells."""
    return max(1, len(text) + 1)

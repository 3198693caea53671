"""HTML display surface: the markup a browser page shows for the scrollback."""

from __future__ import annotations

import html

from portfolio_terminal.core.models import LineKind, ScrollbackLine
from portfolio_terminal.utils.formatting import escape_text, input_width, linkify_html

LINE_CLASSES: dict[LineKind, str] = {
    LineKind.WELCOME: "welcome-message",
    LineKind.FOOTER: "all-rights-reserved",
    LineKind.ECHO: "command-line",
    LineKind.OUTPUT: "output-line",
}

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
<div id="terminal">
{output}
<div id="input-area"><span class="prompt">{prompt}</span> <input id="input" value="{value}" style="width: {width}ch"></div>
</div>
</body>
</html>
"""


def render_line(line: ScrollbackLine) -> str:
    """Render one scrollback line as a ``<div>``.

    Echoed input is always escaped as literal text; output text is escaped
    too, except for the link markup added here.
    """
    css = LINE_CLASSES[line.kind]
    if line.kind is LineKind.ECHO:
        prompt = html.escape(line.prompt, quote=False)
        return (
            f'<div class="{css}" data-line="{line.line_id}">'
            f'<span class="prompt">{prompt}</span> {escape_text(line.text)}</div>'
        )
    return (
        f'<div class="{css}" data-line="{line.line_id}" style="white-space: pre-wrap">'
        f"{linkify_html(line.text)}</div>"
    )


class HtmlSurface:
    """Collects the scrollback as HTML fragments."""

    def __init__(self, title: str = "Portfolio Terminal") -> None:
        self.title = title
        self._fragments: dict[int, str] = {}
        self.prompt = ""
        self.input_value = ""
        self.input_width = 1
        self.scroll_position: int | None = None

    def show(self, line: ScrollbackLine) -> None:
        self._fragments[line.line_id] = render_line(line)

    def remove(self, line: ScrollbackLine) -> None:
        self._fragments.pop(line.line_id, None)

    def scroll_to_bottom(self) -> None:
        self.scroll_position = next(reversed(self._fragments), None)

    def draw_input(self, prompt: str, text: str) -> None:
        self.prompt = prompt
        self.input_value = text
        self.input_width = input_width(text)

    @property
    def fragments(self) -> list[str]:
        return list(self._fragments.values())

    def render(self) -> str:
        """Render the output region."""
        body = "\n".join(self._fragments.values())
        return f'<div id="output">\n{body}\n</div>' if body else '<div id="output"></div>'

    def document(self) -> str:
        """Render a standalone page holding the output region and input line."""
        return PAGE_TEMPLATE.format(
            title=html.escape(self.title),
            output=self.render(),
            prompt=html.escape(self.prompt, quote=False),
            value=html.escape(self.input_value, quote=True),
            width=self.input_width,
        )

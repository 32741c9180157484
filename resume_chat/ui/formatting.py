"""Text formatting helpers for chat bubbles."""

import html
import re
from datetime import datetime

_BULLET = re.compile(r"^\s*(?:[-*•])\s+(.*)$")


def _inline(text: str) -> str:
    text = re.sub(
        r"`([^`]+)`",
        r'<code class="bg-gray-200 text-pink-600 px-1.5 py-0.5 rounded text-xs">\1</code>',
        text,
    )
    text = re.sub(r"\*\*(.+?)\*\*", r"<strong>\1</strong>", text)
    return re.sub(r"(?<![\w*])\*([^*\n]+)\*(?![\w*])", r"<em>\1</em>", text)


def markdown_to_html(text: str) -> str:
    """Render the small markdown subset used in assistant replies.

    Supports bold, italic, inline code and bullet lists (``-``, ``*`` or ``•``).
    Everything else is escaped and newlines become ``<br>``.
    """
    lines: list[str] = []
    in_list = False
    for line in html.escape(text, quote=False).split("\n"):
        match = _BULLET.match(line)
        if match:
            if not in_list:
                lines.append('<ul class="list-disc list-inside my-2 space-y-1">')
                in_list = True
            lines.append(f"<li>{_inline(match.group(1))}</li>")
            continue
        if in_list:
            lines.append("</ul>")
            in_list = False
        lines.append(_inline(line) + "<br>")
    if in_list:
        lines.append("</ul>")

    rendered = "".join(lines)
    return rendered.removesuffix("<br>")


def plain_to_html(text: str) -> str:
    """Escape user text and keep its line breaks."""
    return html.escape(text, quote=False).replace("\n", "<br>")


def format_timestamp(moment: datetime) -> str:
    """Format a message time as ``03:07 PM``."""
    return moment.strftime("%I:%M %p")

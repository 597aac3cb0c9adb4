"""Markdown index of exported files."""

from collections.abc import Iterable, Sequence
from typing import Optional
from urllib.parse import quote

from ..common.logging import get_logger

logger = get_logger(__name__)

HEADER = ("File", "Link")

# Characters that end a table cell or a link label
_LABEL_ESCAPES = str.maketrans({"\\": "\\\\", "|": "\\|", "[": "\\[", "]": "\\]"})

IndexSection = tuple[Optional[str], Sequence[str], str]


def escape_label(text: str) -> str:
    """Escape text for use as a link label inside a table cell."""
    return text.translate(_LABEL_ESCAPES)


class IndexRenderer:
    """Renders exported filenames as a markdown table of links."""

    def render(self, filenames: Iterable[str], url_prefix: str) -> str:
        """Render a two-column markdown table.

        Filenames are sorted, so the output does not depend on input order.
        An empty input yields the header rows only.

        Args:
            filenames: Names of exported files
            url_prefix: URL under which the files are published

        Returns:
            Markdown text, newline-terminated
        """
        lines = [
            f"| {HEADER[0]} | {HEADER[1]} |",
            "| --- | --- |",
        ]

        for filename in sorted(filenames):
            url = self.link(filename, url_prefix)
            lines.append(f"| [{escape_label(filename)}]({url}) | [{url}]({url}) |")

        logger.debug(f"Rendered index with {len(lines) - 2} rows")
        return "\n".join(lines) + "\n"

    def render_sections(self, sections: Sequence[IndexSection]) -> str:
        """Render one table per section, each under its own URL prefix.

        A single section is rendered as a bare table. Several sections get a
        ``## title`` heading each, in the given order.

        Args:
            sections: (title, filenames, url_prefix) triples

        Returns:
            Markdown text, newline-terminated
        """
        if len(sections) == 1:
            _, filenames, url_prefix = sections[0]
            return self.render(filenames, url_prefix)

        return "\n".join(
            f"## {title}\n\n{self.render(filenames, url_prefix)}"
            for title, filenames, url_prefix in sections
        )

    @staticmethod
    def link(filename: str, url_prefix: str) -> str:
        """URL of a file under the prefix."""
        return f"{url_prefix.rstrip('/')}/{quote(filename)}"

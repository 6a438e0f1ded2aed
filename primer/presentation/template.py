"""
OutputTemplate — Consistent CLI output structure

Builder for framed command output: header, sections, footer.

Usage:
    from primer.presentation.template import OutputTemplate

    template = OutputTemplate()
    template.header("PRIMER", "Composed Prompt")
    template.section("FRAGMENTS", fragment_lines)
    template.section("PROMPT", text)
    template.footer("4 fragment(s)")
    print(template.render())
"""

import shutil
from dataclasses import dataclass
from typing import List, Optional

from .symbols import SymbolSet, get_symbols


HEADER_CHAR = "="
SECTION_CHAR = "-"
DEFAULT_WIDTH = 80
MAX_WIDTH = 100


@dataclass
class TemplateSection:
    """A titled section of output."""
    title: str
    content: str


class OutputTemplate:
    """
    Builder for structured CLI output.

    Each instance is independent; build, render, discard.
    """

    def __init__(self, symbols: Optional[SymbolSet] = None, width: Optional[int] = None):
        """
        Initialize template.

        Args:
            symbols: SymbolSet for visual elements (auto-detect if None)
            width: Border width (terminal width, capped, if None)
        """
        self.symbols = symbols or get_symbols()
        if width is None:
            width = min(shutil.get_terminal_size((DEFAULT_WIDTH, 24)).columns or DEFAULT_WIDTH, MAX_WIDTH)
        self.width = width

        self._title: Optional[str] = None
        self._subtitle: Optional[str] = None
        self._sections: List[TemplateSection] = []
        self._summary: Optional[str] = None

    def header(self, title: str, subtitle: Optional[str] = None) -> "OutputTemplate":
        self._title = title
        self._subtitle = subtitle
        return self

    def section(self, title: str, content: str) -> "OutputTemplate":
        self._sections.append(TemplateSection(title=title, content=content))
        return self

    def footer(self, summary: Optional[str] = None) -> "OutputTemplate":
        self._summary = summary
        return self

    def render(self) -> str:
        """Render template to formatted string."""
        lines: List[str] = []

        if self._title:
            border = HEADER_CHAR * self.width
            lines.append(border)
            if self._subtitle:
                lines.append(f"{self._title} - {self._subtitle}")
            else:
                lines.append(self._title)
            lines.append(border)
            lines.append("")

        for section in self._sections:
            if section.title:
                lines.append(section.title)
                lines.append(SECTION_CHAR * len(section.title))
            if section.content:
                lines.append(section.content)
            lines.append("")

        lines.append(SECTION_CHAR * self.width)
        if self._summary:
            lines.append(f"Summary: {self._summary}")
        lines.append(HEADER_CHAR * self.width)

        return "\n".join(lines)

    def format_table(self, rows: List[dict], columns: List[str], keys: Optional[List[str]] = None) -> str:
        """
        Format data as simple aligned table (grep-parseable).

        Args:
            rows: List of dicts with data
            columns: Column headers
            keys: Dict keys for columns (defaults to lowercase headers)
        """
        if not rows:
            return ""

        keys = keys or [c.lower().replace(" ", "_") for c in columns]

        widths = [len(c) for c in columns]
        for row in rows:
            for i, key in enumerate(keys):
                widths[i] = max(widths[i], len(str(row.get(key, ""))))

        lines = ["  ".join(col.ljust(widths[i]) for i, col in enumerate(columns)).rstrip()]
        for row in rows:
            lines.append("  ".join(str(row.get(key, "")).ljust(widths[i]) for i, key in enumerate(keys)).rstrip())
        return "\n".join(lines)

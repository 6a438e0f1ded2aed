"""
Menus — Text rendering for the interactive compose flow

Pure string builders. Reading input stays in the command layer.
"""

from typing import List, Optional, Sequence, Tuple

from .symbols import SymbolSet, get_symbols


def format_menu(
    title: str,
    options: Sequence[Tuple[str, str]],
    symbols: Optional[SymbolSet] = None,
    hint: Optional[str] = None,
) -> str:
    """
    Render a numbered menu.

    Args:
        title: Question shown above the options
        options: (label, description) pairs; description may be empty
        hint: Optional input hint shown below the options
    """
    symbols = symbols or get_symbols()
    width = max((len(label) for label, _ in options), default=0)

    lines: List[str] = [title, ""]
    for number, (label, description) in enumerate(options, 1):
        if description:
            lines.append(f"  {number:>2}. {label.ljust(width)}  {description}")
        else:
            lines.append(f"  {number:>2}. {label}")
    if hint:
        lines.append("")
        lines.append(f"  {symbols.arrow} {hint}")
    return "\n".join(lines)


def format_yes_no(question: str, default: bool = False) -> str:
    """Render a yes/no question with its default marked."""
    choices = "[Y/n]" if default else "[y/N]"
    return f"{question} {choices}: "


def format_selected(fragment_ids: Sequence[str], symbols: Optional[SymbolSet] = None) -> str:
    """One-line view of the current selection."""
    symbols = symbols or get_symbols()
    if not fragment_ids:
        return f"{symbols.available} (nothing selected)"
    return f"{symbols.selected} " + f" {symbols.arrow} ".join(fragment_ids)

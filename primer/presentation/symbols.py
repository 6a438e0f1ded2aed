"""
Symbols — Visual vocabulary for menus and summaries

Progressive enhancement: Unicode when supported, ASCII fallback.
Configurable via display.symbols setting.

Also provides safe output utilities:
- safe_print(): Encoding-safe printing for user-supplied text
"""

import os
import sys
from dataclasses import dataclass
from typing import Optional


# Common Unicode to ASCII replacements for display
UNICODE_TO_ASCII = {
    '→': '->',
    '←': '<-',
    '…': '...',
    '–': '-',
    '—': '--',
    '“': '"',
    '”': '"',
    '‘': "'",
    '’': "'",
    '•': '*',
    '·': '.',
    '✓': '[OK]',
    '⚠': '[!]',
}


def safe_print(text: str, end: str = '\n', file=None) -> None:
    """
    Print with graceful encoding fallback.

    Handles UnicodeEncodeError by replacing unencodable characters
    with ASCII equivalents or '?' as last resort.

    Use this when printing user-supplied content (questions, project notes).

    Args:
        text: Text to print (may contain any Unicode)
        end: String appended after text (default: newline)
        file: Output stream (default: sys.stdout)
    """
    if file is None:
        file = sys.stdout

    try:
        print(text, end=end, file=file)
    except UnicodeEncodeError:
        safe_text = text
        for unicode_char, ascii_equiv in UNICODE_TO_ASCII.items():
            safe_text = safe_text.replace(unicode_char, ascii_equiv)

        try:
            print(safe_text, end=end, file=file)
        except UnicodeEncodeError:
            # Last resort: replace all unencodable chars with ?
            encoding = getattr(file, 'encoding', 'utf-8') or 'utf-8'
            encoded = safe_text.encode(encoding, errors='replace')
            print(encoded.decode(encoding), end=end, file=file)


@dataclass(frozen=True)
class SymbolSet:
    """Symbols used by menus and the final summary."""
    # Selection states
    selected: str
    available: str

    # Status markers
    check_pass: str
    info: str
    arrow: str

    # Menu prompt marker
    prompt: str


UNICODE = SymbolSet(
    selected='●',
    available='○',
    check_pass='✓',
    info='ℹ',
    arrow='→',
    prompt='›',
)

ASCII = SymbolSet(
    selected='[*]',
    available='[ ]',
    check_pass='[OK]',
    info='[i]',
    arrow='->',
    prompt='>',
)


def supports_unicode() -> bool:
    """
    Check if environment likely supports Unicode output.

    Conservative: defaults to ASCII if uncertain.
    Checks stdout encoding first (most reliable on Windows).
    """
    # Explicit environment override
    if os.environ.get('PRIMER_ASCII_ONLY', '').lower() in ('1', 'true', 'yes'):
        return False
    if os.environ.get('PRIMER_UNICODE', '').lower() in ('1', 'true', 'yes'):
        return True

    stdout_encoding = getattr(sys.stdout, 'encoding', None)
    if stdout_encoding:
        encoding_lower = stdout_encoding.lower().replace('-', '').replace('_', '')
        # Windows code pages that don't support our Unicode symbols
        if encoding_lower.startswith('cp') or encoding_lower in ('ascii', 'latin1', 'iso88591'):
            return False

    lang = os.environ.get('LANG', '').lower()
    lc_all = os.environ.get('LC_ALL', '').lower()

    if 'utf-8' in lang or 'utf8' in lang:
        return True
    if 'utf-8' in lc_all or 'utf8' in lc_all:
        return True

    # Known good terminals
    term_program = os.environ.get('TERM_PROGRAM', '')
    if term_program in ('vscode', 'iTerm.app', 'Apple_Terminal', 'Hyper'):
        return True

    # Windows Terminal
    if os.environ.get('WT_SESSION'):
        return True

    if stdout_encoding and 'utf' in stdout_encoding.lower():
        return True

    return False


def get_symbols(preference: Optional[str] = None) -> SymbolSet:
    """
    Get appropriate symbol set based on preference or auto-detection.

    Args:
        preference: "unicode", "ascii", or "auto" (None = auto)

    Returns:
        Appropriate SymbolSet for the environment
    """
    if preference == 'unicode':
        return UNICODE
    if preference == 'ascii':
        return ASCII
    return UNICODE if supports_unicode() else ASCII

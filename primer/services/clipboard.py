"""
Clipboard — Best-effort copy of the composed prompt

External collaborator, not part of composition. Any failure
(no clipboard mechanism, headless session, OS error) becomes a message;
the prompt that was already printed is unaffected.
"""

from typing import Tuple

import pyperclip


def copy_to_clipboard(text: str) -> Tuple[bool, str]:
    """
    Copy text to the system clipboard.

    Returns:
        (copied, message) - message is suitable for direct display
    """
    try:
        pyperclip.copy(text)
    except (pyperclip.PyperclipException, OSError) as e:
        detail = str(e).splitlines()[0] if str(e) else type(e).__name__
        return False, f"Could not copy to clipboard ({detail}). Copy the prompt above manually."
    return True, "Prompt copied to clipboard."

"""
System clipboard access.

Text is piped on stdin to the first copy utility found on PATH.
"""

import logging
import shutil
import subprocess

logger = logging.getLogger(__name__)

# Tried in order; the first one found on PATH is used
CLIPBOARD_COMMANDS = [
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["clip"],
]

CLIPBOARD_TIMEOUT = 10.0


class ClipboardError(Exception):
    """Raised when text cannot be written to the clipboard."""

    pass


def find_clipboard_command() -> list[str] | None:
    """Return the first available clipboard command, or None."""
    for cmd in CLIPBOARD_COMMANDS:
        if shutil.which(cmd[0]):
            return cmd
    return None


def copy_to_clipboard(text: str) -> None:
    """
    Write text to the system clipboard.

    Args:
        text: Text to copy.

    Raises:
        ClipboardError: If no clipboard utility is available or it fails.
    """
    cmd = find_clipboard_command()
    if cmd is None:
        raise ClipboardError("No clipboard utility found")
    logger.debug("Copying %d characters with %s", len(text), cmd[0])
    try:
        subprocess.run(
            cmd,
            input=text,
            text=True,
            capture_output=True,
            check=True,
            timeout=CLIPBOARD_TIMEOUT,
        )
    except subprocess.CalledProcessError as e:
        raise ClipboardError(
            f"{cmd[0]} exited with status {e.returncode}: {e.stderr.strip()}"
        ) from e
    except (OSError, subprocess.TimeoutExpired) as e:
        raise ClipboardError(f"{cmd[0]} failed: {e}") from e

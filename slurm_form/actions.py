"""
Script actions.

This module wires the generate, copy and download actions to the
renderer. The raw script is what gets copied and downloaded; only the
display text is HTML-escaped.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from slurm_form.clipboard import ClipboardError, copy_to_clipboard
from slurm_form.script.escaping import escape_html
from slurm_form.script.renderer import render_script
from slurm_form.script.request import JobRequest

logger = logging.getLogger(__name__)

COPY_FAILED_MESSAGE = "Failed to copy to clipboard"
COPY_SUCCESS_MESSAGE = "Copied!"


class UnknownActionError(KeyError):
    """Raised when dispatching an action that does not exist."""

    pass


@dataclass(frozen=True)
class RenderedScript:
    """A rendered script and its display form."""

    raw: str

    @property
    def display(self) -> str:
        """Script escaped for placing in a page."""
        return f"<code>{escape_html(self.raw)}</code>"


def script_filename(job_name: str) -> str:
    """File name for a downloaded script, with path separators replaced."""
    return job_name.replace("/", "_").replace("\\", "_") + ".sh"


def _ignore(message: str) -> None:
    pass


class ScriptActions:
    """Action name -> handler table for the script form."""

    def __init__(
        self,
        form_provider: Callable[[], Mapping[str, Any]],
        download_dir: str | Path = ".",
        clipboard: Callable[[str], None] | None = None,
        alert: Callable[[str], None] = _ignore,
        notify: Callable[[str], None] = _ignore,
    ) -> None:
        """
        Args:
            form_provider: Returns the current form values when called.
            download_dir: Directory that downloaded scripts are written to.
            clipboard: Writes text to the clipboard, raising ClipboardError.
                Defaults to the system clipboard.
            alert: Shows a failure message to the user.
            notify: Shows a success message to the user.
        """
        self.form_provider = form_provider
        self.download_dir = Path(download_dir)
        self.clipboard = clipboard or copy_to_clipboard
        self.alert = alert
        self.notify = notify
        self.handlers: dict[str, Callable[[], Any]] = {
            "generate": self.generate,
            "copy": self.copy,
            "download": self.download,
        }

    def dispatch(self, name: str) -> Any:
        """
        Run an action by name.

        Raises:
            UnknownActionError: If no handler is registered for name.
        """
        try:
            handler = self.handlers[name]
        except KeyError:
            raise UnknownActionError(name) from None
        logger.debug("Dispatching action '%s'", name)
        return handler()

    def generate(self) -> RenderedScript:
        """Render the script from the current form values."""
        return self._render(JobRequest.from_form(self.form_provider()))

    def _render(self, request: JobRequest) -> RenderedScript:
        return RenderedScript(raw=render_script(request))

    def copy(self) -> bool:
        """
        Copy the raw script to the clipboard.

        Returns:
            True if the copy succeeded, False otherwise.
        """
        rendered = self.generate()
        try:
            self.clipboard(rendered.raw)
        except ClipboardError as e:
            logger.error("Failed to copy: %s", e)
            self.alert(COPY_FAILED_MESSAGE)
            return False
        self.notify(COPY_SUCCESS_MESSAGE)
        return True

    def download(self) -> Path:
        """
        Write the raw script to <job-name>.sh in the download directory.

        Returns:
            Path to the written script.
        """
        request = JobRequest.from_form(self.form_provider())
        rendered = self._render(request)
        self.download_dir.mkdir(parents=True, exist_ok=True)
        script_path = self.download_dir / script_filename(request.job_name)
        script_path.write_text(rendered.raw, encoding="utf-8")
        logger.info("Wrote script to %s", script_path)
        return script_path

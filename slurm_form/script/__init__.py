"""
Slurm script rendering.

This package turns job form values into Slurm batch scripts and
provides the escaping used for script values and page display.
"""

from slurm_form.script.escaping import escape_html, escape_shell
from slurm_form.script.renderer import render_script
from slurm_form.script.request import FORM_FIELDS, JobRequest

__all__ = [
    "JobRequest",
    "FORM_FIELDS",
    "render_script",
    "escape_shell",
    "escape_html",
]

"""
Job request definition.

This module defines the record of form values used to render a job
script, and the mapping between form keys and record fields.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

# Form key -> JobRequest attribute
FORM_FIELDS = {
    "job-name": "job_name",
    "account": "account",
    "qos": "qos",
    "partition": "partition",
    "time": "time",
    "nodes": "nodes",
    "ntasks": "ntasks_per_node",
    "cpus": "cpus_per_task",
    "memory": "mem_per_cpu",
    "gpus": "gpus",
    "workdir": "workdir",
    "email": "email",
    "mail-begin": "mail_begin",
    "mail-end": "mail_end",
    "mail-fail": "mail_fail",
    "modules": "modules",
    "commands": "commands",
}

CHECKBOX_FIELDS = frozenset({"mail-begin", "mail-end", "mail-fail"})

DEFAULT_JOB_NAME = "my-job"

_CHECKED_VALUES = frozenset({"on", "true", "yes", "1"})
_LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?[0-9]+)")


@dataclass(frozen=True)
class JobRequest:
    """Values for a single job script, with form defaults applied."""

    job_name: str = DEFAULT_JOB_NAME
    account: str = ""
    qos: str = ""
    partition: str = "normal"
    time: str = "01:00:00"
    nodes: str = "1"
    ntasks_per_node: str = "1"
    cpus_per_task: str = "1"
    mem_per_cpu: str = "4G"
    gpus: str = "0"
    workdir: str = ""
    email: str = ""
    mail_begin: bool = False
    mail_end: bool = False
    mail_fail: bool = False
    modules: str = ""
    commands: str = ""

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "JobRequest":
        """
        Build a request from a mapping of form keys to values.

        Blank values fall back to the field default. Keys that are not
        form fields are ignored.

        Args:
            form: Current form values keyed by form key (e.g. "job-name").

        Returns:
            JobRequest with defaults applied.
        """
        values = {}
        for key, attr in FORM_FIELDS.items():
            value = form.get(key)
            if key in CHECKBOX_FIELDS:
                values[attr] = is_checked(value)
            elif value is not None and value != "":
                values[attr] = str(value)
        return cls(**values)

    @property
    def mail_types(self) -> list[str]:
        """Mail event types in BEGIN, END, FAIL order."""
        flags = [
            ("BEGIN", self.mail_begin),
            ("END", self.mail_end),
            ("FAIL", self.mail_fail),
        ]
        return [name for name, checked in flags if checked]

    @property
    def gpu_count(self) -> int | None:
        """GPU count parsed from the leading integer, or None if not a number."""
        return parse_int(self.gpus)

    @property
    def module_names(self) -> list[str]:
        """Non-blank module lines, trimmed, in input order."""
        return [line.strip() for line in self.modules.split("\n") if line.strip()]


def is_checked(value: Any) -> bool:
    """Interpret a checkbox form value."""
    if isinstance(value, str):
        return value.strip().lower() in _CHECKED_VALUES
    return bool(value)


def parse_int(text: str) -> int | None:
    """
    Parse the leading integer of a string.

    Args:
        text: Text such as "3", " 2 ", "3abc" or "1.5".

    Returns:
        The parsed integer, or None if text does not start with digits.
    """
    match = _LEADING_INT_PATTERN.match(text)
    if match is None:
        return None
    return int(match.group(1))

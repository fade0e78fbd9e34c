"""
Job form files.

This module loads job form values from YAML files, checking that only
known form keys with scalar values are present.
"""

from pathlib import Path
from typing import Any

import yaml

from slurm_form.script.request import FORM_FIELDS


class ConfigError(Exception):
    """Raised when a form file cannot be parsed or validated."""

    pass


def load_form(path: str | Path) -> dict[str, Any]:
    """
    Load job form values from a YAML file.

    Scalars are read as strings, so values such as 12:00:00 or "no" reach
    the script exactly as written.

    Args:
        path: Path to the YAML form file.

    Returns:
        Mapping of form key to value. An empty file gives an empty mapping.

    Raises:
        ConfigError: If the file is not valid YAML or has invalid entries.
        FileNotFoundError: If the form file doesn't exist.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Form file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.load(f, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in form file: {e}")

    if data is None:
        return {}
    return _parse_form(data)


def _parse_form(data: Any) -> dict[str, Any]:
    """
    Validate parsed YAML form data.

    Args:
        data: Object returned by the YAML parser.

    Returns:
        Validated form mapping.

    Raises:
        ConfigError: If data is not a mapping of known keys to scalars.
    """
    if not isinstance(data, dict):
        raise ConfigError("Form file must contain a mapping of form fields")

    unknown = sorted(str(key) for key in data if key not in FORM_FIELDS)
    if unknown:
        raise ConfigError(
            f"Unknown form field(s): {', '.join(unknown)}. "
            f"Valid fields: {', '.join(FORM_FIELDS)}"
        )

    for key, value in data.items():
        if isinstance(value, (dict, list)):
            raise ConfigError(f"Form field '{key}' must be a single value")
    return dict(data)


def create_example_form(output_path: str | Path) -> None:
    """
    Create an example form file with documentation.

    Args:
        output_path: Where to write the example form.
    """
    example = """# Slurm job form
# Any field left out or empty uses the default shown.

# =============================================================================
# JOB
# =============================================================================
job-name: my-job

# Optional account and quality of service
# account: my-project
# qos: normal

partition: normal

# Time limit (HH:MM:SS)
time: "01:00:00"

# =============================================================================
# RESOURCES
# =============================================================================
nodes: 1
ntasks: 1
cpus: 1

# Memory per CPU
memory: 4G

# GPUs per node; 0 requests none
gpus: 0

# =============================================================================
# ENVIRONMENT
# =============================================================================
# Directory to cd into before running
# workdir: /path/to/work

# Email notifications; mail-type is only added when a flag is set
# email: user@example.com
mail-begin: false
mail-end: false
mail-fail: false

# One module per line
# modules: |
#   gcc/11
#   openmpi

# =============================================================================
# COMMANDS - Copied into the script as-is
# =============================================================================
# commands: |
#   srun ./my_program
"""
    Path(output_path).write_text(example)

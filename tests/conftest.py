"""Pytest fixtures and configuration for slurm_form tests."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def full_form() -> dict:
    """Return a form with every field filled in."""
    return {
        "job-name": "sim",
        "account": "proj-42",
        "qos": "high",
        "partition": "gpu",
        "time": "12:00:00",
        "nodes": "2",
        "ntasks": "4",
        "cpus": "8",
        "memory": "2G",
        "gpus": "2",
        "workdir": "/scratch/sim",
        "email": "user@example.com",
        "mail-begin": True,
        "mail-end": True,
        "mail-fail": True,
        "modules": "gcc/11\nopenmpi",
        "commands": "srun ./sim --steps 100",
    }

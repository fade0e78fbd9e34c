"""Generate Slurm batch submission scripts from job form values."""

__version__ = "0.1.0"

"""
Slurm batch script rendering.

This module turns a JobRequest into the text of a Slurm submission
script: SBATCH directives followed by a bash body that reports job
information, loads modules, runs the user's commands and prints
resource usage at the end.
"""

from slurm_form.script.escaping import escape_shell
from slurm_form.script.request import JobRequest

SEPARATOR_ECHO = 'echo "========================================"'

SACCT_COMMAND = (
    'sacct -j "$SLURM_JOB_ID" '
    "--format=JobID,JobName,Partition,AllocCPUS,State,ExitCode,Elapsed,MaxRSS,MaxVMSize "
    '2>/dev/null || echo "Resource usage data not yet available"'
)


def render_script(request: JobRequest) -> str:
    """
    Render the complete Slurm batch script for a request.

    Args:
        request: Job values with defaults applied.

    Returns:
        Script text ending with a newline.
    """
    lines = _generate_header(request)
    lines.extend(_generate_workdir(request))
    lines.extend(_generate_job_info())
    lines.extend(_generate_modules(request))
    lines.extend(_generate_commands(request))
    lines.extend(_generate_completion())
    return "\n".join(lines) + "\n"


def _directive(key: str, value: str) -> str:
    """Format a single-quoted SBATCH directive."""
    return f"#SBATCH --{key}='{escape_shell(value)}'"


def _generate_header(request: JobRequest) -> list[str]:
    """Generate the shebang and SBATCH directives."""
    header = ["#!/bin/bash", "", _directive("job-name", request.job_name)]
    if request.account:
        header.append(_directive("account", request.account))
    header.append(_directive("partition", request.partition))
    if request.qos:
        header.append(_directive("qos", request.qos))
    header.extend(
        [
            _directive("time", request.time),
            _directive("nodes", request.nodes),
            _directive("ntasks-per-node", request.ntasks_per_node),
            _directive("cpus-per-task", request.cpus_per_task),
            _directive("mem-per-cpu", request.mem_per_cpu),
        ]
    )
    gpu_count = request.gpu_count
    if gpu_count is not None and gpu_count > 0:
        header.append(f"#SBATCH --gres=gpu:'{escape_shell(request.gpus)}'")
    header.append("#SBATCH --output=%x-%j.out")
    header.append("#SBATCH --error=%x-%j.err")
    if request.email:
        header.append(_directive("mail-user", request.email))
        mail_types = request.mail_types
        if mail_types:
            header.append(f"#SBATCH --mail-type={','.join(mail_types)}")
    return header


def _generate_workdir(request: JobRequest) -> list[str]:
    """Generate the optional working directory change."""
    lines = ["", "# Set working directory (if specified)"]
    if request.workdir:
        lines.append(f"cd '{escape_shell(request.workdir)}' || exit 1")
    lines.append("")
    return lines


def _generate_job_info() -> list[str]:
    """Generate the job information echoes."""
    return [
        "# Job information",
        SEPARATOR_ECHO,
        'echo "Job started on $(date)"',
        'echo "Job ID: $SLURM_JOB_ID"',
        'echo "Running on node(s): $SLURM_NODELIST"',
        'echo "Working directory: $(pwd)"',
        SEPARATOR_ECHO,
        'echo ""',
        "",
    ]


def _generate_modules(request: JobRequest) -> list[str]:
    """Generate the module purge and load block."""
    module_names = request.module_names
    if not module_names:
        return []
    lines = [
        "# Purge and load modules",
        "# Note: module purge may unload system modules; remove if not desired",
        "module purge",
    ]
    lines.extend(f"module load '{escape_shell(name)}'" for name in module_names)
    lines.extend(['echo "Loaded modules:"', "module list 2>&1", 'echo ""', ""])
    return lines


def _generate_commands(request: JobRequest) -> list[str]:
    """Generate the user command block. Commands are not escaped."""
    commands = request.commands.strip()
    if not commands:
        return []
    return [
        "# Execute commands",
        "# WARNING: Commands are executed as-is without escaping",
        commands,
        "",
    ]


def _generate_completion() -> list[str]:
    """Generate the completion echoes and resource usage report."""
    return [
        "# Job completion and resource usage",
        'echo ""',
        SEPARATOR_ECHO,
        'echo "Job completed on $(date)"',
        SEPARATOR_ECHO,
        "",
        "# Display resource usage (wait for accounting data to be available)",
        "# Note: Delay is system-dependent; increase if data is not available",
        "sleep 5",
        SACCT_COMMAND,
    ]

"""
Command-line interface for slurm_form.

This module provides commands for generating Slurm batch scripts from
job form values, previewing them as HTML, and managing the theme and
form files.
"""

import sys
from pathlib import Path
from typing import Any

import click

from slurm_form.actions import ScriptActions
from slurm_form.config import ConfigError, create_example_form, load_form
from slurm_form.log import setup_logging
from slurm_form.page import render_page
from slurm_form.preferences import THEMES, ThemePreference
from slurm_form.script.request import FORM_FIELDS, JobRequest

# CLI option parameter -> form key
OPTION_FIELDS = {
    "job_name": "job-name",
    "account": "account",
    "qos": "qos",
    "partition": "partition",
    "time": "time",
    "nodes": "nodes",
    "ntasks": "ntasks",
    "cpus": "cpus",
    "memory": "memory",
    "gpus": "gpus",
    "workdir": "workdir",
    "email": "email",
    "mail_begin": "mail-begin",
    "mail_end": "mail-end",
    "mail_fail": "mail-fail",
}

_FORM_OPTIONS = [
    click.option("--form", "form_file", type=click.Path(exists=True), help="YAML form file"),
    click.option("--job-name", default=None, help="Job name (default: my-job)"),
    click.option("--account", default=None, help="Account to charge"),
    click.option("--qos", default=None, help="Quality of service"),
    click.option("--partition", default=None, help="Partition (default: normal)"),
    click.option("--time", default=None, help="Time limit (default: 01:00:00)"),
    click.option("--nodes", default=None, help="Number of nodes (default: 1)"),
    click.option("--ntasks", default=None, help="Tasks per node (default: 1)"),
    click.option("--cpus", default=None, help="CPUs per task (default: 1)"),
    click.option("--memory", default=None, help="Memory per CPU (default: 4G)"),
    click.option("--gpus", default=None, help="GPUs per node (default: 0)"),
    click.option("--workdir", default=None, help="Working directory"),
    click.option("--email", default=None, help="Email for notifications"),
    click.option("--mail-begin/--no-mail-begin", default=None, help="Email when the job begins"),
    click.option("--mail-end/--no-mail-end", default=None, help="Email when the job ends"),
    click.option("--mail-fail/--no-mail-fail", default=None, help="Email when the job fails"),
    click.option("--module", "modules", multiple=True, help="Module to load (repeatable)"),
    click.option("--commands", default=None, help="Commands to run, copied as-is"),
    click.option(
        "--commands-file",
        type=click.Path(exists=True),
        default=None,
        help="File with commands to run, copied as-is",
    ),
]


def form_options(func):
    """Add the job form options to a command."""
    for option in reversed(_FORM_OPTIONS):
        func = option(func)
    return func


def _collect_form(options: dict[str, Any]) -> dict[str, Any]:
    """
    Build form values from a form file and CLI options.

    CLI options override form file values.
    """
    form_file = options.pop("form_file", None)
    form: dict[str, Any] = {}
    if form_file is not None:
        try:
            form.update(load_form(form_file))
        except (ConfigError, FileNotFoundError) as e:
            raise click.ClickException(f"Form error: {e}")

    for param, key in OPTION_FIELDS.items():
        value = options.get(param)
        if value is not None:
            form[key] = value

    modules = options.get("modules")
    if modules:
        form["modules"] = "\n".join(modules)

    commands_file = options.get("commands_file")
    if commands_file is not None:
        form["commands"] = Path(commands_file).read_text(encoding="utf-8")
    elif options.get("commands") is not None:
        form["commands"] = options["commands"]
    return form


def _alert(message: str) -> None:
    click.echo(f"Error: {message}", err=True)


def _notify(message: str) -> None:
    click.echo(message, err=True)


@click.group()
@click.option("-v", "--verbose", count=True, help="Increase log verbosity")
@click.option("--log-file", type=click.Path(), default=None, help="Also log to this file")
def cli(verbose: int, log_file: str | None) -> None:
    """Slurm batch script generator."""
    setup_logging(verbosity=verbose, log_file=log_file)


@cli.command()
@form_options
@click.option(
    "--download",
    "download_dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Write <job-name>.sh to this directory",
)
@click.option("--copy", is_flag=True, help="Copy the script to the clipboard")
@click.option("--html", is_flag=True, help="Print the HTML-escaped display form")
def generate(download_dir: str | None, copy: bool, html: bool, **options: Any) -> None:
    """
    Generate a Slurm batch script.

    Prints the script to stdout unless --download or --copy is given.
    """
    values = _collect_form(options)
    actions = ScriptActions(
        lambda: values,
        download_dir=download_dir or ".",
        alert=_alert,
        notify=_notify,
    )

    if download_dir is not None:
        path = actions.dispatch("download")
        print(f"Saved script to {path}")
    if copy and not actions.dispatch("copy"):
        sys.exit(1)
    if download_dir is None and not copy:
        rendered = actions.dispatch("generate")
        click.echo(rendered.display if html else rendered.raw, nl=False)


@cli.command()
@form_options
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None, help="Output HTML file")
@click.option("--preferences", type=click.Path(dir_okay=False), default=None, help="Preferences file")
def page(output: str | None, preferences: str | None, **options: Any) -> None:
    """Write an HTML preview page of the script."""
    values = _collect_form(options)
    saved_theme = ThemePreference(preferences).load()
    rendered = ScriptActions(lambda: values).dispatch("generate")
    html = render_page(rendered, theme=saved_theme)
    if output is None:
        click.echo(html, nl=False)
        return
    Path(output).write_text(html, encoding="utf-8")
    print(f"Saved preview to {output}")


# =============================================================================
# Theme commands
# =============================================================================


@cli.group()
def theme() -> None:
    """Theme preference commands."""
    pass


_preferences_option = click.option(
    "--preferences", type=click.Path(dir_okay=False), default=None, help="Preferences file"
)


@theme.command("show")
@_preferences_option
def theme_show(preferences: str | None) -> None:
    """Show the saved theme."""
    print(ThemePreference(preferences).load())


@theme.command("toggle")
@_preferences_option
def theme_toggle(preferences: str | None) -> None:
    """Switch between light and dark."""
    pref = ThemePreference(preferences)
    pref.load()
    print(pref.toggle(not pref.is_dark))


@theme.command("set")
@click.argument("name", type=click.Choice(THEMES))
@_preferences_option
def theme_set(name: str, preferences: str | None) -> None:
    """Save a theme."""
    ThemePreference(preferences).set(name)
    print(name)


# =============================================================================
# Form commands
# =============================================================================


@cli.group()
def form() -> None:
    """Form file management commands."""
    pass


@form.command("init")
@click.option("--output", "-o", default="job.yml", help="Output path for form file")
@click.option("--force", "-f", is_flag=True, help="Overwrite existing form file")
def form_init(output: str, force: bool) -> None:
    """Generate an example form file."""
    output_path = Path(output)
    if output_path.exists() and not force:
        raise click.ClickException(
            f"Form file already exists: {output_path}\n"
            "Use --force to overwrite."
        )
    create_example_form(output_path)
    print(f"Created example form file: {output_path}")
    print(f"Generate the script with: slurm-form generate --form {output_path}")


@form.command("show")
@click.argument("form_file", type=click.Path(exists=True))
def form_show(form_file: str) -> None:
    """
    Show form values with defaults applied.

    FORM_FILE: Path to the YAML form file.
    """
    try:
        request = JobRequest.from_form(load_form(form_file))
    except ConfigError as e:
        raise click.ClickException(f"Form error: {e}")
    for key, attr in FORM_FIELDS.items():
        value = getattr(request, attr)
        if isinstance(value, str) and "\n" in value:
            print(f"  {key}:")
            for line in value.strip().split("\n"):
                print(f"    {line}")
        else:
            print(f"  {key}: {value if value != '' else '(not set)'}")


if __name__ == "__main__":
    cli()

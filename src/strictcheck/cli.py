from __future__ import annotations

import runpy
from pathlib import Path

import typer

from strictcheck.style import ColorMode

app = typer.Typer(name="strictcheck", help="Run strict boolean test groups")

EXAMPLE_CONFIG = """\
# Colored output: auto (only on a terminal), always, or never
color: auto

# What an exception inside a test expression does:
#   raise - abort the group and propagate
#   fail  - count the expression as failed and keep going
on_error: raise

# Optional debug log, relative to this file
# debug_log: strictcheck-debug.log
"""


@app.command()
def run(
    script: str = typer.Argument(help="Python file that calls run_group"),
    config: str | None = typer.Option(None, help="Path to strictcheck YAML config"),
    color: ColorMode | None = typer.Option(None, help="Override the color mode"),
    on_error: str | None = typer.Option(
        None, "--on-error", help="Override the exception policy (raise or fail)"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Execute a script with a configured runner; exit 1 if any group failed."""
    from pydantic import ValidationError

    from strictcheck.config import RunnerSettings, load_config
    from strictcheck.runner import TestRunner, use_runner

    script_path = Path(script)
    if not script_path.exists():
        typer.echo(f"Error: script not found: {script}", err=True)
        raise typer.Exit(1)

    overrides: dict[str, object] = {}
    if color is not None:
        overrides["color"] = color
    if on_error is not None:
        overrides["on_error"] = on_error
    if verbose:
        overrides["verbose"] = True

    try:
        if config is not None:
            config_path = Path(config)
            if not config_path.exists():
                typer.echo(f"Error: config file not found: {config}", err=True)
                raise typer.Exit(1)
            base = load_config(config_path).model_dump()
        else:
            base = {}
        settings = RunnerSettings(**{**base, **overrides})
    except (ValidationError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    runner = TestRunner.from_settings(settings, track_failures=True)
    with use_runner(runner):
        runpy.run_path(str(script_path), run_name="__main__")

    if runner.failed_groups:
        typer.echo(f"Failed groups: {', '.join(runner.failed_groups)}", err=True)
        raise typer.Exit(1)


@app.command()
def init(
    dir: str = typer.Option(".", "--dir", help="Directory to write strictcheck.yaml in"),
):
    """Write an example strictcheck.yaml."""
    project_dir = Path(dir)
    if not project_dir.exists():
        project_dir.mkdir(parents=True, exist_ok=True)

    example = project_dir / "strictcheck.yaml"
    if example.exists():
        typer.echo(f"strictcheck.yaml already exists in {dir}, skipping.")
        return

    example.write_text(EXAMPLE_CONFIG)
    typer.echo(f"Wrote {example}")

from __future__ import annotations

import ast
from pathlib import Path

import typer

app = typer.Typer(name="playcheck", help="Run and validate annotated tutorial pages")


@app.command()
def run(
    config: str = typer.Argument(help="Path to playbook YAML config"),
    page: str | None = typer.Option(None, help="Run only this page"),
    mode: str = typer.Option(
        "solved", "--mode", "-m", help="Presentation mode: solved or exercise"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
    debug_log: str | None = typer.Option(
        None, "--debug-log", help="Append debug output to this file"
    ),
):
    """Run playbook pages, printing each check as it happens."""
    import yaml

    from playcheck.config import PresentationMode, load_config
    from playcheck.runner import PageRunner
    from playcheck.verbose import setup_logger, teardown_logger

    config_path = Path(config)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(1)

    try:
        presentation = PresentationMode(mode)
    except ValueError:
        typer.echo(f"Error: unknown mode '{mode}' (use solved or exercise)", err=True)
        raise typer.Exit(1)

    try:
        playbook = load_config(config_path)
    except (ValueError, yaml.YAMLError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    logger = setup_logger(
        Path(debug_log) if debug_log else None,
        verbose=verbose,
    )
    try:
        runner = PageRunner(
            config=playbook,
            mode=presentation,
            page_filter=page,
            logger=logger,
        )
        outcomes = runner.execute()
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    finally:
        teardown_logger(logger)

    # Check failures are reported inline; only crashed pages affect the exit code
    crashed = [o for o in outcomes if o.crashed]
    for outcome in crashed:
        typer.echo(f"Error: page '{outcome.name}' crashed: {outcome.error}", err=True)
    if crashed:
        raise typer.Exit(1)


@app.command()
def pages(
    config: str = typer.Argument(help="Path to playbook YAML config"),
):
    """List the pages in a playbook and the modes each offers."""
    import yaml

    from playcheck.config import load_config

    config_path = Path(config)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(1)

    try:
        playbook = load_config(config_path)
    except (ValueError, yaml.YAMLError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(playbook.title)
    for entry in playbook.pages:
        modes = ", ".join(m.value for m in entry.modes)
        line = f"  {entry.name} [{modes}]"
        if entry.description:
            line = f"{line} - {entry.description}"
        typer.echo(line)


@app.command()
def describe(
    literal: str = typer.Argument(help="Python literal, e.g. 12 or \"{'a': [1, 2]}\""),
):
    """Print a literal together with its runtime type."""
    from playcheck.describe import describe as describe_value

    try:
        value = ast.literal_eval(literal)
    except (ValueError, SyntaxError) as e:
        typer.echo(f"Error: not a Python literal: {literal} ({e})", err=True)
        raise typer.Exit(1)

    typer.echo(describe_value(value))


def main():
    app()

"""Thin CLI wrapper — Typer commands that delegate to the use case.

Exit status of ``check``: 0 when no errors were found (warnings allowed) or
there was nothing to check, 1 on any error or a missing target directory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from wowui_xml_lint.application.use_cases.validate_addon import ValidateAddonUseCase
from wowui_xml_lint.config.loader import get_config, load_config, write_default_config
from wowui_xml_lint.config.models import LintConfig
from wowui_xml_lint.domain.errors import ConfigurationError, TargetDirectoryNotFoundError
from wowui_xml_lint.presentation.cli.formatters import (
    banner,
    console,
    error_message,
    file_report,
    json_panel,
    notice,
    rules_table,
    run_summary,
    success_panel,
)
from wowui_xml_lint.rules.engine import default_rules

app = typer.Typer(
    name="wowui-xml-lint",
    help="Validate World of Warcraft addon UI XML files.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="Inspect or create a configuration file.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

# ---------------------------------------------------------------------------
# wowui-xml-lint check
# ---------------------------------------------------------------------------


@app.command()
def check(
    directory: Annotated[
        Optional[Path],
        typer.Argument(help="Addon directory to scan (default: LayoutLedger)"),
    ] = None,
    config: Annotated[
        Optional[str], typer.Option("--config", "-c", help="Path to a JSON configuration file")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log each validation stage")
    ] = False,
) -> None:
    """Validate every XML file under the addon directory."""
    _configure_logging(verbose)
    cfg = _load_or_exit(config)
    target = directory or cfg.discovery.target_path

    banner(target)
    try:
        result = ValidateAddonUseCase(config=cfg).execute(target)
    except TargetDirectoryNotFoundError as e:
        error_message(f"Error: {e}")
        raise typer.Exit(code=1)

    if not result.files:
        notice("No XML files found")
        raise typer.Exit(code=0)

    console.print(f"Found {len(result.files)} XML file(s)\n")
    for report in result.reports:
        file_report(report)

    run_summary(result.tally)
    raise typer.Exit(code=result.exit_code)


# ---------------------------------------------------------------------------
# wowui-xml-lint rules
# ---------------------------------------------------------------------------


@app.command()
def rules() -> None:
    """List the dialect rules applied to every well-formed file."""
    rules_table(default_rules())


# ---------------------------------------------------------------------------
# wowui-xml-lint config show / init / validate
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(
    config: Annotated[
        Optional[str], typer.Option("--config", "-c", help="Path to a JSON configuration file")
    ] = None,
) -> None:
    """Show the active configuration."""
    cfg = _load_or_exit(config)
    json_panel(cfg.model_dump_json(indent=2))


@config_app.command("init")
def config_init(
    dest: Annotated[
        Path, typer.Argument(help="Destination file (default: wowui-xml-lint.json)")
    ] = Path("wowui-xml-lint.json"),
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite an existing file")
    ] = False,
) -> None:
    """Write the default configuration to DEST for editing."""
    try:
        write_default_config(dest, overwrite=force)
    except FileExistsError as e:
        error_message(f"{e} (use --force to overwrite)")
        raise typer.Exit(code=1)

    success_panel(
        f"Configuration written to: [bold green]{dest}[/]\n\n"
        "Edit it and pass it with [bold]--config[/]:\n"
        f'  wowui-xml-lint check --config "{dest}"'
    )


@config_app.command("validate")
def config_validate(
    config_file: Annotated[str, typer.Argument(help="JSON configuration file to validate")],
) -> None:
    """Validate a JSON configuration file."""
    cfg = _load_or_exit(config_file)
    success_panel(
        "Configuration is valid\n\n"
        f"  Target directory: [cyan]{cfg.discovery.target_dir}[/]\n"
        f"  Excluded: [cyan]{', '.join(cfg.discovery.excluded_dirs) or '-'}[/]\n"
        f"  Root element: [cyan]<{cfg.dialect.root_element}>[/]",
        title="Validation",
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_or_exit(config: Optional[str]) -> LintConfig:
    """Load *config* (or the default), exiting with status 1 when it is unusable."""
    try:
        return _load(config)
    except ConfigurationError as e:
        error_message(str(e))
        raise typer.Exit(code=1)


def _load(config: Optional[str]) -> LintConfig:
    try:
        return load_config(Path(config)) if config else get_config()
    except FileNotFoundError as e:
        raise ConfigurationError(str(e)) from e
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration {config}:\n{e}") from e


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


if __name__ == "__main__":
    app()

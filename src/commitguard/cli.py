"""commitguard CLI — Typer application with lint, rules, print-config and init."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from commitguard import __version__
from commitguard.config.schema import OUTPUT_FORMATS

app = typer.Typer(
    name="commitguard",
    help="Lint commit messages against a configurable rule set.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _load(config: Optional[str]):
    """Load config from the working directory, exit 2 on failure."""
    from commitguard.config.loader import ConfigError, load_config

    try:
        return load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc


def _custom_dir(cfg) -> Path:
    from commitguard.rules.registry import CUSTOM_RULES_DIR

    root = Path(cfg.source).parent if cfg.source else Path.cwd()
    return root / CUSTOM_RULES_DIR


def _resolve(cfg):
    from commitguard.config.resolver import resolve
    from commitguard.config.schema import ConfigurationError

    try:
        return resolve(cfg.declared, custom_dir=_custom_dir(cfg))
    except ConfigurationError as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc


def _read_message(file: Optional[str]) -> str:
    if file is None or file == "-":
        return sys.stdin.read()
    return Path(file).read_text(encoding="utf-8")


# ── lint ──────────────────────────────────────────────────────────────────────


@app.command()
def lint(
    file: Optional[str] = typer.Argument(None, help="Commit message file; '-' or omitted reads stdin"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .commitguard.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json | text"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="No output, exit code only"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output"),
) -> None:
    """Lint a commit message. Exit 1 when an error-level rule fails."""
    from commitguard.lint.engine import evaluate
    from commitguard.log import setup_logging
    from commitguard.message.parser import parse
    from commitguard.output import json_report, terminal

    setup_logging(verbose=verbose, debug=debug)
    cfg = _load(config)

    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]

    resolved = _resolve(cfg)

    try:
        raw = _read_message(file)
    except (OSError, UnicodeDecodeError) as exc:
        console.print(f"[bold red]Input error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    report = evaluate(parse(raw), resolved)

    if not quiet:
        if cfg.output.format == "terminal":
            terminal.render(report, show_summary=cfg.output.show_summary, console=console)
        elif cfg.output.format == "json":
            print(json_report.render(report))
        else:
            print(report.summary)

    raise typer.Exit(code=1 if report.status == "fail" else 0)


# ── rules ─────────────────────────────────────────────────────────────────────


@app.command()
def rules(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .commitguard.toml"),
) -> None:
    """List every rule available to the configuration."""
    from commitguard.config.resolver import collect_plugins
    from commitguard.config.schema import ConfigurationError
    from commitguard.rules.registry import build_registry

    cfg = _load(config)
    try:
        registry = build_registry(collect_plugins(cfg.declared), _custom_dir(cfg))
    except ConfigurationError as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    table = Table(title="Available rules", title_style="bold", border_style="dim")
    table.add_column("Rule", style="cyan", no_wrap=True)
    table.add_column("Default", justify="center")
    table.add_column("Source", style="magenta")
    table.add_column("Description")
    for rule in registry.all_rules:
        table.add_row(rule.name, rule.default_severity, rule.source, rule.description)
    Console().print(table)


# ── print-config ──────────────────────────────────────────────────────────────


def _describe_options(options: Any) -> str:
    if options is None:
        return ""
    if callable(options):
        return f"<function {getattr(options, '__name__', 'anonymous')}>"
    if isinstance(options, tuple):
        return ", ".join(str(o) for o in options)
    return str(options)


@app.command("print-config")
def print_config(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .commitguard.toml"),
) -> None:
    """Show the configuration after presets and overrides are merged."""
    cfg = _load(config)
    resolved = _resolve(cfg)

    table = Table(title="Resolved configuration", title_style="bold", border_style="dim")
    table.add_column("Rule", style="cyan", no_wrap=True)
    table.add_column("Severity", justify="center")
    table.add_column("When", justify="center")
    table.add_column("Options")
    for spec in resolved:
        table.add_row(spec.name, spec.severity, spec.applicability, _describe_options(spec.options))
    out = Console()
    out.print(table)
    if resolved.plugins:
        out.print(f"[dim]Plugins:[/dim] {', '.join(resolved.plugins)}")


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    ticket_rule: bool = typer.Option(
        False, "--ticket-rule", help="Also add a custom rule requiring ticket-id scopes"
    ),
) -> None:
    """Generate a starter .commitguard.toml in the current directory."""
    from commitguard.config.defaults import DEFAULT_TOML, TICKET_SCOPE_RULE_YAML
    from commitguard.rules.registry import CUSTOM_RULES_DIR

    root = Path.cwd()
    config_path = root / ".commitguard.toml"

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  .commitguard.toml already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")

    if ticket_rule:
        rules_dir = root / CUSTOM_RULES_DIR
        rules_dir.mkdir(exist_ok=True)
        rule_path = rules_dir / "ticket-scope.yaml"
        rule_path.write_text(TICKET_SCOPE_RULE_YAML, encoding="utf-8")
        console.print(f"[green]✓[/green] Created {rule_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"commitguard {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """commitguard — lint commit messages against a configurable rule set."""

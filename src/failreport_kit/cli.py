from typing import Optional
import typer
from .config import load_config, ReportConfig
from .errors import ReportInputError
from .logging import setup_logging
from .reporters.console import ConsoleReporter
from .runners.collector import collect, load_failures

app = typer.Typer(add_completion=False, help="failreport - render cross-browser test failures as an indented console report")

@app.callback()
def main():
    pass

@app.command()
def render(
    results: str = typer.Argument(..., help="Results file (YAML or JSON) with a 'failures' list"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to config YAML"),
    no_color: bool = typer.Option(False, "--no-color", help="Plain text output"),
    no_highlight: bool = typer.Option(False, "--no-highlight", help="Do not highlight application stack frames"),
    omit_external: bool = typer.Option(False, "--omit-external", help="Hide stack frames from external dependencies"),
    standalone: bool = typer.Option(False, "--standalone", help="Print each failure with its suite and test names"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
):
    log = setup_logging(log_level.upper())
    try:
        cfg: ReportConfig = load_config(config)
        records = load_failures(results)
    except ReportInputError as e:
        log.error("%s", e)
        raise typer.Exit(code=2)

    if no_color: cfg.color = False
    if no_highlight: cfg.suppress_error_highlighting = True
    if omit_external: cfg.omit_external_stack_frames = True
    if standalone: cfg.standalone = True

    try:
        collector = collect(records, cfg.root_name)
    except ReportInputError as e:
        log.error("%s", e)
        raise typer.Exit(code=2)

    reporter = ConsoleReporter(cfg.build_context())
    if cfg.standalone:
        reporter.emit_standalone(collector)
    else:
        reporter.emit(collector)
    raise typer.Exit(code=0 if collector.failure_count == 0 else 1)

from __future__ import annotations

from enum import Enum
from pathlib import Path

import typer

app = typer.Typer(name="suitetally", help="Aggregate test outcomes into reports")
schema_app = typer.Typer(name="schema", help="Generate schema tooling")
app.add_typer(schema_app, name="schema")


class ReportFormat(str, Enum):
    NUNIT = "nunit"
    JUNIT = "junit"
    HTML = "html"


def _load(results: str):
    import yaml

    from suitetally.config import load_results

    results_path = Path(results)
    if not results_path.exists():
        typer.echo(f"Error: results file not found: {results}", err=True)
        raise typer.Exit(1)

    try:
        return load_results(results_path)
    except (ValueError, yaml.YAMLError) as e:
        # pydantic.ValidationError is a ValueError
        typer.echo(f"Error: invalid results file {results}:\n{e}", err=True)
        raise typer.Exit(1)


@app.command()
def render(
    results: str = typer.Argument(help="Path to a YAML outcome tree"),
    output: str = typer.Option("results.xml", "--output", "-o", help="Report path"),
    fmt: ReportFormat = typer.Option(
        ReportFormat.NUNIT, "--format", "-f", help="Report format"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
    debug_log: str | None = typer.Option(
        None, "--debug-log", help="Also write debug output to this file"
    ),
):
    """Render a YAML outcome tree into a report."""
    from suitetally.verbose import setup_logger

    logger = setup_logger(
        Path(debug_log) if debug_log else None, verbose=verbose
    )

    result = _load(results)
    logger.debug(f"Loaded {result.full_name!r} ({result.outcome.label})")

    output_path = Path(output)
    if fmt == ReportFormat.JUNIT:
        from suitetally.reporting.junit import write_junit

        write_junit(result, output_path)
    elif fmt == ReportFormat.HTML:
        from suitetally.reporting.html import write_html

        write_html(result, output_path)
    else:
        from suitetally.reporting.nunit import write_report

        write_report(result, output_path)

    typer.echo(f"Report: {output_path}")


@app.command()
def summary(
    results: str = typer.Argument(help="Path to a YAML outcome tree"),
):
    """Print outcome counts; exit non-zero when any test failed."""
    from suitetally.summary import summarize

    result = _load(results)
    s = summarize(result)

    typer.echo(f"{result.full_name}: {result.outcome.label}")
    typer.echo(
        f"  {s.total} tests, {s.passed} passed, {s.failed} failed, "
        f"{s.ignored} ignored, {s.inconclusive} inconclusive, {s.other} other"
    )
    typer.echo(f"  pass rate: {s.pass_rate}%")
    if s.time.avg is not None:
        typer.echo(
            f"  time: avg {s.time.avg:.3f}s, min {s.time.min:.3f}s, max {s.time.max:.3f}s"
        )

    if s.failed > 0:
        raise typer.Exit(1)


@schema_app.command("generate")
def schema_generate(
    out: str = typer.Option(
        "schemas/suitetally.schema.json", help="Output path for JSON Schema"
    ),
):
    """Generate JSON Schema for the outcome tree YAML format."""
    from suitetally.schema import write_json_schema

    path = write_json_schema(Path(out))
    typer.echo(f"Schema: {path}")


if __name__ == "__main__":
    app()

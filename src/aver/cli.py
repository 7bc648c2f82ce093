from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="aver", help="Accumulate test assertions into named blocks")
schema_app = typer.Typer(name="schema", help="Generate config schema tooling")
app.add_typer(schema_app, name="schema")


@app.command()
def check(
    config: str = typer.Argument(help="Path to aver YAML config"),
):
    """Validate a config file and show the reporter it selects."""
    from pydantic import ValidationError

    from aver.config import load_config

    config_path = Path(config)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(1)

    try:
        aver_config = load_config(config_path)
    except ValidationError as e:
        typer.echo(f"Error: invalid config {config}:\n{e}", err=True)
        raise typer.Exit(1)

    reporter = aver_config.build_reporter()
    typer.echo(f"Config OK: {config_path}")
    typer.echo(f"Reporter: {reporter.reporter_type()}")
    if aver_config.debug_log:
        typer.echo(f"Debug log: {aver_config.debug_log}")


@app.command()
def init(
    dir: str = typer.Option(".", "--dir", help="Directory to write aver.yaml into"),
):
    """Write an example aver.yaml config."""
    project_dir = Path(dir)
    if not project_dir.exists():
        project_dir.mkdir(parents=True, exist_ok=True)

    example = project_dir / "aver.yaml"
    if example.exists():
        typer.echo(f"aver.yaml already exists in {dir}, skipping.")
        return

    example.write_text("""\
# Reporter used by the aver_block pytest fixture: aggregating, strict or tracker
reporter: aggregating
# debug_log: ${AVER_LOG_DIR:-.aver}/debug.log
verbose: false
""")
    typer.echo(f"Initialized aver config: {example}")


@schema_app.command("generate")
def schema_generate(
    out: str = typer.Option(
        "schemas/aver.schema.json", help="Output path for JSON Schema"
    ),
    doc: str | None = typer.Option(None, help="Output path for schema docs"),
):
    """Generate JSON Schema (and optionally docs) for the aver YAML config."""
    from aver.schema import write_json_schema, write_schema_doc

    out_path = Path(out)
    write_json_schema(out_path)
    typer.echo(f"Wrote schema: {out_path}")
    if doc is not None:
        doc_path = Path(doc)
        write_schema_doc(doc_path)
        typer.echo(f"Wrote docs: {doc_path}")

"""Click CLI with build and serve subcommands."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from dep_tree import __version__
from dep_tree.analysis import summarize
from dep_tree.errors import DepTreeError
from dep_tree.exporter import export_html, export_json, export_mermaid, tree_to_json
from dep_tree.models import BuildConfig
from dep_tree.pipeline import run_build

_FORMAT_CHOICES = ["json", "mermaid", "html"]
_DEFAULT_FILENAMES = {
    "mermaid": "dependency-tree.mmd",
    "html": "dependency-tree.html",
}


def _configure_logging(verbosity: int) -> None:
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@click.group()
@click.version_option(version=__version__)
def cli():
    """dep-tree: Draw the installed dependency tree of a package.json project."""


@cli.command()
@click.argument("project_path", type=click.Path(file_okay=False, path_type=Path))
@click.option("--skip-install", is_flag=True, help="Do not run the install command first")
@click.option("--format", "-f", "output_format", type=click.Choice(_FORMAT_CHOICES), default="json", show_default=True)
@click.option("-o", "--output", "output_path", type=click.Path(dir_okay=False, path_type=Path), help="Output file")
@click.option("-v", "--verbose", count=True, help="Log progress (-vv for debug)")
def build(
    project_path: Path,
    skip_install: bool,
    output_format: str,
    output_path: Path | None,
    verbose: int,
):
    """Build the dependency tree of PROJECT_PATH."""
    _configure_logging(verbose)
    config = BuildConfig(project_dir=project_path, skip_install=skip_install)

    def progress(stage: str, current: int, total: int):
        if verbose:
            click.echo(f"  {stage}: {current}/{total}", err=True)

    try:
        result = run_build(config, progress=progress)
    except DepTreeError as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        if output_path is None:
            click.echo(tree_to_json(result.forest))
            return
        written = export_json(result.forest, output_path)
    else:
        target = output_path or project_path / _DEFAULT_FILENAMES[output_format]
        if output_format == "mermaid":
            written = export_mermaid(result.mermaid, target)
        else:
            written = export_html(result.mermaid, target, title=f"Dependency tree: {project_path.resolve().name}")

    summary = summarize(result.forest)
    click.echo(f"Wrote {written}", err=True)
    click.echo(
        f"  {summary['roots']} root(s), {summary['nodes']} node(s), "
        f"{click.style(str(summary['circular']), fg='yellow')} circular, "
        f"{click.style(str(summary['missing']), fg='red')} missing",
        err=True,
    )


@cli.command()
@click.option("--port", "-p", default=8421, help="Port number")
@click.option("--host", default="127.0.0.1", help="Host address")
def serve(port: int, host: str):
    """Start the web API."""
    try:
        import uvicorn
    except ImportError:
        raise click.ClickException(
            "uvicorn is required for the web API. Install with: pip install uvicorn"
        )

    from dep_tree.web import create_app

    click.echo(f"Starting dep-tree API at http://{host}:{port}")
    uvicorn.run(create_app(), host=host, port=port, log_level="info")


if __name__ == "__main__":
    cli()

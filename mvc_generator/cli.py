"""Command‑line interface for the **mvc_generator** package.

The CLI is intentionally small – a single command that scaffolds one
resource per invocation::

    generate <resource-name>     # controller, route, model + app.js wiring
    generate --help | -h
    generate --version | -v

Implementation details
----------------------
* Uses **Typer** for argument parsing and colored output.
* All file‑system work is delegated to
  :func:`mvc_generator.scaffold.generate_resource`; this module only
  reports the :class:`~mvc_generator.scaffold.ScaffoldReport` it returns.
* An invalid name or config ends the process with exit code ``1`` before
  anything is written.  Failed file writes are reported per step; the
  run continues and exits with ``1`` after the summary.
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from mvc_generator import __version__
from mvc_generator.entry_file import RouteOutcome
from mvc_generator.exceptions import GeneratorError, InvalidNameError
from mvc_generator.scaffold import ScaffoldReport, generate_resource
from mvc_generator.templates import API_PREFIX

log = logging.getLogger(__name__)

app = typer.Typer(
        name = "generate", help = "Node.js MVC Generator", add_completion = False,
        context_settings = {"help_option_names": ["-h", "--help"]}, )

HELP_EXAMPLES = """Usage: generate <resource-name>

Examples:
  generate user       # Creates user controller, route, and model
  generate product    # Creates product controller, route, and model

Options:
  --help, -h         Show this help message
  --version, -v      Show version"""

# Rendered below the option list of --help.
HELP_EPILOG = """Examples:

  generate user       # Creates user controller, route, and model

  generate product    # Creates product controller, route, and model"""


def _setup_logging(debug: bool) -> None:
    """Configure the root logger.

    Normal runs only show warnings; ``--debug`` turns on the per-step
    messages emitted by the generator modules.
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
            level = level, format = "[%(asctime)s] %(levelname)s %(name)s: %(message)s", datefmt = "%H:%M:%S", )


def _version_callback(value: bool) -> None:
    if value:
        typer.secho(f"v{__version__}", fg = typer.colors.GREEN)
        raise typer.Exit()


def _show_help() -> None:
    typer.secho("🚀 Node.js MVC Generator", fg = typer.colors.BLUE)
    typer.echo("")
    typer.echo(HELP_EXAMPLES)


def _report_files(report: ScaffoldReport) -> None:
    for generated in report.files:
        if generated.status == "created":
            typer.secho(f"✅ Created: {generated.path}", fg = typer.colors.GREEN)
        elif generated.status == "failed":
            typer.secho(f"❌ Failed: {generated.path} ({generated.error})", fg = typer.colors.RED, err = True)
        else:
            typer.secho(f"⚠️  Already exists: {generated.path}", fg = typer.colors.YELLOW)
    if report.entry_file_created:
        typer.secho(f"✅ Created: {report.entry_file}", fg = typer.colors.GREEN)
    elif report.entry_file_error:
        typer.secho(f"❌ Failed: {report.entry_file} ({report.entry_file_error})", fg = typer.colors.RED, err = True)


def _report_route(report: ScaffoldReport) -> None:
    entry = report.entry_file
    if report.route_outcome is None:
        typer.secho(
                f"❌ Could not register the route in {entry}: {report.route_error}", fg = typer.colors.RED, err = True, )
    elif report.route_outcome is RouteOutcome.INSERTED:
        typer.secho(f"✅ Route auto-imported in {entry}", fg = typer.colors.GREEN)
    elif report.route_outcome is RouteOutcome.ALREADY_PRESENT:
        typer.secho(f"⚠️  Route already exists in {entry}", fg = typer.colors.YELLOW)
    elif report.route_outcome is RouteOutcome.ANCHOR_NOT_FOUND:
        typer.secho(
                f"⚠️  Could not find the routes anchor in {entry}; register the route manually.",
                fg = typer.colors.YELLOW, )
    else:
        typer.secho(f"⚠️  {entry} not found; route was not registered.", fg = typer.colors.YELLOW)


def _show_summary(report: ScaffoldReport) -> None:
    pluralized = report.resource.pluralized
    typer.echo("")
    typer.secho("📊 Generation Summary:", fg = typer.colors.BLUE)
    typer.secho(f"   Files created: {report.files_created}", fg = typer.colors.GREEN)
    if report.files_skipped > 0:
        typer.secho(f"   Files skipped: {report.files_skipped}", fg = typer.colors.YELLOW)
    typer.echo("")
    if report.errors:
        typer.secho(f"❌ Generation finished with {len(report.errors)} error(s)", fg = typer.colors.RED)
    else:
        typer.secho("🎉 MVC structure generated successfully!", fg = typer.colors.GREEN)
    typer.secho(f"📁 Resource: {report.resource.capitalized}", fg = typer.colors.BLUE)
    typer.secho(f"🌐 API Endpoint: {API_PREFIX}/{pluralized}", fg = typer.colors.BLUE)
    typer.echo("")
    typer.secho("Next steps:", fg = typer.colors.YELLOW)
    typer.echo("1. Install dependencies: npm install express")
    typer.echo(f"2. Start server: node {report.entry_file}")
    typer.echo(f"3. Test endpoint: GET http://localhost:3000{API_PREFIX}/{pluralized}")


@app.command(help = "Generate controller, route and model files for a resource.", epilog = HELP_EPILOG)
def generate(
        name: Optional[str] = typer.Argument(
                None, metavar = "RESOURCE_NAME", help = "Resource name, e.g. 'user'.", show_default = False, ),
        root: Path = typer.Option(
                Path("."), "--root", file_okay = False, help = "Project root the files are generated in.", ),
        debug: bool = typer.Option(False, "--debug", help = "Enable DEBUG logs."),
        version: bool = typer.Option(
                False, "--version", "-v", callback = _version_callback, is_eager = True, help = "Show version.", ),
        ) -> None:
    """Scaffold one resource and register its routes in the entry file.

    Existing files are left untouched and reported as skipped, so the
    command can be re-run safely.
    A step that fails is reported and the others still run; the exit
    code is then ``1``.
    """
    _setup_logging(debug)

    if not name:
        typer.secho("❌ Please provide a resource name", fg = typer.colors.RED, err = True)
        _show_help()
        raise typer.Exit(code = 1)

    try:
        report = generate_resource(name, root = root)
    except InvalidNameError as exc:
        typer.secho(f"❌ {exc}", fg = typer.colors.RED, err = True)
        raise typer.Exit(code = 1)
    except GeneratorError as exc:
        log.debug("Generation failed", exc_info = True)
        typer.secho(f"❌ Error generating {name}: {exc}", fg = typer.colors.RED, err = True)
        raise typer.Exit(code = 1)

    _report_files(report)
    _report_route(report)
    _show_summary(report)
    if report.errors:
        raise typer.Exit(code = 1)


def main() -> None:  # pragma: no cover – thin wrapper
    """Entry point used by the ``generate`` console script.

    This function initializes and runs the Typer CLI application.
    """
    app()


if __name__ == "__main__":
    main()

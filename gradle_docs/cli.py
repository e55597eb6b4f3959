from typing import Optional
import logging
import json

from gradle_docs.common.errors import DocumentationError, ErrorEnumEncoder
from gradle_docs.common.logging import setup_logger, get_logger
from gradle_docs.common.version import GradleVersion, VERSION_ENV_VAR
from gradle_docs.documentation_registry import DocumentationLocator
import typer
from enum import Enum
from rich.console import Console
from rich.table import Table


class OutputFormat(str, Enum):
    console = "console"
    json = "json"


class CliState:
    """Options set by the app callback and read by every command."""
    verbose: int = 0
    quiet: bool = False
    gradle_version: Optional[str] = None

state = CliState()
console = Console()

VERBOSITY_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]

def apply_log_level():
    """Set the gradle-docs log level from --quiet and the -v count."""
    if state.quiet:
        setup_logger(level=logging.ERROR)
    else:
        setup_logger(level=VERBOSITY_LEVELS[min(state.verbose, len(VERBOSITY_LEVELS) - 1)])

def verbose_callback(value: int):
    state.verbose = value
    apply_log_level()

def quiet_callback(value: bool):
    state.quiet = value
    apply_log_level()

def fail(error: DocumentationError, output_format: OutputFormat):
    """Report a documentation error and exit with the usage error code."""
    get_logger("cli").debug(f"Exiting after {error.code.value}: {error.message}")

    if output_format == OutputFormat.json:
        typer.echo(json.dumps({"error": error.to_dict()}, indent=2, cls=ErrorEnumEncoder))
    else:
        typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=2)

def resolve_version(output_format: OutputFormat) -> GradleVersion:
    """Resolve the Gradle version from the command line, the environment or the packaged default."""
    logger = get_logger("cli")

    try:
        if state.gradle_version:
            version = GradleVersion.parse(state.gradle_version)
        else:
            version = GradleVersion.current()
    except DocumentationError as e:
        fail(e, output_format)

    logger.info(f"Using Gradle version {version}")
    return version

def build_locator(output_format: OutputFormat) -> DocumentationLocator:
    """Create the locator for this invocation."""
    return DocumentationLocator(resolve_version(output_format))

def run_locator(kind: str, operation, output_format: OutputFormat, **inputs):
    """Invoke a locator operation and output the URL in the specified format."""
    logger = get_logger("cli")
    logger.debug(f"Building {kind} link for {inputs}")

    try:
        url = operation()
    except DocumentationError as e:
        fail(e, output_format)

    if output_format == OutputFormat.json:
        payload = {"kind": kind, "url": url}
        payload.update({k: v for k, v in inputs.items() if v is not None})
        typer.echo(json.dumps(payload, indent=2))
    else:
        typer.echo(url)

def format_option():
    return typer.Option(
        OutputFormat.console, "--format", "-f",
        help="Output format: 'console' for the plain URL, 'json' for a machine-readable object"
    )

app = typer.Typer(
    help="gradle-docs - Build links into the Gradle documentation",
    add_completion=False,
)

# -v, -q and --gradle-version apply to every command
@app.callback()
def main(
    verbose: int = typer.Option(
        0, "--verbose", "-v", count=True,
        help="Increase verbosity (-v for INFO, -vv for DEBUG)",
        callback=verbose_callback,
        is_eager=True
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q",
        help="Suppress all output except errors",
        callback=quiet_callback,
        is_eager=True
    ),
    gradle_version: Optional[str] = typer.Option(
        None, "--gradle-version",
        envvar=VERSION_ENV_VAR,
        help="Gradle version to link to (defaults to the packaged version)"
    ),
):
    """Global options for gradle-docs."""
    # A blank GRADLE_DOCS_VERSION means "use the default", as in GradleVersion.current()
    state.gradle_version = (gradle_version or "").strip() or None


@app.command()
def userguide(
    id: str = typer.Argument(..., help="User guide page id, e.g. 'java_plugin'"),
    section: Optional[str] = typer.Option(None, "--section", "-s", help="Section anchor within the page"),
    format: OutputFormat = format_option(),
):
    """
    Print the user guide link for a feature.
    """
    locator = build_locator(format)
    run_locator("userguide", lambda: locator.documentation_for(id, section), format, id=id, section=section)


@app.command()
def dsl(
    type_name: str = typer.Argument(..., help="Fully-qualified type name, e.g. 'org.gradle.api.Project'"),
    property: str = typer.Argument(..., help="Property name on the type"),
    format: OutputFormat = format_option(),
):
    """
    Print the DSL reference link for a property of a type.
    """
    locator = build_locator(format)
    run_locator("dsl", lambda: locator.dsl_reference_for(type_name, property), format,
                type_name=type_name, property=property)


@app.command()
def samples(format: OutputFormat = format_option()):
    """
    Print the link to the samples index.
    """
    locator = build_locator(format)
    run_locator("samples", locator.sample_index, format)


@app.command()
def sample(
    id: str = typer.Argument(..., help="Sample id, e.g. 'building_java_applications'"),
    format: OutputFormat = format_option(),
):
    """
    Print the link to a single sample.
    """
    locator = build_locator(format)
    run_locator("sample", lambda: locator.sample_for(id), format, id=id)


@app.command()
def recommend(
    id: str = typer.Argument(..., help="User guide page id"),
    section: Optional[str] = typer.Option(None, "--section", "-s", help="Section anchor within the page"),
    topic: str = typer.Option("", "--topic", "-t", help="Topic named in the sentence"),
    format: OutputFormat = format_option(),
):
    """
    Print a 'for more information' sentence suitable for error messages.
    """
    locator = build_locator(format)

    try:
        text = locator.documentation_recommendation_for(topic, id, section)
    except DocumentationError as e:
        fail(e, format)

    if format == OutputFormat.json:
        payload = {
            "kind": "recommendation",
            "url": locator.documentation_for(id, section),
            "text": text,
            "id": id,
        }
        if section is not None:
            payload["section"] = section
        if topic:
            payload["topic"] = topic
        typer.echo(json.dumps(payload, indent=2))
    else:
        typer.echo(text)


@app.command()
def links(
    id: str = typer.Argument(..., help="Identifier to look up as both a user guide page and a sample"),
    format: OutputFormat = format_option(),
):
    """
    Show every link the locator can build for an identifier.
    """
    logger = get_logger("cli")
    locator = build_locator(format)

    try:
        rows = [
            ("userguide", locator.documentation_for(id)),
            ("sample", locator.sample_for(id)),
            ("samples", locator.sample_index()),
        ]
    except DocumentationError as e:
        fail(e, format)

    logger.info(f"Built {len(rows)} links for {id}")

    if format == OutputFormat.json:
        typer.echo(json.dumps([{"kind": kind, "url": url} for kind, url in rows], indent=2))
        return

    table = Table(title=f"Gradle documentation for '{id}'")
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("URL", overflow="fold")
    for kind, url in rows:
        table.add_row(kind, url)
    console.print(table)


@app.command()
def version(format: OutputFormat = format_option()):
    """
    Show the Gradle version and documentation base URL in use.
    """
    resolved = resolve_version(format)
    locator = DocumentationLocator(resolved)

    if format == OutputFormat.json:
        payload = {
            "version": str(resolved),
            "base_version": resolved.base_version,
            "snapshot": resolved.is_snapshot,
            "base_url": locator.base_url,
        }
        typer.echo(json.dumps(payload, indent=2))
    else:
        suffix = " (snapshot)" if resolved.is_snapshot else ""
        typer.secho(f"Gradle {resolved}{suffix}", fg=typer.colors.BLUE)
        typer.echo(locator.base_url)


if __name__ == "__main__":
    app()

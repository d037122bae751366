from datetime import datetime, timezone
from enum import StrEnum
from pathlib import Path

import typer

from pydantic import TypeAdapter, ValidationError
from typer import Typer
from .config import LEVELS, LoggerDefinition, Requirements, WriteSettings, colored_templates
from .diagnostics import get_logger, set_level
from .errors import ConfigurationError
from .logger import LoggerRegistry, caller_label, render as render_template
from .logger.fields import RuntimeFields
from .path_keeper import PathKeeper
from .utils import get_package_version

app = Typer(name="logger-factory", pretty_exceptions_enable=False, no_args_is_help=True)
logger = get_logger()
_DEFINITIONS = TypeAdapter(LoggerDefinition | list[LoggerDefinition])


class LevelChoice(StrEnum):
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


def _version(value: bool):
    if value:
        typer.echo(get_package_version())
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show the package's own diagnostics."),
    version: bool = typer.Option(False, "--version", callback=_version, is_eager=True, help="Print the version and exit."),
):
    if verbose:
        set_level("DEBUG")


@app.command()
def demo(
    base_dir: Path = typer.Option(Path("."), help="Directory that receives logs/<timestamp>.log."),
    write: bool = typer.Option(True, help="Persist every level to the log file."),
):
    """Create 'my-logger', emit one message per level and check the registry hands it back."""
    registry = LoggerRegistry()

    log_file = None
    if write:
        paths = PathKeeper(base_dir)
        paths.set_params({"log_id": datetime.now(timezone.utc).isoformat()})
        log_file = paths.LOG

    my_logger = registry.create(
        "my-logger",
        colored_templates(),
        WriteSettings(levels_to_write=list(LEVELS), write=write, file=log_file),
        {"Cli": "Main"},
        Requirements(debug=True, info=True, warn=True, error=True),
    )

    my_logger.debug("This is a debug message")
    my_logger.info("This is an info message")
    my_logger.warn("This is a warn message")
    my_logger.error("This is an error message")
    my_logger.error("This is an error message with an error", RuntimeError("This is an error"))

    if registry.get("my-logger") is None:
        raise typer.Exit(code=1)

    typer.echo(registry.get("my-logger") is my_logger)
    if log_file is not None:
        typer.echo(f"Log written to {log_file}")


@app.command()
def emit(
    config: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON logger definition."),
    level: LevelChoice = typer.Argument(...),
    message: str = typer.Argument(...),
    error: str | None = typer.Option(None, help="Text rendered through $[err]."),
    name: str | None = typer.Option(None, help="Logger to use when CONFIG defines several. Defaults to the first."),
):
    """Build the loggers described in CONFIG and emit MESSAGE at LEVEL."""
    registry = LoggerRegistry()
    try:
        loaded = _DEFINITIONS.validate_json(config.read_text(encoding="utf-8"))
        definitions = loaded if isinstance(loaded, list) else [loaded]
        for definition in definitions:
            registry.create_from_definition(definition)
    except (ValidationError, ConfigurationError) as exc:
        logger.error(f"Could not load logger definition '{config}'.", extra={"config": str(config)})
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)

    if name is None and definitions:
        name = definitions[0].name
    instance = registry.get(name) if name is not None else None
    if instance is None:
        typer.echo(f"No logger named '{name}' in {config}.", err=True)
        raise typer.Exit(code=2)

    getattr(instance, level.value)(message, error)


@app.command()
def render(
    template: str = typer.Argument(..., help="Template such as '[$[caller]] $[message]'."),
    message: str = typer.Option("", help="Value for $[message]."),
):
    """Render TEMPLATE once, as a logger called from this command would."""
    fields = RuntimeFields(message=message, caller=caller_label(__file__))
    typer.echo(render_template(template, fields))


if __name__ == "__main__":
    app()

"""tp command line: load, list and create stored sessions."""

from typing import NoReturn

import typer
from rich.console import Console

from . import config
from .adapters.tmux import TmuxClient
from .errors import TploaderError
from .muxer import Muxer, Output
from .session import store
from .telemetry import get_logger, setup_logging

logger = get_logger(__name__)

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="tp",
    help="A simple tmux project loader",
    no_args_is_help=True,
    add_completion=False,
)


def _fail(error: Exception) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {error}", highlight=False)
    raise typer.Exit(1)


def _print_output(output: Output) -> None:
    if not output.is_new_session:
        console.print(f"Switched to session [bold]{output.session_name}[/bold]")
        return

    console.print(f"[green]Created[/green] session [bold]{output.session_name}[/bold]")
    for window_index, pane_indices in output.windows:
        panes = ", ".join(str(index) for index in pane_indices)
        console.print(f"  window {window_index}: panes {panes}", highlight=False)


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        config.LOG_LEVEL, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)"
    ),
) -> None:
    try:
        setup_logging(log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e


@app.command()
def load(
    session: str = typer.Argument(..., help="Name of a stored session"),
) -> None:
    """Load a project"""
    try:
        declared = store.load_from_name(session)
        output = Muxer(TmuxClient()).apply(declared)
    except TploaderError as e:
        logger.debug(f"load {session} failed: {e!r}")
        _fail(e)

    _print_output(output)


@app.command("list")
def list_command() -> None:
    """List projects"""
    for name in store.list_sessions():
        typer.echo(name)


@app.command()
def new(
    name: str = typer.Argument(..., help="Name of the session to create"),
) -> None:
    """Create a project file from a starter template"""
    try:
        path = store.create(name)
    except TploaderError as e:
        _fail(e)

    console.print(f"Created {path}", highlight=False)


def main() -> None:
    app()


if __name__ == "__main__":
    main()

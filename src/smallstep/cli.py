import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from smallstep.env import Environment
from smallstep.errors import ReductionError
from smallstep.machine import Machine
from smallstep.surface.errors import SurfaceError
from smallstep.surface.parse import parse_binding, parse_expression

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Log every reduction step"),
) -> None:
    """Small-step evaluator."""
    log_level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
            ),
        ],
        force=True,
    )


@app.command()
def run(
    program: Annotated[
        str,
        typer.Argument(help="Expression or assignment, e.g. 'x = x + 1'"),
    ],
    *,
    bindings: Annotated[
        list[str] | None,
        typer.Option("--let", "-l", help="Initial binding NAME=VALUE (repeatable)"),
    ] = None,
    show_environment: Annotated[
        bool,
        typer.Option("--env/--no-env", help="Show the environment on each trace line"),
    ] = True,
) -> None:
    """Reduce PROGRAM step by step, printing each intermediate state."""
    try:
        expression = parse_expression(program)
        env = Environment()
        for text in bindings or []:
            name, value = parse_binding(text)
            env = env.bind(name, value)
    except SurfaceError as e:
        err_console.print(f"[red]Syntax error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    logger.debug("Initial environment: %s", env)
    machine = Machine(
        expression, env, show_environment=show_environment, echo=typer.echo
    )
    try:
        machine.run()
    except ReductionError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e
    logger.debug("Halted after %d steps", machine.steps_taken)


def main() -> None:
    app()

"""``interaktor invoke TARGET``: run an interaktor with JSON input.

Exit codes:
    0  the interaktor succeeded
    1  the interaktor failed its context (``Failure``)
    2  the input was rejected (contract or argument error)
"""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.panel import Panel
from rich.pretty import Pretty

from interaktor.cli.commands._target import load_interaktor
from interaktor.errors import (
    AttributeContractError,
    Failure,
    InvalidArgumentError,
    type_name,
)

console = Console()


def invoke_cmd(
    target: str = typer.Argument(
        ...,
        help="The interaktor to run, as 'package.module:ClassName'.",
    ),
    input_json: str = typer.Option(
        "{}",
        "--input",
        "-i",
        help="JSON object passed as the interaktor's input attributes.",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        "-s",
        help="Use call_strict: report failures as raised Failure errors.",
    ),
) -> None:
    """Invoke an interaktor and print the resulting context."""
    interaktor_cls = load_interaktor(target)

    try:
        payload = json.loads(input_json)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Invalid JSON: {exc}", param_hint="--input") from exc

    try:
        if strict:
            context = interaktor_cls.call_strict(payload)
        else:
            context = interaktor_cls.call(payload)
    except (AttributeContractError, InvalidArgumentError) as exc:
        console.print(f"[bold red]Rejected:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    except Failure as exc:
        console.print(f"[bold red]Failure raised:[/bold red] {type_name(exc.interaktor)}")
        console.print(Pretty(exc.context.to_dict()))
        raise typer.Exit(code=1) from exc

    status = "[bold red]failure[/bold red]" if context.failure else "[bold green]success[/bold green]"
    console.print(
        Panel(
            Pretty(context.to_dict()),
            title=f"[bold]{interaktor_cls.__qualname__}[/bold] {status}",
            border_style="red" if context.failure else "green",
            padding=(1, 2),
        )
    )
    if context.failure:
        raise typer.Exit(code=1)

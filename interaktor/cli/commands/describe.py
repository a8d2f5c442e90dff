"""``interaktor describe TARGET``: show an interaktor's contract and hooks.

Prints the declared input attributes with their defaults, the documented
success/failure attributes, and the order in which a full run visits the
hooks.  Describing freezes the type's declarations, exactly as a call
would.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from interaktor.cli.commands._target import load_interaktor
from interaktor.core.chain import execution_plan
from interaktor.models.attributes import Requiredness

console = Console()

_STAGE_STYLES = {
    "around": "magenta",
    "before": "cyan",
    "core": "bold green",
    "after": "cyan",
    "ensure": "yellow",
}


def describe_cmd(
    target: str = typer.Argument(
        ...,
        help="The interaktor to describe, as 'package.module:ClassName'.",
    ),
) -> None:
    """Show the attribute contract and execution plan of an interaktor."""
    interaktor_cls = load_interaktor(target)
    definition = interaktor_cls.definition()

    attributes = Table(title=f"{definition.name}: attributes")
    attributes.add_column("Name", style="cyan")
    attributes.add_column("Kind")
    attributes.add_column("Default")

    for spec in definition.attribute_specs():
        kind = (
            "[bold]required[/bold]"
            if spec.requiredness == Requiredness.REQUIRED
            else "optional"
        )
        default = Text(repr(spec.default)) if spec.has_default else "[dim]-[/dim]"
        attributes.add_row(spec.name, kind, default)
    for name in definition.success:
        attributes.add_row(name, "[green]success[/green]", "[dim]-[/dim]")
    for name in definition.failure:
        attributes.add_row(name, "[red]failure[/red]", "[dim]-[/dim]")

    if attributes.row_count:
        console.print(attributes)
    else:
        console.print("[dim]No attributes declared.[/dim]")

    plan = Table(title=f"{definition.name}: execution plan")
    plan.add_column("#", justify="right")
    plan.add_column("Stage")
    plan.add_column("Hook")
    for position, (stage, label) in enumerate(execution_plan(definition.hooks), start=1):
        plan.add_row(str(position), Text(stage, style=_STAGE_STYLES.get(stage, "")), Text(label))

    console.print(plan)

"""Rich table builders used by the CLI.

Kept separate to keep the command module focused on wiring.
"""

from __future__ import annotations

from rich.table import Table

from apisig.core.models import MethodModel, TypeDescriptor


def build_methods_table(models: list[MethodModel], target: str) -> Table:
    """Build the (Unique Name, Method, Result, Arguments, Member) table for `parse`."""
    table = Table(show_header=True, title=f"API methods of {target}")
    table.add_column("Unique Name", style="cyan")
    table.add_column("Method")
    table.add_column("Result")
    table.add_column("Arguments")
    table.add_column("Member", style="dim")
    for model in models:
        table.add_row(
            model.unique_name or "",
            model.name,
            str(model.result_type),
            ", ".join(str(argument) for argument in model.arguments),
            str(model.member),
        )
    return table


def build_descriptor_table(descriptor: TypeDescriptor) -> Table:
    """Build a two-column property table for `resolve`."""
    table = Table(show_header=True)
    table.add_column("Property")
    table.add_column("Value")
    table.add_row("Name", descriptor.name)
    table.add_row("Kind", descriptor.kind.value)
    if descriptor.component is not None:
        table.add_row("Component", descriptor.component.name)
        table.add_row("Dimensions", str(descriptor.dimensions))
    return table

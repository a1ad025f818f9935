"""Console rendering of resolved properties."""
import importlib
from typing import Any, List

import click
from colorama import Fore, Style

from modelprops.exceptions import TargetImportError
from modelprops.properties.model_property import BeanModelProperty
from modelprops.schema.models import Direction, ResolvedType


def load_target(target: str) -> Any:
    """
    Import a ``package.module:ClassName`` target

    Nested classes are addressed with dots after the colon (``mod:Outer.Inner``).

    Raises:
        TargetImportError: If the module or attribute cannot be found
    """
    module_name, sep, qualname = target.partition(":")
    if not sep or not module_name or not qualname:
        raise TargetImportError(f"Target must look like 'package.module:ClassName', got '{target}'")

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise TargetImportError(f"Cannot import module '{module_name}': {e}") from e

    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise TargetImportError(f"'{module_name}' has no attribute '{qualname}'") from e

    if not isinstance(obj, type):
        raise TargetImportError(f"'{target}' is not a class")
    return obj


class PropertyReport:
    """Prints property tables for a resolved type."""

    def print_header(self, title: str):
        """Print a section header."""
        click.echo(f"\n{Fore.CYAN}{'━' * 60}")
        click.echo(f"{Fore.CYAN}{title}")
        click.echo(f"{Fore.CYAN}{'━' * 60}{Style.RESET_ALL}\n")

    def print_properties(
        self,
        resolved_type: ResolvedType,
        direction: Direction,
        properties: List[BeanModelProperty],
    ):
        """Print one direction's properties as a table."""
        self.print_header(f"{resolved_type.name} ({direction.value})")

        if not properties:
            click.echo(f"{Fore.YELLOW}No documented properties")
            return

        name_width = max(len(p.name) for p in properties) + 2
        type_width = max(len(p.type_name) for p in properties) + 2
        click.echo(f"{'NAME':{name_width}s}{'TYPE':{type_width}s}ACCESSOR")
        for prop in properties:
            required = f" {Fore.RED}*{Style.RESET_ALL}" if prop.required else ""
            click.echo(
                f"{Fore.GREEN}{prop.name:{name_width}s}{Style.RESET_ALL}"
                f"{prop.type_name:{type_width}s}{prop.accessor.qualified_name}{required}"
            )
            if prop.description:
                click.echo(f"    {Fore.WHITE}{prop.description}")

        click.echo(f"\n{Fore.GREEN}Total: {len(properties)}")

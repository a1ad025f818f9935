"""modelprops command line interface."""
import dataclasses
import json
import logging
import sys
from pathlib import Path

import click
from colorama import Fore, init

from modelprops import __version__
from modelprops.config import AppConfig
from modelprops.exceptions import ModelPropsError
from modelprops.exporter.json_exporter import JsonExporter
from modelprops.naming.policy import NamingPolicy
from modelprops.properties.provider import build_provider
from modelprops.schema.models import Direction
from modelprops.schema.type_resolver import resolve_class
from .report import PropertyReport, load_target

DIRECTIONS = {
    "serialization": [Direction.SERIALIZATION],
    "deserialization": [Direction.DESERIALIZATION],
    "both": [Direction.SERIALIZATION, Direction.DESERIALIZATION],
}


@click.group()
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx):
    """modelprops - document the serialized properties of Python classes."""
    config = AppConfig.from_env()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


@cli.command()
@click.argument("target")
@click.option(
    "--direction",
    type=click.Choice(sorted(DIRECTIONS)),
    default="both",
    show_default=True,
    help="Which property view to resolve",
)
@click.option(
    "--naming-policy",
    type=click.Choice([p.value for p in NamingPolicy]),
    default=None,
    help="Override the configured naming policy",
)
@click.option("--sort/--no-sort", default=None, help="Sort properties alphabetically")
@click.option(
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also export the properties to this JSON file (relative to the output dir)",
)
@click.pass_obj
def describe(config, target, direction, naming_policy, sort, output):
    """Describe the properties of TARGET (package.module:ClassName)."""
    profile = config.profile
    overrides = {}
    if naming_policy:
        overrides["naming_policy"] = NamingPolicy(naming_policy)
    if sort is not None:
        overrides["sort_properties_alphabetically"] = sort
    if overrides:
        profile = dataclasses.replace(profile, **overrides)

    try:
        resolved_type = resolve_class(load_target(target))
        provider = build_provider(profile)

        results = {}
        for selected in DIRECTIONS[direction]:
            if selected is Direction.SERIALIZATION:
                results[selected] = provider.properties_for_serialization(resolved_type)
            else:
                results[selected] = provider.properties_for_deserialization(resolved_type)
    except ModelPropsError as e:
        click.echo(f"{Fore.RED}Error: {e}")
        sys.exit(1)

    report = PropertyReport()
    for selected, properties in results.items():
        report.print_properties(resolved_type, selected, properties)

    if output:
        output_path = Path(output)
        if not output_path.is_absolute():
            output_path = Path(config.output_dir) / output_path
        JsonExporter().export(
            output_path,
            resolved_type,
            serialization=results.get(Direction.SERIALIZATION),
            deserialization=results.get(Direction.DESERIALIZATION),
            profile=profile,
        )
        click.echo(f"{Fore.GREEN}✅ Exported to {output_path}")


@cli.command("show-config")
@click.pass_obj
def show_config(config):
    """Show the effective configuration."""
    click.echo(json.dumps(config.to_dict(), indent=2))


def main():
    """Console entry point."""
    init(autoreset=True)
    cli()

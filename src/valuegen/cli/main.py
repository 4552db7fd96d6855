"""Main CLI entry point for valuegen.

Provides exploratory sampling of registered generators and record models
from the command line.
"""

from pathlib import Path
from typing import Any
import json
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from valuegen import __version__
from valuegen.config.base import SessionConfig
from valuegen.config.loader import load_config
from valuegen.engine.session import Session
from valuegen.generators.base import Generator
from valuegen.generators.registry import GeneratorRegistry, get_global_generator_registry
from valuegen.models.loader import load_model

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _to_json(values: Any, pretty: bool) -> str:
    def encode(value: Any) -> Any:
        if isinstance(value, (set, frozenset)):
            return sorted(value, key=repr)
        if isinstance(value, bytes):
            return value.hex()
        return str(value)

    return json.dumps(values, indent=2 if pretty else None, default=encode, ensure_ascii=False)


def _fail(ctx: click.Context, error: Exception) -> None:
    err_console.print(f"[red]Error: {error}[/red]")
    if ctx.obj.get("verbose", False):
        import traceback
        err_console.print(traceback.format_exc())
    sys.exit(1)


def _lookup(registry: GeneratorRegistry, name: str) -> Generator:
    generator = registry.get(name)
    if generator is None:
        raise click.BadParameter(
            f"Unknown generator '{name}'. Run 'valuegen list' to see available generators.",
            param_hint="NAME",
        )
    return generator


def _session_config(
    config_path: str | None,
    seed: int | None,
    size_min: int | None = None,
    size_max: int | None = None,
) -> SessionConfig:
    """Layer config file, VALUEGEN_* environment variables and flags."""
    base = load_config(config_path) if config_path else SessionConfig()
    config = SessionConfig.from_env(base=base)
    return config.with_overrides(seed=seed, size_min=size_min, size_max=size_max)


@click.group()
@click.version_option(version=__version__, prog_name="valuegen")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """valuegen - Composable, seeded generators of structured test data.

    Sample built-in generators or record models to see what they produce.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    _configure_logging(verbose)


@cli.command(name="list")
@click.pass_context
def list_generators(ctx: click.Context) -> None:
    """List registered generators."""
    registry = get_global_generator_registry()

    table = Table(title="Available Generators")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Example")

    for name in registry.list_names():
        example = registry.get(name).gen(size=5, seed=0)
        table.add_row(name, repr(example))

    console.print(table)


@cli.command()
@click.argument("name")
@click.option("--count", "-n", type=int, help="Number of values (config sample_count if omitted)")
@click.option("--seed", "-s", type=int, help="Random seed for reproducibility")
@click.option("--size-min", type=int, help="First size of the size cycle")
@click.option("--size-max", type=int, help="Exclusive upper bound of the size cycle")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Session config YAML file")
@click.option("--pretty", is_flag=True, help="Pretty print JSON output")
@click.pass_context
def sample(
    ctx: click.Context,
    name: str,
    count: int | None,
    seed: int | None,
    size_min: int | None,
    size_max: int | None,
    config_path: str | None,
    pretty: bool,
) -> None:
    """Sample values from a registered generator.

    NAME is the registered generator name (see 'valuegen list').
    """
    generator = _lookup(get_global_generator_registry(), name)

    try:
        config = _session_config(config_path, seed, size_min, size_max)
        session = Session(config)
        values = session.take(generator, count)
    except Exception as e:
        _fail(ctx, e)
        return

    click.echo(_to_json(values, pretty))
    if ctx.obj.get("verbose", False):
        err_console.print(f"[dim]seed: {session.seed}[/dim]")


@cli.command()
@click.argument("name")
@click.option("--size", type=int, help="Size bound (config default_size if omitted)")
@click.option("--seed", "-s", type=int, help="Random seed for reproducibility")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Session config YAML file")
@click.pass_context
def gen(
    ctx: click.Context,
    name: str,
    size: int | None,
    seed: int | None,
    config_path: str | None,
) -> None:
    """Generate a single value from a registered generator.

    NAME is the registered generator name (see 'valuegen list').
    """
    generator = _lookup(get_global_generator_registry(), name)

    try:
        session = Session(_session_config(config_path, seed))
        value = session.generate(generator, size)
    except Exception as e:
        _fail(ctx, e)
        return

    click.echo(_to_json(value, pretty=False))


@cli.command()
@click.argument("model_path", type=click.Path(exists=True))
@click.option("--count", "-n", type=int, help="Number of records (model sample_count if omitted)")
@click.option("--seed", "-s", type=int, help="Random seed for reproducibility")
@click.option("--output", "-o", type=click.Path(), help="Output file (stdout if not specified)")
@click.option("--pretty", is_flag=True, help="Pretty print JSON output")
@click.pass_context
def model(
    ctx: click.Context,
    model_path: str,
    count: int | None,
    seed: int | None,
    output: str | None,
    pretty: bool,
) -> None:
    """Generate records from a model document.

    MODEL_PATH is the path to the YAML model file.
    """
    try:
        record_model = load_model(model_path)
        config = SessionConfig.from_env(base=record_model.session).with_overrides(seed=seed)
        session = Session(config)
        records = session.take(record_model.to_generator(), count)
    except Exception as e:
        _fail(ctx, e)
        return

    json_output = _to_json(records, pretty)

    if output:
        Path(output).write_text(json_output)
        console.print(Panel.fit(
            f"[green]Wrote {len(records)} records to {output}[/green]\n"
            f"[cyan]Model:[/cyan] {record_model.name}\n"
            f"[cyan]Seed:[/cyan] {session.seed}",
            title="Generation Complete",
        ))
    else:
        click.echo(json_output)


if __name__ == "__main__":
    cli()

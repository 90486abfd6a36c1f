"""Click CLI with analyze and defs subcommands."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from type_reach.analysis import compute_reachable, redirect_umbrella
from type_reach.models import AnalysisConfig, DefinitionKind
from type_reach.pipeline import run_collect, run_pipeline
from type_reach.scanner import ParseError

_DEFAULTS = AnalysisConfig()


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """type-reach: find the types that transitively contain a seed type."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _config_options(func):
    func = click.option(
        "--suppress", "suppressed", multiple=True,
        help=f"Type name dropped from the graph (default: {', '.join(_DEFAULTS.suppressed)})",
    )(func)
    func = click.option(
        "--no-umbrella", is_flag=True, help="Do not inject the umbrella edge",
    )(func)
    func = click.option(
        "--umbrella", default=_DEFAULTS.umbrella, show_default=True,
        help="Type name redirected onto the seeds",
    )(func)
    func = click.option(
        "--seed", "seeds", multiple=True,
        help=f"Seed type name (default: {', '.join(_DEFAULTS.seeds)})",
    )(func)
    return func


def _make_config(source: Path, output: Path | None, seeds, umbrella, no_umbrella, suppressed) -> AnalysisConfig:
    config = AnalysisConfig(source_dir=source)
    if output is not None:
        config.output_path = output
    if seeds:
        config.seeds = list(seeds)
    config.umbrella = None if no_umbrella else umbrella
    if suppressed:
        config.suppressed = list(suppressed)
    return config


@cli.command()
@click.argument("source", type=click.Path(exists=True, path_type=Path))
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@_config_options
def analyze(source: Path, output: Path, seeds, umbrella, no_umbrella, suppressed):
    """Write the graph of types reachable from the seeds to OUTPUT."""
    config = _make_config(source, output, seeds, umbrella, no_umbrella, suppressed)

    try:
        result = run_pipeline(config)
    except (ParseError, OSError) as e:
        raise click.ClickException(str(e))

    if result.duplicates:
        click.echo(click.style(f"{len(result.duplicates)} duplicate definition(s)", fg="yellow"))

    click.echo(
        f"Scanned {result.files_scanned} file(s), "
        f"{len(result.graph)} definition(s); "
        f"{len(result.reachable)} reachable in {result.passes} pass(es)."
    )
    click.echo(f"Wrote {result.edge_count} edge(s) to {result.output_path}")


@cli.command()
@click.argument("source", type=click.Path(exists=True, path_type=Path))
@click.option("--reachable", "only_reachable", is_flag=True, help="Only list reachable definitions")
@_config_options
def defs(source: Path, only_reachable: bool, seeds, umbrella, no_umbrella, suppressed):
    """List struct and alias definitions with the types they reference."""
    config = _make_config(source, None, seeds, umbrella, no_umbrella, suppressed)

    try:
        graph = run_collect(config)
    except (ParseError, OSError) as e:
        raise click.ClickException(str(e))

    definitions = list(graph.definitions.values())
    if only_reachable:
        redirected = redirect_umbrella(
            graph.references, config.umbrella, config.seeds, config.suppressed,
        )
        reachable = compute_reachable(redirected, config.seeds).reachable
        definitions = [d for d in definitions if d.name in reachable]

    if not definitions:
        click.echo("No definitions found.")
        return

    # Group by file
    by_file: dict[Path, list] = {}
    for definition in sorted(definitions, key=lambda d: (str(d.file_path), d.line_number)):
        by_file.setdefault(definition.file_path, []).append(definition)

    for file_path, file_defs in by_file.items():
        click.echo(click.style(str(file_path), fg="cyan"))
        for definition in file_defs:
            type_color = "yellow" if definition.kind == DefinitionKind.STRUCT else "blue"
            refs = ", ".join(sorted(definition.references)) or "-"
            click.echo(
                f"  {click.style(definition.kind.value, fg=type_color):>16}  "
                f"{definition.name}  "
                f"{click.style(f'L{definition.line_number}', dim=True)}  "
                f"-> {refs}"
            )
        click.echo()

    by_kind: dict[DefinitionKind, int] = {}
    for definition in definitions:
        by_kind[definition.kind] = by_kind.get(definition.kind, 0) + 1

    click.echo("Summary:")
    for kind in DefinitionKind:
        if kind in by_kind:
            click.echo(f"  {kind.value}: {by_kind[kind]}")
    if graph.duplicates:
        click.echo(f"  duplicates: {len(graph.duplicates)}")


if __name__ == "__main__":
    cli()

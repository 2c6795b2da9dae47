"""Command-line interface for the JSON node graph codec."""

import logging
import sys
from pathlib import Path
from typing import Optional, Tuple
import click
from . import __version__
from .config import CodecConfig
from .io import NodeTableReader, NodeTableWriter
from .node_graph import NodeGraphCodec
from .types import CodecError
from .utils.validation import ValidationUtils


def _configure_logging(verbose: bool, debug: bool) -> None:
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        return
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _load_config(config_file: Optional[Path], profiles: bool) -> CodecConfig:
    if config_file:
        return CodecConfig.from_file(config_file)
    if profiles:
        return CodecConfig.for_profiles()
    return CodecConfig()


def _fail(error: Exception) -> None:
    click.echo(f"❌ Error: {error}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def main():
    """JSON Node Graph - Convert between JSON documents and flat node tables."""
    pass


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output node table (default: stdout)')
@click.option('--format', '-f', 'fmt', type=click.Choice(['csv', 'json']),
              help='Table format (default: from output extension, else csv)')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='JSON codec configuration file')
@click.option('--debug', is_flag=True, help='Log statistics, profiling and self-check output')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def encode(input_file: Path, output: Optional[Path], fmt: Optional[str],
           config_file: Optional[Path], debug: bool, verbose: bool):
    """Encode a JSON file into a node table."""
    _configure_logging(verbose, debug)

    try:
        codec = NodeGraphCodec(_load_config(config_file, profiles=False))
        nodes = codec.encode(input_file.read_text(encoding='utf-8'), debug=debug)
        writer = NodeTableWriter()

        if output:
            info = writer.write(nodes, output, fmt)
            click.echo(f"✅ Wrote {info['rows']} nodes to {info['path']}")
        else:
            click.echo(writer.render(nodes, fmt or 'csv'), nl=False)

    except (CodecError, ValueError, OSError) as e:
        _fail(e)


@main.command()
@click.argument('table_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output JSON file (default: stdout)')
@click.option('--format', '-f', 'fmt', type=click.Choice(['csv', 'json']),
              help='Table format (default: from file extension)')
@click.option('--node', '-n', 'nodes', multiple=True, help='Path to select; repeatable')
@click.option('--siblings', is_flag=True, help='Include siblings of selected paths')
@click.option('--depth', '-d', default=1, show_default=True, type=click.IntRange(min=0),
              help='Descendant levels to include below selected paths')
@click.option('--profiles', is_flag=True, help='Use the biographical-profile catalogs')
@click.option('--no-repair', is_flag=True, help='Skip the collection repair stage')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='JSON codec configuration file')
@click.option('--debug', is_flag=True, help='Log classification, selection and profiling output')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def decode(table_file: Path, output: Optional[Path], fmt: Optional[str], nodes: Tuple[str, ...],
           siblings: bool, depth: int, profiles: bool, no_repair: bool,
           config_file: Optional[Path], debug: bool, verbose: bool):
    """Decode a node table back into JSON."""
    _configure_logging(verbose, debug)

    try:
        config = _load_config(config_file, profiles)
        if no_repair:
            config = config.replace(enable_repair=False)

        paths, names, values = NodeTableReader().read_columns(table_file, fmt)
        result = NodeGraphCodec(config).decode(
            paths, names, values,
            selected_nodes=list(nodes),
            include_siblings=siblings,
            descendant_depth=depth,
            debug=debug
        )

        if output:
            output.write_text(result + "\n", encoding='utf-8')
            click.echo(f"✅ Successfully wrote JSON to {output}")
        else:
            click.echo(result)

    except (CodecError, ValueError, OSError) as e:
        _fail(e)


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def validate(input_file: Path, verbose: bool):
    """Encode a JSON file and check the resulting node list."""
    _configure_logging(verbose, False)

    try:
        codec = NodeGraphCodec()
        nodes = codec.encode(input_file.read_text(encoding='utf-8'))
    except (CodecError, OSError) as e:
        _fail(e)
        return

    result = ValidationUtils.validate_node_list(nodes, codec.codec)
    for warning in result.warnings:
        click.echo(f"⚠️  {warning}")

    if result.is_valid:
        click.echo(f"✅ {len(nodes)} nodes passed all checks")
    else:
        click.echo(f"❌ {len(result.errors)} problems found:")
        for error in result.errors:
            click.echo(f"   • {error.message} at {error.location}")
        sys.exit(1)


if __name__ == '__main__':
    main()

"""Command‑line interface for FileFinder.

Running ``filefinder`` without a subcommand starts the interactive search
loop: it asks for a directory, a name fragment and a list of extensions,
prints every match as soon as it is found and then asks again.  The loop
ends at end of input (Ctrl‑D) or on Ctrl‑C at a prompt.
"""

from __future__ import annotations

import json
import logging
import uuid
from contextlib import ExitStack
from pathlib import Path
from typing import Any, Dict, Optional

import click
from rich.console import Console

from ..config_loader import ConfigError, load_config
from ..discovery.engine import SearchStats, search
from ..logging.logger import CSVLogger, configure_logging
from ..query.builder import QueryError, SearchQuery, build_query
from .report import format_match, format_summary


# Prompts and messages only; search results use click.echo so paths print verbatim.
console = Console(markup=False, emoji=False, highlight=False, soft_wrap=True)
logger = logging.getLogger(__name__)

PATH_PROMPT = 'Enter path to dir to search for file: '
NAME_PROMPT = 'Enter a file name to search (without extension): '
EXTENSIONS_PROMPT = 'Enter file extensions separated by space: '


def get_input(query: str) -> str:
    return click.prompt(query, default='', show_default=False, prompt_suffix='').strip()


def get_search_query() -> Optional[SearchQuery]:
    """Ask for the search data and build a query from it.

    Returns ``None`` after reporting unreadable or invalid input, so the
    caller can ask again.  ``click.Abort`` from end of input propagates.
    """
    try:
        root = get_input(PATH_PROMPT)
        name = get_input(NAME_PROMPT)
        extensions = get_input(EXTENSIONS_PROMPT)
    except (OSError, UnicodeDecodeError) as exc:
        console.print(f'Error getting user input, try again: {exc}\n')
        return None
    try:
        return build_query(root, name, extensions)
    except QueryError as exc:
        console.print(str(exc))
        return None


def run_search(query: SearchQuery, results_log: Optional[CSVLogger] = None) -> SearchStats:
    """Run one search, printing matches as they stream in."""
    run_id = uuid.uuid4().hex
    click.echo()
    stats = SearchStats()
    for result in search(query, stats):
        click.echo(format_match(result))
        if results_log is not None:
            results_log.log_match(result, query, run_id)
    click.echo(format_summary(stats))
    logger.info('Search %s finished with %d results', run_id, stats.count)
    return stats


def search_loop(cfg: Dict[str, Any]) -> None:
    with ExitStack() as stack:
        results_log = None
        if cfg.get('results_csv'):
            results_path = Path(cfg['results_csv'])
            results_path.parent.mkdir(parents=True, exist_ok=True)
            results_log = stack.enter_context(CSVLogger(results_path))
        while True:
            try:
                query = get_search_query()
            except click.Abort:
                console.print()
                return
            if query is None:
                continue
            run_search(query, results_log)


@click.group(invoke_without_command=True)
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False), default=None, help='Path to configuration file.')
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str]) -> None:
    """FileFinder CLI."""
    try:
        cfg = load_config(Path(config_path) if config_path else None)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    configure_logging(cfg['log_level'])
    ctx.obj = cfg
    if ctx.invoked_subcommand is None:
        ctx.invoke(search_command)


@cli.command('search')
@click.pass_obj
def search_command(cfg: Dict[str, Any]) -> None:
    """Interactively search directories for files and folders."""
    search_loop(cfg)


@cli.command()
@click.pass_obj
def show_config(cfg: Dict[str, Any]) -> None:
    """Print the current configuration."""
    console.print_json(json.dumps(cfg, indent=2))


if __name__ == '__main__':  # pragma: no cover
    cli()
